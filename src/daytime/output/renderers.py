"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from daytime.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from daytime.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the headline value only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    for key in ("between", "datetime", "daytime"):
        if key in result.data:
            value = result.data[key]
            return str(value).lower() if isinstance(value, bool) else str(value)
    if "seconds" in result.data:
        if "days" in result.data:
            return f"{result.data['seconds']} {result.data['days']:+d}"
        return str(result.data["seconds"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="dt.ok"), Text(f"  {result.op}", style="dt.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="dt.key")
    if isinstance(value, bool):
        v = Text(str(value).lower(), style="dt.yes" if value else "dt.no")
    elif key in ("daytime", "start", "end", "from", "to"):
        v = Text(str(value), style="dt.clock")
    elif key == "days":
        v = Text(f"{value:+d}" if isinstance(value, int) else str(value), style="dt.days")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dt.error")
    op = Text(f"  {result.op}", style="dt.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_shift(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add/sub/mul/div/mod: the resulting daytime first, then bookkeeping."""
    _status_line(console, result)
    for key in ("daytime", "days", "remainder"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        for key in ("input", "amount", "divisor", "modulus", "seconds"):
            if key in result.data:
                _field(console, key, result.data[key])


def _render_interval(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    if "window" in data:
        _field(console, "window", data["window"])
    span = f"{data['start']} → {data['end']}"
    if data.get("wraps"):
        span += " (wraps midnight)"
    _field(console, "interval", span)
    _field(console, "daytime", data["daytime"])
    _field(console, "between", data["between"])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "add": _render_shift,
    "sub": _render_shift,
    "mul": _render_shift,
    "div": _render_shift,
    "mod": _render_shift,
    "between": _render_interval,
}
