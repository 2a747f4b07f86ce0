"""Rich Console factory and theme for daytime output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DAYTIME_THEME = Theme(
    {
        "dt.ok": "bold green",
        "dt.error": "bold red",
        "dt.op": "bold cyan",
        "dt.key": "dim",
        "dt.clock": "bold blue",
        "dt.days": "magenta",
        "dt.yes": "green",
        "dt.no": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DAYTIME_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
