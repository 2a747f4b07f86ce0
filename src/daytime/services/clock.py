"""ClockService — daytime operations wrapped in the ServiceResult contract.

Every method parses its textual operands with the strict text rules,
runs one Daytime operation, and reports the outcome. Domain failures
become ``ok=False`` results carrying the error category code.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import structlog

from daytime.config.models import DisplayConfig, WindowConfig, resolve_zone
from daytime.domain.daytime import Daytime, parse
from daytime.domain.errors import DaytimeError
from daytime.services.result import ServiceError, ServiceResult

logger = structlog.get_logger(__name__)


def describe(d: Daytime) -> dict[str, Any]:
    """Flatten a daytime into a JSON-friendly payload."""
    hour, minute, second = d.clock()
    return {
        "daytime": str(d),
        "seconds": d.seconds,
        "hour": hour,
        "minute": minute,
        "second": second,
        "valid": d.is_valid(),
        "end_of_day": d.is_end_of_day(),
        "in_day": d.is_in_day(),
    }


class ClockService:
    """Parse, compare, shift, and place daytimes.

    Args:
        display: Defaults for :meth:`at` when no zone or layout is given.
        windows: Named intervals for :meth:`in_window`.
    """

    def __init__(
        self,
        *,
        display: DisplayConfig | None = None,
        windows: dict[str, WindowConfig] | None = None,
    ) -> None:
        self._display = display or DisplayConfig()
        self._windows = windows or {}

    @staticmethod
    def _fail(op: str, exc: DaytimeError) -> ServiceResult:
        logger.debug("daytime.op_failed", op=op, code=exc.code, source_op=exc.op, value=exc.value)
        return ServiceResult.failure(op, exc)

    # ------------------------------------------------------------------
    # parse
    # ------------------------------------------------------------------

    def parse(self, text: str) -> ServiceResult:
        try:
            d = parse(text)
        except DaytimeError as exc:
            return self._fail("parse", exc)
        return ServiceResult(ok=True, op="parse", data={"input": text, **describe(d)})

    # ------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------

    def shift(self, op: str, text: str, amount: int) -> ServiceResult:
        """Apply ``add``, ``sub``, or ``mul`` and report days crossed."""
        try:
            d = parse(text)
        except DaytimeError as exc:
            return self._fail(op, exc)

        if op == "add":
            result, days = d.add(amount)
        elif op == "sub":
            result, days = d.sub(amount)
        elif op == "mul":
            result, days = d.mul(amount)
        else:
            msg = f"Unsupported shift operation: {op!r}"
            raise ValueError(msg)

        return ServiceResult(
            ok=True,
            op=op,
            data={"input": str(d), "amount": amount, "days": days, **describe(result)},
        )

    def div(self, text: str, divisor: int) -> ServiceResult:
        try:
            quotient, remainder = parse(text).div(divisor)
        except DaytimeError as exc:
            return self._fail("div", exc)
        return ServiceResult(
            ok=True,
            op="div",
            data={"divisor": divisor, "remainder": remainder, **describe(quotient)},
        )

    def mod(self, text: str, modulus: int) -> ServiceResult:
        try:
            result = parse(text).mod(modulus)
        except DaytimeError as exc:
            return self._fail("mod", exc)
        return ServiceResult(ok=True, op="mod", data={"modulus": modulus, **describe(result)})

    def diff(self, text: str, other_text: str) -> ServiceResult:
        """Difference ``text - other_text`` as seconds within a day plus days."""
        try:
            d = parse(text)
            other = parse(other_text)
        except DaytimeError as exc:
            return self._fail("diff", exc)
        seconds, days = d.diff(other)
        return ServiceResult(
            ok=True,
            op="diff",
            data={
                "from": str(other),
                "to": str(d),
                "seconds": seconds,
                "days": days,
                "compare": d.compare(other),
            },
        )

    # ------------------------------------------------------------------
    # intervals
    # ------------------------------------------------------------------

    def between(self, text: str, start_text: str, end_text: str) -> ServiceResult:
        try:
            d = parse(text)
            start = parse(start_text)
            end = parse(end_text)
        except DaytimeError as exc:
            return self._fail("between", exc)
        return self._interval_result("between", d, start, end)

    def in_window(self, text: str, name: str) -> ServiceResult:
        """Membership test against a named window from configuration."""
        window = self._windows.get(name)
        if window is None:
            known = ", ".join(sorted(self._windows)) or "none configured"
            return ServiceResult(
                ok=False,
                op="between",
                error=ServiceError(
                    code="NOT_FOUND",
                    message=f"Window '{name}' not found ({known})",
                    detail={"window": name},
                ),
            )
        try:
            d = parse(text)
        except DaytimeError as exc:
            return self._fail("between", exc)
        result = self._interval_result("between", d, window.start, window.end)
        return result.model_copy(update={"data": {"window": name, **result.data}})

    @staticmethod
    def _interval_result(op: str, d: Daytime, start: Daytime, end: Daytime) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "daytime": str(d),
                "start": str(start),
                "end": str(end),
                "wraps": start.after(end),
                "between": d.between(start, end),
            },
        )

    # ------------------------------------------------------------------
    # calendar placement
    # ------------------------------------------------------------------

    def at(
        self,
        text: str,
        *,
        on: date | None = None,
        zone: str | None = None,
        layout: str | None = None,
        reference: datetime | None = None,
    ) -> ServiceResult:
        """Place a daytime on a calendar date in a zone.

        Args:
            text: Daytime text.
            on: Calendar date (default: today in *zone*).
            zone: IANA zone name (default: ``[display] timezone``).
            layout: ``strftime`` layout (default: ``[display] layout``).
            reference: Naive datetimes are read in *zone*. When given, the
                result includes ``since`` and ``until`` in seconds.
        """
        try:
            d = parse(text)
        except DaytimeError as exc:
            return self._fail("at", exc)

        tz = resolve_zone(zone or self._display.timezone)
        base = datetime.combine(on, datetime.min.time(), tzinfo=tz) if on else datetime.now(tz)
        placed = d.to_datetime(base)

        data: dict[str, Any] = {
            "daytime": str(d),
            "datetime": placed.isoformat(),
            "formatted": d.format(layout or self._display.layout, base),
        }
        if reference is not None:
            if reference.tzinfo is None:
                reference = reference.replace(tzinfo=tz)
            data["reference"] = reference.isoformat()
            data["since"] = int(d.since(reference, base).total_seconds())
            data["until"] = int(d.until(reference, base).total_seconds())
        return ServiceResult(ok=True, op="at", data=data)
