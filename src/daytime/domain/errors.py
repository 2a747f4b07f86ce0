"""Error taxonomy for daytime operations.

Every failure carries the operation name, the offending value rendered
as text, and a root-cause category. Categories are subclasses of
:class:`DaytimeError`, so callers match on the category alone::

    try:
        parse(text)
    except InvalidFormat:
        ...
"""

from __future__ import annotations


class DaytimeError(Exception):
    """Base class for all daytime failures.

    Attributes:
        op: Name of the operation that failed (e.g. ``"parse"``).
        value: Offending input rendered as text, or None.
    """

    code = "DAYTIME_ERROR"
    reason = "daytime error"

    def __init__(self, op: str, value: object = None) -> None:
        self.op = op
        self.value = None if value is None else str(value)
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.value is not None:
            return f"daytime: {self.op}: {self.value}: {self.reason}"
        return f"daytime: {self.op}: {self.reason}"


class InvalidTimeComponent(DaytimeError, ValueError):
    """Hour, minute, or second outside its valid numeric range."""

    code = "INVALID_TIME_COMPONENT"
    reason = "invalid time component"


class EndOfDayExceeded(DaytimeError, ValueError):
    """Hour 24 combined with non-zero minutes or seconds."""

    code = "END_OF_DAY_EXCEEDED"
    reason = "daytime 24:00:00 must have zero minutes and seconds"


class InvalidFormat(DaytimeError, ValueError):
    """Text is neither integer seconds nor ``HH:MM:SS``."""

    code = "INVALID_FORMAT"
    reason = "invalid format"


class ValueOutOfRange(DaytimeError, ValueError):
    """A seconds value or computed quotient falls outside [0, 86400]."""

    code = "VALUE_OUT_OF_RANGE"
    reason = "value out of range"


class DivisionByZero(DaytimeError, ZeroDivisionError):
    code = "DIVISION_BY_ZERO"
    reason = "division by zero"


class InvalidModulus(DaytimeError, ValueError):
    code = "INVALID_MODULUS"
    reason = "modulus must be positive"
