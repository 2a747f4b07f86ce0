"""Daytime — a moment within a single day, stored as seconds since midnight.

Valid values lie in [0, 86400]. Both ends mean midnight but are kept
distinct: ``START_OF_DAY`` (0, 00:00:00) opens the day and ``END_OF_DAY``
(86400, 24:00:00) closes it. Ordering, interval membership, and
arithmetic all treat ``END_OF_DAY`` as the latest instant of the day.

Values outside the valid range are representable but inert: predicates
report them as invalid and arithmetic returns them unchanged.

INVARIANT: Daytime is immutable. Every operation returns a new value.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

from daytime.domain.errors import (
    DaytimeError,
    DivisionByZero,
    EndOfDayExceeded,
    InvalidFormat,
    InvalidModulus,
    InvalidTimeComponent,
    ValueOutOfRange,
)

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

SECONDS_IN_DAY = 86400
HOURS_IN_DAY = 24

# Integer seconds: optional sign, ASCII digits only.
_SECONDS_PATTERN = re.compile(r"[+-]?[0-9]+")
# HH:MM:SS with fixed two-character fields; a field may be a signed digit.
_CLOCK_FIELD = r"([+-][0-9]|[0-9]{2})"
_CLOCK_PATTERN = re.compile(rf"{_CLOCK_FIELD}:{_CLOCK_FIELD}:{_CLOCK_FIELD}")


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class Daytime:
    """Seconds since midnight, with 86400 reserved for 24:00:00."""

    seconds: int = 0

    # --- Classification ---

    def is_valid(self) -> bool:
        """True iff the value lies in [START_OF_DAY, END_OF_DAY]."""
        return 0 <= self.seconds <= SECONDS_IN_DAY

    def is_end_of_day(self) -> bool:
        return self.seconds == SECONDS_IN_DAY

    def is_in_day(self) -> bool:
        """True iff the value lies in [START_OF_DAY, END_OF_DAY)."""
        return 0 <= self.seconds < SECONDS_IN_DAY

    # --- Construction ---

    @classmethod
    def from_datetime(cls, dt: datetime) -> Daytime:
        """Extract the wall-clock time of *dt*.

        Never yields ``END_OF_DAY``: datetimes report hours in [0, 23].
        """
        return cls(dt.hour * 3600 + dt.minute * 60 + dt.second)

    @classmethod
    def unmarshal_text(cls, data: bytes | str) -> Daytime:
        """Decode text produced by :meth:`marshal_text` (or integer seconds).

        Every failure, whatever its underlying category, is reported as
        :class:`InvalidFormat` with the original error as ``__cause__``.
        """
        try:
            text = data if isinstance(data, str) else bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidFormat("unmarshal_text", repr(data)) from exc
        try:
            return parse(text)
        except DaytimeError as exc:
            raise InvalidFormat("unmarshal_text", text) from exc

    # --- Components ---

    def clock(self) -> tuple[int, int, int]:
        """Return ``(hour, minute, second)``; ``END_OF_DAY`` gives ``(24, 0, 0)``."""
        if self.is_end_of_day():
            return HOURS_IN_DAY, 0, 0
        hour, rest = divmod(self.seconds, 3600)
        minute, second = divmod(rest, 60)
        return hour, minute, second

    @property
    def hour(self) -> int:
        return self.clock()[0]

    @property
    def minute(self) -> int:
        return self.clock()[1]

    @property
    def second(self) -> int:
        return self.clock()[2]

    def duration(self) -> timedelta:
        """Elapsed time since midnight (``END_OF_DAY`` is 24 hours)."""
        return timedelta(seconds=self.seconds)

    # --- Comparison ---

    def before(self, other: Daytime) -> bool:
        """Report whether this daytime occurs before *other*.

        ``END_OF_DAY`` is after every other daytime and never before itself.
        """
        if self.is_end_of_day():
            return False
        if other.is_end_of_day():
            return True
        return self.seconds < other.seconds

    def after(self, other: Daytime) -> bool:
        return other.before(self)

    def equal(self, other: Daytime) -> bool:
        return self.seconds == other.seconds

    def compare(self, other: Daytime) -> int:
        """Return -1, 0, or 1 as this daytime is before, equal to, or after *other*."""
        if self.equal(other):
            return 0
        if self.before(other):
            return -1
        return 1

    def between(self, start: Daytime, end: Daytime) -> bool:
        """Report whether this daytime lies in the closed interval [start, end].

        When *start* is after *end* the interval wraps across midnight and
        covers ``[start, END_OF_DAY]`` plus ``[START_OF_DAY, end]``. Any
        invalid operand yields False.
        """
        if not (self.is_valid() and start.is_valid() and end.is_valid()):
            return False
        if start.equal(end):
            return self.equal(start)
        if start.before(end):
            return not self.before(start) and not self.after(end)
        return not self.before(start) or not self.after(end)

    def before_datetime(self, dt: datetime) -> bool:
        return self.before(Daytime.from_datetime(dt))

    def after_datetime(self, dt: datetime) -> bool:
        return self.after(Daytime.from_datetime(dt))

    def equal_datetime(self, dt: datetime) -> bool:
        return self.equal(Daytime.from_datetime(dt))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Daytime):
            return NotImplemented
        return self.before(other)

    def __int__(self) -> int:
        return self.seconds

    # --- Arithmetic ---

    def add(self, seconds: int) -> tuple[Daytime, int]:
        """Move forward (or backward, if negative) by *seconds*.

        Returns the normalized daytime and the number of day boundaries
        crossed. An invalid daytime is returned unchanged with 0 days.
        """
        if not self.is_valid():
            return self, 0
        return _normalize(self.seconds + seconds)

    def sub(self, seconds: int) -> tuple[Daytime, int]:
        return self.add(-seconds)

    def add_duration(self, delta: timedelta) -> tuple[Daytime, int]:
        """Like :meth:`add`; sub-second parts of *delta* are truncated."""
        return self.add(_whole_seconds(delta))

    def sub_duration(self, delta: timedelta) -> tuple[Daytime, int]:
        return self.add(-_whole_seconds(delta))

    def mul(self, factor: int) -> tuple[Daytime, int]:
        """Scale by *factor*, normalizing like :meth:`add`.

        Negative factors move backward and report negative days crossed.
        """
        if not self.is_valid():
            return self, 0
        return _normalize(self.seconds * factor)

    def diff(self, other: Daytime) -> tuple[int, int]:
        """Return ``(seconds, days)`` for ``self - other``.

        *seconds* is always in [0, 86399]; *days* absorbs the rest, so
        ``END_OF_DAY - START_OF_DAY`` is ``(0, 1)``. Invalid operands give
        ``(0, 0)``.
        """
        if not (self.is_valid() and other.is_valid()):
            return 0, 0
        days, seconds = divmod(self.seconds - other.seconds, SECONDS_IN_DAY)
        return seconds, days

    def div(self, divisor: int) -> tuple[Daytime, int]:
        """Divide with truncation, returning ``(quotient, remainder)``.

        Raises:
            DivisionByZero: *divisor* is zero.
            ValueOutOfRange: the quotient falls outside [0, 86400], which
                is how negative divisors are rejected.
        """
        if divisor == 0:
            raise DivisionByZero("div", divisor)
        if not self.is_valid():
            return self, 0
        quotient, remainder = _truncated_divmod(self.seconds, divisor)
        if quotient < 0 or quotient > SECONDS_IN_DAY:
            raise ValueOutOfRange("div", quotient)
        return Daytime(quotient), remainder

    def mod(self, modulus: int) -> Daytime:
        """Return the daytime modulo *modulus*, in [0, modulus).

        *modulus* is not capped at 86400; a larger modulus never wraps.

        Raises:
            InvalidModulus: *modulus* is zero or negative.
        """
        if modulus <= 0:
            raise InvalidModulus("mod", modulus)
        if not self.is_valid():
            return self
        return Daytime(self.seconds % modulus)

    # --- Conversion ---

    def to_datetime(self, base: date) -> datetime:
        """Place this daytime on *base*'s calendar date, in *base*'s zone.

        *base*'s own time of day is ignored. ``END_OF_DAY`` becomes midnight
        of the following day. The value is not validated: an out-of-range
        daytime spills over into a neighbouring day.
        """
        midnight = datetime(base.year, base.month, base.day, tzinfo=getattr(base, "tzinfo", None))
        if self.is_end_of_day():
            return midnight + timedelta(days=1)
        hour, minute, second = self.clock()
        return midnight + timedelta(hours=hour, minutes=minute, seconds=second)

    def since(self, other: datetime, base: date) -> timedelta:
        """Elapsed time from *other* to this daytime on *base*; positive if later."""
        return _elapsed(self.to_datetime(base), other)

    def until(self, other: datetime, base: date) -> timedelta:
        """Elapsed time from this daytime on *base* to *other*; positive if earlier."""
        return _elapsed(other, self.to_datetime(base))

    def format(self, layout: str, base: date) -> str:
        """Render with a ``strftime`` *layout* after placing the value on *base*."""
        return self.to_datetime(base).strftime(layout)

    def marshal_text(self) -> bytes:
        return str(self).encode("utf-8")

    def __str__(self) -> str:
        if not self.is_valid():
            return "invalid"
        if self.is_end_of_day():
            return "24:00:00"
        hour, minute, second = self.clock()
        return f"{hour:02d}:{minute:02d}:{second:02d}"

    # --- Pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        """Validate from Daytime, int, or text; serialize as ``HH:MM:SS``."""
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def _coerce(cls, value: Any) -> Daytime:
        if isinstance(value, Daytime):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value <= SECONDS_IN_DAY:
                raise ValueOutOfRange("validate", value)
            return cls(value)
        if isinstance(value, (str, bytes)):
            return cls.unmarshal_text(value)
        raise InvalidFormat("validate", type(value).__name__)


START_OF_DAY = Daytime(0)
END_OF_DAY = Daytime(SECONDS_IN_DAY)


# --- Constructors ---


def new(hour: int, minute: int, second: int) -> Daytime:
    """Build a daytime from clock components.

    Valid ranges are hour [0, 24], minute [0, 59], second [0, 59], and
    hour 24 is only allowed as exactly 24:00:00 (``END_OF_DAY``).

    Raises:
        InvalidTimeComponent: a component is out of range.
        EndOfDayExceeded: hour is 24 with non-zero minutes or seconds.
    """
    return Daytime(_pack_components("new", hour, minute, second))


def must(hour: int, minute: int, second: int) -> Daytime:
    """Like :func:`new`, for literal values known to be valid.

    Any error from :func:`new` propagates unchanged; never call this with
    untrusted input.
    """
    return new(hour, minute, second)


def from_datetime(dt: datetime) -> Daytime:
    return Daytime.from_datetime(dt)


def parse(text: str) -> Daytime:
    """Parse integer seconds (``"3600"``) or clock text (``"01:00:00"``).

    Integer seconds take precedence: ``"1234"`` is 1234 seconds. Clock
    text with out-of-range components raises the component error; any
    other unparseable input raises :class:`InvalidFormat`.
    """
    if not text:
        raise InvalidFormat("parse", text)

    try:
        return Daytime(_parse_seconds(text))
    except DaytimeError:
        pass  # not integer seconds; try HH:MM:SS

    try:
        return Daytime(_parse_clock(text))
    except InvalidFormat as exc:
        raise InvalidFormat("parse", text) from exc


# --- Helpers ---


def _normalize(total: int) -> tuple[Daytime, int]:
    """Fold a raw seconds total into ``(daytime, days_crossed)``.

    Floored division keeps the remainder in [0, 86399]. A total of exactly
    86400 is ``END_OF_DAY`` of the same day rather than the start of the next.
    """
    if total == SECONDS_IN_DAY:
        return END_OF_DAY, 0
    days, remainder = divmod(total, SECONDS_IN_DAY)
    return Daytime(remainder), days


def _truncated_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Integer division rounding toward zero; the remainder takes the dividend's sign."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def _whole_seconds(delta: timedelta) -> int:
    micros = (delta.days * SECONDS_IN_DAY + delta.seconds) * 1_000_000 + delta.microseconds
    return _truncated_divmod(micros, 1_000_000)[0]


def _elapsed(later: datetime, earlier: datetime) -> timedelta:
    # Aware datetimes sharing a tzinfo subtract as wall time; compare in UTC instead.
    if later.tzinfo is not None and earlier.tzinfo is not None:
        return later.astimezone(timezone.utc) - earlier.astimezone(timezone.utc)
    return later - earlier


def _parse_seconds(text: str) -> int:
    if not _SECONDS_PATTERN.fullmatch(text):
        raise InvalidFormat("parse_seconds", text)
    seconds = int(text)
    if seconds < 0 or seconds > SECONDS_IN_DAY:
        raise ValueOutOfRange("parse_seconds", seconds)
    return seconds


def _parse_clock(text: str) -> int:
    match = _CLOCK_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidFormat("parse_clock", text)
    hour, minute, second = (int(field) for field in match.groups())
    return _pack_components("parse_clock", hour, minute, second)


def _pack_components(op: str, hour: int, minute: int, second: int) -> int:
    rendered = f"{hour:02d}:{minute:02d}:{second:02d}"
    if not (0 <= hour <= HOURS_IN_DAY and 0 <= minute <= 59 and 0 <= second <= 59):
        raise InvalidTimeComponent(op, rendered)
    if hour == HOURS_IN_DAY and (minute != 0 or second != 0):
        raise EndOfDayExceeded(op, rendered)
    return hour * 3600 + minute * 60 + second
