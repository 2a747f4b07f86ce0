"""daytime — time-of-day values with a distinct 24:00:00 end of day."""

from daytime.domain.daytime import (
    END_OF_DAY,
    SECONDS_IN_DAY,
    START_OF_DAY,
    Daytime,
    from_datetime,
    must,
    new,
    parse,
)
from daytime.domain.errors import (
    DaytimeError,
    DivisionByZero,
    EndOfDayExceeded,
    InvalidFormat,
    InvalidModulus,
    InvalidTimeComponent,
    ValueOutOfRange,
)

__version__ = "0.1.0"

__all__ = [
    "END_OF_DAY",
    "SECONDS_IN_DAY",
    "START_OF_DAY",
    "Daytime",
    "DaytimeError",
    "DivisionByZero",
    "EndOfDayExceeded",
    "InvalidFormat",
    "InvalidModulus",
    "InvalidTimeComponent",
    "ValueOutOfRange",
    "__version__",
    "from_datetime",
    "must",
    "new",
    "parse",
]
