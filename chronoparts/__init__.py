"""
ChronoParts - Gregorian and ISO 8601 Calendar Arithmetic.

Converts millisecond timestamps to Gregorian, ISO week-date, clock and
zone fields and back, validating partial and redundant field sets.

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "ChronoParts Team"

from chronoparts.config import Settings, default_settings
from chronoparts.date_time import DateTime
from chronoparts.schema import (
    DAY_MS,
    HOUR_MS,
    MAX_FULL_YEAR,
    MAX_TIMESTAMP,
    MIN_FULL_YEAR,
    MIN_TIMESTAMP,
    MINUTE_MS,
    SECOND_MS,
    WEEK_MS,
    AddressingScheme,
    DateTimeParts,
)
from chronoparts.validator import (
    CoherenceError,
    DateTimeError,
    InvalidDateTime,
    RangeError,
    Result,
    UnderspecifiedError,
)

__all__ = [
    "AddressingScheme",
    "CoherenceError",
    "DAY_MS",
    "DateTime",
    "DateTimeError",
    "DateTimeParts",
    "HOUR_MS",
    "InvalidDateTime",
    "MAX_FULL_YEAR",
    "MAX_TIMESTAMP",
    "MINUTE_MS",
    "MIN_FULL_YEAR",
    "MIN_TIMESTAMP",
    "RangeError",
    "Result",
    "SECOND_MS",
    "Settings",
    "UnderspecifiedError",
    "WEEK_MS",
    "default_settings",
]
