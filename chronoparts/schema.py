"""
ChronoParts - Data Schema Module.

This module defines the constants and the plain immutable records shared by
the calendar locators and the DateTime facade. All durations are integer
milliseconds.

Calendar Context:
    - Gregorian leap years repeat with a 400-year period (97 leap years)
    - ISO week-years repeat with a 400-year period (71 long years)
    - Timestamps are bounded by the ECMA-262 Date range

Classes:
    AddressingScheme: Which field set resolves the day in from_parts.
    SplitTimestamp: A timestamp split into a day part and a time part.
    GregorianYear: Descriptor of a Gregorian year.
    GregorianDay: Descriptor of a day inside a Gregorian year.
    IsoYear: Descriptor of an ISO week-year.
    IsoDay: Descriptor of a day inside an ISO week-year.
    TimeOfDay: Decomposition of the time elapsed since midnight.
    ZoneOffsetParts: Decomposition of a fixed UTC offset.
    DateTimeParts: Every optional field accepted by DateTime.from_parts.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional


SECOND_MS = 1_000
MINUTE_MS = 60 * SECOND_MS
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS
WEEK_MS = 7 * DAY_MS

COMMON_YEAR_MS = 365 * DAY_MS
LEAP_YEAR_MS = COMMON_YEAR_MS + DAY_MS

# ISO week-years last 52 (short) or 53 (long) weeks
SHORT_YEAR_MS = 52 * WEEK_MS
LONG_YEAR_MS = SHORT_YEAR_MS + WEEK_MS

# ECMA-262 Date range
MAX_TIMESTAMP = 8_640_000_000_000_000
MIN_TIMESTAMP = -MAX_TIMESTAMP

_MAX_FULL_YEAR_OFFSET = 273_790

MAX_FULL_YEAR = 1970 + _MAX_FULL_YEAR_OFFSET
MIN_FULL_YEAR = 1970 - _MAX_FULL_YEAR_OFFSET - 1

MIN_TIME_ZONE_OFFSET = -12
MAX_TIME_ZONE_OFFSET = 14


class AddressingScheme(Enum):
    """
    Field set used by DateTime.from_parts to resolve a day.

    Attributes:
        GREGORIAN_ORDINAL: year and ordinal_day.
        GREGORIAN_MONTH_DAY: year, month and month_day (month and
            month_day may default to 1).
        ISO_WEEK_DAY: iso_year, iso_week and week_day (iso_week and
            week_day may default to 1).
        UNDERSPECIFIED: neither year nor iso_year was supplied.
    """

    GREGORIAN_ORDINAL = "GREGORIAN_ORDINAL"
    GREGORIAN_MONTH_DAY = "GREGORIAN_MONTH_DAY"
    ISO_WEEK_DAY = "ISO_WEEK_DAY"
    UNDERSPECIFIED = "UNDERSPECIFIED"


class SplitTimestamp(NamedTuple):
    """A timestamp split at midnight. day_part + time_part is the timestamp."""

    day_part: int
    time_part: int


@dataclass(frozen=True)
class GregorianYear:
    """
    Descriptor of a Gregorian year.

    Attributes:
        year: Year number, range [MIN_FULL_YEAR, MAX_FULL_YEAR].
        is_leap: True if the year counts 366 days.
        start_timestamp: Timestamp of January 1st at 00:00:00.000 UTC.
    """

    year: int
    is_leap: bool
    start_timestamp: int


@dataclass(frozen=True)
class GregorianDay:
    """
    Descriptor of a day inside a Gregorian year.

    ordinal_day and (month, month_day) are two coordinates of the
    same day.

    Attributes:
        ordinal_day: Position of the day in the year, range [1, 366].
        month: Month of the day, range [1, 12].
        month_day: Position of the day in the month, range [1, 31].
        start_timestamp: Timestamp of the day at 00:00:00.000 UTC.
    """

    ordinal_day: int
    month: int
    month_day: int
    start_timestamp: int


@dataclass(frozen=True)
class IsoYear:
    """
    Descriptor of an ISO week-year.

    An ISO year starts on the Monday of the week containing January 4th
    of the Gregorian year with the same number.

    Attributes:
        iso_year: ISO year number, range [MIN_FULL_YEAR, MAX_FULL_YEAR].
        is_long: True if the ISO year counts 53 weeks.
        start_timestamp: Timestamp of its first Monday at 00:00:00.000 UTC.
    """

    iso_year: int
    is_long: bool
    start_timestamp: int


@dataclass(frozen=True)
class IsoDay:
    """
    Descriptor of a day inside an ISO week-year.

    Attributes:
        iso_week: Week of the ISO year, range [1, 53].
        week_day: Day of the week, range [1, 7], 1 is Monday.
        start_timestamp: Timestamp of the day at 00:00:00.000 UTC.
    """

    iso_week: int
    week_day: int
    start_timestamp: int


@dataclass(frozen=True)
class TimeOfDay:
    """
    Decomposition of the time elapsed since midnight.

    Attributes:
        hour24: Hours since midnight, range [0, 23].
        hour12: Hours since the start of the meridiem, range [0, 11].
        meridiem: 0 for AM, 12 for PM.
        minute: Range [0, 59].
        second: Range [0, 59].
        millisecond: Range [0, 999].
        timestamp_offset: Milliseconds since midnight, range [0, DAY_MS).
    """

    hour24: int
    hour12: int
    meridiem: int
    minute: int
    second: int
    millisecond: int
    timestamp_offset: int


@dataclass(frozen=True)
class ZoneOffsetParts:
    """
    Decomposition of a fixed UTC offset.

    is_negative is kept apart from zone_hour so that offsets between
    -01:00 and 00:00 (zone_hour == 0) keep their sign.

    Attributes:
        zone_hour: Whole hours, range [-12, 14].
        zone_minute: Range [0, 59].
        zone_second: Range [0, 59].
        is_negative: True for offsets west of Greenwich.
    """

    zone_hour: int
    zone_minute: int
    zone_second: int
    is_negative: bool = False


@dataclass
class DateTimeParts:
    """
    Every optional field accepted by DateTime.from_parts.

    Used to carry a complete or partial field set between the facade
    and its collaborators (serialiser, reports).
    """

    year: Optional[int] = None
    ordinal_day: Optional[int] = None
    month: Optional[int] = None
    month_day: Optional[int] = None
    iso_year: Optional[int] = None
    iso_week: Optional[int] = None
    week_day: Optional[int] = None
    hour24: Optional[int] = None
    hour12: Optional[int] = None
    meridiem: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    millisecond: Optional[int] = None
    time_zone_offset: Optional[float] = None
    zone_hour: Optional[int] = None
    zone_minute: Optional[int] = None
    zone_second: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        """Returns the supplied (non-None) fields as keyword arguments."""
        return {
            name: value
            for name, value in asdict(self).items()
            if value is not None
        }
