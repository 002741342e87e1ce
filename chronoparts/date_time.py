"""
ChronoParts - DateTime Module.

This module provides the DateTime value type, which converts between a
millisecond timestamp and every Gregorian, ISO week-date, clock and zone
field, in both directions.

A DateTime holds an authoritative UTC timestamp and a fixed time zone
offset in hours. Every calendar field is computed in the local time of
that offset, from the zoned timestamp (timestamp + offset). Descriptors
(Gregorian year and day, ISO year and day, time of day, zone parts) are
computed on first access and cached on the instance. The cache is not
part of the value: two DateTimes are equal iff their timestamps are.

Construction and every setter, offsetter and to_* helper return a
Result, so invalid field combinations never produce a DateTime.

Classes:
    DateTime: Immutable date-time value with lazily computed fields.
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import total_ordering
from typing import Any, Dict, Iterable, Optional

from chronoparts import gregorian, iso, time_of_day, zone_offset
from chronoparts.config import Settings, default_settings
from chronoparts.schema import (
    DAY_MS,
    HOUR_MS,
    MAX_FULL_YEAR,
    MAX_TIMESTAMP,
    MIN_FULL_YEAR,
    MIN_TIMESTAMP,
    MINUTE_MS,
    SECOND_MS,
    AddressingScheme,
    DateTimeParts,
    GregorianDay,
    GregorianYear,
    IsoDay,
    IsoYear,
    TimeOfDay,
    ZoneOffsetParts,
)
from chronoparts.timestamp import offset_to_ms, split, zoned
from chronoparts.validator import (
    DateTimeError,
    Result,
    UnderspecifiedError,
    check_integer_range,
    check_value,
    first_error,
)

logger = logging.getLogger(__name__)

# Day fields in declaration order, used for coherence checks
DAY_FIELDS = (
    "year",
    "ordinal_day",
    "month",
    "month_day",
    "iso_year",
    "iso_week",
    "week_day",
)

SCHEME_FIELDS = {
    AddressingScheme.GREGORIAN_ORDINAL: ("year", "ordinal_day"),
    AddressingScheme.GREGORIAN_MONTH_DAY: ("year", "month", "month_day"),
    AddressingScheme.ISO_WEEK_DAY: ("iso_year", "iso_week", "week_day"),
    AddressingScheme.UNDERSPECIFIED: (),
}

ZONE_FIELDS = ("zone_hour", "zone_minute", "zone_second")

_EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def addressing_scheme(
    year: Optional[int] = None,
    ordinal_day: Optional[int] = None,
    month: Optional[int] = None,
    month_day: Optional[int] = None,
    iso_year: Optional[int] = None,
    iso_week: Optional[int] = None,
    week_day: Optional[int] = None
) -> AddressingScheme:
    """
    Selects the field set that resolves the day of a DateTime.

    A complete Gregorian field set wins over a complete ISO one. When no
    set is complete, year alone (then iso_year alone) resolves the day
    with the missing fields defaulted to 1.

    Returns:
        The AddressingScheme to use.
    """
    if year is not None and ordinal_day is not None:
        return AddressingScheme.GREGORIAN_ORDINAL
    if year is not None and month is not None and month_day is not None:
        return AddressingScheme.GREGORIAN_MONTH_DAY
    if iso_year is not None and iso_week is not None and week_day is not None:
        return AddressingScheme.ISO_WEEK_DAY
    if year is not None:
        return AddressingScheme.GREGORIAN_MONTH_DAY
    if iso_year is not None:
        return AddressingScheme.ISO_WEEK_DAY
    return AddressingScheme.UNDERSPECIFIED


def _check_year(value: Any, field_name: str) -> Result[int]:
    error = check_integer_range(value, field_name, MIN_FULL_YEAR, MAX_FULL_YEAR)
    if error is not None:
        return Result.fail(error)
    return Result.ok(value)


def _day_from_ordinal(year: int, ordinal_day: int) -> Result[int]:
    """Returns the start of the day at ordinal_day in year."""
    def locate(checked_year: int) -> Result[int]:
        year_descriptor = gregorian.year_from_number(checked_year)
        error = check_integer_range(
            ordinal_day,
            "ordinal_day",
            1,
            gregorian.year_length_days(year_descriptor)
        )
        if error is not None:
            return Result.fail(error)
        day = gregorian.day_from_ordinal(year_descriptor, ordinal_day)
        return Result.ok(day.start_timestamp)

    return _check_year(year, "year").and_then(locate)


def _day_from_month_day(year: int, month: int, month_day: int) -> Result[int]:
    """Returns the start of the day at (month, month_day) in year."""
    def locate(checked_year: int) -> Result[int]:
        error = check_integer_range(month, "month", 1, 12)
        if error is not None:
            return Result.fail(error)

        year_descriptor = gregorian.year_from_number(checked_year)
        error = check_integer_range(
            month_day,
            "month_day",
            1,
            gregorian.days_in_month(year_descriptor, month)
        )
        if error is not None:
            return Result.fail(error)

        day = gregorian.day_from_month_day(year_descriptor, month, month_day)
        return Result.ok(day.start_timestamp)

    return _check_year(year, "year").and_then(locate)


def _day_from_iso_week(iso_year: int, iso_week: int, week_day: int) -> Result[int]:
    """Returns the start of the day at (iso_week, week_day) in iso_year."""
    def locate(checked_year: int) -> Result[int]:
        year_descriptor = iso.iso_year_from_number(checked_year)
        error = first_error(
            check_integer_range(
                iso_week, "iso_week", 1, iso.weeks_in_year(year_descriptor)
            ),
            check_integer_range(week_day, "week_day", 1, 7),
        )
        if error is not None:
            return Result.fail(error)

        day = iso.day_from_week(year_descriptor, iso_week, week_day)
        return Result.ok(day.start_timestamp)

    return _check_year(iso_year, "iso_year").and_then(locate)


def _resolve_offset(
    time_zone_offset: Optional[float],
    zone_hour: Optional[int],
    zone_minute: Optional[int],
    zone_second: Optional[int],
    settings: Settings
) -> Result[float]:
    """
    Determines the time zone offset of a DateTime built from parts.

    An explicit time_zone_offset wins. Otherwise zone parts, if any,
    are assembled with missing parts defaulting to 0. Without both, the
    offset comes from settings.
    """
    has_zone_parts = any(
        part is not None for part in (zone_hour, zone_minute, zone_second)
    )

    if time_zone_offset is None and has_zone_parts:
        return zone_offset.from_parts(
            zone_hour=zone_hour or 0,
            zone_minute=zone_minute or 0,
            zone_second=zone_second or 0
        ).and_then(lambda parts: Result.ok(zone_offset.offset_from_parts(parts)))

    if time_zone_offset is None:
        time_zone_offset = settings.time_zone_offset

    error = zone_offset.check_offset(time_zone_offset)
    if error is not None:
        return Result.fail(error)
    return Result.ok(time_zone_offset)


def _format_year(year: int) -> str:
    """Formats a year on 4 digits, or signed on 6 digits outside [0, 9999]."""
    if 0 <= year <= 9999:
        return f"{year:04d}"
    sign = "+" if year > 0 else "-"
    return f"{sign}{abs(year):06d}"


@total_ordering
class DateTime:
    """
    Immutable date-time value with a fixed time zone offset.

    Do not call the constructor directly: use from_timestamp, from_parts,
    from_datetime or now, which validate their inputs and return a Result.

    Attributes:
        timestamp: Milliseconds since 1970-01-01T00:00:00.000Z.
        time_zone_offset: Offset in hours of the zone in which every
            field is expressed (e.g. 5.5 for +05:30).

    Example:
        >>> dt = DateTime.from_parts(
        ...     year=2024, month=2, month_day=29, time_zone_offset=0
        ... ).unwrap()
        >>> dt.ordinal_day, dt.iso_week, dt.week_day
        (60, 9, 4)
        >>> dt.set_year(2023).error.field_name
        'month_day'
    """

    def __init__(self, timestamp: int, time_zone_offset: float):
        """
        Initialises a DateTime without validation.

        Args:
            timestamp: Timestamp in [MIN_TIMESTAMP, MAX_TIMESTAMP].
            time_zone_offset: Offset in hours, range [-12, 14].
        """
        self._timestamp = timestamp
        self._time_zone_offset = time_zone_offset
        self._local = zoned(split(timestamp), offset_to_ms(time_zone_offset))
        self._zoned_timestamp = self._local.day_part + self._local.time_part

        self._gregorian_year: Optional[GregorianYear] = None
        self._gregorian_day: Optional[GregorianDay] = None
        self._iso_year: Optional[IsoYear] = None
        self._iso_day: Optional[IsoDay] = None
        self._time: Optional[TimeOfDay] = None
        self._zone_parts: Optional[ZoneOffsetParts] = None

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_timestamp(
        cls,
        timestamp: int,
        time_zone_offset: Optional[float] = None,
        settings: Optional[Settings] = None
    ) -> "Result[DateTime]":
        """
        Builds a DateTime from a timestamp.

        Args:
            timestamp: Milliseconds since 1970-01-01T00:00:00.000Z, range
                [MIN_TIMESTAMP, MAX_TIMESTAMP].
            time_zone_offset: Offset in hours, range [-12, 14]. Defaults
                to the offset of settings.
            settings: Settings to read the default offset from. Defaults
                to default_settings.

        Returns:
            Result holding the DateTime, or a RangeError on timestamp or
            time_zone_offset.
        """
        error = check_integer_range(timestamp, "timestamp", MIN_TIMESTAMP, MAX_TIMESTAMP)

        if error is None:
            if time_zone_offset is None:
                time_zone_offset = (settings or default_settings).time_zone_offset
            error = zone_offset.check_offset(time_zone_offset)

        if error is not None:
            logger.debug("Rejected timestamp %r: %s", timestamp, error)
            return Result.fail(error)

        return Result.ok(cls(timestamp, time_zone_offset))

    @classmethod
    def from_parts(
        cls,
        *,
        year: Optional[int] = None,
        ordinal_day: Optional[int] = None,
        month: Optional[int] = None,
        month_day: Optional[int] = None,
        iso_year: Optional[int] = None,
        iso_week: Optional[int] = None,
        week_day: Optional[int] = None,
        hour24: Optional[int] = None,
        hour12: Optional[int] = None,
        meridiem: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[int] = None,
        millisecond: Optional[int] = None,
        time_zone_offset: Optional[float] = None,
        zone_hour: Optional[int] = None,
        zone_minute: Optional[int] = None,
        zone_second: Optional[int] = None,
        settings: Optional[Settings] = None
    ) -> "Result[DateTime]":
        """
        Builds a DateTime from a partial or over-specified field set.

        The day is resolved from the first complete field set among
        (year, ordinal_day), (year, month, month_day) and
        (iso_year, iso_week, week_day). Failing that, year alone is used
        with month and month_day defaulting to 1, then iso_year alone
        with iso_week and week_day defaulting to 1.

        Fields of the chosen set, the clock fields and the zone fields
        are range-checked. Every other supplied field is redundant: it
        is compared with the value derived from the resolved DateTime
        and must match.

        The time zone offset is time_zone_offset if supplied, else built
        from zone_hour, zone_minute and zone_second (missing ones default
        to 0) if any is supplied, else read from settings. Parts cannot
        express negative offsets of less than one hour; use
        time_zone_offset for those.

        Returns:
            Result holding the DateTime, or the first error found:
            UnderspecifiedError if neither year nor iso_year is supplied,
            RangeError for a field outside its domain (or a resulting
            timestamp outside the supported range), CoherenceError for a
            redundant field that disagrees.
        """
        day_fields = {
            "year": year,
            "ordinal_day": ordinal_day,
            "month": month,
            "month_day": month_day,
            "iso_year": iso_year,
            "iso_week": iso_week,
            "week_day": week_day,
        }
        scheme = addressing_scheme(**day_fields)

        if scheme is AddressingScheme.GREGORIAN_ORDINAL:
            day_start = _day_from_ordinal(year, ordinal_day)
        elif scheme is AddressingScheme.GREGORIAN_MONTH_DAY:
            day_start = _day_from_month_day(
                year,
                1 if month is None else month,
                1 if month_day is None else month_day
            )
        elif scheme is AddressingScheme.ISO_WEEK_DAY:
            day_start = _day_from_iso_week(
                iso_year,
                1 if iso_week is None else iso_week,
                1 if week_day is None else week_day
            )
        else:
            day_start = Result.fail(UnderspecifiedError(
                field_name="year",
                message="either year or iso_year must be supplied"
            ))

        if not day_start.is_ok:
            logger.debug("Rejected fields %s: %s", scheme.value, day_start.error)
            return Result.fail(day_start.error)

        error = time_of_day.check_ranges(
            hour24, hour12, meridiem, minute, second, millisecond
        )
        if error is not None:
            logger.debug("Rejected clock fields: %s", error)
            return Result.fail(error)

        offset = _resolve_offset(
            time_zone_offset,
            zone_hour,
            zone_minute,
            zone_second,
            settings or default_settings
        )
        if not offset.is_ok:
            logger.debug("Rejected zone fields: %s", offset.error)
            return Result.fail(offset.error)

        time = time_of_day.resolve(hour24, hour12, meridiem, minute, second, millisecond)
        zoned_timestamp = day_start.value + time.timestamp_offset
        timestamp = zoned_timestamp - offset_to_ms(offset.value)

        error = check_integer_range(timestamp, "timestamp", MIN_TIMESTAMP, MAX_TIMESTAMP)
        if error is not None:
            logger.debug("Rejected fields: %s", error)
            return Result.fail(error)

        date_time = cls(timestamp, offset.value)
        zone_fields = {
            "zone_hour": zone_hour,
            "zone_minute": zone_minute,
            "zone_second": zone_second,
        }

        error = first_error(
            time_of_day.check_coherence(hour24, hour12, meridiem),
            date_time._check_fields(zone_fields, ZONE_FIELDS),
            date_time._check_fields(
                day_fields,
                [name for name in DAY_FIELDS if name not in SCHEME_FIELDS[scheme]]
            ),
        )
        if error is not None:
            logger.debug("Rejected redundant field: %s", error)
            return Result.fail(error)

        return Result.ok(date_time)

    @classmethod
    def now(
        cls,
        time_zone_offset: Optional[float] = None,
        settings: Optional[Settings] = None
    ) -> "Result[DateTime]":
        """
        Builds a DateTime from the clock of settings.

        Args:
            time_zone_offset: Offset in hours. Defaults to the offset of
                settings.
            settings: Settings providing the clock. Defaults to
                default_settings.
        """
        settings = settings or default_settings
        return cls.from_timestamp(settings.now(), time_zone_offset, settings)

    @classmethod
    def from_datetime(cls, value: datetime) -> "Result[DateTime]":
        """
        Builds a DateTime from a standard library datetime.

        Naive values are taken as UTC. Microseconds are truncated to
        milliseconds.

        Args:
            value: Aware or naive datetime.

        Returns:
            Result holding the DateTime, or a RangeError if the value's
            UTC offset lies outside [-12, 14] hours.
        """
        if value.tzinfo is None or value.utcoffset() is None:
            value = value.replace(tzinfo=timezone.utc)

        time_zone_offset = value.utcoffset() / timedelta(hours=1)
        timestamp = (value - _EPOCH_UTC) // _ONE_MILLISECOND
        return cls.from_timestamp(timestamp, time_zone_offset)

    # ------------------------------------------------------------------
    # Cached descriptors
    # ------------------------------------------------------------------

    def _get_gregorian_year(self) -> GregorianYear:
        if self._gregorian_year is None:
            self._gregorian_year = gregorian.year_from_timestamp(self._zoned_timestamp)
        return self._gregorian_year

    def _get_gregorian_day(self) -> GregorianDay:
        if self._gregorian_day is None:
            year = self._get_gregorian_year()
            self._gregorian_day = gregorian.day_from_offset(
                year, self._zoned_timestamp - year.start_timestamp
            )
        return self._gregorian_day

    def _get_iso_year(self) -> IsoYear:
        if self._iso_year is None:
            day_part = self._local.day_part
            if self._gregorian_year is not None:
                self._iso_year = iso.iso_year_from_gregorian(self._gregorian_year, day_part)
            else:
                self._iso_year = iso.iso_year_from_timestamp(day_part)
        return self._iso_year

    def _get_iso_day(self) -> IsoDay:
        if self._iso_day is None:
            iso_year = self._get_iso_year()
            self._iso_day = iso.day_from_offset(
                iso_year, self._zoned_timestamp - iso_year.start_timestamp
            )
        return self._iso_day

    def _get_time(self) -> TimeOfDay:
        if self._time is None:
            self._time = time_of_day.from_timestamp(self._local.time_part)
        return self._time

    def _get_zone_parts(self) -> ZoneOffsetParts:
        if self._zone_parts is None:
            self._zone_parts = zone_offset.parts_from_offset(self._time_zone_offset)
        return self._zone_parts

    def _check_fields(
        self,
        fields: Dict[str, Any],
        names: Iterable[str]
    ) -> Optional[DateTimeError]:
        """Compares supplied redundant fields with the values of self."""
        return first_error(*(
            check_value(fields[name], name, getattr(self, name))
            for name in names
            if fields[name] is not None
        ))

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------

    @property
    def timestamp(self) -> int:
        """Milliseconds since 1970-01-01T00:00:00.000Z."""
        return self._timestamp

    @property
    def time_zone_offset(self) -> float:
        """Offset in hours of the zone the fields are expressed in."""
        return self._time_zone_offset

    @property
    def year(self) -> int:
        """Gregorian year, range [MIN_FULL_YEAR, MAX_FULL_YEAR]."""
        return self._get_gregorian_year().year

    @property
    def is_leap_year(self) -> bool:
        """True if the Gregorian year counts 366 days."""
        return self._get_gregorian_year().is_leap

    @property
    def ordinal_day(self) -> int:
        """Position of the day in the year, range [1, 366]."""
        return self._get_gregorian_day().ordinal_day

    @property
    def month(self) -> int:
        """Month of the year, range [1, 12]."""
        return self._get_gregorian_day().month

    @property
    def month_day(self) -> int:
        """Day of the month, range [1, 31]."""
        return self._get_gregorian_day().month_day

    @property
    def iso_year(self) -> int:
        """ISO week-numbering year, can differ from year near January 1st."""
        return self._get_iso_year().iso_year

    @property
    def is_long_iso_year(self) -> bool:
        """True if the ISO year counts 53 weeks."""
        return self._get_iso_year().is_long

    @property
    def iso_week(self) -> int:
        """Week of the ISO year, range [1, 53]."""
        return self._get_iso_day().iso_week

    @property
    def week_day(self) -> int:
        """Day of the week, range [1, 7], 1 is Monday."""
        return self._get_iso_day().week_day

    @property
    def hour24(self) -> int:
        """Hours on a 24-hour clock, range [0, 23]."""
        return self._get_time().hour24

    @property
    def hour12(self) -> int:
        """Hours on a 12-hour clock, range [0, 11]."""
        return self._get_time().hour12

    @property
    def meridiem(self) -> int:
        """0 for AM, 12 for PM."""
        return self._get_time().meridiem

    @property
    def minute(self) -> int:
        """Range [0, 59]."""
        return self._get_time().minute

    @property
    def second(self) -> int:
        """Range [0, 59]."""
        return self._get_time().second

    @property
    def millisecond(self) -> int:
        """Range [0, 999]."""
        return self._get_time().millisecond

    @property
    def zone_hour(self) -> int:
        """Whole hours of the offset, signed like the offset."""
        return self._get_zone_parts().zone_hour

    @property
    def zone_minute(self) -> int:
        """Minutes of the offset, range [0, 59], unsigned."""
        return self._get_zone_parts().zone_minute

    @property
    def zone_second(self) -> int:
        """Seconds of the offset, range [0, 59], unsigned."""
        return self._get_zone_parts().zone_second

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def _clock_fields(self) -> Dict[str, int]:
        return {
            "hour24": self.hour24,
            "minute": self.minute,
            "second": self.second,
            "millisecond": self.millisecond,
        }

    def _with_day(self, **fields: Any) -> "Result[DateTime]":
        """Rebuilds self with new day fields, keeping clock and zone."""
        return DateTime.from_parts(
            **fields,
            **self._clock_fields(),
            time_zone_offset=self._time_zone_offset
        )

    def _with_clock(self, **fields: Any) -> "Result[DateTime]":
        """Rebuilds self with new clock fields, keeping day and zone."""
        clock_fields = self._clock_fields()
        clock_fields.update(fields)
        return DateTime.from_parts(
            year=self.year,
            ordinal_day=self.ordinal_day,
            **clock_fields,
            time_zone_offset=self._time_zone_offset
        )

    def set_year(self, year: int) -> "Result[DateTime]":
        """
        Returns a copy of self in another year, same month and month day.

        Fails on February 29th if the target year is not a leap year.
        """
        return self._with_day(year=year, month=self.month, month_day=self.month_day)

    def set_ordinal_day(self, ordinal_day: int) -> "Result[DateTime]":
        return self._with_day(year=self.year, ordinal_day=ordinal_day)

    def set_month(self, month: int) -> "Result[DateTime]":
        """
        Returns a copy of self in another month of the same year.

        Fails if month_day does not exist in the target month.
        """
        return self._with_day(year=self.year, month=month, month_day=self.month_day)

    def set_month_day(self, month_day: int) -> "Result[DateTime]":
        return self._with_day(year=self.year, month=self.month, month_day=month_day)

    def set_iso_year(self, iso_year: int) -> "Result[DateTime]":
        """
        Returns a copy of self in another ISO year, same week and week day.

        Fails on week 53 if the target ISO year is short.
        """
        return self._with_day(
            iso_year=iso_year, iso_week=self.iso_week, week_day=self.week_day
        )

    def set_iso_week(self, iso_week: int) -> "Result[DateTime]":
        return self._with_day(
            iso_year=self.iso_year, iso_week=iso_week, week_day=self.week_day
        )

    def set_week_day(self, week_day: int) -> "Result[DateTime]":
        return self._with_day(
            iso_year=self.iso_year, iso_week=self.iso_week, week_day=week_day
        )

    def set_hour24(self, hour24: int) -> "Result[DateTime]":
        return self._with_clock(hour24=hour24)

    def _with_twelve_hour_clock(self, hour12: int, meridiem: int) -> "Result[DateTime]":
        """Rebuilds self with the hour24 of hour12 and meridiem."""
        time = time_of_day.from_parts(hour12=hour12, meridiem=meridiem)
        if not time.is_ok:
            return Result.fail(time.error)
        return self._with_clock(hour24=time.value.hour24)

    def set_hour12(self, hour12: int) -> "Result[DateTime]":
        """Returns a copy of self with another hour12, same meridiem."""
        return self._with_twelve_hour_clock(hour12, self.meridiem)

    def set_meridiem(self, meridiem: int) -> "Result[DateTime]":
        """Returns a copy of self with another meridiem, same hour12."""
        return self._with_twelve_hour_clock(self.hour12, meridiem)

    def set_minute(self, minute: int) -> "Result[DateTime]":
        return self._with_clock(minute=minute)

    def set_second(self, second: int) -> "Result[DateTime]":
        return self._with_clock(second=second)

    def set_millisecond(self, millisecond: int) -> "Result[DateTime]":
        return self._with_clock(millisecond=millisecond)

    def set_time_zone_offset(
        self,
        time_zone_offset: float,
        keep_timestamp: bool = True
    ) -> "Result[DateTime]":
        """
        Returns a copy of self expressed in another time zone.

        Args:
            time_zone_offset: New offset in hours, range [-12, 14].
            keep_timestamp: If True, the instant is kept and the fields
                change. If False, the fields are kept and the instant
                changes.
        """
        if keep_timestamp:
            return DateTime.from_timestamp(self._timestamp, time_zone_offset)
        return DateTime.from_parts(
            year=self.year,
            ordinal_day=self.ordinal_day,
            **self._clock_fields(),
            time_zone_offset=time_zone_offset
        )

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_first_month_day(self) -> bool:
        return self.month_day == 1

    def is_last_month_day(self) -> bool:
        return self.month_day == gregorian.days_in_month(
            self._get_gregorian_year(), self.month
        )

    def is_first_year_day(self) -> bool:
        return self.ordinal_day == 1

    def is_last_year_day(self) -> bool:
        return self.ordinal_day == gregorian.year_length_days(self._get_gregorian_year())

    def is_first_iso_year_day(self) -> bool:
        return self.iso_week == 1 and self.week_day == 1

    def is_last_iso_year_day(self) -> bool:
        return (
            self.iso_week == iso.weeks_in_year(self._get_iso_year())
            and self.week_day == 7
        )

    # ------------------------------------------------------------------
    # Offsetters
    # ------------------------------------------------------------------

    def offset_milliseconds(self, offset: int) -> "Result[DateTime]":
        """Returns a copy of self moved by offset milliseconds."""
        return DateTime.from_timestamp(self._timestamp + offset, self._time_zone_offset)

    def offset_seconds(self, offset: int) -> "Result[DateTime]":
        return self.offset_milliseconds(offset * SECOND_MS)

    def offset_minutes(self, offset: int) -> "Result[DateTime]":
        return self.offset_milliseconds(offset * MINUTE_MS)

    def offset_hours(self, offset: int) -> "Result[DateTime]":
        return self.offset_milliseconds(offset * HOUR_MS)

    def offset_days(self, offset: int) -> "Result[DateTime]":
        return self.offset_milliseconds(offset * DAY_MS)

    def offset_months(
        self,
        offset: int,
        respect_month_end: bool = False
    ) -> "Result[DateTime]":
        """
        Returns a copy of self moved by offset months.

        The clock and the zone are kept. The month day is kept too,
        so moving January 31st by one month fails, unless
        respect_month_end is True: then the last day of a month is moved
        to the last day of the target month.

        Args:
            offset: Number of months, may be negative.
            respect_month_end: Keep self on the last day of the month.
        """
        year_offset, month_index = divmod(self.month - 1 + offset, 12)
        target_year = self.year + year_offset
        target_month = month_index + 1

        month_day = self.month_day
        if respect_month_end and self.is_last_month_day():
            month_day = gregorian.days_in_month(
                gregorian.year_from_number(target_year), target_month
            )

        return self._with_day(year=target_year, month=target_month, month_day=month_day)

    def offset_years(
        self,
        offset: int,
        respect_month_end: bool = False
    ) -> "Result[DateTime]":
        """Returns a copy of self moved by offset years. See offset_months."""
        return self.offset_months(offset * 12, respect_month_end)

    def offset_iso_years(
        self,
        offset: int,
        respect_year_end: bool = False
    ) -> "Result[DateTime]":
        """
        Returns a copy of self moved by offset ISO years.

        The ISO week, week day, clock and zone are kept, so moving from
        week 53 to a short ISO year fails, unless respect_year_end is
        True and self is on the last day of its ISO year: then the result
        is on the last day of the target ISO year.
        """
        target_iso_year = self.iso_year + offset

        iso_week = self.iso_week
        if respect_year_end and self.is_last_iso_year_day():
            iso_week = iso.weeks_in_year(iso.iso_year_from_number(target_iso_year))

        return self._with_day(
            iso_year=target_iso_year, iso_week=iso_week, week_day=self.week_day
        )

    def to_first_month_day(self) -> "Result[DateTime]":
        return self.offset_days(1 - self.month_day)

    def to_last_month_day(self) -> "Result[DateTime]":
        last_day = gregorian.days_in_month(self._get_gregorian_year(), self.month)
        return self.offset_days(last_day - self.month_day)

    def to_first_year_day(self) -> "Result[DateTime]":
        return self.offset_days(1 - self.ordinal_day)

    def to_last_year_day(self) -> "Result[DateTime]":
        last_day = gregorian.year_length_days(self._get_gregorian_year())
        return self.offset_days(last_day - self.ordinal_day)

    def to_first_iso_year_day(self) -> "Result[DateTime]":
        return self.offset_days(-7 * (self.iso_week - 1) - (self.week_day - 1))

    def to_last_iso_year_day(self) -> "Result[DateTime]":
        last_week = iso.weeks_in_year(self._get_iso_year())
        return self.offset_days(7 * (last_week - self.iso_week) + 7 - self.week_day)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_iso_string(self) -> str:
        """
        Formats self as an ISO 8601 extended date-time.

        Example:
            >>> DateTime.from_timestamp(0, 5.5).unwrap().to_iso_string()
            '1970-01-01T05:30:00.000+05:30'
        """
        return (
            f"{_format_year(self.year)}-{self.month:02d}-{self.month_day:02d}"
            f"T{self.hour24:02d}:{self.minute:02d}:{self.second:02d}"
            f".{self.millisecond:03d}"
            f"{zone_offset.format_offset(self._get_zone_parts())}"
        )

    def to_iso_week_string(self) -> str:
        """Formats the day of self as an ISO 8601 week date (YYYY-Www-D)."""
        return f"{_format_year(self.iso_year)}-W{self.iso_week:02d}-{self.week_day}"

    def to_parts(self) -> DateTimeParts:
        """Returns every field of self, in the zone of self."""
        return DateTimeParts(
            year=self.year,
            ordinal_day=self.ordinal_day,
            month=self.month,
            month_day=self.month_day,
            iso_year=self.iso_year,
            iso_week=self.iso_week,
            week_day=self.week_day,
            hour24=self.hour24,
            hour12=self.hour12,
            meridiem=self.meridiem,
            minute=self.minute,
            second=self.second,
            millisecond=self.millisecond,
            time_zone_offset=self._time_zone_offset,
            zone_hour=self.zone_hour,
            zone_minute=self.zone_minute,
            zone_second=self.zone_second
        )

    def to_datetime(self) -> datetime:
        """
        Converts self to an aware standard library datetime.

        Raises:
            OverflowError: If the year lies outside [1, 9999].
        """
        tzinfo = timezone(timedelta(milliseconds=offset_to_ms(self._time_zone_offset)))
        return (_EPOCH_UTC + self._timestamp * _ONE_MILLISECOND).astimezone(tzinfo)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._timestamp == other._timestamp

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._timestamp < other._timestamp

    def __hash__(self) -> int:
        return hash(self._timestamp)

    def __repr__(self) -> str:
        return (
            f"DateTime(timestamp={self._timestamp}, "
            f"time_zone_offset={self._time_zone_offset})"
        )

    def __str__(self) -> str:
        return self.to_iso_string()
