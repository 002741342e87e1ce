"""
ChronoParts - Zone Offset Module.

Converts a fixed UTC offset expressed in hours (e.g. 5.5 for +05:30)
to and from its hour, minute and second parts.

Note that an offset of -00:10 has zone_hour == 0: its sign is carried by
ZoneOffsetParts.is_negative.
"""

from typing import Optional

from chronoparts.schema import (
    HOUR_MS,
    MAX_TIME_ZONE_OFFSET,
    MIN_TIME_ZONE_OFFSET,
    MINUTE_MS,
    SECOND_MS,
    ZoneOffsetParts,
)
from chronoparts.timestamp import offset_to_ms
from chronoparts.validator import (
    RangeError,
    Result,
    check_integer_range,
    check_real_range,
    first_error,
)

UTC = ZoneOffsetParts(zone_hour=0, zone_minute=0, zone_second=0)


def check_offset(time_zone_offset: object) -> Optional[RangeError]:
    """
    Checks that an offset is a finite number of hours in [-12, 14].

    Returns:
        None if the offset is valid, a RangeError otherwise.
    """
    return check_real_range(
        time_zone_offset,
        "time_zone_offset",
        MIN_TIME_ZONE_OFFSET,
        MAX_TIME_ZONE_OFFSET
    )


def parts_from_offset(time_zone_offset: float) -> ZoneOffsetParts:
    """
    Splits an offset in hours into its parts.

    Parts are truncated, not rounded: an offset of 5.9999 hours gives
    05:59:59.

    Args:
        time_zone_offset: Offset in hours, range [-12, 14].

    Returns:
        ZoneOffsetParts of the offset.

    Example:
        >>> parts_from_offset(-3.5)
        ZoneOffsetParts(zone_hour=-3, zone_minute=30, zone_second=0, is_negative=True)
    """
    offset_ms = offset_to_ms(time_zone_offset)
    is_negative = offset_ms < 0

    hours, remainder = divmod(abs(offset_ms), HOUR_MS)
    minutes, remainder = divmod(remainder, MINUTE_MS)

    return ZoneOffsetParts(
        zone_hour=-hours if is_negative else hours,
        zone_minute=minutes,
        zone_second=remainder // SECOND_MS,
        is_negative=is_negative
    )


def offset_from_parts(parts: ZoneOffsetParts) -> float:
    """
    Converts zone offset parts back to hours.

    Args:
        parts: Zone offset parts.

    Returns:
        The offset in hours, negative west of Greenwich.
    """
    sign = -1 if parts.is_negative or parts.zone_hour < 0 else 1
    return sign * (
        abs(parts.zone_hour) + parts.zone_minute / 60 + parts.zone_second / 3600
    )


def from_parts(
    zone_hour: int = 0,
    zone_minute: int = 0,
    zone_second: int = 0
) -> Result[ZoneOffsetParts]:
    """
    Builds zone offset parts from integer fields.

    Args:
        zone_hour: Whole hours, range [-12, 14].
        zone_minute: Range [0, 59].
        zone_second: Range [0, 59].

    Returns:
        Result holding the parts, or the first RangeError. An offset
        beyond +14:00 or -12:00 fails on time_zone_offset.
    """
    error = first_error(
        check_integer_range(
            zone_hour, "zone_hour", MIN_TIME_ZONE_OFFSET, MAX_TIME_ZONE_OFFSET
        ),
        check_integer_range(zone_minute, "zone_minute", 0, 59),
        check_integer_range(zone_second, "zone_second", 0, 59),
    )
    if error is not None:
        return Result.fail(error)

    parts = ZoneOffsetParts(
        zone_hour=zone_hour,
        zone_minute=zone_minute,
        zone_second=zone_second,
        is_negative=zone_hour < 0
    )

    error = check_offset(offset_from_parts(parts))
    if error is not None:
        return Result.fail(error)

    return Result.ok(parts)


def format_offset(parts: ZoneOffsetParts) -> str:
    """
    Formats zone offset parts as an ISO 8601 offset.

    Seconds are dropped, as ISO 8601 offsets stop at minutes.

    Example:
        >>> format_offset(parts_from_offset(5.75))
        '+05:45'
    """
    sign = "-" if parts.is_negative else "+"
    return f"{sign}{abs(parts.zone_hour):02d}:{parts.zone_minute:02d}"
