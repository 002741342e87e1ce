"""
ChronoParts - Timestamp Splitting Module.

Splits millisecond timestamps at midnight and shifts them into a fixed
time zone. Pure integer arithmetic, no error conditions.
"""

from chronoparts.schema import DAY_MS, HOUR_MS, SplitTimestamp


def split(timestamp: int) -> SplitTimestamp:
    """
    Splits a timestamp into a day part and a time part.

    Args:
        timestamp: Milliseconds since 1970-01-01T00:00:00.000Z.

    Returns:
        SplitTimestamp where day_part is a multiple of DAY_MS and
        time_part lies in [0, DAY_MS).

    Example:
        >>> split(-1)
        SplitTimestamp(day_part=-86400000, time_part=86399999)
    """
    day_part = (timestamp // DAY_MS) * DAY_MS
    return SplitTimestamp(day_part, timestamp - day_part)


def zoned(split_timestamp: SplitTimestamp, offset_ms: int) -> SplitTimestamp:
    """
    Shifts a split timestamp by a zone offset.

    The offset is added to the time part. Since |offset_ms| < DAY_MS,
    the result leaves [0, DAY_MS) by at most one day, which is carried
    into the day part.

    Args:
        split_timestamp: Split UTC timestamp.
        offset_ms: Zone offset in milliseconds.

    Returns:
        The split timestamp of the same instant in local time.
    """
    day_part, time_part = split_timestamp
    time_part += offset_ms

    if time_part >= DAY_MS:
        return SplitTimestamp(day_part + DAY_MS, time_part - DAY_MS)
    if time_part < 0:
        return SplitTimestamp(day_part - DAY_MS, time_part + DAY_MS)
    return SplitTimestamp(day_part, time_part)


def offset_to_ms(time_zone_offset: float) -> int:
    """Converts an offset in hours to whole milliseconds."""
    return round(time_zone_offset * HOUR_MS)
