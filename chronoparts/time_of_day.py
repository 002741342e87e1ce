"""
ChronoParts - Time of Day Module.

Decomposes the time elapsed since midnight into hours, minutes, seconds
and milliseconds, and rebuilds it from partial field sets.

The hour is available both on a 24-hour clock (hour24) and on a 12-hour
clock (hour12 + meridiem, meridiem being 0 for AM and 12 for PM), so that
hour24 == meridiem + hour12 always holds.
"""

from typing import Optional

from chronoparts.schema import HOUR_MS, MINUTE_MS, SECOND_MS, TimeOfDay
from chronoparts.validator import (
    DateTimeError,
    RangeError,
    Result,
    check_integer_range,
    check_value,
    first_error,
    is_integer,
)

MERIDIEM_AM = 0
MERIDIEM_PM = 12


def from_timestamp(time_part: int) -> TimeOfDay:
    """
    Decomposes a time part into clock fields.

    Args:
        time_part: Milliseconds since midnight, range [0, DAY_MS).

    Returns:
        TimeOfDay holding every clock field.
    """
    hour24, remainder = divmod(time_part, HOUR_MS)
    minute, remainder = divmod(remainder, MINUTE_MS)
    second, millisecond = divmod(remainder, SECOND_MS)
    hour12 = hour24 % 12

    return TimeOfDay(
        hour24=hour24,
        hour12=hour12,
        meridiem=hour24 - hour12,
        minute=minute,
        second=second,
        millisecond=millisecond,
        timestamp_offset=time_part
    )


def _check_meridiem(meridiem: object) -> Optional[RangeError]:
    if is_integer(meridiem) and meridiem in (MERIDIEM_AM, MERIDIEM_PM):
        return None
    return RangeError(
        field_name="meridiem",
        message=f"must be {MERIDIEM_AM} (AM) or {MERIDIEM_PM} (PM) "
                f"(received: {meridiem!r})",
        value=meridiem,
        min_value=MERIDIEM_AM,
        max_value=MERIDIEM_PM
    )


def check_ranges(
    hour24: Optional[int] = None,
    hour12: Optional[int] = None,
    meridiem: Optional[int] = None,
    minute: Optional[int] = None,
    second: Optional[int] = None,
    millisecond: Optional[int] = None
) -> Optional[RangeError]:
    """
    Checks the domain of every supplied clock field.

    Fields left to None are skipped. Fields are checked in declaration
    order and the first failure is returned.

    Returns:
        None if all supplied fields are valid, a RangeError otherwise.
    """
    return first_error(
        None if hour24 is None else check_integer_range(hour24, "hour24", 0, 23),
        None if hour12 is None else check_integer_range(hour12, "hour12", 0, 11),
        None if meridiem is None else _check_meridiem(meridiem),
        None if minute is None else check_integer_range(minute, "minute", 0, 59),
        None if second is None else check_integer_range(second, "second", 0, 59),
        None if millisecond is None else check_integer_range(
            millisecond, "millisecond", 0, 999
        ),
    )


def check_coherence(
    hour24: Optional[int] = None,
    hour12: Optional[int] = None,
    meridiem: Optional[int] = None
) -> Optional[DateTimeError]:
    """
    Checks hour12 and meridiem against an explicit hour24.

    Without hour24, hour12 and meridiem are authoritative and nothing
    can disagree.
    """
    if hour24 is None:
        return None

    expected_hour12 = hour24 % 12
    return first_error(
        None if hour12 is None else check_value(hour12, "hour12", expected_hour12),
        None if meridiem is None else check_value(
            meridiem, "meridiem", hour24 - expected_hour12
        ),
    )


def resolve(
    hour24: Optional[int] = None,
    hour12: Optional[int] = None,
    meridiem: Optional[int] = None,
    minute: Optional[int] = None,
    second: Optional[int] = None,
    millisecond: Optional[int] = None
) -> TimeOfDay:
    """
    Builds a TimeOfDay from valid fields, applying defaults.

    An explicit hour24 wins over hour12 and meridiem, which otherwise
    default to 0 independently. minute, second and millisecond default
    to 0. Inputs are assumed to have passed check_ranges.
    """
    if hour24 is None:
        hour24 = (meridiem or MERIDIEM_AM) + (hour12 or 0)

    return from_timestamp(
        hour24 * HOUR_MS
        + (minute or 0) * MINUTE_MS
        + (second or 0) * SECOND_MS
        + (millisecond or 0)
    )


def from_parts(
    hour24: Optional[int] = None,
    hour12: Optional[int] = None,
    meridiem: Optional[int] = None,
    minute: Optional[int] = None,
    second: Optional[int] = None,
    millisecond: Optional[int] = None
) -> Result[TimeOfDay]:
    """
    Builds a TimeOfDay from a partial field set.

    Args:
        hour24: Hours on a 24-hour clock, range [0, 23].
        hour12: Hours on a 12-hour clock, range [0, 11].
        meridiem: 0 (AM) or 12 (PM).
        minute: Range [0, 59].
        second: Range [0, 59].
        millisecond: Range [0, 999].

    Returns:
        Result holding the TimeOfDay, or the first RangeError, or a
        CoherenceError when hour12/meridiem disagree with hour24.

    Example:
        >>> from_parts(hour12=3, meridiem=12).value.hour24
        15
    """
    error = check_ranges(hour24, hour12, meridiem, minute, second, millisecond)
    if error is not None:
        return Result.fail(error)

    error = check_coherence(hour24, hour12, meridiem)
    if error is not None:
        return Result.fail(error)

    return Result.ok(resolve(hour24, hour12, meridiem, minute, second, millisecond))
