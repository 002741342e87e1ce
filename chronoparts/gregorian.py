"""
ChronoParts - Gregorian Calendar Module.

Locates Gregorian years and days from timestamps and back, using
closed-form quotient/remainder decomposition over the 400-year cycle.

Leap years are those divisible by 4, except those divisible by 100,
except those divisible by 400. So 2100, 2200 and 2300 are not leap
years but 2400 is. Year y and year y + 400k have the same length, so
the 400-year cycle starting on 2001-01-01 is used as reference:

    - [2001, 2100], [2101, 2200] and [2201, 2300] last HUNDRED_YEARS_MS.
      Each divides into 24 periods of FOUR_YEARS_MS and a final 4-year
      period without leap year.
    - [2301, 2400] lasts HUNDRED_YEARS_MS + DAY_MS and divides into 25
      periods of FOUR_YEARS_MS.
"""

from chronoparts.schema import (
    COMMON_YEAR_MS,
    DAY_MS,
    LEAP_YEAR_MS,
    GregorianDay,
    GregorianYear,
)

FOUR_YEARS_MS = 3 * COMMON_YEAR_MS + LEAP_YEAR_MS
HUNDRED_YEARS_MS = 25 * FOUR_YEARS_MS - DAY_MS
FOUR_HUNDRED_YEARS_MS = 4 * HUNDRED_YEARS_MS + DAY_MS

# Timestamp of 2001-01-01T00:00:00.000Z
YEAR_START_2001_MS = 978_307_200_000

COMMON_YEAR_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
LEAP_YEAR_DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """
    Determines if the specified year is a leap year.

    Args:
        year: Gregorian year number.

    Returns:
        True if the year counts 366 days.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def year_from_timestamp(day_part: int) -> GregorianYear:
    """
    Locates the Gregorian year containing a timestamp.

    Args:
        day_part: Timestamp (any moment of the day works).

    Returns:
        GregorianYear descriptor of the year containing day_part.
    """
    offset_2001 = day_part - YEAR_START_2001_MS

    q400_years, r400_years = divmod(offset_2001, FOUR_HUNDRED_YEARS_MS)

    # q100_years reaches 4 on the last day of the 400-year period
    q100_years = min(3, r400_years // HUNDRED_YEARS_MS)
    r100_years = r400_years - q100_years * HUNDRED_YEARS_MS

    q4_years, r4_years = divmod(r100_years, FOUR_YEARS_MS)

    # q1_year reaches 4 on the last day of each leap year
    q1_year = min(3, r4_years // COMMON_YEAR_MS)

    return GregorianYear(
        year=2001 + 400 * q400_years + 100 * q100_years + 4 * q4_years + q1_year,
        is_leap=q1_year == 3 and (q4_years != 24 or q100_years == 3),
        start_timestamp=(
            YEAR_START_2001_MS
            + q400_years * FOUR_HUNDRED_YEARS_MS
            + q100_years * HUNDRED_YEARS_MS
            + q4_years * FOUR_YEARS_MS
            + q1_year * COMMON_YEAR_MS
        )
    )


def year_from_number(year: int) -> GregorianYear:
    """
    Builds the descriptor of a Gregorian year from its number.

    Exact inverse of year_from_timestamp. No capping is needed since the
    year number is exact.

    Args:
        year: Gregorian year number.

    Returns:
        GregorianYear descriptor.
    """
    q400_years, r400_years = divmod(year - 2001, 400)
    q100_years, r100_years = divmod(r400_years, 100)
    q4_years, r4_years = divmod(r100_years, 4)

    return GregorianYear(
        year=year,
        is_leap=is_leap_year(year),
        start_timestamp=(
            YEAR_START_2001_MS
            + q400_years * FOUR_HUNDRED_YEARS_MS
            + q100_years * HUNDRED_YEARS_MS
            + q4_years * FOUR_YEARS_MS
            + r4_years * COMMON_YEAR_MS
        )
    )


def year_length_days(year: GregorianYear) -> int:
    """Returns the number of days of the year."""
    return 366 if year.is_leap else 365


def year_length_ms(year: GregorianYear) -> int:
    """Returns the duration of the year in milliseconds."""
    return LEAP_YEAR_MS if year.is_leap else COMMON_YEAR_MS


def days_in_month(year: GregorianYear, month: int) -> int:
    """
    Returns the number of days of a month.

    Args:
        year: Year descriptor.
        month: Month number (1-12).

    Returns:
        28 to 31.
    """
    table = LEAP_YEAR_DAYS_IN_MONTH if year.is_leap else COMMON_YEAR_DAYS_IN_MONTH
    return table[month - 1]


def month_offset(year: GregorianYear, month: int) -> int:
    """
    Returns the number of days between January 1st and the first day of month.

    From March on, month lengths follow the closed form
    30 * (month - 1) + floor(0.6 * (month + 1)) minus a constant that
    depends on the length of February.

    Args:
        year: Year descriptor.
        month: Month number (1-12).
    """
    if month == 1:
        return 0
    if month == 2:
        return 31
    return 30 * (month - 1) + (6 * (month + 1)) // 10 - (2 if year.is_leap else 3)


def _month_from_ordinal_day(year: GregorianYear, ordinal_day: int) -> int:
    if ordinal_day <= 31:
        return 1

    adjusted = ordinal_day - (1 if year.is_leap else 0)
    if adjusted <= 59:
        return 2

    # floor((adjusted - 59) / 30.6 - 0.018) in integer arithmetic
    return (10 * (adjusted - 59) - 6) // 306 + 3


def day_from_ordinal(year: GregorianYear, ordinal_day: int) -> GregorianDay:
    """
    Builds the descriptor of a day from its position in the year.

    Args:
        year: Year descriptor.
        ordinal_day: Position of the day in the year, range [1, 366].

    Returns:
        GregorianDay descriptor.
    """
    month = _month_from_ordinal_day(year, ordinal_day)
    return GregorianDay(
        ordinal_day=ordinal_day,
        month=month,
        month_day=ordinal_day - month_offset(year, month),
        start_timestamp=year.start_timestamp + (ordinal_day - 1) * DAY_MS
    )


def day_from_month_day(year: GregorianYear, month: int, month_day: int) -> GregorianDay:
    """
    Builds the descriptor of a day from its month and position in the month.

    Args:
        year: Year descriptor.
        month: Month number (1-12).
        month_day: Position of the day in the month.

    Returns:
        GregorianDay descriptor.
    """
    ordinal_day = month_offset(year, month) + month_day
    return GregorianDay(
        ordinal_day=ordinal_day,
        month=month,
        month_day=month_day,
        start_timestamp=year.start_timestamp + (ordinal_day - 1) * DAY_MS
    )


def day_from_offset(year: GregorianYear, offset: int) -> GregorianDay:
    """
    Builds the descriptor of the day at offset ms from the start of year.

    Args:
        year: Year descriptor.
        offset: Milliseconds since the start of the year.
    """
    return day_from_ordinal(year, offset // DAY_MS + 1)
