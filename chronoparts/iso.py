"""
ChronoParts - ISO Week-Date Module.

Locates ISO 8601 week-years and week days from timestamps and back.

An ISO year starts on the Monday of the week holding January 4th and
counts 52 (short) or 53 (long) weeks. A year is long when its Gregorian
counterpart starts on a Thursday, or on a Wednesday in a leap year.

Since the Gregorian calendar repeats every 400 years, so do ISO years:
a 400-year cycle holds 71 long and 329 short years. Inside the cycle
starting with ISO year 2000, long years follow this pattern:

    - [2000, 2100] (101 years) and the three following buckets
      [2101, 2199], [2200, 2299] and [2300, 2399] are cut so that,
      once shifted by a multiple of 96 years, each lines up with the
      28-year cycle starting in 2010.
    - A 28-year cycle holds an 11-year span, another 11-year span and
      a 6-year span, each ending with a long year.
    - An 11-year span holds a 6-year span (5 short years then a long
      one) followed by a 5-year span (4 short years then a long one).
"""

from chronoparts import gregorian
from chronoparts.schema import (
    DAY_MS,
    LONG_YEAR_MS,
    SHORT_YEAR_MS,
    WEEK_MS,
    GregorianYear,
    IsoDay,
    IsoYear,
)

SIX_YEARS_MS = LONG_YEAR_MS + 5 * SHORT_YEAR_MS
ELEVEN_YEARS_MS = 2 * LONG_YEAR_MS + 9 * SHORT_YEAR_MS
TWENTY_EIGHT_YEARS_MS = 5 * LONG_YEAR_MS + 23 * SHORT_YEAR_MS
NINETY_SIX_YEARS_MS = 17 * LONG_YEAR_MS + 79 * SHORT_YEAR_MS
HUNDRED_YEARS_MS = 18 * LONG_YEAR_MS + 82 * SHORT_YEAR_MS
FOUR_HUNDRED_YEARS_MS = 71 * LONG_YEAR_MS + 329 * SHORT_YEAR_MS

# Monday 2000-01-03T00:00:00.000Z, first day of ISO year 2000
ISO_YEAR_START_2000_MS = 946_857_600_000

# Monday 2010-01-04T00:00:00.000Z, first day of ISO year 2010
ISO_YEAR_START_2010_MS = 1_262_563_200_000


def iso_year_from_timestamp(day_part: int) -> IsoYear:
    """
    Locates the ISO year containing a timestamp.

    Args:
        day_part: Timestamp (any moment of the day works).

    Returns:
        IsoYear descriptor of the ISO year containing day_part.
    """
    q400_years, r400_years = divmod(
        day_part - ISO_YEAR_START_2000_MS, FOUR_HUNDRED_YEARS_MS
    )

    # The first bucket holds 101 years, the second one 99
    if r400_years < HUNDRED_YEARS_MS + SHORT_YEAR_MS:
        q100_years = 0
    else:
        q100_years = (r400_years + WEEK_MS) // HUNDRED_YEARS_MS

    # Re-based on the 28-year cycle starting with ISO year 2010
    adjusted = r400_years - q100_years * NINETY_SIX_YEARS_MS + SHORT_YEAR_MS
    q28_years, r28_years = divmod(adjusted, TWENTY_EIGHT_YEARS_MS)

    # q11_years is -1 for the first 11 years of the 28-year cycle
    adjusted_r28_years = r28_years - ELEVEN_YEARS_MS
    q11_years, r11_years = divmod(adjusted_r28_years, ELEVEN_YEARS_MS)

    q6_years, r6_years = divmod(r11_years, SIX_YEARS_MS)

    # Capped on the last week of a long year
    q1_year = min(r6_years // SHORT_YEAR_MS, 5 if q6_years == 0 else 4)

    return IsoYear(
        iso_year=(
            2010
            + 400 * q400_years
            + 96 * q100_years
            + 28 * q28_years
            + 11 * q11_years
            + 6 * q6_years
            + q1_year
        ),
        is_long=(q6_years == 0 and q1_year == 5) or (q6_years == 1 and q1_year == 4),
        start_timestamp=(
            ISO_YEAR_START_2010_MS
            + q400_years * FOUR_HUNDRED_YEARS_MS
            + q100_years * NINETY_SIX_YEARS_MS
            + q28_years * TWENTY_EIGHT_YEARS_MS
            + q11_years * ELEVEN_YEARS_MS
            + q6_years * SIX_YEARS_MS
            + q1_year * SHORT_YEAR_MS
        )
    )


def iso_year_from_number(iso_year: int) -> IsoYear:
    """
    Builds the descriptor of an ISO year from its number.

    Exact inverse of iso_year_from_timestamp.

    Args:
        iso_year: ISO year number.

    Returns:
        IsoYear descriptor.
    """
    q400_years, r400_years = divmod(iso_year - 2000, 400)

    # Year 100 of the cycle closes the first bucket
    q100_years = 0 if r400_years == 100 else r400_years // 100

    adjusted = r400_years - 96 * q100_years + 1
    q28_years, r28_years = divmod(adjusted, 28)
    q11_years, r11_years = divmod(r28_years - 11, 11)

    return IsoYear(
        iso_year=iso_year,
        is_long=r11_years in (5, 10),
        start_timestamp=(
            ISO_YEAR_START_2010_MS
            + q400_years * FOUR_HUNDRED_YEARS_MS
            + q100_years * NINETY_SIX_YEARS_MS
            + q28_years * TWENTY_EIGHT_YEARS_MS
            + q11_years * ELEVEN_YEARS_MS
            + r11_years * SHORT_YEAR_MS
            + (WEEK_MS if r11_years > 5 else 0)
        )
    )


def _iso_year_of(year: GregorianYear) -> IsoYear:
    """Returns the ISO year sharing its number with a Gregorian year."""
    # 1970-01-01 was a Thursday
    weekday = (year.start_timestamp // DAY_MS + 3) % 7 + 1
    days_to_monday = 1 - weekday if weekday <= 4 else 8 - weekday

    return IsoYear(
        iso_year=year.year,
        is_long=weekday == 4 or (weekday == 3 and year.is_leap),
        start_timestamp=year.start_timestamp + days_to_monday * DAY_MS
    )


def iso_year_from_gregorian(year: GregorianYear, day_part: int) -> IsoYear:
    """
    Derives the ISO year of a day from its already located Gregorian year.

    The ISO year of a day is the Gregorian year itself, the previous one
    (early January) or the next one (late December).

    Args:
        year: Gregorian year containing day_part.
        day_part: Timestamp of the day.

    Returns:
        IsoYear descriptor of the ISO year containing day_part.
    """
    iso_year = _iso_year_of(year)

    if day_part < iso_year.start_timestamp:
        return _iso_year_of(gregorian.year_from_number(year.year - 1))

    if day_part >= iso_year.start_timestamp + year_length_ms(iso_year):
        return _iso_year_of(gregorian.year_from_number(year.year + 1))

    return iso_year


def weeks_in_year(iso_year: IsoYear) -> int:
    """Returns 53 for long ISO years and 52 otherwise."""
    return 53 if iso_year.is_long else 52


def year_length_ms(iso_year: IsoYear) -> int:
    """Returns the duration of the ISO year in milliseconds."""
    return LONG_YEAR_MS if iso_year.is_long else SHORT_YEAR_MS


def day_from_week(iso_year: IsoYear, iso_week: int, week_day: int) -> IsoDay:
    """
    Builds the descriptor of a day from its ISO week and week day.

    Args:
        iso_year: ISO year descriptor.
        iso_week: Week of the year, range [1, 53].
        week_day: Day of the week, range [1, 7], 1 is Monday.

    Returns:
        IsoDay descriptor.
    """
    return IsoDay(
        iso_week=iso_week,
        week_day=week_day,
        start_timestamp=(
            iso_year.start_timestamp
            + (iso_week - 1) * WEEK_MS
            + (week_day - 1) * DAY_MS
        )
    )


def day_from_offset(iso_year: IsoYear, offset: int) -> IsoDay:
    """
    Builds the descriptor of the day at offset ms from the start of iso_year.

    Args:
        iso_year: ISO year descriptor.
        offset: Milliseconds since the start of the ISO year.
    """
    weeks, remainder = divmod(offset, WEEK_MS)
    return day_from_week(iso_year, weeks + 1, remainder // DAY_MS + 1)
