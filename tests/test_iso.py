"""
ChronoParts - ISO Week-Date Tests.

Unit and property-based tests for the ISO year and day locators.
Results are cross-checked against date.isocalendar() for years 1 to 9999.
"""

from datetime import date

import pytest
from hypothesis import given, settings
from hypothesis.strategies import dates, integers

from chronoparts import gregorian, iso
from chronoparts.schema import DAY_MS, MAX_FULL_YEAR, MIN_FULL_YEAR, WEEK_MS

EPOCH_ORDINAL = date(1970, 1, 1).toordinal()


def day_part_of(value: date) -> int:
    """Returns the timestamp of a date at midnight UTC."""
    return (value.toordinal() - EPOCH_ORDINAL) * DAY_MS


def iso_fields(day_part: int):
    """Returns (iso_year, iso_week, week_day) of a day through the ISO locators."""
    iso_year = iso.iso_year_from_timestamp(day_part)
    day = iso.day_from_offset(iso_year, day_part - iso_year.start_timestamp)
    return iso_year.iso_year, day.iso_week, day.week_day


class TestIsoYearUnit:
    """Unit tests for the ISO year locator."""

    def test_epoch_iso_year(self) -> None:
        """Verify 1970 starts on Monday December 29th 1969 and is long."""
        iso_year = iso.iso_year_from_timestamp(0)

        assert iso_year.iso_year == 1970
        assert iso_year.is_long is True
        assert iso_year.start_timestamp == -3 * DAY_MS

    def test_anchors(self) -> None:
        """Verify the reference starts of ISO years 2000 and 2010."""
        assert iso.iso_year_from_number(2000).start_timestamp == day_part_of(date(2000, 1, 3))
        assert iso.iso_year_from_number(2010).start_timestamp == day_part_of(date(2010, 1, 4))
        assert iso.ISO_YEAR_START_2000_MS == day_part_of(date(2000, 1, 3))
        assert iso.ISO_YEAR_START_2010_MS == day_part_of(date(2010, 1, 4))

    def test_long_years(self) -> None:
        """Verify known long and short ISO years."""
        assert iso.iso_year_from_number(2004).is_long is True
        assert iso.iso_year_from_number(2009).is_long is True
        assert iso.iso_year_from_number(2020).is_long is True
        assert iso.iso_year_from_number(2026).is_long is True
        assert iso.iso_year_from_number(2021).is_long is False
        assert iso.iso_year_from_number(2024).is_long is False
        assert iso.iso_year_from_number(2100).is_long is False

    def test_weeks_in_year(self) -> None:
        """Verify week counts of long and short years."""
        assert iso.weeks_in_year(iso.iso_year_from_number(2020)) == 53
        assert iso.weeks_in_year(iso.iso_year_from_number(2021)) == 52

    @pytest.mark.parametrize("first_year", [-5000, 1, 1970, 2000, 2101, 270_000])
    def test_20871_weeks_per_400_years(self, first_year: int) -> None:
        """Verify any 400 consecutive ISO years hold 71 long years and 20871 weeks."""
        years = [
            iso.iso_year_from_number(year)
            for year in range(first_year, first_year + 400)
        ]

        assert sum(iso.weeks_in_year(year) for year in years) == 20_871
        assert sum(year.is_long for year in years) == 71

    def test_consecutive_years_are_contiguous(self) -> None:
        """Verify each ISO year starts where the previous one ends."""
        previous = iso.iso_year_from_number(1599)
        for number in range(1600, 2801):
            current = iso.iso_year_from_number(number)

            assert current.start_timestamp == (
                previous.start_timestamp + iso.year_length_ms(previous)
            )
            assert iso.iso_year_from_timestamp(current.start_timestamp) == current
            assert iso.iso_year_from_timestamp(current.start_timestamp - 1) == previous
            previous = current


class TestIsoDayUnit:
    """Unit tests for the ISO day locator."""

    def test_day_from_week(self) -> None:
        """Verify week 9, day 4 of 2024 is February 29th."""
        iso_year = iso.iso_year_from_number(2024)
        day = iso.day_from_week(iso_year, 9, 4)

        assert day.start_timestamp == day_part_of(date(2024, 2, 29))

    def test_week_53(self) -> None:
        """Verify week 53, day 5 of 2020 is January 1st 2021."""
        assert iso_fields(day_part_of(date(2021, 1, 1))) == (2020, 53, 5)

    def test_day_from_offset_last_day(self) -> None:
        """Verify the last millisecond of a long year is on week 53, day 7."""
        iso_year = iso.iso_year_from_number(2020)
        day = iso.day_from_offset(iso_year, 53 * WEEK_MS - 1)

        assert (day.iso_week, day.week_day) == (53, 7)


class TestIsoProperty:
    """Property-based tests for the ISO locators."""

    @given(dates())
    @settings(max_examples=500)
    def test_matches_isocalendar(self, value: date) -> None:
        """Property: ISO fields agree with date.isocalendar()."""
        expected = value.isocalendar()

        assert iso_fields(day_part_of(value)) == (expected[0], expected[1], expected[2])

    @given(dates())
    @settings(max_examples=300)
    def test_from_gregorian_matches_from_timestamp(self, value: date) -> None:
        """Property: both ways of locating the ISO year of a day agree."""
        day_part = day_part_of(value)
        year = gregorian.year_from_timestamp(day_part)

        assert iso.iso_year_from_gregorian(year, day_part) == iso.iso_year_from_timestamp(day_part)

    @given(integers(min_value=MIN_FULL_YEAR, max_value=MAX_FULL_YEAR))
    @settings(max_examples=300)
    def test_year_round_trip(self, number: int) -> None:
        """Property: the first and last milliseconds of an ISO year locate that year."""
        iso_year = iso.iso_year_from_number(number)
        last_ms = iso_year.start_timestamp + iso.year_length_ms(iso_year) - 1

        assert iso.iso_year_from_timestamp(iso_year.start_timestamp) == iso_year
        assert iso.iso_year_from_timestamp(last_ms) == iso_year

    @given(integers(min_value=1, max_value=9998))
    @settings(max_examples=300)
    def test_long_flag_matches_december_28th(self, number: int) -> None:
        """Property: a year is long iff December 28th falls in week 53."""
        expected = date(number, 12, 28).isocalendar()[1] == 53

        assert iso.iso_year_from_number(number).is_long is expected
