"""
ChronoParts - Calendar Report Tests.

Unit tests for CalendarReporter class.
Tests ensure correct sheet creation, data population,
and formatting application.
"""

import tempfile
from pathlib import Path

import pytest
from openpyxl import load_workbook

from chronoparts import MAX_FULL_YEAR, InvalidDateTime, Settings
from chronoparts.calendar_report import CalendarReporter


class TestCalendarReporterUnit:
    """Unit tests for CalendarReporter."""

    def setup_method(self) -> None:
        """Initialise CalendarReporter with a fixed clock for each test."""
        self.reporter = CalendarReporter(Settings(time_zone_offset=0, clock=lambda: 0))

    def _generate(self, tmpdir: str, year: int, **kwargs):
        output_path = Path(tmpdir) / f"calendar_{year}.xlsx"
        day_count = self.reporter.generate_report(year, output_path, **kwargs)
        return day_count, load_workbook(output_path)

    def test_generate_report_creates_file(self) -> None:
        """Verify report generation creates a file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "reports" / "calendar.xlsx"
            self.reporter.generate_report(2024, output_path)

            assert output_path.exists()

    def test_sheet_names(self) -> None:
        """Verify the workbook holds the summary and day sheets."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, wb = self._generate(tmpdir, 2024)

            assert wb.sheetnames == ["Year Summary", "Day Calendar"]

    def test_leap_year_day_count(self) -> None:
        """Verify a leap year has 366 day rows."""
        with tempfile.TemporaryDirectory() as tmpdir:
            day_count, wb = self._generate(tmpdir, 2024)

            assert day_count == 366
            assert wb["Day Calendar"].max_row == 367

    def test_common_year_day_count(self) -> None:
        """Verify a common year has 365 day rows."""
        with tempfile.TemporaryDirectory() as tmpdir:
            day_count, _ = self._generate(tmpdir, 2023)

            assert day_count == 365

    def test_day_rows(self) -> None:
        """Verify the first day and February 29th rows."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, wb = self._generate(tmpdir, 2024)
            ws = wb["Day Calendar"]

            assert [cell.value for cell in ws[1]] == list(CalendarReporter.DAY_HEADERS)
            assert [cell.value for cell in ws[2]] == [
                "2024-01-01", 1, 1, 1, 2024, 1, 1, "Monday", "2024-W01-1"
            ]
            assert [cell.value for cell in ws[61]] == [
                "2024-02-29", 60, 2, 29, 2024, 9, 4, "Thursday", "2024-W09-4"
            ]

    def test_weekend_fill(self) -> None:
        """Verify weekend rows are shaded and weekday rows are not."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, wb = self._generate(tmpdir, 2024)
            ws = wb["Day Calendar"]

            # January 6th 2024 is a Saturday
            assert ws["H7"].value == "Saturday"
            assert ws["A7"].fill.fgColor.rgb.endswith("D9E1F2")
            assert ws["A2"].fill.fill_type is None

    def test_week_53_fill(self) -> None:
        """Verify days of week 53 are highlighted."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, wb = self._generate(tmpdir, 2026)
            ws = wb["Day Calendar"]
            last_row = ws.max_row

            assert ws[f"A{last_row}"].value == "2026-12-31"
            assert ws[f"F{last_row}"].value == 53
            assert ws[f"A{last_row}"].fill.fgColor.rgb.endswith("FFEB9C")

    def test_summary_sheet(self) -> None:
        """Verify the year properties of the summary sheet."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, wb = self._generate(tmpdir, 2024)
            ws = wb["Year Summary"]

            assert ws["A1"].value == "ChronoParts - Calendar 2024"
            assert ws["B3"].value == "1970-01-01T00:00:00.000+00:00"
            assert ws["B4"].value == 2024
            assert ws["B5"].value == "Yes"
            assert ws["B6"].value == 366
            assert ws["B7"].value == "2024-W01-1"
            assert ws["B8"].value == "2025-W01-2"
            assert ws["B9"].value == 52

    def test_summary_long_iso_year(self) -> None:
        """Verify 2026 is reported with 53 ISO weeks."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, wb = self._generate(tmpdir, 2026)

            assert wb["Year Summary"]["B5"].value == "No"
            assert wb["Year Summary"]["B9"].value == 53

    def test_month_rows(self) -> None:
        """Verify the month table of the summary sheet."""
        with tempfile.TemporaryDirectory() as tmpdir:
            _, wb = self._generate(tmpdir, 2024)
            ws = wb["Year Summary"]

            assert [cell.value for cell in ws[14]][:4] == [
                "January", 31, "2024-W01-1", "Monday"
            ]
            assert [cell.value for cell in ws[15]][:4] == [
                "February", 29, "2024-W05-4", "Thursday"
            ]
            assert ws["A25"].value == "December"

    def test_time_zone_offset(self) -> None:
        """Verify days are listed in the requested zone."""
        with tempfile.TemporaryDirectory() as tmpdir:
            day_count, wb = self._generate(tmpdir, 2024, time_zone_offset=-5)

            assert day_count == 366
            assert wb["Day Calendar"]["A2"].value == "2024-01-01"

    def test_last_supported_year_stops_at_timestamp_range(self) -> None:
        """Verify the last supported year is reported up to September 13th."""
        with tempfile.TemporaryDirectory() as tmpdir:
            day_count, wb = self._generate(tmpdir, MAX_FULL_YEAR)
            ws = wb["Day Calendar"]
            summary = wb["Year Summary"]

            # 275760 is a leap year, September 13th is its 257th day
            assert day_count == 257
            assert ws[f"A{ws.max_row}"].value == "+275760-09-13"
            assert summary["B6"].value == 257
            assert summary["A22"].value == "September"
            assert summary["B22"].value == 13
            assert summary["A23"].value is None

    def test_invalid_year(self) -> None:
        """Verify a year past the supported range raises."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(InvalidDateTime):
                self.reporter.generate_report(300_000, Path(tmpdir) / "calendar.xlsx")

    def test_generate_filename(self) -> None:
        """Verify filename generation."""
        assert self.reporter.generate_filename(2024) == "calendar_2024.xlsx"
        assert self.reporter.generate_filename(2024, "year") == "year_2024.xlsx"
