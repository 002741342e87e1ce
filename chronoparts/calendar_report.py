"""
ChronoParts - Calendar Report Module.

This module generates Excel workbooks listing every day of a Gregorian
year together with its ISO week-date coordinates. A Year Summary tab
gives the shape of the year at a glance, a Day Calendar tab holds one
row per day.

Calendar Context:
    - Weekend days (ISO week days 6 and 7) are shaded
    - Days of week 53 are highlighted, as only long ISO years have one
    - Early January and late December days may belong to a neighbouring
      ISO year

Classes:
    CalendarReporter: Generates Excel workbooks for a calendar year.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from chronoparts.config import Settings, default_settings
from chronoparts.date_time import DateTime
from chronoparts.schema import MAX_TIMESTAMP

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

WEEK_DAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


class CalendarReporter:
    """
    Generates Excel calendar reports for a Gregorian year.

    Example:
        >>> reporter = CalendarReporter()
        >>> reporter.generate_report(2024, "calendar_2024.xlsx")
    """

    WEEKEND_FILL = PatternFill(
        start_color="D9E1F2",
        end_color="D9E1F2",
        fill_type="solid"
    )
    LONG_WEEK_FILL = PatternFill(
        start_color="FFEB9C",
        end_color="FFEB9C",
        fill_type="solid"
    )

    # Header styling
    HEADER_FONT = Font(bold=True, color="FFFFFF")
    HEADER_FILL = PatternFill(
        start_color="2F5496",
        end_color="2F5496",
        fill_type="solid"
    )
    HEADER_ALIGNMENT = Alignment(horizontal="center", vertical="center")

    THIN_BORDER = Border(
        left=Side(style="thin"),
        right=Side(style="thin"),
        top=Side(style="thin"),
        bottom=Side(style="thin")
    )

    DAY_HEADERS = (
        "Date",
        "Ordinal Day",
        "Month",
        "Month Day",
        "ISO Year",
        "ISO Week",
        "Week Day",
        "Day Name",
        "ISO Week Date",
    )

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialises the CalendarReporter.

        Args:
            settings: Settings providing the clock for the generation
                date. Defaults to default_settings.
        """
        self._settings = settings or default_settings

    def generate_report(
        self,
        year: int,
        output_path: Union[str, Path],
        time_zone_offset: float = 0
    ) -> int:
        """
        Generates a complete calendar workbook for a year.

        Creates a workbook with two sheets:
        1. Year Summary - Year properties and one row per month
        2. Day Calendar - One row per day

        The last supported year stops at the last day within the timestamp
        range, September 13th 275760 in UTC.

        Args:
            year: Gregorian year to report.
            output_path: Path for the output .xlsx file.
            time_zone_offset: Offset in hours the days are expressed in.

        Returns:
            Number of day rows written.

        Raises:
            InvalidDateTime: If the year or offset is out of range, or if
                January 1st of the year precedes the timestamp range.
        """
        first_day = DateTime.from_parts(
            year=year, time_zone_offset=time_zone_offset
        ).unwrap()
        last_day = self._last_day(first_day)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        workbook = Workbook()

        # Remove default sheet
        workbook.remove(workbook.active)

        self._create_summary_sheet(workbook, first_day, last_day)
        day_count = self._create_day_sheet(workbook, first_day, last_day)

        workbook.save(output_path)
        logger.info("Wrote %d days of %d to %s", day_count, year, output_path)
        return day_count

    def _create_summary_sheet(
        self,
        workbook: Workbook,
        first_day: DateTime,
        last_day: DateTime
    ) -> None:
        """
        Creates the Year Summary sheet.

        Args:
            workbook: Target workbook.
            first_day: January 1st of the reported year.
            last_day: Last reported day of the year.
        """
        ws = workbook.create_sheet("Year Summary")

        ws["A1"] = f"ChronoParts - Calendar {first_day.year}"
        ws["A1"].font = Font(bold=True, size=16)
        ws.merge_cells("A1:D1")

        generated = DateTime.now(
            first_day.time_zone_offset, settings=self._settings
        ).unwrap()

        properties = [
            ("Report Generated:", generated.to_iso_string()),
            ("Year:", first_day.year),
            ("Leap Year:", "Yes" if first_day.is_leap_year else "No"),
            ("Days:", last_day.ordinal_day),
            ("First Day:", first_day.to_iso_week_string()),
            ("Last Day:", last_day.to_iso_week_string()),
            ("ISO Weeks:", self._iso_week_count(first_day)),
        ]

        row = 3
        for label, value in properties:
            ws[f"A{row}"] = label
            ws[f"A{row}"].font = Font(bold=True)
            ws[f"B{row}"] = value
            row += 1

        ws["A11"] = "MONTHS"
        ws["A11"].font = Font(bold=True, size=14)
        ws.merge_cells("A11:D11")

        headers = ("Month", "Days", "First Day", "First Week Day")
        for col, header in enumerate(headers, start=1):
            cell = ws.cell(row=13, column=col, value=header)
            cell.font = self.HEADER_FONT
            cell.fill = self.HEADER_FILL
            cell.alignment = self.HEADER_ALIGNMENT
            cell.border = self.THIN_BORDER

        for month in range(1, last_day.month + 1):
            month_start = first_day.set_month(month).unwrap()
            if month == last_day.month:
                month_end = last_day
            else:
                month_end = month_start.to_last_month_day().unwrap()

            row_data = [
                MONTH_NAMES[month - 1],
                month_end.month_day,
                month_start.to_iso_week_string(),
                WEEK_DAY_NAMES[month_start.week_day - 1],
            ]
            for col_idx, value in enumerate(row_data, start=1):
                cell = ws.cell(row=13 + month, column=col_idx, value=value)
                cell.border = self.THIN_BORDER

        self._auto_adjust_columns(ws)

    def _create_day_sheet(
        self,
        workbook: Workbook,
        first_day: DateTime,
        last_day: DateTime
    ) -> int:
        """
        Creates the Day Calendar sheet with one row per day.

        Args:
            workbook: Target workbook.
            first_day: January 1st of the reported year.
            last_day: Last reported day of the year.

        Returns:
            Number of day rows written.
        """
        ws = workbook.create_sheet("Day Calendar")

        for col, header in enumerate(self.DAY_HEADERS, start=1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = self.HEADER_FONT
            cell.fill = self.HEADER_FILL
            cell.alignment = self.HEADER_ALIGNMENT
            cell.border = self.THIN_BORDER

        row_idx = 2
        for day_offset in range(last_day.ordinal_day):
            day = first_day.offset_days(day_offset).unwrap()
            row_data = [
                day.to_iso_string().split("T")[0],
                day.ordinal_day,
                day.month,
                day.month_day,
                day.iso_year,
                day.iso_week,
                day.week_day,
                WEEK_DAY_NAMES[day.week_day - 1],
                day.to_iso_week_string(),
            ]

            row_fill = self._get_day_fill(day)
            for col_idx, value in enumerate(row_data, start=1):
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                cell.border = self.THIN_BORDER
                if row_fill is not None:
                    cell.fill = row_fill

            row_idx += 1

        self._auto_adjust_columns(ws)
        return row_idx - 2

    def _iso_week_count(self, first_day: DateTime) -> int:
        """Returns the number of weeks of the ISO year numbered like first_day.year."""
        iso_start = DateTime.from_parts(
            iso_year=first_day.year,
            time_zone_offset=first_day.time_zone_offset
        ).unwrap()
        return 53 if iso_start.is_long_iso_year else 52

    def _last_day(self, first_day: DateTime) -> DateTime:
        """
        Returns December 31st of the year of first_day.

        The year MAX_FULL_YEAR ends early: its last day is the one holding
        MAX_TIMESTAMP in the zone of first_day.
        """
        result = first_day.to_last_year_day()
        if result.is_ok:
            return result.value

        last_instant = DateTime.from_timestamp(
            MAX_TIMESTAMP, first_day.time_zone_offset
        ).unwrap()
        logger.info("Year %d stops on %s", first_day.year, last_instant.to_iso_string())
        return DateTime.from_parts(
            year=last_instant.year,
            ordinal_day=last_instant.ordinal_day,
            time_zone_offset=first_day.time_zone_offset
        ).unwrap()

    def _get_day_fill(self, day: DateTime) -> Optional[PatternFill]:
        """
        Returns the fill colour of a day row.

        Args:
            day: Day of the row.

        Returns:
            PatternFill for week 53 and weekend days, or None.
        """
        if day.iso_week == 53:
            return self.LONG_WEEK_FILL
        if day.week_day >= 6:
            return self.WEEKEND_FILL
        return None

    def _auto_adjust_columns(self, worksheet: Worksheet) -> None:
        """
        Auto-adjusts column widths based on content.

        Args:
            worksheet: Target worksheet.
        """
        for col_idx in range(1, worksheet.max_column + 1):
            max_length = 0

            for row_idx in range(1, worksheet.max_row + 1):
                value = worksheet.cell(row=row_idx, column=col_idx).value
                if value is not None:
                    max_length = max(max_length, len(str(value)))

            # Add padding and set minimum width
            column_letter = get_column_letter(col_idx)
            worksheet.column_dimensions[column_letter].width = max(max_length + 2, 10)

    def generate_filename(self, year: int, prefix: str = "calendar") -> str:
        """
        Generates a filename for a calendar report.

        Args:
            year: Reported year.
            prefix: Filename prefix. Defaults to "calendar".

        Returns:
            Filename like "calendar_2024.xlsx".
        """
        return f"{prefix}_{year}.xlsx"
