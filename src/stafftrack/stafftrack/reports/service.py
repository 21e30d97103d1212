from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import ALL_STAFF, UNKNOWN_STAFF
from ..core.enums import ExportFormat
from ..event_types.model import Number
from ..stats import aggregation
from ..tracker.model import AppData

DASHBOARD_COLUMNS = ("Date", "Year", "Staff Member", "Event Type", "Impact", "Notes")
YEAR_COLUMNS = ("Date", "Staff Member", "Event Type", "Value", "Notes")


@dataclass(frozen=True)
class ReportData:
    """Tabular report ready for any renderer."""

    title: str
    subtitle_lines: tuple[str, ...]
    columns: tuple[str, ...]
    rows: list[list[str]]
    filename_stem: str
    header_color: str = "#3b82f6"

    def filename(self, fmt: ExportFormat) -> str:
        return f"{self.filename_stem}.{fmt.value}"


def format_value(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def safe_filename_part(text: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]", "_", text)


class ReportService:
    """Builds the dashboard export and the per-academic-year export."""

    def dashboard_report(self, data: AppData, *, staff_filter: Optional[str] = ALL_STAFF, today: date) -> ReportData:
        date_s = today.isoformat()

        if aggregation.is_all(staff_filter):
            title = "StaffTrack Report: All Data"
            stem = f"StaffTrack_AllData_{date_s}"
            scope = "Scope: All Staff Records (Unfiltered)"
        else:
            staff_name = aggregation.resolve_staff_name(data, staff_filter, default=UNKNOWN_STAFF)
            title = f"StaffTrack Report: {staff_name}"
            stem = f"StaffTrack_Filtered_{safe_filename_part(staff_name)}_{date_s}"
            scope = "Scope: Individual Staff Record"

        rows = [
            [r.date, r.academic_year or "-", r.staff_name, r.event_type_name, format_value(r.value), r.notes]
            for r in aggregation.to_rows(data, aggregation.filter_logs(data, staff_filter))
        ]
        return ReportData(
            title=title,
            subtitle_lines=(f"Generated on {date_s}", scope),
            columns=DASHBOARD_COLUMNS,
            rows=rows,
            filename_stem=stem,
        )

    def year_report(self, data: AppData, *, year: str, today: date) -> ReportData:
        logs = aggregation.year_groups(data).groups.get(year, ())
        rows = [
            [r.date, r.staff_name, r.event_type_name, format_value(r.value), r.notes]
            for r in aggregation.to_rows(data, logs)
        ]
        return ReportData(
            title=f"StaffTrack Report: Academic Year {year}",
            subtitle_lines=(f"Generated on {today.isoformat()}",),
            columns=YEAR_COLUMNS,
            rows=rows,
            filename_stem=f"StaffTrack_{safe_filename_part(year)}",
            header_color="#2980b9",
        )
