"""Read-only projections over the document.

Everything is recomputed from scratch on each call. Log references are
resolved with lookup-or-default: a deleted staff member or event type is a
normal state and shows up as a placeholder name.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from ..core.constants import ALL_STAFF, UNKNOWN, UNKNOWN_STAFF, UNKNOWN_TYPE
from ..event_types.model import EventType, Number
from ..logs.model import EventLog, LogRow, year_key
from ..staff.model import Staff
from ..tracker.model import AppData


@dataclass(frozen=True)
class StaffTotal:
    staff: Staff
    total_score: Number
    log_count: int


@dataclass(frozen=True)
class YearGroups:
    """Logs partitioned by academic year.

    `years` is the display order: descending string order, so "2024-25"
    comes before "2023-24".
    """

    groups: Mapping[str, tuple[EventLog, ...]]
    years: tuple[str, ...]

    def count(self, year: str) -> int:
        return len(self.groups.get(year, ()))


def is_all(staff_filter: Optional[str]) -> bool:
    return staff_filter is None or staff_filter == ALL_STAFF


def find_staff(data: AppData, staff_id: str) -> Optional[Staff]:
    return next((s for s in data.staff if s.id == staff_id), None)


def find_event_type(data: AppData, event_type_id: str) -> Optional[EventType]:
    return next((t for t in data.event_types if t.id == event_type_id), None)


def resolve_staff_name(data: AppData, staff_id: str, default: str = UNKNOWN_STAFF) -> str:
    staff = find_staff(data, staff_id)
    return staff.name if staff else default


def resolve_type_name(data: AppData, event_type_id: str, default: str = UNKNOWN_TYPE) -> str:
    event_type = find_event_type(data, event_type_id)
    return event_type.name if event_type else default


def filter_logs(data: AppData, staff_filter: Optional[str] = ALL_STAFF) -> tuple[EventLog, ...]:
    if is_all(staff_filter):
        return data.logs
    return tuple(log for log in data.logs if log.staff_id == staff_filter)


def staff_totals(data: AppData, staff_filter: Optional[str] = ALL_STAFF) -> list[StaffTotal]:
    """Sum of log values and log count per staff member, in staff order.

    Members without logs are included with a total of 0.
    """
    visible = data.staff if is_all(staff_filter) else [s for s in data.staff if s.id == staff_filter]

    out: list[StaffTotal] = []
    for staff in visible:
        values = [log.value for log in data.logs if log.staff_id == staff.id]
        out.append(StaffTotal(staff=staff, total_score=sum(values), log_count=len(values)))
    return out


def group_logs_by_year(logs: Iterable[EventLog]) -> YearGroups:
    groups: dict[str, list[EventLog]] = {}
    for log in logs:
        groups.setdefault(year_key(log), []).append(log)

    # plain string sort; legacy data may not parse as numbers
    years = tuple(sorted(groups, reverse=True))
    return YearGroups(groups={y: tuple(v) for y, v in groups.items()}, years=years)


def year_groups(data: AppData) -> YearGroups:
    return group_logs_by_year(data.logs)


def to_rows(
    data: AppData,
    logs: Sequence[EventLog],
    *,
    unknown_staff: str = UNKNOWN_STAFF,
    unknown_type: str = UNKNOWN_TYPE,
) -> list[LogRow]:
    """Resolve references for display; the staff placeholder differs per screen."""
    staff_by_id = {s.id: s for s in data.staff}
    types_by_id = {t.id: t for t in data.event_types}

    rows = []
    for log in logs:
        staff = staff_by_id.get(log.staff_id)
        event_type = types_by_id.get(log.event_type_id)
        rows.append(
            LogRow(
                id=log.id,
                date=log.date,
                academic_year=log.academic_year,
                staff_id=log.staff_id,
                staff_name=staff.name if staff else unknown_staff,
                event_type_id=log.event_type_id,
                event_type_name=event_type.name if event_type else unknown_type,
                color=event_type.color if event_type else None,
                value=log.value,
                notes=log.notes,
            )
        )
    return rows


def dashboard_rows(data: AppData, staff_filter: Optional[str] = ALL_STAFF) -> list[LogRow]:
    """Rows of the dashboard table: dangling staff render as plain "Unknown"."""
    return to_rows(data, filter_logs(data, staff_filter), unknown_staff=UNKNOWN)
