from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import UNKNOWN
from ..event_types.model import Number


@dataclass(frozen=True)
class EventLog:
    """Domain entity: one recorded event for a staff member.

    `staff_id` and `event_type_id` are soft references; the target may have
    been deleted and read sites resolve it to a placeholder name.
    """

    id: str
    staff_id: str
    event_type_id: str
    date: str
    academic_year: str
    value: Number
    notes: str = ""


@dataclass(frozen=True)
class LogRow:
    """Read-model for tables and exports, references already resolved to names."""

    id: str
    date: str
    academic_year: str
    staff_id: str
    staff_name: str
    event_type_id: str
    event_type_name: str
    color: str | None
    value: Number
    notes: str


def year_key(log: EventLog) -> str:
    """Group key for a log's academic year; blank years fall under UNKNOWN."""
    return log.academic_year or UNKNOWN
