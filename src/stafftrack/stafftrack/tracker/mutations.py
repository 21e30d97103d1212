"""Pure commands over the aggregate document.

Every function takes the current `AppData` and returns a new one; nothing here
touches storage. Deleting an unknown id returns an equal document.

Deleting a staff member also purges their logs. Deleting an event type keeps
its logs, which then show as "Unknown Type". Keep this asymmetry.
"""
from __future__ import annotations

from dataclasses import replace

from ..event_types.model import EventType
from ..logs.model import EventLog, year_key
from ..staff.model import Staff
from .model import AppData


def add_staff(data: AppData, staff: Staff) -> AppData:
    return replace(data, staff=data.staff + (staff,))


def rename_staff(data: AppData, staff_id: str, name: str) -> AppData:
    return replace(
        data,
        staff=tuple(replace(s, name=name) if s.id == staff_id else s for s in data.staff),
    )


def delete_staff(data: AppData, staff_id: str) -> AppData:
    return replace(
        data,
        staff=tuple(s for s in data.staff if s.id != staff_id),
        logs=tuple(log for log in data.logs if log.staff_id != staff_id),
    )


def add_event_type(data: AppData, event_type: EventType) -> AppData:
    return replace(data, event_types=data.event_types + (event_type,))


def delete_event_type(data: AppData, event_type_id: str) -> AppData:
    # logs are kept on purpose
    return replace(data, event_types=tuple(t for t in data.event_types if t.id != event_type_id))


def add_log(data: AppData, log: EventLog) -> AppData:
    return replace(data, logs=(log,) + data.logs)


def delete_log(data: AppData, log_id: str) -> AppData:
    return replace(data, logs=tuple(log for log in data.logs if log.id != log_id))


def delete_logs_by_year(data: AppData, academic_year: str) -> AppData:
    return replace(data, logs=tuple(log for log in data.logs if year_key(log) != academic_year))


def clear_all_logs(data: AppData) -> AppData:
    return replace(data, logs=())
