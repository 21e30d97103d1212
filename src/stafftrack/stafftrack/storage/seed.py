from __future__ import annotations

from datetime import date

from ..event_types.model import EventType
from ..logs.model import EventLog
from ..staff.model import Staff
from ..tracker.model import AppData

SEED_ACADEMIC_YEAR = "2024-25"


def build_seed_document(today: date) -> AppData:
    """Demo document used when nothing has been stored yet."""
    today_s = today.isoformat()
    return AppData(
        staff=(
            Staff(id="1", name="Alice Johnson"),
            Staff(id="2", name="Bob Smith"),
            Staff(id="3", name="Charlie Davis"),
        ),
        event_types=(
            EventType(id="1", name="Sick Leave", description="Staff member absent due to illness", default_value=1, color="#ef4444"),
            EventType(id="2", name="Class Cover", description="Covering a class for a colleague", default_value=-1, color="#3b82f6"),
            EventType(id="3", name="Training Day", description="Attending mandatory training", default_value=0, color="#f59e0b"),
            EventType(id="4", name="Late Arrival", description="Arrived after shift start", default_value=0.5, color="#ec4899"),
        ),
        logs=(
            EventLog(
                id="101",
                staff_id="1",
                event_type_id="2",
                date=today_s,
                academic_year=SEED_ACADEMIC_YEAR,
                value=-1,
                notes="Covered for Dave",
            ),
            EventLog(
                id="102",
                staff_id="2",
                event_type_id="1",
                date=today_s,
                academic_year=SEED_ACADEMIC_YEAR,
                value=1,
                notes="Flu",
            ),
        ),
    )
