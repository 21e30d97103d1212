from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Any, Callable, Optional

from ..common.datetime_utils import current_academic_year, today_local
from ..common.ids import generate_id
from ..common.validators import require_iso_date, require_non_empty, require_number
from ..core.constants import ALL_STAFF, DEFAULT_TYPE_COLOR
from ..event_types.model import EventType
from ..logs.model import EventLog, LogRow
from ..staff.model import Staff
from ..stats import aggregation
from ..storage.store import DataStore
from . import mutations
from .model import AppData

logger = logging.getLogger(__name__)


class TrackerService:
    """Use cases over the single in-memory document.

    Each command runs to completion under one lock: validate input, apply the
    pure mutation, then persist the whole document. Commands never interleave.
    A failed save is logged by the store; the in-memory document stays the
    source of truth either way.
    """

    def __init__(
        self,
        store: DataStore,
        *,
        id_factory: Callable[[], str] = generate_id,
        today: Optional[Callable[[], date]] = None,
    ):
        self._store = store
        self._new_id = id_factory
        self._today = today or today_local
        self._lock = threading.RLock()
        self._data = store.load()

    @property
    def data(self) -> AppData:
        return self._data

    def _apply(self, data: AppData) -> AppData:
        self._data = data
        self._store.save(data)
        return data

    def reload(self) -> AppData:
        with self._lock:
            self._data = self._store.load()
            return self._data

    # ----- staff -----

    def add_staff(self, name: Any) -> Staff:
        staff = Staff(id=self._new_id(), name=require_non_empty(name, "Staff name"))
        with self._lock:
            self._apply(mutations.add_staff(self._data, staff))
        return staff

    def rename_staff(self, staff_id: str, name: Any) -> Optional[Staff]:
        name = require_non_empty(name, "Staff name")
        with self._lock:
            data = self._apply(mutations.rename_staff(self._data, staff_id, name))
        return aggregation.find_staff(data, staff_id)

    def delete_staff(self, staff_id: str) -> None:
        with self._lock:
            before = len(self._data.logs)
            removed = before - len(self._apply(mutations.delete_staff(self._data, staff_id)).logs)
        if removed:
            logger.info("Deleted staff %s together with %d log(s)", staff_id, removed)

    def find_staff(self, staff_id: str) -> Optional[Staff]:
        return aggregation.find_staff(self._data, staff_id)

    # ----- event types -----

    def add_event_type(
        self,
        name: Any,
        *,
        description: Any = "",
        default_value: Any = 0,
        color: Any = DEFAULT_TYPE_COLOR,
    ) -> EventType:
        event_type = EventType(
            id=self._new_id(),
            name=require_non_empty(name, "Event type name"),
            description=str(description or ""),
            default_value=require_number(default_value, "Default value"),
            color=str(color or DEFAULT_TYPE_COLOR),
        )
        with self._lock:
            self._apply(mutations.add_event_type(self._data, event_type))
        return event_type

    def delete_event_type(self, event_type_id: str) -> None:
        with self._lock:
            self._apply(mutations.delete_event_type(self._data, event_type_id))

    # ----- logs -----

    def log_event(
        self,
        staff_id: Any,
        event_type_id: Any,
        *,
        event_date: Any = None,
        academic_year: Any = None,
        value: Any = None,
        notes: Any = "",
    ) -> EventLog:
        """Record an event.

        Without an explicit value the event type's default value is used; the
        log keeps that number even if the type changes later.
        """
        staff_id = require_non_empty(staff_id, "Staff")
        event_type_id = require_non_empty(event_type_id, "Event type")
        today = self._today()
        log_date = require_iso_date(event_date, "Date") if event_date else today.isoformat()
        year = academic_year if academic_year is not None else current_academic_year(today)
        year = require_non_empty(year, "Academic year")

        with self._lock:
            if value is None or value == "":
                event_type = aggregation.find_event_type(self._data, event_type_id)
                value = event_type.default_value if event_type else 0
            value = require_number(value, "Value")

            log = EventLog(
                id=self._new_id(),
                staff_id=staff_id,
                event_type_id=event_type_id,
                date=log_date,
                academic_year=year,
                value=value,
                notes=str(notes or ""),
            )
            self._apply(mutations.add_log(self._data, log))
        return log

    def delete_log(self, log_id: str) -> None:
        with self._lock:
            self._apply(mutations.delete_log(self._data, log_id))

    def delete_logs_by_year(self, academic_year: str) -> int:
        with self._lock:
            before = len(self._data.logs)
            removed = before - len(self._apply(mutations.delete_logs_by_year(self._data, academic_year)).logs)
        logger.info("Deleted %d log(s) for academic year %s", removed, academic_year)
        return removed

    def clear_all_logs(self) -> int:
        with self._lock:
            removed = len(self._data.logs)
            self._apply(mutations.clear_all_logs(self._data))
        logger.info("Cleared all %d log(s)", removed)
        return removed

    # ----- read side -----

    def staff_totals(self, staff_filter: Optional[str] = ALL_STAFF) -> list[aggregation.StaffTotal]:
        return aggregation.staff_totals(self._data, staff_filter)

    def filtered_logs(self, staff_filter: Optional[str] = ALL_STAFF) -> tuple[EventLog, ...]:
        return aggregation.filter_logs(self._data, staff_filter)

    def dashboard_rows(self, staff_filter: Optional[str] = ALL_STAFF) -> list[LogRow]:
        return aggregation.dashboard_rows(self._data, staff_filter)

    def year_groups(self) -> aggregation.YearGroups:
        return aggregation.year_groups(self._data)
