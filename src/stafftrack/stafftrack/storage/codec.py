"""Conversion between `AppData` and the persisted JSON document.

The persisted shape uses camelCase keys:

    {"staff": [{"id", "name"}],
     "eventTypes": [{"id", "name", "description", "defaultValue", "color"}],
     "logs": [{"id", "staffId", "eventTypeId", "date", "academicYear", "value", "notes"}]}

Only a broken structure raises `StorageError`: a non-object root or entry,
or a collection that is not a list. Odd field values are coerced one by one
(numeric strings become numbers, gaps become "" or 0) so a single bad field
never costs the rest of the document.
"""
from __future__ import annotations

import json
import logging
import math
from typing import Any, Mapping

from ..core.constants import DEFAULT_ACADEMIC_YEAR
from ..core.exceptions import StorageError
from ..event_types.model import EventType, Number
from ..logs.model import EventLog
from ..staff.model import Staff
from ..tracker.model import AppData

logger = logging.getLogger(__name__)


def _encode_number(value: Number) -> Number:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _require_mapping(raw: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise StorageError(f"{what} must be an object, got {type(raw).__name__}")
    return raw


def _require_list(raw: Mapping[str, Any], key: str) -> list:
    value = raw.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list):
        raise StorageError(f"{key!r} must be a list")
    return value


def _str(raw: Mapping[str, Any], key: str, *, default: str = "") -> str:
    value = raw.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # ids written by other tools may be numeric
        return str(value)
    logger.warning("Field %r has unexpected type %s, using %r", key, type(value).__name__, default)
    return default


def _number(raw: Mapping[str, Any], key: str) -> Number:
    value = raw.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            parsed = None
        if parsed is not None and math.isfinite(parsed):
            return int(parsed) if parsed.is_integer() else parsed
    if value is not None:
        logger.warning("Field %r is not a number (%r), using 0", key, value)
    return 0


def staff_to_dict(staff: Staff) -> dict[str, Any]:
    return {"id": staff.id, "name": staff.name}


def event_type_to_dict(event_type: EventType) -> dict[str, Any]:
    return {
        "id": event_type.id,
        "name": event_type.name,
        "description": event_type.description,
        "defaultValue": _encode_number(event_type.default_value),
        "color": event_type.color,
    }


def log_to_dict(log: EventLog) -> dict[str, Any]:
    return {
        "id": log.id,
        "staffId": log.staff_id,
        "eventTypeId": log.event_type_id,
        "date": log.date,
        "academicYear": log.academic_year,
        "value": _encode_number(log.value),
        "notes": log.notes,
    }


def document_to_dict(document: AppData) -> dict[str, Any]:
    return {
        "staff": [staff_to_dict(s) for s in document.staff],
        "eventTypes": [event_type_to_dict(t) for t in document.event_types],
        "logs": [log_to_dict(log) for log in document.logs],
    }


def staff_from_dict(raw: Any) -> Staff:
    raw = _require_mapping(raw, "staff entry")
    return Staff(id=_str(raw, "id"), name=_str(raw, "name"))


def event_type_from_dict(raw: Any) -> EventType:
    raw = _require_mapping(raw, "event type entry")
    return EventType(
        id=_str(raw, "id"),
        name=_str(raw, "name"),
        description=_str(raw, "description"),
        default_value=_number(raw, "defaultValue"),
        color=_str(raw, "color"),
    )


def log_from_dict(raw: Any) -> EventLog:
    raw = _require_mapping(raw, "log entry")
    return EventLog(
        id=_str(raw, "id"),
        staff_id=_str(raw, "staffId"),
        event_type_id=_str(raw, "eventTypeId"),
        date=_str(raw, "date"),
        academic_year=_str(raw, "academicYear"),
        value=_number(raw, "value"),
        notes=_str(raw, "notes"),
    )


def document_from_dict(raw: Any) -> AppData:
    raw = _require_mapping(raw, "document")
    return AppData(
        staff=tuple(staff_from_dict(s) for s in _require_list(raw, "staff")),
        event_types=tuple(event_type_from_dict(t) for t in _require_list(raw, "eventTypes")),
        logs=tuple(log_from_dict(log) for log in _require_list(raw, "logs")),
    )


def migrate_document(raw: Any) -> dict[str, Any]:
    """Upgrade a freshly parsed document to the current shape.

    Logs written before academic years existed get DEFAULT_ACADEMIC_YEAR.
    Running it again on its own output changes nothing.
    """
    raw = dict(_require_mapping(raw, "document"))
    logs = _require_list(raw, "logs")

    migrated = []
    upgraded = 0
    for entry in logs:
        if isinstance(entry, Mapping) and not entry.get("academicYear"):
            entry = {**entry, "academicYear": DEFAULT_ACADEMIC_YEAR}
            upgraded += 1
        migrated.append(entry)

    if upgraded:
        logger.info("Assigned academic year %s to %d legacy log(s)", DEFAULT_ACADEMIC_YEAR, upgraded)
    raw["logs"] = migrated
    return raw


def dumps(document: AppData) -> str:
    return json.dumps(document_to_dict(document), ensure_ascii=False)


def loads(blob: str) -> AppData:
    """Parse, migrate and decode a stored blob."""
    try:
        raw = json.loads(blob)
    except ValueError as e:
        raise StorageError(f"Stored document is not valid JSON: {e}") from e
    return document_from_dict(migrate_document(raw))
