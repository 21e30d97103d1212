from __future__ import annotations

import math
from datetime import date
from typing import Any

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_number(value: Any, field_name: str) -> float | int:
    """Accept ints, floats and numeric strings; integral values come back as int."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, int):
        return value
    try:
        number = float(value) if isinstance(value, float) else float(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number")
    return int(number) if number.is_integer() else number


def require_iso_date(value: Any, field_name: str) -> str:
    if isinstance(value, date):
        return value.isoformat()
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text).isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from None


def require_json_object(payload: Any) -> dict:
    """Request bodies are optional, but when present they must be a JSON object."""
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload
