from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request

from ..common.datetime_utils import academic_year_options, current_academic_year
from ..common.validators import require_json_object
from ..container import Container
from ..core.constants import ALL_STAFF
from ..core.exceptions import ValidationError
from ..storage.codec import log_to_dict
from .model import LogRow


def row_to_json(row: LogRow) -> dict[str, Any]:
    return {
        "id": row.id,
        "date": row.date,
        "academicYear": row.academic_year or "-",
        "staffId": row.staff_id,
        "staffName": row.staff_name,
        "eventTypeId": row.event_type_id,
        "eventTypeName": row.event_type_name,
        "color": row.color,
        "value": row.value,
        "notes": row.notes,
    }


def register(app: Flask, container: Container) -> None:
    tracker = container.tracker_service

    @app.get("/api/logs", endpoint="logs_list")
    def logs_list():
        staff_filter = request.args.get("staff", ALL_STAFF)
        rows = tracker.dashboard_rows(staff_filter)
        return jsonify({"count": len(rows), "logs": [row_to_json(r) for r in rows]})

    @app.get("/api/logs/form-defaults", endpoint="logs_form_defaults")
    def logs_form_defaults():
        today = container.today()
        return jsonify(
            {
                "date": today.isoformat(),
                "academicYear": current_academic_year(today),
                "academicYearOptions": academic_year_options(today),
            }
        )

    @app.post("/api/logs", endpoint="logs_create")
    def logs_create():
        try:
            payload = require_json_object(request.get_json(silent=True))
            log = tracker.log_event(
                payload.get("staffId"),
                payload.get("eventTypeId"),
                event_date=payload.get("date"),
                academic_year=payload.get("academicYear"),
                value=payload.get("value"),
                notes=payload.get("notes", ""),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(log_to_dict(log)), 201

    @app.delete("/api/logs/<log_id>", endpoint="logs_delete")
    def logs_delete(log_id: str):
        tracker.delete_log(log_id)
        return jsonify({"success": True})
