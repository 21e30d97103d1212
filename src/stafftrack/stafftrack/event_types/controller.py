from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_json_object
from ..container import Container
from ..core.constants import DEFAULT_TYPE_COLOR, PRESET_COLORS
from ..core.exceptions import ValidationError
from ..storage.codec import event_type_to_dict


def register(app: Flask, container: Container) -> None:
    tracker = container.tracker_service

    @app.get("/api/event-types", endpoint="event_types_list")
    def event_types_list():
        return jsonify([event_type_to_dict(t) for t in tracker.data.event_types])

    @app.get("/api/event-types/colors", endpoint="event_types_colors")
    def event_types_colors():
        return jsonify({"colors": list(PRESET_COLORS), "default": DEFAULT_TYPE_COLOR})

    @app.post("/api/event-types", endpoint="event_types_create")
    def event_types_create():
        try:
            payload = require_json_object(request.get_json(silent=True))
            event_type = tracker.add_event_type(
                payload.get("name"),
                description=payload.get("description", ""),
                default_value=payload.get("defaultValue", 0),
                color=payload.get("color") or DEFAULT_TYPE_COLOR,
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(event_type_to_dict(event_type)), 201

    @app.delete("/api/event-types/<event_type_id>", endpoint="event_types_delete")
    def event_types_delete(event_type_id: str):
        # Logs of this type are kept and show as "Unknown Type"
        tracker.delete_event_type(event_type_id)
        return jsonify({"success": True})
