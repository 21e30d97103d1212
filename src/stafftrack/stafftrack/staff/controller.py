from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_json_object
from ..container import Container
from ..core.exceptions import ValidationError
from ..storage.codec import staff_to_dict


def register(app: Flask, container: Container) -> None:
    tracker = container.tracker_service

    @app.get("/api/staff", endpoint="staff_list")
    def staff_list():
        return jsonify([staff_to_dict(s) for s in tracker.data.staff])

    @app.post("/api/staff", endpoint="staff_create")
    def staff_create():
        try:
            payload = require_json_object(request.get_json(silent=True))
            staff = tracker.add_staff(payload.get("name"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(staff_to_dict(staff)), 201

    @app.patch("/api/staff/<staff_id>", endpoint="staff_rename")
    def staff_rename(staff_id: str):
        if not tracker.find_staff(staff_id):
            return jsonify({"success": False, "message": "Staff member not found"}), 404
        try:
            payload = require_json_object(request.get_json(silent=True))
            staff = tracker.rename_staff(staff_id, payload.get("name"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(staff_to_dict(staff))

    @app.delete("/api/staff/<staff_id>", endpoint="staff_delete")
    def staff_delete(staff_id: str):
        # Cascade: the member's logs go too
        tracker.delete_staff(staff_id)
        return jsonify({"success": True})

    @app.post("/api/staff/<staff_id>/summary", endpoint="staff_summary")
    def staff_summary(staff_id: str):
        staff = tracker.find_staff(staff_id)
        if not staff:
            return jsonify({"success": False, "message": "Staff member not found"}), 404

        text = container.summary_service.generate(
            staff,
            tracker.filtered_logs(staff_id),
            tracker.data.event_types,
        )
        return jsonify({"success": True, "summary": text})
