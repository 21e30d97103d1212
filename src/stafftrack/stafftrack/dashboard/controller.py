from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import ALL_STAFF
from ..logs.controller import row_to_json
from ..reports.export import export_response, parse_format
from ..stats.aggregation import is_all


def register(app: Flask, container: Container) -> None:
    tracker = container.tracker_service

    @app.get("/api/dashboard", endpoint="dashboard")
    def dashboard():
        staff_filter = request.args.get("staff", ALL_STAFF)
        totals = tracker.staff_totals(staff_filter)
        rows = tracker.dashboard_rows(staff_filter)
        return jsonify(
            {
                "filter": staff_filter,
                "filtered": not is_all(staff_filter),
                "totals": [
                    {
                        "id": t.staff.id,
                        "name": t.staff.name,
                        "totalScore": t.total_score,
                        "logCount": t.log_count,
                    }
                    for t in totals
                ],
                "count": len(rows),
                "logs": [row_to_json(r) for r in rows],
            }
        )

    @app.get("/api/dashboard/export.<fmt>", endpoint="dashboard_export")
    def dashboard_export(fmt: str):
        export_format = parse_format(fmt)
        if export_format is None:
            return jsonify({"success": False, "message": f"Unsupported format: {fmt}"}), 404

        report = container.report_service.dashboard_report(
            tracker.data,
            staff_filter=request.args.get("staff", ALL_STAFF),
            today=container.today(),
        )
        return export_response(report, export_format)
