from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..reports.export import export_response, parse_format


def register(app: Flask, container: Container) -> None:
    tracker = container.tracker_service

    @app.get("/api/storage/years", endpoint="storage_years")
    def storage_years():
        groups = tracker.year_groups()
        return jsonify({"years": [{"year": y, "count": groups.count(y)} for y in groups.years]})

    @app.get("/api/storage/years/<year>/export.<fmt>", endpoint="storage_year_export")
    def storage_year_export(year: str, fmt: str):
        export_format = parse_format(fmt)
        if export_format is None:
            return jsonify({"success": False, "message": f"Unsupported format: {fmt}"}), 404

        report = container.report_service.year_report(tracker.data, year=year, today=container.today())
        return export_response(report, export_format)

    @app.delete("/api/storage/years/<year>", endpoint="storage_year_delete")
    def storage_year_delete(year: str):
        removed = tracker.delete_logs_by_year(year)
        return jsonify({"success": True, "removed": removed})

    @app.delete("/api/storage/logs", endpoint="storage_clear_logs")
    def storage_clear_logs():
        # staff and event types are kept
        removed = tracker.clear_all_logs()
        return jsonify({"success": True, "removed": removed})
