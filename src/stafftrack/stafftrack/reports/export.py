from __future__ import annotations

import io
import logging

from flask import jsonify, send_file

from ..core.enums import ExportFormat
from .renderers import render
from .service import ReportData

logger = logging.getLogger(__name__)


def parse_format(value: str) -> ExportFormat | None:
    try:
        return ExportFormat(value.lower())
    except ValueError:
        return None


def export_response(report: ReportData, fmt: ExportFormat):
    """Render a report as a file download.

    Shared helper used by dashboard and per-year exports. Rendering errors are
    answered with a fixed message, never re-raised.
    """
    try:
        content = render(report, fmt)
    except Exception:
        logger.exception("Failed to render %s report %r", fmt.value, report.title)
        return jsonify({"success": False, "message": "Failed to generate report"}), 500

    return send_file(
        io.BytesIO(content),
        mimetype=fmt.mimetype,
        as_attachment=True,
        download_name=report.filename(fmt),
    )
