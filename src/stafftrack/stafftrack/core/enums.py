from __future__ import annotations

from enum import Enum


class ExportFormat(str, Enum):
    """File formats a report can be exported to."""

    PDF = "pdf"
    CSV = "csv"
    XLSX = "xlsx"

    @property
    def mimetype(self) -> str:
        return {
            ExportFormat.PDF: "application/pdf",
            ExportFormat.CSV: "text/csv",
            ExportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        }[self]
