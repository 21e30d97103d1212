from __future__ import annotations

import csv
import io
from xml.sax.saxutils import escape

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..core.enums import ExportFormat
from .service import ReportData


def render_pdf(report: ReportData) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        title=report.title,
        leftMargin=14 * mm,
        rightMargin=14 * mm,
        topMargin=14 * mm,
        bottomMargin=14 * mm,
    )

    styles = getSampleStyleSheet()
    subtitle = ParagraphStyle("subtitle", parent=styles["Normal"], fontSize=10, textColor=colors.grey)
    cell = ParagraphStyle("cell", parent=styles["BodyText"], fontSize=9, leading=11)

    story = [Paragraph(escape(report.title), styles["Heading1"])]
    story.extend(Paragraph(escape(line), subtitle) for line in report.subtitle_lines)
    story.append(Spacer(1, 6 * mm))

    # Paragraph cells wrap long notes instead of overflowing the page
    body = [[Paragraph(escape(text), cell) for text in row] for row in report.rows]
    col_width = doc.width / len(report.columns)
    table = Table([list(report.columns)] + body, colWidths=[col_width] * len(report.columns), repeatRows=1)

    style = [
        ("GRID", (0, 0), (-1, -1), 0.5, colors.lightgrey),
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(report.header_color)),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]
    if body:
        style.append(("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f8fafc")]))
    table.setStyle(TableStyle(style))
    story.append(table)

    doc.build(story)
    return buf.getvalue()


def render_csv(report: ReportData) -> bytes:
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow(report.columns)
    writer.writerows(report.rows)
    # BOM so Excel opens UTF-8 names correctly
    return out.getvalue().encode("utf-8-sig")


def render_xlsx(report: ReportData) -> bytes:
    df = pd.DataFrame(report.rows, columns=list(report.columns))
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Report")
    return out.getvalue()


_RENDERERS = {
    ExportFormat.PDF: render_pdf,
    ExportFormat.CSV: render_csv,
    ExportFormat.XLSX: render_xlsx,
}


def render(report: ReportData, fmt: ExportFormat) -> bytes:
    return _RENDERERS[fmt](report)
