"""Excel link report for a pipeline run."""

from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Optional

import openpyxl
from openpyxl.styles import (
    Alignment,
    Border,
    Font,
    PatternFill,
    Side,
)

from core.pipeline import LinkReport
from core.results import ResultsConfig, save_result
from utils.logger import get_logger
from utils.url_utils import extract_domain

log = get_logger("excel")

# ─── Style Constants ────────────────────────────────────────────

BLUE = "2563EB"
WHITE = "FFFFFF"
GRAY_BG = "F9FAFB"
GRAY_BORDER = "E5E7EB"
GRAY_TEXT = "6B7280"

HEADER_FILL = PatternFill("solid", fgColor=BLUE)
HEADER_FONT = Font(name="Inter", bold=True, color=WHITE, size=11)
BODY_FONT = Font(name="Inter", size=10)
LINK_FONT = Font(name="Inter", size=10, color=BLUE)
REASON_FONT = Font(name="Inter", size=10, color=GRAY_TEXT, bold=True)
THIN_BORDER = Border(bottom=Side(style="thin", color=GRAY_BORDER))
ALT_ROW_FILL = PatternFill("solid", fgColor=GRAY_BG)

XLSX_EXT = ".xlsx"


# ─── Helpers ────────────────────────────────────────────────────


def _set_header_row(ws, headers: list[tuple[str, int]], row: int = 1) -> None:
    """Write a styled header row."""
    for col, (title, width) in enumerate(headers, 1):
        cell = ws.cell(row=row, column=col, value=title)
        cell.fill = HEADER_FILL
        cell.font = HEADER_FONT
        cell.alignment = Alignment(horizontal="center", vertical="center")
        ws.column_dimensions[cell.column_letter].width = width
    ws.row_dimensions[row].height = 24


def _finish_row(ws, row: int, max_col: int) -> None:
    for col in range(1, max_col + 1):
        cell = ws.cell(row=row, column=col)
        cell.border = THIN_BORDER
        if row % 2 == 0:
            cell.fill = ALT_ROW_FILL


# ─── Sheets ─────────────────────────────────────────────────────


def _write_eligible(ws, report: LinkReport) -> None:
    _set_header_row(ws, [("#", 8), ("URL", 80)])

    row = 2
    for i, url in enumerate(report.eligible, 1):
        idx = ws.cell(row=row, column=1, value=i)
        idx.font = BODY_FONT
        idx.alignment = Alignment(horizontal="center")
        ws.cell(row=row, column=2, value=url).font = LINK_FONT
        _finish_row(ws, row, 2)
        row += 1

    ws.auto_filter.ref = f"A1:B{max(row - 1, 1)}"
    ws.freeze_panes = "A2"


def _write_dropped(ws, report: LinkReport) -> None:
    _set_header_row(ws, [("URL", 80), ("Reason", 14)])

    row = 2
    for entry in report.dropped:
        ws.cell(row=row, column=1, value=entry["url"]).font = BODY_FONT
        reason = ws.cell(row=row, column=2, value=entry["reason"])
        reason.font = REASON_FONT
        reason.alignment = Alignment(horizontal="center")
        _finish_row(ws, row, 2)
        row += 1

    ws.auto_filter.ref = f"A1:B{max(row - 1, 1)}"
    ws.freeze_panes = "A2"


# ─── Public API ─────────────────────────────────────────────────


def create_link_report(report: LinkReport) -> BytesIO:
    """
    Create the Excel workbook for a pipeline run.

    Args:
        report: LinkReport returned by discover_links

    Returns:
        BytesIO with the Excel file
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Eligible Links"
    _write_eligible(ws, report)
    _write_dropped(wb.create_sheet("Dropped Links"), report)

    output = BytesIO()
    wb.save(output)
    output.seek(0)

    log.info(f"Link report generated ({len(report.eligible)} eligible, {report.dropped_count} dropped)")
    return output


def save_link_report(
    report: LinkReport,
    config: Optional[ResultsConfig] = None,
    now: Optional[datetime] = None,
) -> Path:
    """Store the workbook under the results directory, named after the crawled domain."""
    url = next((u for u in report.eligible if extract_domain(u)), None)
    if url is None:
        url = f"http://{report.reference_domain.strip()}/"
    return save_result(url, create_link_report(report).getvalue(), XLSX_EXT, config, now)
