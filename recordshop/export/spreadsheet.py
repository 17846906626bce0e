"""Spreadsheet export (.xlsx) via openpyxl."""
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from recordshop.errors import EmptyExportError
from recordshop.export.rows import record_row
from recordshop.models.record import Record

logger = logging.getLogger(__name__)

SHEET_TITLE = "Records"
HEADERS = [
    "ID", "Title", "Artist", "Format", "Genre", "Release Year", "Price", "Stock",
    "Customer ID", "Customer Name", "Contact", "Email",
]
# Column widths in characters, same order as HEADERS
COLUMN_WIDTHS = [8, 25, 20, 10, 15, 12, 10, 8, 12, 25, 15, 25]

HEADER_FILL = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
HEADER_FONT = Font(color="FFFFFF", bold=True)


def _cell(value):
    if value is None or isinstance(value, (str, int, float)):
        return value
    return str(value)


def build_workbook(records: List[Record]) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE
    ws.append(HEADERS)
    for record in records:
        ws.append([_cell(v) for v in record_row(record)])

    for cell in ws[1]:
        cell.fill = HEADER_FILL
        cell.font = HEADER_FONT
    for i, width in enumerate(COLUMN_WIDTHS, start=1):
        ws.column_dimensions[get_column_letter(i)].width = width
    return wb


def export_spreadsheet(
    records: List[Record],
    directory: Path,
    filename: str = "records",
    today: Optional[date] = None,
) -> Path:
    """Write <filename>_<YYYY-MM-DD>.xlsx into directory and return its path."""
    if not records:
        raise EmptyExportError()
    today = today or date.today()
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{filename}_{today.isoformat()}.xlsx"
    build_workbook(records).save(path)
    logger.info("Exported %d records to %s", len(records), path)
    return path
