"""Spreadsheet and PDF exports of an already-loaded record list."""
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from recordshop.errors import EmptyExportError
from recordshop.export.pdf import export_pdf
from recordshop.export.spreadsheet import export_spreadsheet
from recordshop.models.record import Record

__all__ = ["ExportResult", "export_all", "export_pdf", "export_spreadsheet"]


@dataclass
class ExportResult:
    spreadsheet: Path
    pdf: Path


def export_all(
    records: List[Record],
    directory: Path,
    filename: str = "records",
    now: Optional[datetime] = None,
) -> ExportResult:
    """Spreadsheet first; the PDF starts only once the spreadsheet is written."""
    if not records:
        raise EmptyExportError()
    now = now or datetime.now()
    spreadsheet = export_spreadsheet(records, directory, filename, today=now.date())
    pdf = export_pdf(records, directory, filename, now=now)
    return ExportResult(spreadsheet=spreadsheet, pdf=pdf)
