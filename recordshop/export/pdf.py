"""Paginated PDF table export via reportlab, rows coloured by genre."""
import logging
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from recordshop.errors import EmptyExportError
from recordshop.export.palette import FALLBACK_COLOR, RGB, contrast_color, genre_color, hex_to_rgb
from recordshop.export.rows import record_text_row
from recordshop.models.record import Record

logger = logging.getLogger(__name__)

TITLE = "Music Records Export"
HEADERS = [
    "ID", "Title", "Artist", "Format", "Genre", "Year", "Price", "Stock",
    "Cust ID", "Customer", "Contact", "Email",
]
# Column widths in mm, same order as HEADERS
COLUMN_WIDTHS_MM = [8, 25, 18, 10, 12, 8, 10, 8, 12, 22, 15, 25]
HEADER_RGB: RGB = (68, 114, 196)
MARGIN = 14 * mm


def _color(rgb: RGB) -> colors.Color:
    r, g, b = rgb
    return colors.Color(r / 255, g / 255, b / 255)


def row_colors(records: List[Record]) -> List[Tuple[RGB, RGB]]:
    """(background, text) colour per body row."""
    out = []
    for record in records:
        background = hex_to_rgb(genre_color(record.genre)) or hex_to_rgb(FALLBACK_COLOR)
        out.append((background, contrast_color(background)))
    return out


class RecordsPDF:
    def __init__(self):
        self.styles = getSampleStyleSheet()
        self.title_style = ParagraphStyle(
            name="ExportTitle",
            parent=self.styles["Normal"],
            fontName="Helvetica",
            fontSize=16,
            leading=20,
            textColor=colors.Color(40 / 255, 40 / 255, 40 / 255),
        )
        self.meta_style = ParagraphStyle(
            name="ExportMeta",
            parent=self.styles["Normal"],
            fontSize=10,
            leading=14,
            textColor=colors.Color(100 / 255, 100 / 255, 100 / 255),
        )
        self.header_style = ParagraphStyle(
            name="ExportHeader",
            parent=self.styles["Normal"],
            fontName="Helvetica-Bold",
            fontSize=9,
            leading=11,
            textColor=colors.white,
        )
        self._cell_styles = {}

    def _cell_style(self, text_rgb: RGB) -> ParagraphStyle:
        style = self._cell_styles.get(text_rgb)
        if style is None:
            style = ParagraphStyle(
                name=f"ExportCell{len(self._cell_styles)}",
                parent=self.styles["Normal"],
                fontSize=8,
                leading=10,
                textColor=_color(text_rgb),
            )
            self._cell_styles[text_rgb] = style
        return style

    def _table(self, records: List[Record]) -> Table:
        data = [[Paragraph(escape(h), self.header_style) for h in HEADERS]]
        commands = [
            ("GRID", (0, 0), (-1, -1), 0.5, colors.Color(0.8, 0.8, 0.8)),
            ("BACKGROUND", (0, 0), (-1, 0), _color(HEADER_RGB)),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 2),
            ("RIGHTPADDING", (0, 0), (-1, -1), 2),
            ("TOPPADDING", (0, 0), (-1, -1), 2),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 2),
        ]
        for i, (record, (background, text)) in enumerate(zip(records, row_colors(records)), start=1):
            style = self._cell_style(text)
            data.append([Paragraph(escape(v), style) for v in record_text_row(record)])
            commands.append(("BACKGROUND", (0, i), (-1, i), _color(background)))
        # Rows taller than a page are split across pages
        table = Table(
            data,
            colWidths=[w * mm for w in COLUMN_WIDTHS_MM],
            repeatRows=1,
            splitInRow=1,
        )
        table.setStyle(TableStyle(commands))
        return table

    def build(self, records: List[Record], out: Union[str, BinaryIO], generated_at: datetime) -> int:
        """Render the document and return the number of pages written."""
        doc = SimpleDocTemplate(
            out,
            pagesize=A4,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=MARGIN,
            bottomMargin=MARGIN,
            title=TITLE,
        )
        content = [
            Paragraph(TITLE, self.title_style),
            Paragraph(f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}", self.meta_style),
            Paragraph(f"Total Records: {len(records)}", self.meta_style),
            Spacer(1, 4 * mm),
            self._table(records),
        ]
        doc.build(content)
        return doc.page


def export_pdf(
    records: List[Record],
    directory: Path,
    filename: str = "records",
    now: Optional[datetime] = None,
) -> Path:
    """Write <filename>_<YYYY-MM-DD>.pdf into directory and return its path."""
    if not records:
        raise EmptyExportError()
    now = now or datetime.now()
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{filename}_{now.date().isoformat()}.pdf"
    RecordsPDF().build(records, str(path), now)
    logger.info("Exported %d records to %s", len(records), path)
    return path
