"""Column layout shared by the spreadsheet and PDF exports."""
from typing import Any, List

from recordshop.models.record import Record


def format_price(price: Any) -> str:
    try:
        return f"€{float(price):.2f}"
    except (TypeError, ValueError):
        return "" if price is None else str(price)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def record_row(record: Record) -> List[Any]:
    """One export row in fixed column order."""
    return [
        record.id,
        record.title,
        record.artist,
        record.format,
        record.genre,
        record.release_year,
        format_price(record.price),
        record.stock_qty,
        record.customer_id,
        record.customer_name,
        record.customer_contact,
        record.customer_email,
    ]


def record_text_row(record: Record) -> List[str]:
    return [_text(v) for v in record_row(record)]
