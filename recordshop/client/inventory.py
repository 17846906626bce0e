"""Record list screen: loaded records, search, delete and exports."""
import logging
from pathlib import Path
from typing import List, Optional

from recordshop.client.api_client import RecordShopClient
from recordshop.config import EXPORT_DIR
from recordshop.core.role_policy import DELETE
from recordshop.errors import EmptyExportError
from recordshop.export import ExportResult, export_all, export_pdf, export_spreadsheet
from recordshop.models.record import Record

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "music_records"

_SEARCH_ATTRS = (
    "title",
    "artist",
    "genre",
    "format",
    "customer_id",
    "customer_first_name",
    "customer_last_name",
)


def customer_display(record: Record) -> str:
    if record.customer_last_name:
        return f"{record.customer_last_name} ({record.customer_id})"
    return record.customer_id or "N/A"


def matches(record: Record, query: str) -> bool:
    needle = query.strip().lower()
    if not needle:
        return True
    return any(needle in str(getattr(record, attr) or "").lower() for attr in _SEARCH_ATTRS)


class InventoryView:
    """Holds the last fetched list; exports work on it without refetching."""

    def __init__(self, client: RecordShopClient, export_dir: Optional[Path] = None) -> None:
        self.client = client
        self.export_dir = Path(export_dir) if export_dir is not None else EXPORT_DIR
        self.records: List[Record] = []

    def load(self) -> List[Record]:
        self.client.require_login()
        self.records = self.client.list_records()
        return self.records

    def search(self, query: str) -> List[Record]:
        return [r for r in self.records if matches(r, query)]

    def delete(self, record_id: int) -> Record:
        """Delete on the server, then drop the row locally."""
        self.client.require_permission(DELETE)
        removed = self.client.delete_record(record_id)
        self.records = [r for r in self.records if r.id != record_id]
        logger.info("Deleted record %s from the loaded list", record_id)
        return removed

    def _require_records(self) -> List[Record]:
        if not self.records:
            raise EmptyExportError()
        return self.records

    def export_spreadsheet(self) -> Path:
        return export_spreadsheet(self._require_records(), self.export_dir, EXPORT_FILENAME)

    def export_pdf(self) -> Path:
        return export_pdf(self._require_records(), self.export_dir, EXPORT_FILENAME)

    def export_all(self) -> ExportResult:
        # Both files keep the exporter's default base name "records"
        return export_all(self._require_records(), self.export_dir)
