"""Record store: ordered record collection over a swappable storage backend."""
import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Tuple

from recordshop.core.seed import seed_records
from recordshop.models.record import Record

logger = logging.getLogger(__name__)


class RecordBackend(Protocol):
    def load(self) -> Tuple[List[Record], Optional[int]]:
        """Return (records in insertion order, next id or None if unknown)."""

    def save(self, records: List[Record], next_id: int) -> None:
        ...


class InMemoryRecordBackend:
    """Process-lifetime storage; everything resets on restart."""

    def __init__(self, records: Optional[List[Record]] = None) -> None:
        self._records = list(records or [])
        self._next_id: Optional[int] = None

    def load(self) -> Tuple[List[Record], Optional[int]]:
        return list(self._records), self._next_id

    def save(self, records: List[Record], next_id: int) -> None:
        self._records = list(records)
        self._next_id = next_id


class JsonFileRecordBackend:
    """Persist records to a JSON file: {"next_id": n, "records": [...]}."""

    def __init__(self, path: Path, seed: Optional[List[Record]] = None) -> None:
        self.path = Path(path)
        self._seed = list(seed or [])

    def load(self) -> Tuple[List[Record], Optional[int]]:
        if not self.path.exists():
            return list(self._seed), None
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return list(self._seed), None
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: top level is not an object", self.path)
            return list(self._seed), None
        out = []
        for item in data.get("records", []):
            if not isinstance(item, dict) or not isinstance(item.get("id"), int):
                continue
            out.append(Record.from_dict(item))
        next_id = data.get("next_id")
        return out, next_id if isinstance(next_id, int) else None

    def save(self, records: List[Record], next_id: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "next_id": next_id,
            "records": [r.to_dict() for r in records],
        }
        self.path.write_text(json.dumps(data, indent=2))


class RecordStore:
    """CRUD by id. Mutations are serialised by a lock; last write wins."""

    def __init__(self, backend: Optional[RecordBackend] = None) -> None:
        self._backend = backend if backend is not None else InMemoryRecordBackend()
        self._records, next_id = self._backend.load()
        highest = max((r.id for r in self._records), default=0)
        # Ids are never reused, even after the highest record is deleted
        self._next_id = max(next_id or 0, highest + 1)
        self._lock = threading.Lock()

    def _index_of(self, record_id: int) -> Optional[int]:
        for i, r in enumerate(self._records):
            if r.id == record_id:
                return i
        return None

    def _save(self) -> None:
        self._backend.save(self._records, self._next_id)

    def list(self) -> List[Record]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return list(self._records)

    def get(self, record_id: int) -> Optional[Record]:
        with self._lock:
            i = self._index_of(record_id)
            return None if i is None else self._records[i]

    def create(self, fields: Dict[str, Any]) -> Record:
        """Append a new record; the store assigns the id."""
        with self._lock:
            record = Record(id=self._next_id).merged(fields)
            self._next_id += 1
            self._records.append(record)
            self._save()
        logger.info("Created record %s (%s)", record.id, record.title)
        return record

    def update(self, record_id: int, fields: Dict[str, Any]) -> Optional[Record]:
        """Shallow-merge fields into the record. Returns None if not found."""
        with self._lock:
            i = self._index_of(record_id)
            if i is None:
                return None
            updated = self._records[i].merged(fields)
            self._records[i] = updated
            self._save()
        logger.info("Updated record %s", record_id)
        return updated

    def delete(self, record_id: int) -> Optional[Record]:
        """Remove and return the record, or None if not found."""
        with self._lock:
            i = self._index_of(record_id)
            if i is None:
                return None
            removed = self._records.pop(i)
            self._save()
        logger.info("Deleted record %s", record_id)
        return removed


def create_store(path: str = "") -> RecordStore:
    """Seeded store; JSON-file backed when path is set, otherwise in memory."""
    seed = seed_records()
    if path:
        return RecordStore(JsonFileRecordBackend(Path(path), seed=seed))
    return RecordStore(InMemoryRecordBackend(seed))
