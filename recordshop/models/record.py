"""Inventory record: music title plus the embedded customer transaction."""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

FORMATS = ["Vinyl", "CD"]
GENRES = ["Rock", "Pop", "Jazz", "Hip-Hop", "Classical", "Electronic"]

# Python attribute -> JSON key (wire format is camelCase)
FIELD_ALIASES = {
    "id": "id",
    "title": "title",
    "artist": "artist",
    "format": "format",
    "genre": "genre",
    "release_year": "releaseYear",
    "price": "price",
    "stock_qty": "stockQty",
    "customer_id": "customerId",
    "customer_first_name": "customerFirstName",
    "customer_last_name": "customerLastName",
    "customer_contact": "customerContact",
    "customer_email": "customerEmail",
}
_ATTRS_BY_KEY = {key: attr for attr, key in FIELD_ALIASES.items()}


@dataclass
class Record:
    """One inventory line. Values are stored as received; nothing is coerced."""
    id: Optional[int] = None
    title: Any = ""
    artist: Any = ""
    format: Any = ""
    genre: Any = ""
    release_year: Any = None
    price: Any = None
    stock_qty: Any = None
    customer_id: Any = ""
    customer_first_name: Any = ""
    customer_last_name: Any = ""
    customer_contact: Any = ""
    customer_email: Any = ""
    # Payload keys that are not record fields, kept and echoed back
    extras: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Record":
        known, extras = split_payload(payload)
        return cls(**known, extras=extras)

    def to_dict(self) -> Dict[str, Any]:
        data = {key: getattr(self, attr) for attr, key in FIELD_ALIASES.items()}
        for key, value in self.extras.items():
            data.setdefault(key, value)
        return data

    def merged(self, payload: Dict[str, Any]) -> "Record":
        """Shallow-merge a partial payload; the id never changes."""
        known, extras = split_payload(payload)
        known.pop("id", None)
        return replace(self, **known, extras={**self.extras, **extras})

    @property
    def customer_name(self) -> str:
        return f"{self.customer_first_name} {self.customer_last_name}"


def split_payload(payload: Dict[str, Any]) -> tuple[Dict[str, Any], Dict[str, Any]]:
    """Return (record attrs, unknown keys) for a camelCase payload."""
    known: Dict[str, Any] = {}
    extras: Dict[str, Any] = {}
    for key, value in payload.items():
        attr = _ATTRS_BY_KEY.get(key)
        if attr is None:
            extras[key] = value
        else:
            known[attr] = value
    return known, extras

