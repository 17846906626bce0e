"""Record form: per-field rules, touched/dirty tracking and error messages.

Mirrors the rules staff see when adding or editing a record. The API does not
share these rules; a form that fails here never reaches the network.
"""
import math
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional, Set

from recordshop.errors import ClientValidationFailure
from recordshop.models.record import FIELD_ALIASES, Record

REQUIRED = "required"
PATTERN = "pattern"
MIN = "min"
MAX = "max"
NUMBER = "number"

MIN_RELEASE_YEAR = 1900

CUSTOMER_ID_PATTERN = re.compile(r"^\d+[A-Za-z]$")
CONTACT_PATTERN = re.compile(r"^\d{8,}$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

# Every wire field except the store-assigned id
FORM_FIELDS = [key for key in FIELD_ALIASES.values() if key != "id"]

_PATTERNS = {
    "customerId": CUSTOMER_ID_PATTERN,
    "customerContact": CONTACT_PATTERN,
    "customerEmail": EMAIL_PATTERN,
}

_MESSAGES = {
    ("customerId", PATTERN): "ID must be numbers followed by a letter (e.g., 123A)",
    ("customerContact", PATTERN): "Contact must be at least 8 digits",
    ("customerEmail", PATTERN): "Please enter a valid email address",
    ("releaseYear", MIN): "Year must be 1900 or later",
    ("releaseYear", MAX): "Year cannot be in the future",
    ("price", MIN): "Value must be 0 or greater",
    ("stockQty", MIN): "Value must be 0 or greater",
}


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _to_number(value: Any) -> Optional[Decimal]:
    if isinstance(value, bool):
        return None
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        return None


def _check_range(
    value: Any, low: Optional[int], high: Optional[int], integer: bool = False
) -> List[str]:
    number = _to_number(value)
    # Values that overflow a float cannot be sent as JSON
    if number is None or not number.is_finite() or not math.isfinite(float(number)):
        return [NUMBER]
    if integer and number != number.to_integral_value():
        return [NUMBER]
    errors = []
    if low is not None and number < low:
        errors.append(MIN)
    if high is not None and number > high:
        errors.append(MAX)
    return errors


def validate_field(name: str, value: Any, current_year: Optional[int] = None) -> List[str]:
    """Return the rules the value violates, in evaluation order."""
    if name not in FORM_FIELDS:
        raise KeyError(name)
    if _is_empty(value):
        return [REQUIRED]
    if name == "releaseYear":
        year = current_year if current_year is not None else date.today().year
        return _check_range(value, MIN_RELEASE_YEAR, year, integer=True)
    if name == "stockQty":
        return _check_range(value, 0, None, integer=True)
    if name == "price":
        return _check_range(value, 0, None)
    pattern = _PATTERNS.get(name)
    if pattern is not None and not pattern.match(str(value)):
        return [PATTERN]
    return []


def error_message(name: str, rule: str) -> str:
    """Text shown under a field for the first violated rule."""
    if rule == REQUIRED:
        return "This field is required"
    return _MESSAGES.get((name, rule), "Invalid value")


class RecordForm:
    """Add/edit form state. Values are kept as entered (usually strings)."""

    def __init__(
        self,
        values: Optional[Dict[str, Any]] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._today = today
        self.values: Dict[str, Any] = {name: "" for name in FORM_FIELDS}
        self.errors: Dict[str, List[str]] = {}
        self.dirty: Set[str] = set()
        self.touched: Set[str] = set()
        for name, value in (values or {}).items():
            if name in self.values:
                self.values[name] = value
        self.validate()

    @classmethod
    def from_record(cls, record: Record, **kwargs) -> "RecordForm":
        """Edit form pre-filled from an existing record (patch, not dirty)."""
        data = record.to_dict()
        return cls({name: data.get(name, "") for name in FORM_FIELDS}, **kwargs)

    def _validate_one(self, name: str) -> None:
        self.errors[name] = validate_field(name, self.values[name], self._today().year)

    def validate(self) -> bool:
        for name in FORM_FIELDS:
            self._validate_one(name)
        return self.is_valid

    def set_value(self, name: str, value: Any) -> List[str]:
        """Update one field and re-check it straight away."""
        if name not in self.values:
            raise KeyError(name)
        self.values[name] = value
        self.dirty.add(name)
        self._validate_one(name)
        return self.errors[name]

    def touch(self, name: str) -> None:
        self.touched.add(name)

    def mark_all_touched(self) -> None:
        self.touched.update(FORM_FIELDS)

    @property
    def is_valid(self) -> bool:
        return not any(self.errors.values())

    def is_field_invalid(self, name: str) -> bool:
        return bool(self.errors.get(name)) and (name in self.dirty or name in self.touched)

    def field_error(self, name: str) -> str:
        errors = self.errors.get(name)
        if not errors:
            return ""
        return error_message(name, errors[0])

    def field_errors(self) -> Dict[str, str]:
        return {name: self.field_error(name) for name in FORM_FIELDS if self.errors.get(name)}

    def submit(self) -> Dict[str, Any]:
        """Return the payload to send, or block with ClientValidationFailure."""
        if not self.validate():
            self.mark_all_touched()
            raise ClientValidationFailure(self.field_errors())
        payload = dict(self.values)
        payload["releaseYear"] = int(_to_number(payload["releaseYear"]))
        payload["stockQty"] = int(_to_number(payload["stockQty"]))
        payload["price"] = float(_to_number(payload["price"]))
        return payload
