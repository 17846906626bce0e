"""Role policy: which roles may add, update, delete and view records.

Used by the client to gate actions and by the API on mutating endpoints.
"""
from typing import FrozenSet, Optional

from recordshop.models.user import ADMIN, CLERK, MANAGER, ROLES

ADD = "add"
UPDATE = "update"
DELETE = "delete"
VIEW = "view"
ACTIONS = (ADD, UPDATE, DELETE, VIEW)

_ALLOWED = {
    ADD: frozenset({CLERK, MANAGER, ADMIN}),
    UPDATE: frozenset({MANAGER, ADMIN}),
    DELETE: frozenset({ADMIN}),
    VIEW: frozenset(ROLES),
}

_TITLES = {
    CLERK: "Salesperson",
    MANAGER: "Store Manager",
    ADMIN: "System Admin",
}


def is_allowed(role: Optional[str], action: str) -> bool:
    """Unknown roles and unknown actions are denied."""
    return role in _ALLOWED.get(action, frozenset())


def can_add(role: Optional[str]) -> bool:
    return is_allowed(role, ADD)


def can_update(role: Optional[str]) -> bool:
    return is_allowed(role, UPDATE)


def can_delete(role: Optional[str]) -> bool:
    return is_allowed(role, DELETE)


def can_view(role: Optional[str]) -> bool:
    return is_allowed(role, VIEW)


def permissions_for(role: Optional[str]) -> FrozenSet[str]:
    return frozenset(a for a in ACTIONS if is_allowed(role, a))


def assignment_title(role: Optional[str]) -> str:
    """Job title shown next to the logged-in user's name."""
    return _TITLES.get(role, "Unknown")
