"""Data models for records and users."""
from recordshop.models.record import FORMATS, GENRES, Record
from recordshop.models.user import ADMIN, CLERK, MANAGER, ROLES, User

__all__ = [
    "Record",
    "FORMATS",
    "GENRES",
    "User",
    "ROLES",
    "CLERK",
    "MANAGER",
    "ADMIN",
]
