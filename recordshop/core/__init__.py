"""Core services: record store, staff directory, role policy, form validation."""
from recordshop.core.auth_directory import AuthDirectory
from recordshop.core.record_store import RecordStore

__all__ = ["AuthDirectory", "RecordStore"]
