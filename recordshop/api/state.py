"""Shared application state (injected into routes)."""
from typing import Optional

from recordshop.config import ENFORCE_ROLES, STORE_PATH
from recordshop.core.auth_directory import AuthDirectory
from recordshop.core.record_store import RecordStore, create_store


class AppState:
    def __init__(
        self,
        store: Optional[RecordStore] = None,
        directory: Optional[AuthDirectory] = None,
        enforce_roles: bool = ENFORCE_ROLES,
    ) -> None:
        self.store = store if store is not None else create_store(STORE_PATH)
        self.directory = directory if directory is not None else AuthDirectory()
        self.enforce_roles = enforce_roles


_state = AppState()


def get_state() -> AppState:
    return _state
