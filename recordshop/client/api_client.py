"""HTTP client for the record shop API with a locally persisted session."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

import httpx

from recordshop.config import API_BASE_URL, SESSION_MAX_AGE_HOURS, SESSION_PATH
from recordshop.client.session import Session, SessionStorage
from recordshop.core import role_policy
from recordshop.core.validation import RecordForm
from recordshop.errors import (
    AuthenticationRequired,
    InvalidCredentials,
    PermissionDenied,
    RecordNotFound,
    RecordShopError,
)
from recordshop.models.record import Record

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _message(response: httpx.Response) -> Optional[str]:
    try:
        data = response.json()
    except ValueError:
        return None
    return data.get("message") if isinstance(data, dict) else None


class RecordShopClient:
    """Staff-side client: login state, role gating and record calls.

    Requests are not cancellable or fenced; if two calls overlap, whichever
    response arrives last is what the caller sees.
    """

    def __init__(
        self,
        http: Optional[httpx.Client] = None,
        storage: Optional[SessionStorage] = None,
        max_age: Optional[timedelta] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.http = http if http is not None else httpx.Client(base_url=API_BASE_URL, timeout=10.0)
        self.storage = storage if storage is not None else SessionStorage(SESSION_PATH)
        self.max_age = max_age if max_age is not None else timedelta(hours=SESSION_MAX_AGE_HOURS)
        self._clock = clock
        self._session: Optional[Session] = self.storage.load()

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "RecordShopClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # --- session -----------------------------------------------------------

    @property
    def session(self) -> Optional[Session]:
        """Current session, dropped once it is older than max_age."""
        if self._session is not None and self._session.is_expired(self._clock(), self.max_age):
            logger.info("Session for %s expired", self._session.user.get("email"))
            self.logout()
        return self._session

    def login(self, email: str, password: str) -> Dict[str, Any]:
        response = self.http.post("/api/login", json={"email": email, "password": password})
        if response.status_code == 401:
            raise InvalidCredentials(_message(response))
        response.raise_for_status()
        profile = response.json()
        self._session = Session(user=profile, created_at=self._clock())
        self.storage.save(self._session)
        logger.info("Logged in as %s (%s)", profile.get("email"), profile.get("role"))
        return profile

    def logout(self) -> None:
        self._session = None
        self.storage.clear()

    def current_user(self) -> Optional[Dict[str, Any]]:
        session = self.session
        return session.user if session else None

    def is_logged_in(self) -> bool:
        return self.session is not None

    def role(self) -> Optional[str]:
        session = self.session
        return session.role if session else None

    def can_add(self) -> bool:
        return role_policy.can_add(self.role())

    def can_update(self) -> bool:
        return role_policy.can_update(self.role())

    def can_delete(self) -> bool:
        return role_policy.can_delete(self.role())

    def assignment_title(self) -> str:
        return role_policy.assignment_title(self.role())

    def require_login(self) -> Dict[str, Any]:
        user = self.current_user()
        if user is None:
            raise AuthenticationRequired()
        return user

    def require_role(self, *roles: str) -> Dict[str, Any]:
        """Guard for role-restricted screens."""
        user = self.require_login()
        if user.get("role") not in roles:
            raise PermissionDenied()
        return user

    def require_permission(self, action: str) -> Dict[str, Any]:
        user = self.require_login()
        if not role_policy.is_allowed(user.get("role"), action):
            raise PermissionDenied(f"Role '{user.get('role')}' may not {action} records.")
        return user

    # --- requests ----------------------------------------------------------

    def _headers(self) -> Dict[str, str]:
        session = self.session
        if session is None or session.user_id is None:
            return {}
        return {"X-User-Id": str(session.user_id)}

    def _request(self, method: str, path: str, **kwargs) -> Any:
        response = self.http.request(method, path, headers=self._headers(), **kwargs)
        if response.is_success:
            return response.json()
        message = _message(response)
        if response.status_code == 404:
            raise RecordNotFound(message=message)
        if response.status_code == 403:
            raise PermissionDenied(message)
        if response.status_code == 401:
            raise AuthenticationRequired(message)
        if message:
            error = RecordShopError(message)
            error.status_code = response.status_code
            raise error
        response.raise_for_status()
        return None

    def get_formats(self) -> List[str]:
        return self._request("GET", "/api/formats")

    def get_genres(self) -> List[str]:
        return self._request("GET", "/api/genres")

    def list_records(self) -> List[Record]:
        return [Record.from_dict(item) for item in self._request("GET", "/api/records")]

    def get_record(self, record_id: int) -> Record:
        return Record.from_dict(self._request("GET", f"/api/records/{record_id}"))

    def add_record(self, payload: Dict[str, Any]) -> Record:
        return Record.from_dict(self._request("POST", "/api/records", json=payload))

    def update_record(self, record_id: int, payload: Dict[str, Any]) -> Record:
        return Record.from_dict(self._request("PUT", f"/api/records/{record_id}", json=payload))

    def delete_record(self, record_id: int) -> Record:
        data = self._request("DELETE", f"/api/records/{record_id}")
        return Record.from_dict(data["record"])

    def submit_form(self, form: RecordForm, record_id: Optional[int] = None) -> Record:
        """Validate locally, then add (no record_id) or update the record."""
        if record_id is None:
            self.require_permission(role_policy.ADD)
        else:
            self.require_permission(role_policy.UPDATE)
        payload = form.submit()
        if record_id is None:
            return self.add_record(payload)
        return self.update_record(record_id, payload)
