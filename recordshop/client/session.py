"""Client-held login session persisted to a local JSON file.

The server keeps no session. The client stores the last login response under a
fixed key together with its creation time; a session expires after a maximum
age or when the user logs out.
"""
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from recordshop.config import SESSION_KEY, SESSION_MAX_AGE_HOURS

logger = logging.getLogger(__name__)


@dataclass
class Session:
    user: Dict[str, Any]  # public profile: id, name, email, role
    created_at: datetime

    @property
    def role(self) -> Optional[str]:
        return self.user.get("role")

    @property
    def user_id(self) -> Optional[int]:
        return self.user.get("id")

    def is_expired(self, now: Optional[datetime] = None, max_age: Optional[timedelta] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        max_age = max_age if max_age is not None else timedelta(hours=SESSION_MAX_AGE_HOURS)
        return now - self.created_at >= max_age

    def to_dict(self) -> dict:
        return {"user": self.user, "created_at": self.created_at.isoformat()}

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        return cls(user=dict(data["user"]), created_at=datetime.fromisoformat(data["created_at"]))


class SessionStorage:
    """Key/value JSON file, the local-storage analogue for the client."""

    def __init__(self, path: Path, key: str = SESSION_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))

    def load(self) -> Optional[Session]:
        raw = self._read().get(self.key)
        if raw is None:
            return None
        try:
            session = Session.from_dict(raw)
        except (KeyError, TypeError, ValueError):
            logger.warning("Discarding malformed session under %r", self.key)
            return None
        # Expiry compares against an aware UTC clock
        if session.created_at.tzinfo is None:
            logger.warning("Discarding session under %r without a timezone", self.key)
            return None
        return session

    def save(self, session: Session) -> None:
        data = self._read()
        data[self.key] = session.to_dict()
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if data.pop(self.key, None) is not None:
            self._write(data)
