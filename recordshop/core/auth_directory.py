"""Static staff directory with plaintext credential lookup.

Demo stand-in kept for parity with the shop's existing clients: passwords are
compared by plain equality, with no hashing, rate limiting or lockout.
"""
import logging
from typing import Iterable, List, Optional

from recordshop.models.user import ADMIN, CLERK, MANAGER, User

logger = logging.getLogger(__name__)

DEFAULT_USERS = (
    User(id=1, email="clerk@recordshop.com", password="password", role=CLERK, name="Chris Clerk"),
    User(id=2, email="manager@recordshop.com", password="password", role=MANAGER, name="Mandy Manager"),
    User(id=3, email="admin@recordshop.com", password="password", role=ADMIN, name="Alex Admin"),
)


class AuthDirectory:
    def __init__(self, users: Iterable[User] = DEFAULT_USERS) -> None:
        self._users: List[User] = list(users)

    def find_by_credentials(self, email: str, password: str) -> Optional[User]:
        """Return the user whose email and password both match, or None."""
        for u in self._users:
            if u.email == email and u.password == password:
                return u
        logger.warning("Failed login for %s", email)
        return None

    def get(self, user_id: int) -> Optional[User]:
        for u in self._users:
            if u.id == user_id:
                return u
        return None
