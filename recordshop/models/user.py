"""Staff users and roles."""
from dataclasses import dataclass

CLERK = "clerk"
MANAGER = "manager"
ADMIN = "admin"
ROLES = (CLERK, MANAGER, ADMIN)


@dataclass(frozen=True)
class User:
    """Directory entry. Password is plaintext and only compared by equality."""
    id: int
    email: str
    password: str
    role: str  # "clerk" | "manager" | "admin"
    name: str

    def public_profile(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
        }
