from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from werkzeug.security import check_password_hash

from ..core.exceptions import AuthenticationError
from .repository import UserRepository

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class SessionUser:
    """What the login endpoint hands back to the client."""

    user_id: int
    username: str
    name: str
    role: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.user_id, "username": self.username, "name": self.name, "role": self.role}


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: Any, password: Any) -> SessionUser:
        if not isinstance(username, str) or not isinstance(password, str) or not username:
            raise AuthenticationError(INVALID_CREDENTIALS)

        user = self._users.get_by_username(username)
        if not user:
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError(INVALID_CREDENTIALS)

        return SessionUser(user_id=user.user_id, username=user.username, name=user.name, role=user.role)
