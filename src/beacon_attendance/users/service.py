from __future__ import annotations

from typing import Mapping, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import SessionUser


class AuthService:
    """Use case: demo login.

    Instructors are checked against a hardcoded account map; students are
    identified by their id alone. This is not meant to be secure.
    """

    def __init__(self, instructor_accounts: Optional[Mapping[str, str]] = None):
        self._instructors = {
            username: generate_password_hash(password)
            for username, password in (instructor_accounts or {}).items()
        }

    def authenticate(self, user_id: str, role: str, password: Optional[str] = None) -> SessionUser:
        user_id = require_non_empty(user_id, "User ID")
        try:
            parsed_role = Role(str(role).strip().lower())
        except ValueError:
            raise ValidationError("Role must be 'instructor' or 'student'.") from None

        if parsed_role == Role.INSTRUCTOR:
            password_hash = self._instructors.get(user_id)
            if not password_hash or not check_password_hash(password_hash, password or ""):
                raise AuthenticationError("Invalid instructor credentials.")

        return SessionUser(user_id=user_id, role=parsed_role)
