from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    role: Role

    def to_dict(self) -> dict:
        return {"id": self.user_id, "role": self.role.value}
