from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class CheckInRecord:
    """A student's presence in one session. Never modified once stored."""

    id: str
    student_id: str
    device_id: str
    timestamp: datetime
    session_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "deviceId": self.device_id,
            "timestamp": to_iso(self.timestamp),
            "sessionId": self.session_id,
        }
