from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import to_iso
from ..core.enums import SessionStatus


@dataclass(frozen=True)
class AttendanceSession:
    """Snapshot of the current attendance session.

    Instances are immutable; the manager swaps in a new snapshot on every
    transition so callers can hold on to one safely.
    """

    session_id: Optional[str] = None
    status: SessionStatus = SessionStatus.NOT_STARTED
    class_id: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    auto_close_time: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.status == SessionStatus.OPEN and bool(self.session_id)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"sessionId": self.session_id, "status": self.status.value}
        optional = {
            "classId": self.class_id,
            "startTime": to_iso(self.start_time),
            "endTime": to_iso(self.end_time),
            "durationMinutes": self.duration_minutes,
            "autoCloseTime": to_iso(self.auto_close_time),
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data
