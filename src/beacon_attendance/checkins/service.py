from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, ContextManager, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.ids import SequentialIdGenerator
from ..common.validators import require_non_empty
from ..core.constants import CHECKIN_ID_PREFIX, MANUAL_ENTRY_DEVICE_ID
from ..core.exceptions import DuplicateCheckInError, SessionNotOpenError
from ..sessions.model import AttendanceSession
from ..sessions.service import SessionManager
from .model import CheckInRecord
from .repository import CheckInRepository, InMemoryCheckInRepository

logger = logging.getLogger(__name__)


class CheckInLedger:
    """Admission control for check-ins against the current session.

    One record per student per session. Device ids are not checked for
    reuse: a student may switch devices, and two students sharing a device
    are both admitted.
    """

    def __init__(
        self,
        sessions: SessionManager,
        records: Optional[CheckInRepository] = None,
        *,
        clock: Callable[[], datetime] = now_utc,
        manual_entry_device_id: str = MANUAL_ENTRY_DEVICE_ID,
        lock: Optional[ContextManager[bool]] = None,
    ):
        self._sessions = sessions
        self._records = records if records is not None else InMemoryCheckInRepository()
        self._clock = clock
        self._ids = SequentialIdGenerator(CHECKIN_ID_PREFIX)
        self._manual_device_id = manual_entry_device_id
        # Shares the session lock so admission cannot interleave with end/timeout.
        self._lock = lock or sessions.lock

    def check_in(
        self,
        student_id: str,
        device_id: str,
        current_session: Optional[AttendanceSession] = None,
    ) -> CheckInRecord:
        student_id = require_non_empty(student_id, "Student ID")
        device_id = require_non_empty(device_id, "Bluetooth device ID")
        return self._admit(
            student_id,
            device_id,
            current_session,
            manual=False,
            not_open_message="Attendance session is not open or not available.",
            duplicate_message="You have already checked in for this session.",
        )

    def manual_check_in(self, student_id: str, current_session: Optional[AttendanceSession] = None) -> CheckInRecord:
        student_id = require_non_empty(student_id, "Student ID")
        return self._admit(
            student_id,
            self._manual_device_id,
            current_session,
            manual=True,
            not_open_message="Attendance session is not open or not available for manual check-in.",
            duplicate_message=f"Student {student_id} has already checked in for this session.",
        )

    def list(self) -> Sequence[CheckInRecord]:
        return self._records.list_all()

    def list_for_session(self, session_id: Optional[str]) -> Sequence[CheckInRecord]:
        if not session_id:
            return []
        return self._records.list_for_session(session_id)

    def _admit(
        self,
        student_id: str,
        device_id: str,
        current_session: Optional[AttendanceSession],
        *,
        manual: bool,
        not_open_message: str,
        duplicate_message: str,
    ) -> CheckInRecord:
        with self._lock:
            session = self._sessions.get_status()
            # a caller-held snapshot must still be the live open session
            stale = current_session is not None and (
                not current_session.is_open or current_session.session_id != session.session_id
            )
            if stale or not session.is_open:
                logger.info("Rejected check-in for %s: session not open (%s)", student_id, session.status.value)
                raise SessionNotOpenError(not_open_message)

            if self._records.find_for_student(session_id=session.session_id, student_id=student_id):
                logger.info("Rejected duplicate check-in for %s in %s", student_id, session.session_id)
                raise DuplicateCheckInError(duplicate_message)

            record = CheckInRecord(
                id=self._ids.next_id(),
                student_id=student_id,
                device_id=device_id,
                timestamp=self._clock(),
                session_id=session.session_id,
            )
            self._records.add(record)

        if manual:
            logger.info("Instructor manually checked in student %s for session %s", student_id, record.session_id)
        else:
            logger.info("Student %s checked in with device %s for session %s", student_id, device_id, record.session_id)
        return record
