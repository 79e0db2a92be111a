from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Callable, ContextManager, Optional

from ..common.datetime_utils import now_utc
from ..common.ids import SequentialIdGenerator
from ..common.scheduler import Scheduler, ThreadTimerScheduler, TimerHandle
from ..core.constants import MAX_SESSION_DURATION_MINUTES, SECONDS_PER_MINUTE, SESSION_ID_PREFIX
from ..core.enums import SessionStatus
from ..core.exceptions import ConflictError, ValidationError
from .model import AttendanceSession

logger = logging.getLogger(__name__)


class SessionManager:
    """Owns the single current attendance session.

    Timeouts are enforced twice: a background timer closes the session
    promptly when it can run, and ``start``, ``end`` and ``get_status`` close an
    expired session themselves before acting. The lazy check is the one
    correctness relies on. Both go through ``lock`` and re-check the session
    id and status before mutating, so whichever runs first wins and the other
    does nothing.
    """

    def __init__(
        self,
        *,
        scheduler: Optional[Scheduler] = None,
        clock: Callable[[], datetime] = now_utc,
        lock: Optional[ContextManager[bool]] = None,
    ):
        self._scheduler = scheduler or ThreadTimerScheduler()
        self._clock = clock
        self._ids = SequentialIdGenerator(SESSION_ID_PREFIX)
        self._current = AttendanceSession()
        self._timer: Optional[TimerHandle] = None
        self.lock = lock or threading.RLock()

    def start(self, duration_minutes: Optional[int] = None, class_id: Optional[str] = None) -> AttendanceSession:
        if duration_minutes and duration_minutes > MAX_SESSION_DURATION_MINUTES:
            raise ValidationError(f"durationMinutes must not exceed {MAX_SESSION_DURATION_MINUTES}.")

        with self.lock:
            self._expire_if_due()
            if self._current.status == SessionStatus.OPEN:
                raise ConflictError("An attendance session is already open.")

            self._cancel_timer()

            start_time = self._clock()
            auto_close_time = None
            if duration_minutes and duration_minutes > 0:
                auto_close_time = start_time + timedelta(minutes=duration_minutes)

            session = AttendanceSession(
                session_id=self._ids.next_id(),
                status=SessionStatus.OPEN,
                class_id=class_id,
                start_time=start_time,
                duration_minutes=duration_minutes or None,
                auto_close_time=auto_close_time,
            )
            self._current = session

            if auto_close_time is not None:
                delay = duration_minutes * SECONDS_PER_MINUTE
                session_id = session.session_id
                self._timer = self._scheduler.schedule(delay, lambda: self._on_timer(session_id))

            logger.info(
                "Attendance session %s started. Duration: %s",
                session.session_id,
                f"{duration_minutes} mins" if auto_close_time else "manual",
            )
            return session

    def end(self) -> AttendanceSession:
        with self.lock:
            self._expire_if_due()
            if self._current.status != SessionStatus.OPEN:
                raise ConflictError("No attendance session is currently open to end.")

            self._cancel_timer()
            self._current = replace(
                self._current,
                status=SessionStatus.CLOSED_MANUAL,
                end_time=self._clock(),
                auto_close_time=None,
            )
            logger.info("Attendance session %s ended manually.", self._current.session_id)
            return self._current

    def get_status(self) -> AttendanceSession:
        with self.lock:
            self._expire_if_due()
            return self._current

    def _expire_if_due(self) -> None:
        current = self._current
        if (
            current.status == SessionStatus.OPEN
            and current.auto_close_time is not None
            and self._clock() >= current.auto_close_time
        ):
            self._close_timed_out(current.session_id)
            self._cancel_timer()
            logger.info("Attendance session %s found timed out past its auto-close time.", current.session_id)

    def _on_timer(self, session_id: Optional[str]) -> None:
        with self.lock:
            if self._close_timed_out(session_id):
                self._timer = None
                logger.info("Attendance session %s timed out and closed automatically.", session_id)

    def _close_timed_out(self, session_id: Optional[str]) -> bool:
        current = self._current
        if current.session_id != session_id or current.status != SessionStatus.OPEN:
            return False
        self._current = replace(current, status=SessionStatus.CLOSED_TIMEOUT, end_time=current.auto_close_time)
        return True

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
