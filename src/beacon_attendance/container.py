from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Mapping, Optional

from .checkins.repository import InMemoryCheckInRepository
from .checkins.service import CheckInLedger
from .common.datetime_utils import now_utc
from .common.scheduler import Scheduler, ThreadTimerScheduler
from .core.constants import MANUAL_ENTRY_DEVICE_ID
from .sessions.service import SessionManager
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    checkins_repo: InMemoryCheckInRepository

    session_manager: SessionManager
    checkin_ledger: CheckInLedger
    auth_service: AuthService

    require_class_id: bool = False


def build_container(
    *,
    auto_close_timer: bool = True,
    require_class_id: bool = False,
    manual_entry_device_id: str = MANUAL_ENTRY_DEVICE_ID,
    instructor_accounts: Optional[Mapping[str, str]] = None,
    clock: Callable[[], datetime] = now_utc,
    scheduler: Optional[Scheduler] = None,
) -> Container:
    state_lock = threading.RLock()

    checkins_repo = InMemoryCheckInRepository()

    session_manager = SessionManager(
        scheduler=scheduler or ThreadTimerScheduler(enabled=auto_close_timer),
        clock=clock,
        lock=state_lock,
    )
    checkin_ledger = CheckInLedger(
        session_manager,
        checkins_repo,
        clock=clock,
        manual_entry_device_id=manual_entry_device_id,
        lock=state_lock,
    )
    auth_service = AuthService(instructor_accounts)

    return Container(
        checkins_repo=checkins_repo,
        session_manager=session_manager,
        checkin_ledger=checkin_ledger,
        auth_service=auth_service,
        require_class_id=bool(require_class_id),
    )
