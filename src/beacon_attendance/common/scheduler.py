from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None:
        raise NotImplementedError


class Scheduler(Protocol):
    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> Optional[TimerHandle]:
        raise NotImplementedError


class ThreadTimerScheduler:
    """One-shot background timers backed by ``threading.Timer``.

    When disabled, nothing is scheduled and callers rely on the lazy
    status check alone.
    """

    def __init__(self, *, enabled: bool = True):
        self._enabled = bool(enabled)

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> Optional[TimerHandle]:
        if not self._enabled:
            return None

        timer = threading.Timer(max(0.0, float(delay_seconds)), callback)
        timer.daemon = True
        timer.start()
        logger.debug("Scheduled timer in %.1fs", delay_seconds)
        return timer
