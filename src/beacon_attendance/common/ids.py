from __future__ import annotations

import threading


class SequentialIdGenerator:
    """Hands out ``<prefix>-1``, ``<prefix>-2``, ... in call order."""

    def __init__(self, prefix: str, *, start: int = 1):
        self._prefix = prefix
        self._next = int(start)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            value = self._next
            self._next += 1
        return f"{self._prefix}-{value}"
