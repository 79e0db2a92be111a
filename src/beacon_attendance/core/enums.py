from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles accepted by the demo login."""

    INSTRUCTOR = "instructor"
    STUDENT = "student"


class SessionStatus(str, Enum):
    """Lifecycle states of the current attendance session."""

    NOT_STARTED = "not_started"
    OPEN = "open"
    CLOSED_MANUAL = "closed_manual"
    CLOSED_TIMEOUT = "closed_timeout"
