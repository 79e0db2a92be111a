from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from beacon_attendance.container import build_container
from beacon_attendance.main import create_app


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class FakeTimer:
    def __init__(self, delay_seconds: float, callback):
        self.delay_seconds = delay_seconds
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Collects timers instead of starting threads; tests fire them explicitly."""

    def __init__(self):
        self.timers: list[FakeTimer] = []

    def schedule(self, delay_seconds, callback):
        timer = FakeTimer(delay_seconds, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled]

    def fire(self, timer: FakeTimer) -> None:
        timer.callback()


@pytest.fixture
def fixed_now():
    return datetime(2026, 2, 1, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(fixed_now):
    return FakeClock(fixed_now)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def container(clock, scheduler):
    return build_container(
        clock=clock,
        scheduler=scheduler,
        instructor_accounts={"instructor": "instructor123"},
    )


@pytest.fixture
def app(container):
    return create_app(settings_module="beacon_attendance.settings.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()
