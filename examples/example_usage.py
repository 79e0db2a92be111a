"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the session lifecycle and admission rules live
in the services.
"""

import importlib

from beacon_attendance.container import build_container
from beacon_attendance.core.exceptions import DuplicateCheckInError
from beacon_attendance.settings import get_settings_module


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        auto_close_timer=settings.AUTO_CLOSE_TIMER,
        manual_entry_device_id=settings.MANUAL_ENTRY_DEVICE_ID,
    )

    session = container.session_manager.start(duration_minutes=5, class_id="CS101")
    print(session.to_dict())

    container.checkin_ledger.check_in("S1001", "00:1A:2B:3C:4D:5E")
    try:
        container.checkin_ledger.check_in("S1001", "AA:BB:CC:DD:EE:FF")
    except DuplicateCheckInError as e:
        print("rejected:", e)
    container.checkin_ledger.manual_check_in("S1002")

    print([r.to_dict() for r in container.checkin_ledger.list()])
    print(container.session_manager.end().to_dict())


if __name__ == "__main__":
    main()
