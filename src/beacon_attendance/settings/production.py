import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_CLOSE_TIMER = bool(int(os.getenv("AUTO_CLOSE_TIMER", "1")))
REQUIRE_CLASS_ID = bool(int(os.getenv("REQUIRE_CLASS_ID", "0")))

MANUAL_ENTRY_DEVICE_ID = os.getenv("MANUAL_ENTRY_DEVICE_ID", "INSTRUCTOR_MANUAL_ENTRY")

INSTRUCTOR_ACCOUNTS = {
    os.getenv("INSTRUCTOR_USERNAME", "instructor"): os.getenv("INSTRUCTOR_PASSWORD", "please-set-INSTRUCTOR_PASSWORD"),
}
