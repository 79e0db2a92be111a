import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Background timers close sessions promptly; status reads enforce it regardless
AUTO_CLOSE_TIMER = bool(int(os.getenv("AUTO_CLOSE_TIMER", "1")))
REQUIRE_CLASS_ID = bool(int(os.getenv("REQUIRE_CLASS_ID", "0")))

MANUAL_ENTRY_DEVICE_ID = os.getenv("MANUAL_ENTRY_DEVICE_ID", "INSTRUCTOR_MANUAL_ENTRY")

# Demo login only
INSTRUCTOR_ACCOUNTS = {
    os.getenv("INSTRUCTOR_USERNAME", "instructor"): os.getenv("INSTRUCTOR_PASSWORD", "instructor123"),
}
