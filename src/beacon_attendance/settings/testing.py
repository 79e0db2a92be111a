SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_CLOSE_TIMER = False
REQUIRE_CLASS_ID = False

MANUAL_ENTRY_DEVICE_ID = "INSTRUCTOR_MANUAL_ENTRY"

INSTRUCTOR_ACCOUNTS = {"instructor": "instructor123"}
