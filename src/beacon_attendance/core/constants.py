"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

MANUAL_ENTRY_DEVICE_ID = "INSTRUCTOR_MANUAL_ENTRY"
SESSION_ID_PREFIX = "session"
CHECKIN_ID_PREFIX = "checkin"
SECONDS_PER_MINUTE = 60
MAX_SESSION_DURATION_MINUTES = 7 * 24 * 60
