"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_HISTORY_DEPTH = 3
MIN_HISTORY_DEPTH = 1

DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Python weekday(): Monday=0 ... Saturday=5
EVENT_WEEKDAY = 5

# Calendar id meaning "the account's own calendar"
DEFAULT_CALENDAR_ID = "primary"
