import os

# Numeric values stay raw here; build_container validates and converts them.

LOOKBACK_DAYS = os.getenv("ATTENDANCE_LOOKBACK_DAYS", "30")
RECENT_RECORDS_LIMIT = os.getenv("ATTENDANCE_RECENT_LIMIT", "30")
CALENDAR_MONTHS = os.getenv("ATTENDANCE_CALENDAR_MONTHS", "12")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
DEBUG = True
