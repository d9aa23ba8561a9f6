"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LOOKBACK_DAYS = 30
DEFAULT_RECENT_RECORDS_LIMIT = 30
DEFAULT_CALENDAR_MONTHS = 12
