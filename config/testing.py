LOOKBACK_DAYS = 30
RECENT_RECORDS_LIMIT = 5
CALENDAR_MONTHS = 12

LOG_LEVEL = "DEBUG"
DEBUG = False
TESTING = True
