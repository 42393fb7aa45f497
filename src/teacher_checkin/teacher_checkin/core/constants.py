"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_GRACE_MINUTES = 5
DEFAULT_MINOR_LATE_MAX_MINUTES = 15
DEFAULT_TREND_DAYS = 7
DEFAULT_RECENT_LIMIT = 5
WEEKLY_SUMMARY_DAYS = 7

INTERVAL_PERIOD_ID = "Interval"
