"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
DEFAULT_HOURLY_WAGE = 10030
MAX_PERCENTAGE = 100
DEFAULT_DAY_OFF_REASON = "Not specified"
DEFAULT_ANNOUNCEMENT_PRIORITY = 1
MAX_ANNOUNCEMENT_PRIORITY = 3
DEFAULT_SESSION_DAYS = 7
