"""Application constants."""

# Workout builder limits
MAX_EXERCISES_PER_WORKOUT = 20
MAX_SETS_PER_EXERCISE = 10

# Default page sizes
DEFAULT_SESSION_LIST_LIMIT = 50
DEFAULT_RECENT_SESSIONS = 5
DEFAULT_MEASUREMENT_LIST_LIMIT = 100
DEFAULT_SEARCH_LIMIT = 20

# Dashboard
DASHBOARD_RECENT_RECORDS = 3
DASHBOARD_WEEK_DAYS = 7
