"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ENTRY_TIME = "09:00"
DEFAULT_LUNCH_START = "12:00"
DEFAULT_LUNCH_END = "13:00"
DEFAULT_EXIT_TIME = "18:00"

ZERO_TIMEBANK = "+00:00"
