"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SECONDS_PER_DAY = 86400
MAX_IDENTITY_LENGTH = 256
DEFAULT_HISTORY_LIMIT = 30
MAX_HISTORY_LIMIT = 366
DEFAULT_IDENTITY_HEADER = "X-Caller-Identity"

# Timestamps whose day falls within datetime.date's range (0001-01-01 .. 9999-12-31).
MIN_TIMESTAMP = -62135596800
MAX_TIMESTAMP = 253402300800
