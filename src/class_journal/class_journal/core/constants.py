"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Teaching periods filled by a whole-day (legacy) attendance write.
CANONICAL_HOURS = (1, 2, 3, 4, 5)

DEFAULT_POOL_SIZE = 5
DEFAULT_POOL_NAME = "class_journal"
# Seconds a request waits for a free pooled connection before failing.
DEFAULT_POOL_TIMEOUT = 30.0

# Column widths from database/schema.sql, checked before any write.
MAX_NAME_LENGTH = 255
MAX_GROUP_LENGTH = 100
MAX_DATE_KEY_LENGTH = 64
MAX_STATUS_LENGTH = 64
