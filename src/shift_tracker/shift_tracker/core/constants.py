"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

DEFAULT_HISTORY_SINCE = date(2024, 12, 1)
DEFAULT_CODE_MAX_ATTEMPTS = 5

NATIONAL_ID_LENGTH = 11

MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000
