"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

from datetime import date
from decimal import Decimal

DEFAULT_RANGE_START = date(1900, 1, 1)
DEFAULT_RANGE_END = date(2999, 12, 31)
DEFAULT_TOKEN_MAX_AGE_DAYS = 7
MIN_PASSWORD_LENGTH = 6

# Column limits from database/schema.sql (amount DECIMAL(14,2)).
AMOUNT_STEP = Decimal("0.01")
MAX_AMOUNT = Decimal("1e12")
MAX_CATEGORY_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 255
MAX_PHONE_LENGTH = 50

UNCATEGORIZED = "Uncategorized"
UNKNOWN_RECORDER = "Unknown"
