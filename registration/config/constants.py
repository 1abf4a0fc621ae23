"""
Shared constants used across the registration core.

Centralizes the validation bounds and display formats so rules and
tests read from one place.
"""

# Field order drives result ordering and focus priority
FIELD_ORDER = ("full_name", "email", "phone", "birth_date", "terms")

# Full name rules
NAME_MIN_WORDS = 2
NAME_MIN_WORD_LENGTH = 2

# Phone number validation bounds
PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15

# Birth date / age rules
MIN_AGE_YEARS = 13
DAYS_PER_YEAR = 365.25

# Display format for submission timestamps (local wall-clock, no zone)
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
