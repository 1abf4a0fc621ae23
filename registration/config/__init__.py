"""Configuration and validation constants."""

from registration.config.settings import (
    PROJECT_ROOT,
    LOG_LEVEL,
)
from registration.config.constants import (
    FIELD_ORDER,
    NAME_MIN_WORDS,
    NAME_MIN_WORD_LENGTH,
    PHONE_MIN_DIGITS,
    PHONE_MAX_DIGITS,
    MIN_AGE_YEARS,
    DAYS_PER_YEAR,
    TIMESTAMP_FORMAT,
)

__all__ = [
    # Settings
    "PROJECT_ROOT",
    "LOG_LEVEL",
    # Constants
    "FIELD_ORDER",
    "NAME_MIN_WORDS",
    "NAME_MIN_WORD_LENGTH",
    "PHONE_MIN_DIGITS",
    "PHONE_MAX_DIGITS",
    "MIN_AGE_YEARS",
    "DAYS_PER_YEAR",
    "TIMESTAMP_FORMAT",
]
