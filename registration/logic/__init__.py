"""Business logic: field validators and submission aggregation."""

from registration.logic.validators import get_validator, register_validator
from registration.logic.submission import (
    build_record,
    format_timestamp,
    validate_field,
    validate_submission,
)

__all__ = [
    "get_validator",
    "register_validator",
    "build_record",
    "format_timestamp",
    "validate_field",
    "validate_submission",
]
