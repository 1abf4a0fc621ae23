"""
Submission Aggregation

Runs every field validator over a submission in fixed field order and
folds the results into a ValidationOutcome. Nothing here performs I/O
or keeps state; identical inputs and an identical `now` always give an
identical outcome.
"""

from datetime import datetime
from typing import Dict, Optional

from registration.config.constants import FIELD_ORDER, TIMESTAMP_FORMAT
from registration.logic.validators import get_validator
from registration.models import (
    AcceptedRecord,
    FieldResult,
    RawSubmission,
    ValidationOutcome,
)


def format_timestamp(now: datetime) -> str:
    """Render `now` as YYYY-MM-DD HH:MM:SS (local wall-clock, no zone)."""
    return now.strftime(TIMESTAMP_FORMAT)


def _field_values(raw: RawSubmission) -> Dict[str, object]:
    return {
        "full_name": raw.full_name,
        "email": raw.email,
        "phone": raw.phone,
        "birth_date": raw.birth_date,
        "terms": raw.accepted_terms,
    }


def validate_field(field_id: str, value, now: Optional[datetime] = None) -> FieldResult:
    """Validate a single field and wrap the result."""
    validator = get_validator(field_id)
    if validator is None:
        raise KeyError(f"No validator registered for field: {field_id}")

    kwargs = {"today": now.date()} if now is not None else {}
    _, error = validator.validate(value, **kwargs)
    return FieldResult(field_id=field_id, error_message=error or "")


def validate_submission(raw: RawSubmission, now: datetime) -> ValidationOutcome:
    """
    Validate all five fields of a submission.

    Every field is always evaluated so that all errors surface together.
    Results follow FIELD_ORDER, which also decides `first_invalid`.

    Args:
        raw: The submission as entered (normalized here before checking)
        now: Reference time for the age check

    Returns:
        ValidationOutcome with ordered results
    """
    values = _field_values(raw.normalized())
    results = [validate_field(field_id, values[field_id], now) for field_id in FIELD_ORDER]
    return ValidationOutcome(results=results)


def build_record(raw: RawSubmission, now: datetime) -> AcceptedRecord:
    """Build the table row for an accepted submission."""
    clean = raw.normalized()
    return AcceptedRecord(
        timestamp=format_timestamp(now),
        full_name=clean.full_name,
        email=clean.email,
        phone=clean.phone,
        birth_date=clean.birth_date,
    )
