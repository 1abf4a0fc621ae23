"""
Validation Node

Runs the full rule set over the submitted values. This is the single
synchronous "validating" step of the submission flow; routing decides
afterwards whether the attempt is accepted or rejected.
"""

import logging
from datetime import datetime
from typing import Callable

from registration.logic.submission import format_timestamp, validate_submission
from registration.models import RawSubmission
from registration.state.form_state import FormState

logger = logging.getLogger(__name__)


def validation_node(
    state: FormState,
    clock: Callable[[], datetime],
    verbose: bool = False,
) -> dict:
    """
    Validate the submission carried in state.

    This node:
    1. Stamps the attempt with the current time
    2. Writes the normalized values back into the form fields
    3. Stores the outcome, per-field errors and invalid flags

    Args:
        state: Current FormState
        clock: Source of "now"
        verbose: Enable verbose logging

    Returns:
        dict: State update with outcome and error display
    """
    now = clock()
    raw = RawSubmission.model_validate(state.get("submission") or {})
    outcome = validate_submission(raw, now)

    errors = outcome.errors
    invalid = {field_id: bool(message) for field_id, message in errors.items()}

    if verbose:
        failed = [field_id for field_id, flag in invalid.items() if flag]
        logger.info(f"VALIDATE | Session {state.get('session_id')}: failed={failed}")

    return {
        "phase": "validating",
        "submitted_at": now.isoformat(),
        "timestamp": format_timestamp(now),
        "fields": raw.normalized().model_dump(),
        "outcome": outcome.model_dump(),
        "field_errors": errors,
        "invalid_fields": invalid,
    }
