"""
Outcome Nodes

Apply the result of a validated submission: reject returns the form to
editing with errors shown, accept appends the record to the table.
"""

import logging
from datetime import datetime

from registration.config.constants import FIELD_ORDER
from registration.logic.submission import build_record
from registration.models import RawSubmission, ValidationOutcome
from registration.state.form_state import FormState

logger = logging.getLogger(__name__)


def reject_node(state: FormState, verbose: bool = False) -> dict:
    """Return to editing with errors displayed and focus on the first invalid field."""
    outcome = ValidationOutcome.model_validate(state["outcome"])
    first = outcome.first_invalid
    focus = first.field_id if first else FIELD_ORDER[0]

    if verbose:
        logger.info(f"REJECT | Focus -> {focus}")

    return {
        "phase": "editing",
        "last_result": "rejected",
        "focus_field": focus,
    }


def accept_node(state: FormState, verbose: bool = False) -> dict:
    """
    Append exactly one accepted record for the current submission.

    The record carries the normalized values and the attempt's timestamp.
    Clearing the form is left to the reset nodes that follow.
    """
    raw = RawSubmission.model_validate(state.get("submission") or {})
    now = datetime.fromisoformat(state["submitted_at"])
    record = build_record(raw, now)

    logger.info(f"ACCEPT | Session {state.get('session_id')}: record at {record.timestamp}")

    return {
        "records": [record.model_dump()],
        "last_result": "accepted",
        "focus_field": FIELD_ORDER[0],
    }
