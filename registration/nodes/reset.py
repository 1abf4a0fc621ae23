"""
Reset Nodes

Two-phase form reset. reset_fields clears the editable values; only
after it has run does clear_errors wipe error display and render a
fresh timestamp. Used for both the manual reset action and the cleanup
after an accepted submission.
"""

import logging
from datetime import datetime
from typing import Callable

from registration.config.constants import FIELD_ORDER
from registration.logic.submission import format_timestamp
from registration.state.form_state import FormState, blank_fields

logger = logging.getLogger(__name__)


def reset_fields_node(state: FormState, verbose: bool = False) -> dict:
    """Clear every editable field value."""
    update = {"fields": blank_fields()}

    # Manual reset: nothing was validated on this event
    if state.get("action") == "reset":
        update["last_result"] = "reset"
        update["outcome"] = None
        if verbose:
            logger.info(f"RESET | Session {state.get('session_id')}: manual reset")

    return update


def clear_errors_node(
    state: FormState,
    clock: Callable[[], datetime],
    verbose: bool = False,
) -> dict:
    """Clear error text and invalid flags, then refresh the timestamp."""
    timestamp = format_timestamp(clock())

    if verbose:
        logger.info(f"RESET | Errors cleared, timestamp -> {timestamp}")

    return {
        "phase": "editing",
        "field_errors": {field_id: "" for field_id in FIELD_ORDER},
        "invalid_fields": {field_id: False for field_id in FIELD_ORDER},
        "timestamp": timestamp,
    }
