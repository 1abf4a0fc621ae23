"""
Conditional Routing Functions

These functions determine which node to execute next based on the
current state. This is where the submission flow logic lives.
"""

import logging

from registration.state.form_state import FormState

logger = logging.getLogger(__name__)


def route_entry_point(state: FormState) -> str:
    """
    Routes an incoming event.

    Decision:
    - If action is 'start' or 'reset' -> reset_fields (no validation, no record)
    - Else -> validation (submit attempt)
    """
    if state.get("action") in ("start", "reset"):
        logger.info(f"ENTRY | {state.get('action')} -> reset_fields")
        return "reset_fields"

    logger.info("ENTRY | Submit attempt -> validation")
    return "validation"


def route_after_validation(state: FormState) -> str:
    """
    Routes after the validation node.

    Decision:
    - If every field passed -> accept
    - Else -> reject
    """
    outcome = state.get("outcome") or {}

    if outcome.get("is_valid"):
        logger.info("ROUTE | validation -> accept")
        return "accept"

    logger.info("ROUTE | validation -> reject")
    return "reject"
