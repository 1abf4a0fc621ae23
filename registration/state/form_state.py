"""
FormState - State schema for the registration form workflow.

This is the explicitly owned session state that flows through the
submission graph. It replaces page-level globals: current field values,
error display, focus, and the append-only list of accepted records.
"""

import operator
from typing import TypedDict, Dict, Any, List, Optional, Annotated


class FormState(TypedDict):
    """
    Complete state for one registration form session.

    This state flows through all nodes in the graph and maintains:
    - Session information
    - Editable field values and the displayed timestamp
    - Validation outcome, per-field errors and invalid flags
    - Focus target after each transition
    - Accepted records (append-only)
    """

    # =========================================================================
    # Session Tracking
    # =========================================================================
    session_id: str
    """Unique session identifier"""

    # =========================================================================
    # Triggering Event
    # =========================================================================
    action: str
    """Event being processed: 'start', 'submit' or 'reset'"""

    submission: Optional[Dict[str, Any]]
    """Raw submission for this attempt (RawSubmission.model_dump())"""

    # =========================================================================
    # Form Contents
    # =========================================================================
    fields: Dict[str, Any]
    """Current editable field values as shown in the form"""

    timestamp: str
    """Timestamp displayed for the next attempt"""

    # =========================================================================
    # Submission Phase
    # =========================================================================
    phase: str
    """'editing' at rest, 'validating' while a submit is processed"""

    last_result: Optional[str]
    """Result of the latest event: 'accepted', 'rejected', 'reset' or None"""

    submitted_at: Optional[str]
    """ISO time of the latest submit attempt"""

    # =========================================================================
    # Validation Display
    # =========================================================================
    outcome: Optional[Dict[str, Any]]
    """Latest ValidationOutcome (model_dump()), None after reset"""

    field_errors: Dict[str, str]
    """Per-field error text (field_id -> message, '' when valid)"""

    invalid_fields: Dict[str, bool]
    """Per-field invalid-state flags"""

    focus_field: Optional[str]
    """Field that should receive focus after the transition"""

    # =========================================================================
    # Accepted Records
    # =========================================================================
    records: Annotated[List[Dict[str, Any]], operator.add]
    """Accepted records in submission order (nodes only append)"""


def blank_fields() -> Dict[str, Any]:
    """Field values of a freshly reset form."""
    return {
        "full_name": "",
        "email": "",
        "phone": "",
        "birth_date": "",
        "accepted_terms": False,
    }


def create_initial_state(session_id: str, timestamp: str = "") -> FormState:
    """
    Creates an initial FormState for a new form session.

    Args:
        session_id: Unique session identifier
        timestamp: Timestamp to display before the first attempt

    Returns:
        FormState: Initial state in the editing phase
    """
    return {
        # Session
        "session_id": session_id,
        # Event
        "action": "start",
        "submission": None,
        # Form
        "fields": blank_fields(),
        "timestamp": timestamp,
        # Phase
        "phase": "editing",
        "last_result": None,
        "submitted_at": None,
        # Display
        "outcome": None,
        "field_errors": {},
        "invalid_fields": {},
        "focus_field": None,
        # Records
        "records": [],
    }


def get_state_summary(state: FormState) -> str:
    """
    Get a human-readable summary of the current state.
    Useful for debugging and logging.
    """
    errors = [name for name, msg in state.get("field_errors", {}).items() if msg]

    return f"""
State Summary (Session: {state['session_id']})
==========================================
Phase: {state.get('phase')}
Last Result: {state.get('last_result')}
Timestamp: {state.get('timestamp')}
Field Errors: {errors}
Focus: {state.get('focus_field')}
Records: {len(state.get('records', []))}
    """.strip()
