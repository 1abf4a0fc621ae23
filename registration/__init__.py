"""
Registration Form Core

Field validation rules and the LangGraph submission state machine
for a five-field registration form.
"""

from registration.models import (
    RawSubmission,
    FieldResult,
    ValidationOutcome,
    AcceptedRecord,
)
from registration.logic.submission import validate_submission, build_record, format_timestamp
from registration.state.form_state import FormState, create_initial_state
from registration.graph.form_graph import create_form_graph

__all__ = [
    "RawSubmission",
    "FieldResult",
    "ValidationOutcome",
    "AcceptedRecord",
    "validate_submission",
    "build_record",
    "format_timestamp",
    "FormState",
    "create_initial_state",
    "create_form_graph",
]
