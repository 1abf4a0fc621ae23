"""State management for registration form sessions."""

from registration.state.form_state import (
    FormState,
    blank_fields,
    create_initial_state,
    get_state_summary,
)

__all__ = [
    "FormState",
    "blank_fields",
    "create_initial_state",
    "get_state_summary",
]
