"""Processing nodes for the submission graph."""

from registration.nodes.validation import validation_node
from registration.nodes.outcome import accept_node, reject_node
from registration.nodes.reset import reset_fields_node, clear_errors_node

__all__ = [
    "validation_node",
    "accept_node",
    "reject_node",
    "reset_fields_node",
    "clear_errors_node",
]
