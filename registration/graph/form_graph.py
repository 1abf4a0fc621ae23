"""
Submission Graph Builder

Constructs the LangGraph workflow for one registration form. Each
invocation processes exactly one event (submit or reset) and runs to
completion synchronously.

Graph Structure:
    START -> _start -> [route_entry_point]

    Submit:
    validation -> reject -> END                                   (invalid)
    validation -> accept -> reset_fields -> clear_errors -> END   (valid)

    Start / Reset:
    reset_fields -> clear_errors -> END
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from langgraph.graph import StateGraph, END

from registration.state.form_state import FormState
from registration.nodes.validation import validation_node
from registration.nodes.outcome import accept_node, reject_node
from registration.nodes.reset import reset_fields_node, clear_errors_node
from registration.routing.conditional_edges import (
    route_entry_point,
    route_after_validation,
)

logger = logging.getLogger(__name__)


def create_form_graph(
    clock: Optional[Callable[[], datetime]] = None,
    verbose: bool = False,
    checkpointer=None,
):
    """
    Creates the LangGraph workflow for registration form sessions.

    Args:
        clock: Source of "now" (defaults to local wall-clock time)
        verbose: Enable verbose logging
        checkpointer: Optional LangGraph checkpointer holding session state

    Returns:
        Compiled LangGraph workflow
    """
    clock = clock or datetime.now

    workflow = StateGraph(FormState)

    # =========================================================================
    # Add all nodes
    # =========================================================================

    # Virtual start node for conditional entry; drops the previous focus
    workflow.add_node("_start", lambda s: {"focus_field": None})

    workflow.add_node(
        "validation",
        lambda s: validation_node(s, clock, verbose),
    )
    workflow.add_node(
        "reject",
        lambda s: reject_node(s, verbose),
    )
    workflow.add_node(
        "accept",
        lambda s: accept_node(s, verbose),
    )
    workflow.add_node(
        "reset_fields",
        lambda s: reset_fields_node(s, verbose),
    )
    workflow.add_node(
        "clear_errors",
        lambda s: clear_errors_node(s, clock, verbose),
    )

    # =========================================================================
    # Edges
    # =========================================================================

    workflow.set_entry_point("_start")

    workflow.add_conditional_edges(
        "_start",
        route_entry_point,
        {
            "validation": "validation",
            "reset_fields": "reset_fields",
        },
    )

    workflow.add_conditional_edges(
        "validation",
        route_after_validation,
        {
            "accept": "accept",
            "reject": "reject",
        },
    )

    workflow.add_edge("reject", END)
    workflow.add_edge("accept", "reset_fields")
    workflow.add_edge("reset_fields", "clear_errors")
    workflow.add_edge("clear_errors", END)

    compiled = workflow.compile(checkpointer=checkpointer)
    logger.info(f"Form graph created: {len(workflow.nodes)} nodes (checkpointer={'yes' if checkpointer else 'no'})")

    return compiled
