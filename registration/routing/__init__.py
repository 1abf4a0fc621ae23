"""Conditional routing functions for the submission graph."""

from registration.routing.conditional_edges import (
    route_entry_point,
    route_after_validation,
)

__all__ = [
    "route_entry_point",
    "route_after_validation",
]
