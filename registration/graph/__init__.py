"""Submission graph construction."""

from registration.graph.form_graph import create_form_graph

__all__ = ["create_form_graph"]
