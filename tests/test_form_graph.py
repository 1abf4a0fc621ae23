"""Tests for the submission graph, its nodes and routing."""

import sys
from datetime import datetime
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from langgraph.checkpoint.memory import MemorySaver

from registration.graph.form_graph import create_form_graph
from registration.routing.conditional_edges import route_entry_point, route_after_validation
from registration.state.form_state import blank_fields, create_initial_state


def _submit(state, submission):
    return {**state, "action": "submit", "submission": submission.model_dump()}


class TestRouting:
    def test_entry_submit(self):
        assert route_entry_point({"action": "submit"}) == "validation"

    def test_entry_reset(self):
        assert route_entry_point({"action": "reset"}) == "reset_fields"

    def test_entry_start(self):
        assert route_entry_point({"action": "start"}) == "reset_fields"

    def test_after_validation(self):
        assert route_after_validation({"outcome": {"is_valid": True}}) == "accept"
        assert route_after_validation({"outcome": {"is_valid": False}}) == "reject"
        assert route_after_validation({"outcome": None}) == "reject"


class TestSubmissionFlow:
    def setup_method(self):
        self.now = datetime(2024, 6, 15, 9, 5, 3)
        self.graph = create_form_graph(clock=lambda: self.now)
        self.state = create_initial_state("s1")

    def test_start_renders_timestamp(self):
        result = self.graph.invoke(self.state)
        assert result["timestamp"] == "2024-06-15 09:05:03"
        assert result["last_result"] is None
        assert result["records"] == []

    def test_accepted_submission(self, valid_submission):
        result = self.graph.invoke(_submit(self.state, valid_submission))

        assert result["last_result"] == "accepted"
        assert result["phase"] == "editing"
        assert len(result["records"]) == 1
        record = result["records"][0]
        assert record == {
            "timestamp": "2024-06-15 09:05:03",
            "full_name": "John Doe",
            "email": "john.doe@example.com",
            "phone": "+1 555-123-4567",
            "birth_date": "2010-06-14",
        }
        assert result["outcome"]["is_valid"] is True

    def test_accepted_clears_form_and_focuses_first_field(self, valid_submission):
        result = self.graph.invoke(_submit(self.state, valid_submission))

        assert result["fields"] == blank_fields()
        assert result["focus_field"] == "full_name"
        assert not any(result["field_errors"].values())
        assert not any(result["invalid_fields"].values())

    def test_rejected_submission(self, valid_submission):
        bad = valid_submission.model_copy(update={"full_name": "", "accepted_terms": False})
        result = self.graph.invoke(_submit(self.state, bad))

        assert result["last_result"] == "rejected"
        assert result["phase"] == "editing"
        assert result["records"] == []
        assert result["focus_field"] == "full_name"
        assert result["field_errors"]["full_name"] == "Full name is required."
        assert result["field_errors"]["terms"] == "You must accept the terms."
        assert result["field_errors"]["email"] == ""
        assert result["invalid_fields"] == {
            "full_name": True,
            "email": False,
            "phone": False,
            "birth_date": False,
            "terms": True,
        }

    def test_rejected_keeps_normalized_values(self, valid_submission):
        bad = valid_submission.model_copy(update={"phone": "123"})
        result = self.graph.invoke(_submit(self.state, bad))

        assert result["focus_field"] == "phone"
        assert result["fields"]["full_name"] == "John Doe"
        assert result["fields"]["email"] == "john.doe@example.com"
        assert result["fields"]["phone"] == "123"

    def test_manual_reset_never_appends(self, valid_submission):
        rejected = self.graph.invoke(_submit(self.state, valid_submission.model_copy(update={"email": ""})))
        result = self.graph.invoke({**rejected, "action": "reset", "submission": valid_submission.model_dump()})

        assert result["last_result"] == "reset"
        assert result["outcome"] is None
        assert result["records"] == []
        assert result["fields"] == blank_fields()
        assert not any(result["field_errors"].values())
        assert result["focus_field"] is None


class TestCheckpointedSession:
    def setup_method(self):
        self.ticks = iter([datetime(2024, 6, 15, 9, 0, s) for s in range(10)])
        self.graph = create_form_graph(clock=lambda: next(self.ticks), checkpointer=MemorySaver())
        self.config = {"configurable": {"thread_id": "s1"}}
        self.graph.invoke(create_initial_state("s1"), config=self.config)

    def test_records_accumulate_in_order(self, valid_submission):
        second = valid_submission.model_copy(update={"full_name": "Jane Roe"})

        self.graph.invoke({"action": "submit", "submission": valid_submission.model_dump()}, config=self.config)
        self.graph.invoke({"action": "reset", "submission": None}, config=self.config)
        result = self.graph.invoke({"action": "submit", "submission": second.model_dump()}, config=self.config)

        names = [r["full_name"] for r in result["records"]]
        assert names == ["John Doe", "Jane Roe"]
        assert result["records"][0]["timestamp"] < result["records"][1]["timestamp"]

    def test_rejection_leaves_records_untouched(self, valid_submission):
        self.graph.invoke({"action": "submit", "submission": valid_submission.model_dump()}, config=self.config)
        bad = valid_submission.model_copy(update={"accepted_terms": False})
        result = self.graph.invoke({"action": "submit", "submission": bad.model_dump()}, config=self.config)

        assert result["last_result"] == "rejected"
        assert len(result["records"]) == 1
        assert result["focus_field"] == "terms"


def test_mermaid_lists_nodes():
    mermaid = create_form_graph().get_graph().draw_mermaid()
    for node in ("validation", "accept", "reject", "reset_fields", "clear_errors"):
        assert node in mermaid
