"""Tests for the backend HTTP API."""

import re
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient

import backend.app as backend_app
from backend.app import app

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")

VALID_BODY = {
    "full_name": "  John   Doe ",
    "email": "john.doe@example.com",
    "phone": "+1 555-123-4567",
    "birth_date": "2000-01-31",
    "accepted_terms": True,
}


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session_id(client):
    return client.post("/forms/start").json()["session_id"]


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"


class TestFormLifecycle:
    def test_start(self, client):
        resp = client.post("/forms/start")
        assert resp.status_code == 200
        data = resp.json()
        assert data["session_id"]
        assert TIMESTAMP_RE.match(data["timestamp"])
        assert data["fields"]["full_name"] == ""
        assert data["fields"]["accepted_terms"] is False

    def test_valid_submit(self, client, session_id):
        resp = client.post(f"/forms/{session_id}/submit", json=VALID_BODY)
        assert resp.status_code == 200
        data = resp.json()
        assert data["accepted"] is True
        assert data["last_result"] == "accepted"
        assert data["focus_field"] == "full_name"
        assert data["record_count"] == 1
        assert data["record"]["full_name"] == "John Doe"
        assert TIMESTAMP_RE.match(data["record"]["timestamp"])
        assert data["fields"]["full_name"] == ""

    def test_invalid_submit(self, client, session_id):
        body = {**VALID_BODY, "full_name": "", "accepted_terms": False}
        data = client.post(f"/forms/{session_id}/submit", json=body).json()
        assert data["accepted"] is False
        assert data["record"] is None
        assert data["focus_field"] == "full_name"
        errors = {k: v for k, v in data["field_errors"].items() if v}
        assert set(errors) == {"full_name", "terms"}
        assert data["record_count"] == 0

    def test_reset_clears_errors(self, client, session_id):
        client.post(f"/forms/{session_id}/submit", json={**VALID_BODY, "email": "a@@b.com"})
        data = client.post(f"/forms/{session_id}/reset").json()
        assert data["last_result"] == "reset"
        assert not any(data["field_errors"].values())
        assert not any(data["invalid_fields"].values())
        assert data["record_count"] == 0

    def test_records_listed_in_order(self, client, session_id):
        client.post(f"/forms/{session_id}/submit", json=VALID_BODY)
        client.post(f"/forms/{session_id}/submit", json={**VALID_BODY, "full_name": "Jane Roe"})

        data = client.get(f"/forms/{session_id}/records").json()
        assert [r["full_name"] for r in data["records"]] == ["John Doe", "Jane Roe"]

        status = client.get(f"/forms/{session_id}").json()
        assert status["record_count"] == 2
        assert status["phase"] == "editing"

    def test_sessions_are_isolated(self, client, session_id):
        client.post(f"/forms/{session_id}/submit", json=VALID_BODY)
        other = client.post("/forms/start").json()["session_id"]
        assert client.get(f"/forms/{other}/records").json()["records"] == []


class TestErrors:
    def test_unknown_session(self, client):
        resp = client.post("/forms/missing/submit", json=VALID_BODY)
        assert resp.status_code == 404

    def test_unknown_session_records(self, client):
        assert client.get("/forms/missing/records").status_code == 404

    def test_malformed_body(self, client, session_id):
        resp = client.post(f"/forms/{session_id}/submit", json={"accepted_terms": "maybe"})
        assert resp.status_code == 422


def test_no_frontend_route(client):
    assert client.get("/").status_code == 404


def test_graph_mermaid(client):
    data = client.get("/api/graph/mermaid").json()
    assert "validation" in data["mermaid"]


class TestEviction:
    def test_evicted_session_state_is_dropped(self, client):
        backend_app.session_store.max_sessions = 2
        first = client.post("/forms/start").json()["session_id"]
        client.post(f"/forms/{first}/submit", json=VALID_BODY)
        client.post("/forms/start")
        client.post("/forms/start")

        assert client.get(f"/forms/{first}").status_code == 404
        snapshot = backend_app.graph.get_state({"configurable": {"thread_id": first}})
        assert snapshot.values.get("records", []) == []
        assert backend_app.session_store.count_active() == 2
