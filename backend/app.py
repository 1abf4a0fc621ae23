"""
Backend API Service

FastAPI application that owns registration form sessions and drives
the submission graph for each submit or reset event.

Persistence: in-memory only. Form state lives in a LangGraph
MemorySaver checkpointer keyed by session id and is lost on restart.
"""

import logging
import uuid
import sys
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from backend.config import (
    API_TITLE, API_DESCRIPTION, API_VERSION,
    BACKEND_HOST, BACKEND_PORT, MAX_SESSIONS, VERBOSE,
)
from backend.models import (
    SubmissionRequest, FormStartResponse, FormStateResponse,
    SubmitResponse, RecordsResponse, HealthResponse,
)
from backend.sessions import SessionStore
from registration.config.settings import LOG_LEVEL
from registration.graph.form_graph import create_form_graph
from registration.models import AcceptedRecord
from registration.state.form_state import create_initial_state, get_state_summary

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Module-level state (initialized in lifespan)
graph = None
session_store: SessionStore | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown."""
    global graph, session_store

    logger.info("Starting Registration Form Service...")

    from langgraph.checkpoint.memory import MemorySaver

    graph = create_form_graph(verbose=VERBOSE, checkpointer=MemorySaver())
    session_store = SessionStore(max_sessions=MAX_SESSIONS, on_evict=_drop_thread)

    yield

    logger.info("Shutdown complete")


# Create app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def _thread_config(session_id: str) -> Dict[str, Any]:
    return {"configurable": {"thread_id": session_id}}


def _drop_thread(session_id: str):
    """Free the checkpointed state of an evicted session."""
    graph.checkpointer.delete_thread(session_id)
    logger.info(f"Session evicted, state dropped: {session_id}")


def _require_session(session_id: str):
    if not session_store or not session_store.exists(session_id):
        raise HTTPException(status_code=404, detail="Session not found")


def _run_event(session_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
    """Invoke the graph for one event and return the resulting state."""
    try:
        state = graph.invoke(updates, config=_thread_config(session_id))
    except Exception as e:
        logger.error(f"Graph invocation error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Processing error: {str(e)}")

    if VERBOSE:
        logger.info(get_state_summary(state))
    return state


def _state_fields(session_id: str, state: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "session_id": session_id,
        "phase": state.get("phase", "editing"),
        "last_result": state.get("last_result"),
        "timestamp": state.get("timestamp", ""),
        "fields": state.get("fields", {}),
        "field_errors": state.get("field_errors", {}),
        "invalid_fields": state.get("invalid_fields", {}),
        "focus_field": state.get("focus_field"),
        "record_count": len(state.get("records", [])),
    }


# =========================================================================
# Health
# =========================================================================


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Check service health."""
    active = session_store.count_active() if session_store else 0
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        active_sessions=active,
    )


# =========================================================================
# Form Endpoints
# =========================================================================


@app.post("/forms/start", response_model=FormStartResponse)
async def start_form():
    """Open a new form session with blank fields and a fresh timestamp."""
    session_id = str(uuid.uuid4())
    state = _run_event(session_id, create_initial_state(session_id))
    session_store.create(session_id)

    logger.info(f"Form session started: {session_id}")

    return FormStartResponse(
        session_id=session_id,
        timestamp=state.get("timestamp", ""),
        fields=state.get("fields", {}),
    )


@app.post("/forms/{session_id}/submit", response_model=SubmitResponse)
async def submit_form(session_id: str, request: SubmissionRequest):
    """Validate a submission; on success append a record and clear the form."""
    _require_session(session_id)

    state = _run_event(session_id, {
        "action": "submit",
        "submission": request.model_dump(),
    })

    accepted = state.get("last_result") == "accepted"
    record = None
    if accepted:
        record = AcceptedRecord.model_validate(state["records"][-1])

    return SubmitResponse(
        **_state_fields(session_id, state),
        accepted=accepted,
        record=record,
    )


@app.post("/forms/{session_id}/reset", response_model=FormStateResponse)
async def reset_form(session_id: str):
    """Clear the form and its errors without validating."""
    _require_session(session_id)

    state = _run_event(session_id, {"action": "reset", "submission": None})
    return FormStateResponse(**_state_fields(session_id, state))


@app.get("/forms/{session_id}", response_model=FormStateResponse)
async def get_form(session_id: str):
    """Get the current form state."""
    _require_session(session_id)

    snapshot = graph.get_state(_thread_config(session_id))
    return FormStateResponse(**_state_fields(session_id, snapshot.values))


@app.get("/forms/{session_id}/records", response_model=RecordsResponse)
async def list_records(session_id: str):
    """List accepted records, oldest first."""
    _require_session(session_id)

    snapshot = graph.get_state(_thread_config(session_id))
    records = snapshot.values.get("records", [])
    return RecordsResponse(
        session_id=session_id,
        records=[AcceptedRecord.model_validate(r) for r in records],
    )


# =========================================================================
# Graph Visualization
# =========================================================================


@app.get("/api/graph/mermaid")
async def get_graph_mermaid():
    """Get Mermaid visualization of the submission graph."""
    try:
        mermaid = graph.get_graph().draw_mermaid()
        return {"mermaid": mermaid}
    except Exception as e:
        logger.error(f"Mermaid generation error: {e}")
        return {"mermaid": f"graph TD\n  A[Error: {e}]"}


# =========================================================================
# Run
# =========================================================================

if __name__ == "__main__":
    import uvicorn

    port = BACKEND_PORT
    # Auto-find port if default is in use
    import socket
    while True:
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
                s.bind(("", port))
                break
        except OSError:
            port += 1

    logger.info(f"Starting backend on port {port}")
    uvicorn.run(app, host=BACKEND_HOST, port=port)
