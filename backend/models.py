"""
Pydantic API Models

Request/response models for the backend API.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List

from registration.models import AcceptedRecord


class SubmissionRequest(BaseModel):
    """Raw form values for one submit attempt."""
    full_name: str = Field("", description="Full name as typed")
    email: str = Field("", description="Email address as typed")
    phone: str = Field("", description="Phone number as typed")
    birth_date: str = Field("", description="Birth date, YYYY-MM-DD")
    accepted_terms: bool = Field(False, description="Terms checkbox state")


class FormStartResponse(BaseModel):
    """Response after opening a new form session."""
    session_id: str
    timestamp: str
    fields: Dict[str, Any]


class FormStateResponse(BaseModel):
    """Form state after an event, as the page should render it."""
    session_id: str
    phase: str
    last_result: Optional[str] = None
    timestamp: str
    fields: Dict[str, Any] = {}
    field_errors: Dict[str, str] = {}
    invalid_fields: Dict[str, bool] = {}
    focus_field: Optional[str] = None
    record_count: int = 0


class SubmitResponse(FormStateResponse):
    """Result of a submit attempt."""
    accepted: bool = False
    record: Optional[AcceptedRecord] = None


class RecordsResponse(BaseModel):
    """Accepted records for a session, oldest first."""
    session_id: str
    records: List[AcceptedRecord]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "1.0.0"
    active_sessions: int = 0
