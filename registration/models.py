"""
Core Value Types

Pydantic models for the data that flows through validation:
the raw submission, per-field results, the aggregated outcome,
and the accepted record appended to the submissions table.
"""

import re
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_full_name(value: Optional[str]) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    return _WHITESPACE_RUN.sub(" ", (value or "").strip())


class RawSubmission(BaseModel):
    """The five raw values of one submit attempt."""

    model_config = ConfigDict(frozen=True)

    full_name: str = ""
    email: str = ""
    phone: str = ""
    birth_date: str = Field("", description="Calendar date, YYYY-MM-DD")
    accepted_terms: bool = False

    def normalized(self) -> "RawSubmission":
        """Return the canonical copy that gets validated and stored."""
        return RawSubmission(
            full_name=normalize_full_name(self.full_name),
            email=self.email.strip(),
            phone=self.phone.strip(),
            birth_date=self.birth_date,
            accepted_terms=self.accepted_terms,
        )


class FieldResult(BaseModel):
    """Validation result for a single field. Empty message means valid."""

    model_config = ConfigDict(frozen=True)

    field_id: str
    error_message: str = ""

    @property
    def is_valid(self) -> bool:
        return not self.error_message


class ValidationOutcome(BaseModel):
    """Ordered field results plus derived validity."""

    model_config = ConfigDict(frozen=True)

    results: List[FieldResult]

    @computed_field
    @property
    def is_valid(self) -> bool:
        return all(r.is_valid for r in self.results)

    @computed_field
    @property
    def first_invalid(self) -> Optional[FieldResult]:
        return next((r for r in self.results if not r.is_valid), None)

    @property
    def errors(self) -> Dict[str, str]:
        """field_id -> message for every field, "" where valid."""
        return {r.field_id: r.error_message for r in self.results}


class AcceptedRecord(BaseModel):
    """Normalized, timestamped row appended after a fully valid submission."""

    model_config = ConfigDict(frozen=True)

    timestamp: str
    full_name: str
    email: str
    phone: str
    birth_date: str
