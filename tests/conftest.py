"""Test fixtures for the registration form service."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from registration.models import RawSubmission


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def fixed_now():
    """Reference time for age checks: 2024-06-15 09:05:03 local."""
    return datetime(2024, 6, 15, 9, 5, 3)


@pytest.fixture
def fixed_clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def valid_submission():
    """A submission that passes every field rule on 2024-06-15."""
    return RawSubmission(
        full_name="  John   Doe ",
        email=" john.doe@example.com ",
        phone="+1 555-123-4567",
        birth_date="2010-06-14",
        accepted_terms=True,
    )
