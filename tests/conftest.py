from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'commands.edit_company'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


_DEFAULTS = {
    "name": "Acme",
    "phone": "91234567",
    "email": "jane@acme.com",
    "role": "Software Engineer",
    "deadline": "31-12-2030",
    "status": "PA",
    "recruiter_name": "Jane Doe",
    "tags": ["remote"],
}


@pytest.fixture
def make_company():
    from models.company_record import CompanyRecord

    def _make(**overrides):
        fields = dict(_DEFAULTS)
        fields.update(overrides)
        return CompanyRecord(**fields)

    return _make
