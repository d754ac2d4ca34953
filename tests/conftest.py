"""
Pytest configuration: make sure `import entityview` and `import api` work
regardless of where pytest is invoked, and share a few sample records.
"""

import sys
from pathlib import Path

import pytest

# /path/to/project/tests -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from entityview.models import Entity, Registration  # noqa: E402

ACME_JSON = {
    "id": "1",
    "name": "Acme",
    "country": "AE",
    "status": "ACTIVE",
    "createdAt": "2024-01-01T00:00:00Z",
    "registrations": [
        {"type": "VAT", "status": "VERIFIED"},
        {"type": "TRADE", "status": "PENDING"},
    ],
}


@pytest.fixture
def acme() -> Entity:
    return Entity.from_json(ACME_JSON)


@pytest.fixture
def najd() -> Entity:
    return Entity(
        id="2",
        name="Najd Logistics",
        country="SA",
        status="PENDING",
        created_at="2024-03-18T09:30:00Z",
        legal_form="JSC",
        registrations=[Registration("CR", "VERIFIED")],
    )
