"""
Test fixtures for session-composer.

Provides sample session entries and a FastAPI test client.
"""

import sys
from pathlib import Path
from typing import List

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ and tests/ importable so tests can do `import session_composer...`
for p in {SRC, ROOT / "tests"}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from session_composer.main import app
from session_composer.models import ExerciseEntry
from factories import gym, other, superset


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def strength_session() -> List[ExerciseEntry]:
    """Warm up, a gym block with a superset in the middle, then sprints."""
    return [
        other(1, order=1, kind_id=1, name="Leg Swings"),
        gym(2, order=2, name="Back Squat"),
        gym(3, order=3, name="Romanian Deadlift"),
        superset("A", 4, order=4, name="Pull Up"),
        superset("A", 5, order=5, name="Dip"),
        gym(6, order=6, name="Hip Thrust"),
        other(7, order=7, kind_id=6, name="Flying 30m"),
        other(8, order=8, kind_id=6, name="Flying 60m"),
    ]


@pytest.fixture
def strength_session_payload(strength_session) -> List[dict]:
    """The strength session as the UI would post it."""
    return [entry.model_dump() for entry in strength_session]
