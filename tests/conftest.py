import random

import pytest
from fastapi.testclient import TestClient

from shared.models import Exercise
from daily_plan.main import app, get_session
from daily_plan.services import ExerciseCatalog, PlanSession

QUOTAS = {"quad": 2, "ankle": 1, "hamstring": 1, "hip": 1}


@pytest.fixture
def make_exercise():
    """Factory for catalog entries with sensible defaults."""

    def _make(exercise_id, category, default_weight=10, is_active=True, name=None):
        return Exercise(
            id=exercise_id,
            name=name or exercise_id.upper(),
            category=category,
            default_weight=default_weight,
            is_active=is_active,
        )

    return _make


@pytest.fixture
def seed_catalog(make_exercise):
    """Full starter catalog: 3 quad, 2 hamstring, 2 hip, 2 ankle."""
    return ExerciseCatalog([
        make_exercise("q1", "quad", 15, name="Quad Extension"),
        make_exercise("q2", "quad", 20, name="Goblet Squat"),
        make_exercise("q3", "quad", 10, name="Step-Ups"),
        make_exercise("h1", "hamstring", 10, name="Hamstring Curl"),
        make_exercise("h2", "hamstring", 25, name="Romanian Deadlift"),
        make_exercise("hip1", "hip", 8, name="Hip Abduction"),
        make_exercise("hip2", "hip", 0, name="Glute Bridge"),
        make_exercise("a1", "ankle", 5, name="Ankle Dorsiflexion"),
        make_exercise("a2", "ankle", 0, name="Ankle Circles"),
    ])


@pytest.fixture
def sparse_catalog(make_exercise):
    """1 active quad, 1 active ankle, no active hamstring, 1 active hip."""
    return ExerciseCatalog([
        make_exercise("q1", "quad", 15),
        make_exercise("q9", "quad", 30, is_active=False),
        make_exercise("a1", "ankle", 5),
        make_exercise("h1", "hamstring", 10, is_active=False),
        make_exercise("hip1", "hip", 8),
    ])


@pytest.fixture
def rng():
    return random.Random(20251022)


@pytest.fixture
def session(seed_catalog, rng):
    return PlanSession(catalog=seed_catalog, quotas=QUOTAS, rng=rng, day_id="2025-10-22")


@pytest.fixture
def client(session):
    """HTTP client bound to a fresh in-memory session."""
    app.dependency_overrides[get_session] = lambda: session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
