"""Shared fixtures: in-memory SQLite database, app client, and a test user."""

import uuid

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from fittrack.core.config import Settings
from fittrack.db.session import Database
from fittrack.main import create_application

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings() -> Settings:
    """App settings pointing at a throwaway in-memory database.

    The rest countdown is not ticked in the background; tests drive it directly.
    """
    return Settings(
        database_url_override=SQLITE_URL,
        auto_create_tables=True,
        environment="test",
        rest_tick_seconds=None,
    )


@pytest.fixture
def client(settings: Settings):
    app = create_application(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def headers(user_id: uuid.UUID) -> dict[str, str]:
    return {"X-User-Id": str(user_id)}


@pytest.fixture
def registered(client: TestClient, headers: dict[str, str]) -> dict[str, str]:
    """Headers of a user whose profile exists."""
    response = client.put(
        "/api/v1/users/me",
        json={"email": "lifter@example.com", "display_name": "Lifter"},
        headers=headers,
    )
    assert response.status_code == 200
    return headers


@pytest_asyncio.fixture
async def database():
    db = Database(SQLITE_URL)
    await db.create_all()
    yield db
    await db.dispose()


def exercise_payload(name: str = "Bench Press", **overrides) -> dict:
    payload = {
        "name": name,
        "description": "Flat barbell press",
        "category": "strength",
        "muscle_groups": ["chest", "triceps"],
        "equipment": ["barbell", "bench"],
    }
    payload.update(overrides)
    return payload


def workout_payload(exercise_ids: list[str], name: str = "Push Day", **prescription) -> dict:
    item = {"sets": 2, "reps": 5, "weight": 100.0, "rest_seconds": 60}
    item.update(prescription)
    return {
        "name": name,
        "estimated_duration": 45,
        "difficulty": "intermediate",
        "exercises": [{"exercise_id": eid, **item} for eid in exercise_ids],
    }
