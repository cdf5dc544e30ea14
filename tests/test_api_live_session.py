"""Endpoint tests for the live workout session and what it leaves behind."""

import uuid

import pytest
from fastapi.testclient import TestClient

from fittrack.services.collaborators import DatabaseSessionSink
from tests.conftest import exercise_payload, workout_payload

LIVE = "/api/v1/sessions/live"


@pytest.fixture
def workout(client: TestClient, registered) -> dict:
    exercise_id = client.post("/api/v1/exercises", json=exercise_payload(), headers=registered).json()["id"]
    response = client.post("/api/v1/workouts", json=workout_payload([exercise_id]), headers=registered)
    assert response.status_code == 201
    return response.json()


class TestOpen:
    def test_no_live_session(self, client: TestClient, registered):
        assert client.get(LIVE, headers=registered).status_code == 404
        assert client.post(f"{LIVE}/start", headers=registered).status_code == 404
        assert client.delete(LIVE, headers=registered).status_code == 404

    def test_unknown_workout(self, client: TestClient, registered):
        response = client.post(LIVE, json={"workout_id": str(uuid.uuid4())}, headers=registered)
        assert response.status_code == 404

    def test_open_waits_for_start(self, client: TestClient, registered, workout):
        response = client.post(LIVE, json={"workout_id": workout["id"]}, headers=registered)
        assert response.status_code == 201
        body = response.json()
        assert body["state"] == "not_started"
        assert body["workout_name"] == "Push Day"
        assert body["exercises"] == []

        started = client.post(f"{LIVE}/start", headers=registered).json()
        assert started["state"] == "active"
        assert len(started["exercises"][0]["sets"]) == 2

    def test_second_open_conflicts(self, client: TestClient, registered, workout):
        client.post(LIVE, json={"workout_id": workout["id"], "start": True}, headers=registered)
        response = client.post(LIVE, json={"workout_id": workout["id"]}, headers=registered)
        assert response.status_code == 409

    def test_finish_before_start_conflicts(self, client: TestClient, registered, workout):
        client.post(LIVE, json={"workout_id": workout["id"]}, headers=registered)
        assert client.post(f"{LIVE}/finish", headers=registered).status_code == 409

    def test_abandon(self, client: TestClient, registered, workout):
        client.post(LIVE, json={"workout_id": workout["id"], "start": True}, headers=registered)
        assert client.delete(LIVE, headers=registered).status_code == 204
        assert client.get(LIVE, headers=registered).status_code == 404
        assert client.get("/api/v1/sessions", headers=registered).json() == []


class TestProgress:
    def test_pause_blocks_sets(self, client: TestClient, registered, workout):
        client.post(LIVE, json={"workout_id": workout["id"], "start": True}, headers=registered)
        assert client.post(f"{LIVE}/pause", headers=registered).json()["state"] == "paused"
        assert client.post(f"{LIVE}/complete-set", json={}, headers=registered).status_code == 409

        client.post(f"{LIVE}/resume", headers=registered)
        response = client.post(f"{LIVE}/complete-set", json={}, headers=registered)
        assert response.status_code == 200
        assert response.json()["cursor"] == {"exercise_index": 0, "set_index": 1}

    def test_set_starts_rest_and_flags_record(self, client: TestClient, registered, workout):
        client.post(LIVE, json={"workout_id": workout["id"], "start": True}, headers=registered)

        body = client.post(f"{LIVE}/complete-set", json={"reps": 5}, headers=registered).json()
        assert body["rest"] == {"total_seconds": 60, "seconds_remaining": 60}
        assert len(body["record_notifications"]) == 1
        note = body["record_notifications"][0]
        assert (note["exercise_name"], note["value"], note["unit"]) == ("Bench Press", 100.0, "kg")

        body = client.post(f"{LIVE}/complete-set", json={"weight": 90}, headers=registered).json()
        assert len(body["record_notifications"]) == 1
        assert body["all_sets_completed"] is True

    def test_invalid_set_values(self, client: TestClient, registered, workout):
        client.post(LIVE, json={"workout_id": workout["id"], "start": True}, headers=registered)
        response = client.post(f"{LIVE}/complete-set", json={"reps": 0}, headers=registered)
        assert response.status_code == 422

    def test_notes(self, client: TestClient, registered, workout):
        client.post(LIVE, json={"workout_id": workout["id"], "start": True}, headers=registered)
        response = client.put(f"{LIVE}/notes", json={"exercise_index": 0, "notes": "elbows in"}, headers=registered)
        assert response.json()["exercises"][0]["notes"] == "elbows in"
        response = client.put(f"{LIVE}/notes", json={"exercise_index": 3, "notes": "?"}, headers=registered)
        assert response.status_code == 400


class TestFinish:
    def test_finish_persists_session_and_record(self, client: TestClient, registered, workout):
        client.post(LIVE, json={"workout_id": workout["id"], "start": True}, headers=registered)
        client.post(f"{LIVE}/complete-set", json={}, headers=registered)
        client.post(f"{LIVE}/complete-set", json={}, headers=registered)

        response = client.post(f"{LIVE}/finish", json={"notes": "solid"}, headers=registered)
        assert response.status_code == 200
        body = response.json()
        assert body["state"] == "completed"
        assert body["duration_minutes"] == 0
        session_id = body["session_id"]

        stored = client.get(f"/api/v1/sessions/{session_id}", headers=registered).json()
        assert stored["completed"] is True
        assert stored["notes"] == "solid"
        assert stored["workout_id"] == workout["id"]
        assert [s["completed"] for s in stored["exercises"][0]["sets"]] == [True, True]

        records = client.get("/api/v1/records", headers=registered).json()
        assert [(r["type"], r["value"]) for r in records] == [("max_weight", 100.0)]

        dashboard = client.get("/api/v1/dashboard", headers=registered).json()
        assert dashboard["weekly_stats"] == {"total_workouts": 1, "total_duration_minutes": 0}
        assert [s["id"] for s in dashboard["recent_sessions"]] == [session_id]
        assert dashboard["suggested_workout"]["id"] == workout["id"]

        # The finish response is the last view of it; the registry lets it go
        assert client.get(LIVE, headers=registered).status_code == 404
        reopened = client.post(LIVE, json={"workout_id": workout["id"]}, headers=registered)
        assert reopened.status_code == 201

    def test_save_failure_keeps_session_open(self, client: TestClient, registered, workout, monkeypatch):
        client.post(LIVE, json={"workout_id": workout["id"], "start": True}, headers=registered)

        async def broken_save(self, session):
            raise ConnectionError("database unavailable")

        with monkeypatch.context() as m:
            m.setattr(DatabaseSessionSink, "save", broken_save)
            response = client.post(f"{LIVE}/finish", headers=registered)
        assert response.status_code == 503
        assert client.get(LIVE, headers=registered).json()["state"] == "active"

        response = client.post(f"{LIVE}/finish", headers=registered)
        assert response.status_code == 200
        assert len(client.get("/api/v1/sessions", headers=registered).json()) == 1


class TestHistory:
    def test_recent_and_patch(self, client: TestClient, registered, workout):
        client.post(LIVE, json={"workout_id": workout["id"], "start": True}, headers=registered)
        session_id = client.post(f"{LIVE}/finish", headers=registered).json()["session_id"]

        recent = client.get("/api/v1/sessions/recent", headers=registered).json()
        assert [s["id"] for s in recent] == [session_id]

        response = client.patch(f"/api/v1/sessions/{session_id}", json={"notes": "tired"}, headers=registered)
        assert response.json()["notes"] == "tired"
        assert client.delete(f"/api/v1/sessions/{session_id}", headers=registered).status_code == 204
        assert client.get(f"/api/v1/sessions/{session_id}", headers=registered).status_code == 404

    def test_empty_dashboard(self, client: TestClient, registered):
        body = client.get("/api/v1/dashboard", headers=registered).json()
        assert body == {
            "recent_sessions": [],
            "recent_records": [],
            "latest_measurements": {},
            "suggested_workout": None,
            "weekly_stats": {"total_workouts": 0, "total_duration_minutes": 0},
        }
