"""Endpoint tests for profile, exercises, workouts, measurements and records."""

import uuid

from fastapi.testclient import TestClient

from tests.conftest import exercise_payload, workout_payload

API = "/api/v1"


class TestHealth:
    def test_liveness(self, client: TestClient):
        response = client.get(f"{API}/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_readiness_checks_database(self, client: TestClient):
        response = client.get(f"{API}/health/ready")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "database": "connected",
            "environment": "test",
            "live_sessions": 0,
        }


class TestUsers:
    def test_requires_user_header(self, client: TestClient):
        response = client.get(f"{API}/users/me")
        assert response.status_code == 422

    def test_profile_missing_until_upserted(self, client: TestClient, headers):
        assert client.get(f"{API}/users/me", headers=headers).status_code == 404

    def test_upsert_and_patch(self, client: TestClient, registered):
        response = client.patch(f"{API}/users/me", json={"weekly_workouts": 4}, headers=registered)
        assert response.status_code == 200
        body = response.json()
        assert body["weekly_workouts"] == 4
        assert body["display_name"] == "Lifter"
        assert body["units"] == "metric"

    def test_email_taken_by_another_user(self, client: TestClient, registered):
        other = {"X-User-Id": str(uuid.uuid4())}
        response = client.put(
            f"{API}/users/me",
            json={"email": "lifter@example.com", "display_name": "Copycat"},
            headers=other,
        )
        assert response.status_code == 409


class TestExercises:
    def test_crud(self, client: TestClient, registered):
        created = client.post(f"{API}/exercises", json=exercise_payload(), headers=registered)
        assert created.status_code == 201
        exercise_id = created.json()["id"]

        response = client.patch(f"{API}/exercises/{exercise_id}", json={"name": "Incline Bench"}, headers=registered)
        assert response.status_code == 200
        assert response.json()["name"] == "Incline Bench"
        assert response.json()["muscle_groups"] == ["chest", "triceps"]

        assert client.delete(f"{API}/exercises/{exercise_id}", headers=registered).status_code == 204
        assert client.get(f"{API}/exercises/{exercise_id}", headers=registered).status_code == 404

    def test_validation(self, client: TestClient, registered):
        response = client.post(f"{API}/exercises", json=exercise_payload(muscle_groups=[]), headers=registered)
        assert response.status_code == 422

    def test_other_users_cannot_see_exercise(self, client: TestClient, registered):
        exercise_id = client.post(f"{API}/exercises", json=exercise_payload(), headers=registered).json()["id"]
        stranger = {"X-User-Id": str(uuid.uuid4())}
        assert client.get(f"{API}/exercises/{exercise_id}", headers=stranger).status_code == 404
        assert client.get(f"{API}/exercises", headers=stranger).json() == []

    def test_search(self, client: TestClient, registered):
        client.post(f"{API}/exercises", json=exercise_payload("Back Squat"), headers=registered)
        client.post(f"{API}/exercises", json=exercise_payload("Deadlift", description="Hinge"), headers=registered)
        response = client.get(f"{API}/exercises/search", params={"q": "squat"}, headers=registered)
        assert [e["name"] for e in response.json()] == ["Back Squat"]


class TestWorkouts:
    def test_create_and_get(self, client: TestClient, registered):
        exercise_id = client.post(f"{API}/exercises", json=exercise_payload(), headers=registered).json()["id"]
        created = client.post(f"{API}/workouts", json=workout_payload([exercise_id]), headers=registered)
        assert created.status_code == 201
        workout = client.get(f"{API}/workouts/{created.json()['id']}", headers=registered).json()
        assert workout["exercises"][0]["exercise_id"] == exercise_id
        assert workout["exercises"][0]["rest_seconds"] == 60

    def test_unknown_exercise_rejected(self, client: TestClient, registered):
        response = client.post(f"{API}/workouts", json=workout_payload([str(uuid.uuid4())]), headers=registered)
        assert response.status_code == 400

    def test_needs_at_least_one_exercise(self, client: TestClient, registered):
        response = client.post(f"{API}/workouts", json=workout_payload([]), headers=registered)
        assert response.status_code == 422

    def test_patch_and_delete(self, client: TestClient, registered):
        exercise_id = client.post(f"{API}/exercises", json=exercise_payload(), headers=registered).json()["id"]
        workout_id = client.post(
            f"{API}/workouts", json=workout_payload([exercise_id]), headers=registered
        ).json()["id"]

        response = client.patch(f"{API}/workouts/{workout_id}", json={"difficulty": "advanced"}, headers=registered)
        assert response.json()["difficulty"] == "advanced"
        advanced = client.get(f"{API}/workouts", params={"difficulty": "advanced"}, headers=registered).json()
        assert [w["id"] for w in advanced] == [workout_id]

        assert client.delete(f"{API}/workouts/{workout_id}", headers=registered).status_code == 204
        assert client.delete(f"{API}/workouts/{workout_id}", headers=registered).status_code == 404


class TestMeasurements:
    def test_log_and_latest(self, client: TestClient, registered):
        for day, value in (("2026-03-01", 82.0), ("2026-03-03", 81.4)):
            response = client.post(
                f"{API}/measurements",
                json={"type": "weight", "value": value, "unit": "kg", "measured_at": f"{day}T07:00:00Z"},
                headers=registered,
            )
            assert response.status_code == 201
        latest = client.get(f"{API}/measurements/latest", headers=registered).json()
        assert latest["weight"]["value"] == 81.4
        assert len(client.get(f"{API}/measurements", headers=registered).json()) == 2


class TestRecords:
    def test_check_stores_only_improvements(self, client: TestClient, registered):
        payload = {"exercise_id": str(uuid.uuid4()), "type": "max_weight", "value": 100}
        first = client.post(f"{API}/records/check", json=payload, headers=registered).json()
        again = client.post(f"{API}/records/check", json=payload, headers=registered).json()

        assert first == {"is_new_record": True, "previous_best": None}
        assert again == {"is_new_record": False, "previous_best": 100.0}
        records = client.get(f"{API}/records", headers=registered).json()
        assert len(records) == 1
        assert records[0]["unit"] == "kg"

    def test_manual_record_and_best(self, client: TestClient, registered):
        exercise_id = str(uuid.uuid4())
        for value in (60, 70):
            client.post(
                f"{API}/records",
                json={"exercise_id": exercise_id, "type": "max_reps", "value": value, "unit": "reps"},
                headers=registered,
            )
        best = client.get(f"{API}/records/best", headers=registered).json()
        assert [r["value"] for r in best] == [70.0]
