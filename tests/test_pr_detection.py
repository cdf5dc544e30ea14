"""Tests for personal record detection."""

import asyncio
import uuid

import pytest

from fittrack.core.enums import RecordType
from fittrack.repositories.personal_record import PersonalRecordRepository
from fittrack.services.collaborators import DatabaseRecordChecker
from fittrack.services.pr_detection import check_and_record, is_new_record


class TestIsNewRecord:
    def test_first_value_is_a_record(self):
        assert is_new_record(20, None)

    def test_strictly_greater(self):
        assert is_new_record(100.5, 100)
        assert not is_new_record(100, 100)
        assert not is_new_record(95, 100)

    def test_zero_beats_nothing(self):
        assert is_new_record(0, None)


class TestCheckAndRecord:
    @pytest.mark.asyncio
    async def test_creates_record_only_when_beaten(self, database):
        user_id, exercise_id = uuid.uuid4(), uuid.uuid4()
        async with database.session() as db:
            repo = PersonalRecordRepository(db, user_id)
            assert await check_and_record(repo, exercise_id, RecordType.MAX_WEIGHT, 80, "kg") == (True, None)
            assert await check_and_record(repo, exercise_id, RecordType.MAX_WEIGHT, 80, "kg") == (False, 80.0)
            assert await check_and_record(repo, exercise_id, RecordType.MAX_WEIGHT, 75, "kg") == (False, 80.0)
            assert await check_and_record(repo, exercise_id, RecordType.MAX_WEIGHT, 82.5, "kg") == (True, 80.0)

            records = await repo.list(exercise_id=exercise_id)
        assert sorted(r.value for r in records) == [80.0, 82.5]

    @pytest.mark.asyncio
    async def test_record_types_are_tracked_separately(self, database):
        user_id, exercise_id = uuid.uuid4(), uuid.uuid4()
        async with database.session() as db:
            repo = PersonalRecordRepository(db, user_id)
            await check_and_record(repo, exercise_id, RecordType.MAX_WEIGHT, 100, "kg")
            is_new, previous = await check_and_record(repo, exercise_id, RecordType.MAX_REPS, 12, "reps")
        assert is_new is True
        assert previous is None

    @pytest.mark.asyncio
    async def test_scoped_to_user(self, database):
        exercise_id = uuid.uuid4()
        async with database.session() as db:
            await check_and_record(
                PersonalRecordRepository(db, uuid.uuid4()), exercise_id, RecordType.MAX_WEIGHT, 200, "kg"
            )
            is_new, previous = await check_and_record(
                PersonalRecordRepository(db, uuid.uuid4()), exercise_id, RecordType.MAX_WEIGHT, 50, "kg"
            )
        assert (is_new, previous) == (True, None)


class TestDatabaseRecordChecker:
    @pytest.mark.asyncio
    async def test_concurrent_equal_values_store_one_record(self, database):
        user_id, exercise_id = uuid.uuid4(), uuid.uuid4()
        checker = DatabaseRecordChecker(database)

        results = await asyncio.gather(
            checker.check(user_id, exercise_id, RecordType.MAX_WEIGHT, 20.0, "kg"),
            checker.check(user_id, exercise_id, RecordType.MAX_WEIGHT, 20.0, "kg"),
        )

        assert sorted(results) == [False, True]
        async with database.session() as db:
            records = await PersonalRecordRepository(db, user_id).list(exercise_id=exercise_id)
        assert len(records) == 1

