"""Database-backed collaborators for the session runner.

Each call opens its own unit of work on the shared ``Database`` handle, so a
runner that outlives any single request can still read and write.
"""

from __future__ import annotations

import asyncio
import uuid
from collections import defaultdict

from fittrack.core.enums import RecordType
from fittrack.db.session import Database
from fittrack.repositories.exercise import ExerciseRepository
from fittrack.repositories.personal_record import PersonalRecordRepository
from fittrack.repositories.workout_session import WorkoutSessionRepository
from fittrack.schemas.workout import WorkoutRead
from fittrack.schemas.workout_session import (
    SessionExerciseCreate,
    SessionSetCreate,
    WorkoutSessionCreate,
)
from fittrack.services.pr_detection import check_and_record
from fittrack.services.session_runner import ExercisePrescription, FinalizedSession, WorkoutDefinition


def definition_from_workout(workout: WorkoutRead) -> WorkoutDefinition:
    """Freeze a stored workout into the runner's input."""
    return WorkoutDefinition(
        workout_id=workout.id,
        name=workout.name,
        exercises=tuple(
            ExercisePrescription(
                exercise_id=e.exercise_id,
                sets=e.sets,
                reps=e.reps,
                weight=e.weight,
                rest_seconds=e.rest_seconds,
            )
            for e in sorted(workout.exercises, key=lambda e: e.position)
        ),
    )


def session_create_from_finalized(finalized: FinalizedSession) -> WorkoutSessionCreate:
    return WorkoutSessionCreate(
        workout_id=finalized.workout_id,
        name=finalized.name,
        started_at=finalized.started_at,
        ended_at=finalized.ended_at,
        duration_minutes=finalized.duration_minutes,
        paused_seconds=finalized.paused_seconds,
        notes=finalized.notes,
        completed=finalized.completed,
        exercises=[
            SessionExerciseCreate(
                exercise_id=ex.exercise_id,
                notes=ex.notes or None,
                sets=[
                    SessionSetCreate(
                        reps=s.reps,
                        weight=s.weight,
                        rest_seconds=s.rest_seconds,
                        completed=s.completed,
                    )
                    for s in ex.sets
                ],
            )
            for ex in finalized.exercises
        ],
    )


class DatabaseExerciseCatalog:
    def __init__(self, database: Database, user_id: uuid.UUID):
        self._database = database
        self._user_id = user_id

    async def get_name(self, exercise_id: uuid.UUID) -> str | None:
        async with self._database.session() as db:
            names = await ExerciseRepository(db, self._user_id).names([exercise_id])
        return names.get(exercise_id)


class DatabaseRecordChecker:
    """Compares against the stored best and writes a record when it wins.

    Reading the best and writing the new row happen under one lock per
    (user, exercise, type), so concurrent equal values store a single record.
    Share one instance per process (see the app lifespan).
    """

    def __init__(self, database: Database):
        self._database = database
        self._locks: defaultdict[tuple, asyncio.Lock] = defaultdict(asyncio.Lock)

    async def check(
        self,
        user_id: uuid.UUID,
        exercise_id: uuid.UUID,
        metric_type: RecordType,
        value: float,
        unit: str,
    ) -> bool:
        async with self._locks[(user_id, exercise_id, metric_type)]:
            async with self._database.session() as db:
                is_new, _ = await check_and_record(
                    PersonalRecordRepository(db, user_id), exercise_id, metric_type, value, unit
                )
        return is_new


class DatabaseSessionSink:
    def __init__(self, database: Database):
        self._database = database

    async def save(self, session: FinalizedSession) -> uuid.UUID:
        async with self._database.session() as db:
            created = await WorkoutSessionRepository(db, session.user_id).create(
                session_create_from_finalized(session)
            )
        return created.id
