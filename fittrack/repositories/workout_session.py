"""Workout session repository - completed session history."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy.orm import selectinload

from fittrack.core.constants import DEFAULT_RECENT_SESSIONS, DEFAULT_SESSION_LIST_LIMIT
from fittrack.models.workout_session import SessionExercise, SessionSet, WorkoutSession
from fittrack.repositories.base import UserScopedRepository
from fittrack.schemas.workout_session import WorkoutSessionCreate, WorkoutSessionRead


class WorkoutSessionRepository(UserScopedRepository[WorkoutSession, WorkoutSessionRead]):
    model = WorkoutSession
    read_schema = WorkoutSessionRead
    entity = "workout session"

    def _load_options(self) -> tuple:
        return (selectinload(WorkoutSession.exercises).selectinload(SessionExercise.sets),)

    async def list(
        self,
        limit: int = DEFAULT_SESSION_LIST_LIMIT,
        workout_id: uuid.UUID | None = None,
    ) -> list[WorkoutSessionRead]:
        """Newest start first, optionally only sessions of one workout."""
        stmt = self._select()
        if workout_id is not None:
            stmt = stmt.where(WorkoutSession.workout_id == workout_id)
        stmt = stmt.order_by(WorkoutSession.started_at.desc()).limit(limit)
        result = await self.db.execute(stmt)
        return self._decode_all(result.scalars().all())

    async def recent(
        self,
        limit: int | None = DEFAULT_RECENT_SESSIONS,
        ended_after: datetime | None = None,
    ) -> list[WorkoutSessionRead]:
        """Completed sessions, most recently finished first."""
        stmt = self._select().where(WorkoutSession.completed.is_(True))
        if ended_after is not None:
            stmt = stmt.where(WorkoutSession.ended_at >= ended_after)
        stmt = stmt.order_by(WorkoutSession.ended_at.desc()).limit(limit)
        result = await self.db.execute(stmt)
        return self._decode_all(result.scalars().all())

    async def create(self, payload: WorkoutSessionCreate) -> WorkoutSessionRead:
        exercises = [
            SessionExercise(
                position=i,
                exercise_id=ex.exercise_id,
                notes=ex.notes,
                sets=[SessionSet(position=j, **s.model_dump()) for j, s in enumerate(ex.sets)],
            )
            for i, ex in enumerate(payload.exercises)
        ]
        session = WorkoutSession(
            user_id=self.user_id,
            exercises=exercises,
            **payload.model_dump(exclude={"exercises"}),
        )
        self.db.add(session)
        await self.db.flush()
        return await self._reload(session.id)
