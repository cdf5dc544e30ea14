"""Workout repository - workouts with their ordered prescriptions."""

from __future__ import annotations

import uuid

from sqlalchemy.orm import selectinload

from fittrack.core.enums import Difficulty
from fittrack.models.workout import Workout, WorkoutExercise
from fittrack.repositories.base import UserScopedRepository
from fittrack.schemas.workout import WorkoutCreate, WorkoutExerciseCreate, WorkoutRead, WorkoutUpdate


def _prescriptions(items: list[WorkoutExerciseCreate]) -> list[WorkoutExercise]:
    return [WorkoutExercise(position=i, **item.model_dump()) for i, item in enumerate(items)]


class WorkoutRepository(UserScopedRepository[Workout, WorkoutRead]):
    model = Workout
    read_schema = WorkoutRead
    entity = "workout"

    def _load_options(self) -> tuple:
        return (selectinload(Workout.exercises),)

    async def list(
        self,
        difficulty: Difficulty | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[WorkoutRead]:
        stmt = self._select()
        if difficulty is not None:
            stmt = stmt.where(Workout.difficulty == difficulty)
        stmt = stmt.order_by(Workout.created_at.desc()).offset(skip).limit(limit)
        result = await self.db.execute(stmt)
        return self._decode_all(result.scalars().all())

    async def create(self, payload: WorkoutCreate) -> WorkoutRead:
        workout = Workout(
            user_id=self.user_id,
            exercises=_prescriptions(payload.exercises),
            **payload.model_dump(exclude={"exercises"}),
        )
        self.db.add(workout)
        await self.db.flush()
        return await self._reload(workout.id)

    async def update(self, item_id: uuid.UUID, payload: WorkoutUpdate) -> WorkoutRead | None:
        """Partial update; a given exercise list replaces the stored one wholesale."""
        workout = await self._get_row(item_id)
        if workout is None:
            return None
        data = payload.model_dump(exclude_unset=True, exclude_none=True, exclude={"exercises"})
        for k, v in data.items():
            setattr(workout, k, v)
        if payload.exercises is not None:
            workout.exercises = _prescriptions(payload.exercises)
        await self.db.flush()
        return await self._reload(item_id)
