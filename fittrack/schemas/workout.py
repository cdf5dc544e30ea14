"""Workout and prescription schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fittrack.core.constants import MAX_EXERCISES_PER_WORKOUT, MAX_SETS_PER_EXERCISE
from fittrack.core.enums import Difficulty


class WorkoutExerciseBase(BaseModel):
    """Planned sets/reps/weight/rest for one exercise in a workout."""

    exercise_id: UUID
    sets: int = Field(..., ge=1, le=MAX_SETS_PER_EXERCISE)
    reps: int | None = Field(None, ge=1)
    weight: float | None = Field(None, ge=0)
    rest_seconds: int = Field(..., ge=0)
    notes: str | None = Field(None, max_length=500)


class WorkoutExerciseCreate(WorkoutExerciseBase):
    pass


class WorkoutExerciseRead(WorkoutExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    position: int


class WorkoutBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    estimated_duration: int = Field(..., ge=1, description="Minutes")
    difficulty: Difficulty
    color: str = Field("#3b82f6", max_length=20)


class WorkoutCreate(WorkoutBase):
    exercises: list[WorkoutExerciseCreate] = Field(..., min_length=1, max_length=MAX_EXERCISES_PER_WORKOUT)


class WorkoutUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    estimated_duration: int | None = Field(None, ge=1)
    difficulty: Difficulty | None = None
    color: str | None = Field(None, max_length=20)
    # Replaces the whole prescription list when present
    exercises: list[WorkoutExerciseCreate] | None = Field(
        None, min_length=1, max_length=MAX_EXERCISES_PER_WORKOUT
    )


class WorkoutRead(WorkoutBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime
    exercises: list[WorkoutExerciseRead] = Field(..., min_length=1)
