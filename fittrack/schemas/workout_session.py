"""Stored workout session schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SessionSetBase(BaseModel):
    reps: int | None = Field(None, ge=1)
    weight: float | None = Field(None, ge=0)
    rest_seconds: int | None = Field(None, ge=0)
    completed: bool


class SessionSetCreate(SessionSetBase):
    pass


class SessionSetRead(SessionSetBase):
    model_config = ConfigDict(from_attributes=True)
    position: int


class SessionExerciseBase(BaseModel):
    exercise_id: UUID
    notes: str | None = None


class SessionExerciseCreate(SessionExerciseBase):
    sets: list[SessionSetCreate] = []


class SessionExerciseRead(SessionExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    position: int
    sets: list[SessionSetRead] = []


class WorkoutSessionBase(BaseModel):
    workout_id: UUID | None = None
    name: str = Field(..., min_length=1, max_length=255)
    started_at: datetime
    ended_at: datetime | None = None
    duration_minutes: int | None = Field(None, ge=0)
    paused_seconds: int = Field(0, ge=0)
    notes: str | None = None
    completed: bool


class WorkoutSessionCreate(WorkoutSessionBase):
    exercises: list[SessionExerciseCreate] = []


class WorkoutSessionUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    notes: str | None = None


class WorkoutSessionRead(WorkoutSessionBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime
    exercises: list[SessionExerciseRead] = []
