"""Live (in-progress) workout session schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fittrack.core.enums import RecordType, SessionState


class LiveSessionOpen(BaseModel):
    workout_id: UUID
    start: bool = Field(False, description="Start immediately instead of waiting for /start")


class CompleteSet(BaseModel):
    """Reps/weight actually performed; omitted values keep the prescription's targets."""

    reps: int | None = Field(None, ge=1)
    weight: float | None = Field(None, ge=0)


class ExerciseNotes(BaseModel):
    exercise_index: int = Field(..., ge=0)
    notes: str = Field(..., max_length=2000)


class FinishSession(BaseModel):
    notes: str | None = None


class LiveSetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    reps: int | None = None
    weight: float | None = None
    rest_seconds: int | None = None
    completed: bool


class LiveExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    exercise_id: UUID
    notes: str = ""
    sets: list[LiveSetRead] = []


class CursorRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    exercise_index: int
    set_index: int


class RestCountdownRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    total_seconds: int
    seconds_remaining: int


class RecordAchievedRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    exercise_id: UUID
    exercise_name: str
    record_type: RecordType
    value: float
    unit: str


class LiveSessionRead(BaseModel):
    state: SessionState
    workout_id: UUID | None = None
    workout_name: str
    started_at: datetime | None = None
    elapsed_seconds: int = 0
    paused_seconds: int = 0
    cursor: CursorRead
    current_exercise_id: UUID | None = None
    rest: RestCountdownRead | None = None
    all_sets_completed: bool = False
    exercises: list[LiveExerciseRead] = []
    record_notifications: list[RecordAchievedRead] = []
    session_id: UUID | None = None
    duration_minutes: int | None = None
