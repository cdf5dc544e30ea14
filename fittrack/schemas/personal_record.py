"""Personal record schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fittrack.core.enums import RecordType


class PersonalRecordBase(BaseModel):
    exercise_id: UUID
    type: RecordType
    value: float = Field(..., ge=0)
    unit: str = Field(..., min_length=1, max_length=20)
    workout_session_id: UUID | None = None


class PersonalRecordCreate(PersonalRecordBase):
    achieved_at: datetime | None = None


class PersonalRecordUpdate(BaseModel):
    value: float | None = Field(None, ge=0)
    unit: str | None = Field(None, min_length=1, max_length=20)
    achieved_at: datetime | None = None
    workout_session_id: UUID | None = None


class PersonalRecordRead(PersonalRecordBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    achieved_at: datetime
    created_at: datetime


class RecordCheck(BaseModel):
    """Candidate value to compare against the stored best."""

    exercise_id: UUID
    type: RecordType
    value: float = Field(..., ge=0)
    unit: str = Field("kg", min_length=1, max_length=20)
    workout_session_id: UUID | None = None


class RecordCheckResult(BaseModel):
    is_new_record: bool
    previous_best: float | None = None
