"""Exercise schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fittrack.core.enums import ExerciseCategory


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)
    category: ExerciseCategory
    muscle_groups: list[str] = Field(..., min_length=1)
    equipment: list[str] = []
    instructions: list[str] = []
    image_url: str | None = None
    video_url: str | None = None


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)
    category: ExerciseCategory | None = None
    muscle_groups: list[str] | None = Field(None, min_length=1)
    equipment: list[str] | None = None
    instructions: list[str] | None = None
    image_url: str | None = None
    video_url: str | None = None


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime
