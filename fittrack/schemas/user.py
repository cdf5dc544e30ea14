"""User profile schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from fittrack.core.enums import ActivityLevel, UnitSystem


class UserBase(BaseModel):
    email: EmailStr
    display_name: str = Field(..., min_length=1, max_length=255)
    photo_url: str | None = None
    weight_target: float | None = Field(None, gt=0)
    activity_level: ActivityLevel | None = None
    weekly_workouts: int | None = Field(None, ge=1, le=7)
    units: UnitSystem = UnitSystem.METRIC
    notifications: bool = True


class UserUpsert(UserBase):
    pass


class UserUpdate(BaseModel):
    display_name: str | None = Field(None, min_length=1, max_length=255)
    photo_url: str | None = None
    weight_target: float | None = Field(None, gt=0)
    activity_level: ActivityLevel | None = None
    weekly_workouts: int | None = Field(None, ge=1, le=7)
    units: UnitSystem | None = None
    notifications: bool | None = None


class UserRead(UserBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    created_at: datetime
    updated_at: datetime
