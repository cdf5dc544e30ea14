"""Body measurement schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fittrack.core.enums import MeasurementType


class MeasurementBase(BaseModel):
    type: MeasurementType
    value: float = Field(..., ge=0)
    unit: str = Field(..., min_length=1, max_length=20)
    location: str | None = Field(None, max_length=100, description="Body part for circumferences")
    measured_at: datetime
    notes: str | None = Field(None, max_length=500)


class MeasurementCreate(MeasurementBase):
    pass


class MeasurementUpdate(BaseModel):
    type: MeasurementType | None = None
    value: float | None = Field(None, ge=0)
    unit: str | None = Field(None, min_length=1, max_length=20)
    location: str | None = Field(None, max_length=100)
    measured_at: datetime | None = None
    notes: str | None = Field(None, max_length=500)


class MeasurementRead(MeasurementBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    created_at: datetime
