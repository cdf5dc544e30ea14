"""Dashboard summary schema."""

from pydantic import BaseModel

from fittrack.core.enums import MeasurementType
from fittrack.schemas.measurement import MeasurementRead
from fittrack.schemas.personal_record import PersonalRecordRead
from fittrack.schemas.workout import WorkoutRead
from fittrack.schemas.workout_session import WorkoutSessionRead


class WeeklyStats(BaseModel):
    total_workouts: int
    total_duration_minutes: int


class DashboardRead(BaseModel):
    recent_sessions: list[WorkoutSessionRead]
    recent_records: list[PersonalRecordRead]
    latest_measurements: dict[MeasurementType, MeasurementRead]
    suggested_workout: WorkoutRead | None = None
    weekly_stats: WeeklyStats
