"""Per-entity repositories, each bound to one session and one user id."""

from fittrack.repositories.exercise import ExerciseRepository
from fittrack.repositories.measurement import MeasurementRepository
from fittrack.repositories.personal_record import PersonalRecordRepository
from fittrack.repositories.user import UserRepository
from fittrack.repositories.workout import WorkoutRepository
from fittrack.repositories.workout_session import WorkoutSessionRepository

__all__ = [
    "ExerciseRepository",
    "MeasurementRepository",
    "PersonalRecordRepository",
    "UserRepository",
    "WorkoutRepository",
    "WorkoutSessionRepository",
]
