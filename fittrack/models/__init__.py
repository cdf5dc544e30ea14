"""ORM models - import all so Base.metadata is complete for migrations."""

from fittrack.models.exercise import Exercise
from fittrack.models.measurement import Measurement
from fittrack.models.personal_record import PersonalRecord
from fittrack.models.user import User
from fittrack.models.workout import Workout, WorkoutExercise
from fittrack.models.workout_session import SessionExercise, SessionSet, WorkoutSession

__all__ = [
    "Exercise",
    "Measurement",
    "PersonalRecord",
    "SessionExercise",
    "SessionSet",
    "User",
    "Workout",
    "WorkoutExercise",
    "WorkoutSession",
]
