"""Shared enums for models and API."""

from enum import Enum


class ExerciseCategory(str, Enum):
    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class MeasurementType(str, Enum):
    """What a body measurement entry records."""

    WEIGHT = "weight"
    BODY_FAT = "body_fat"
    CIRCUMFERENCE = "circumference"  # Use location for the body part
    OTHER = "other"


class RecordType(str, Enum):
    """Type of personal record."""

    MAX_WEIGHT = "max_weight"  # Heaviest weight
    MAX_REPS = "max_reps"  # Most reps in one set
    BEST_TIME = "best_time"  # Longest duration
    TOTAL_VOLUME = "total_volume"  # Weight x reps


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class SessionState(str, Enum):
    """Lifecycle of a live workout session."""

    NOT_STARTED = "not_started"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
