"""PR detection: a value is a record if it beats the all-time best for that exercise and type."""

import logging
import uuid

from fittrack.core.enums import RecordType
from fittrack.repositories.personal_record import PersonalRecordRepository
from fittrack.schemas.personal_record import PersonalRecordCreate

logger = logging.getLogger(__name__)


def is_new_record(value: float, previous_best: float | None) -> bool:
    """Strictly greater than the previous best; the first value ever logged always counts."""
    return previous_best is None or float(value) > float(previous_best)


async def check_and_record(
    repo: PersonalRecordRepository,
    exercise_id: uuid.UUID,
    record_type: RecordType,
    value: float,
    unit: str,
    workout_session_id: uuid.UUID | None = None,
) -> tuple[bool, float | None]:
    """
    Compare value to the stored best and persist a new record when it wins.
    Returns (is_new_record, previous_best). Equal or lower values return False
    and write nothing, so repeated calls with the same value are harmless.
    """
    previous_best = await repo.best_value(exercise_id, record_type)
    if not is_new_record(value, previous_best):
        return False, previous_best

    await repo.create(
        PersonalRecordCreate(
            exercise_id=exercise_id,
            type=record_type,
            value=value,
            unit=unit,
            workout_session_id=workout_session_id,
        )
    )
    logger.info(
        "New %s record for exercise %s: %s %s (previous %s)",
        record_type.value,
        exercise_id,
        value,
        unit,
        previous_best,
    )
    return True, previous_best
