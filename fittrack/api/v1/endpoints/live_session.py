"""Live workout session: open a workout, log sets, rest between them, finish.

The runner lives in the app's ``LiveSessionRegistry`` between requests; its
collaborators write through the shared ``Database`` handle, not the request
session.
"""

import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.api.deps import get_app_settings, get_current_user_id, get_live_sessions, get_record_checker
from fittrack.core.config import Settings
from fittrack.core.errors import (
    InvalidSessionTransition,
    LiveSessionConflict,
    LiveSessionNotFound,
    SessionPersistenceError,
)
from fittrack.db.session import Database, get_database, get_db
from fittrack.repositories.workout import WorkoutRepository
from fittrack.schemas.live_session import (
    CompleteSet,
    CursorRead,
    ExerciseNotes,
    FinishSession,
    LiveExerciseRead,
    LiveSessionOpen,
    LiveSessionRead,
    RecordAchievedRead,
    RestCountdownRead,
)
from fittrack.services.collaborators import (
    DatabaseExerciseCatalog,
    DatabaseRecordChecker,
    DatabaseSessionSink,
    definition_from_workout,
)
from fittrack.services.live_sessions import LiveSessionRegistry
from fittrack.services.session_runner import WorkoutSessionRunner

logger = logging.getLogger(__name__)
router = APIRouter()


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except LiveSessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (InvalidSessionTransition, LiveSessionConflict) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except SessionPersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _to_read(runner: WorkoutSessionRunner) -> LiveSessionRead:
    current = runner.exercises[runner.cursor.exercise_index].exercise_id if runner.exercises else None
    return LiveSessionRead(
        state=runner.state,
        workout_id=runner.definition.workout_id,
        workout_name=runner.definition.name,
        started_at=runner.started_at,
        elapsed_seconds=int(runner.elapsed_seconds()),
        paused_seconds=int(runner.paused_seconds),
        cursor=CursorRead.model_validate(runner.cursor),
        current_exercise_id=current,
        rest=RestCountdownRead.model_validate(runner.rest) if runner.rest else None,
        all_sets_completed=runner.all_sets_completed,
        exercises=[LiveExerciseRead.model_validate(ex) for ex in runner.exercises],
        record_notifications=[RecordAchievedRead.model_validate(n) for n in runner.record_notifications],
        session_id=runner.session_id,
        duration_minutes=runner.finalized.duration_minutes if runner.finalized else None,
    )


async def _runner(
    user_id: uuid.UUID = Depends(get_current_user_id),
    registry: LiveSessionRegistry = Depends(get_live_sessions),
) -> WorkoutSessionRunner:
    with _translate_errors():
        return registry.get(user_id)


@router.post("", response_model=LiveSessionRead, status_code=201)
async def open_session(
    payload: LiveSessionOpen,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    database: Database = Depends(get_database),
    registry: LiveSessionRegistry = Depends(get_live_sessions),
    records: DatabaseRecordChecker = Depends(get_record_checker),
    settings: Settings = Depends(get_app_settings),
):
    """Load a workout into a new runner. ``start: true`` starts the clock right away."""
    workout = await WorkoutRepository(db, user_id).get(payload.workout_id)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    runner = WorkoutSessionRunner(
        definition_from_workout(workout),
        user_id=user_id,
        records=records,
        sink=DatabaseSessionSink(database),
        catalog=DatabaseExerciseCatalog(database, user_id),
        rest_tick_seconds=settings.rest_tick_seconds,
        weight_unit=settings.default_weight_unit,
    )
    with _translate_errors():
        registry.open(user_id, runner)
        if payload.start:
            runner.start()
    return _to_read(runner)


@router.get("", response_model=LiveSessionRead)
async def get_session(runner: WorkoutSessionRunner = Depends(_runner)):
    return _to_read(runner)


@router.post("/start", response_model=LiveSessionRead)
async def start_session(runner: WorkoutSessionRunner = Depends(_runner)):
    with _translate_errors():
        runner.start()
    return _to_read(runner)


@router.post("/pause", response_model=LiveSessionRead)
async def pause_session(runner: WorkoutSessionRunner = Depends(_runner)):
    with _translate_errors():
        runner.pause()
    return _to_read(runner)


@router.post("/resume", response_model=LiveSessionRead)
async def resume_session(runner: WorkoutSessionRunner = Depends(_runner)):
    with _translate_errors():
        runner.resume()
    return _to_read(runner)


@router.post("/complete-set", response_model=LiveSessionRead)
async def complete_set(
    payload: CompleteSet | None = None,
    runner: WorkoutSessionRunner = Depends(_runner),
):
    """Complete the set at the cursor; rest and record checks follow from it."""
    payload = payload or CompleteSet()
    with _translate_errors():
        await runner.complete_current_set(reps=payload.reps, weight=payload.weight)
    return _to_read(runner)


@router.put("/notes", response_model=LiveSessionRead)
async def set_notes(
    payload: ExerciseNotes,
    runner: WorkoutSessionRunner = Depends(_runner),
):
    with _translate_errors():
        runner.set_exercise_notes(payload.exercise_index, payload.notes)
    return _to_read(runner)


@router.post("/finish", response_model=LiveSessionRead)
async def finish_session(
    payload: FinishSession | None = None,
    user_id: uuid.UUID = Depends(get_current_user_id),
    runner: WorkoutSessionRunner = Depends(_runner),
    registry: LiveSessionRegistry = Depends(get_live_sessions),
):
    """
    Save the session and return its final state, then drop it from the registry.
    On a 503 the session stays open and can be finished again.
    """
    payload = payload or FinishSession()
    with _translate_errors():
        await runner.finish(notes=payload.notes)
    result = _to_read(runner)
    registry.release(user_id)
    return result


@router.delete("", status_code=204)
async def abandon_session(
    user_id: uuid.UUID = Depends(get_current_user_id),
    registry: LiveSessionRegistry = Depends(get_live_sessions),
):
    """Drop the live session without saving anything. Not allowed while it is saving."""
    with _translate_errors():
        discarded = registry.discard(user_id)
    if not discarded:
        raise HTTPException(status_code=404, detail="No live session")
    logger.info("Live session discarded for user %s", user_id)
    return None
