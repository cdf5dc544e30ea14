"""Workout CRUD endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.api.deps import get_current_user_id
from fittrack.core.enums import Difficulty
from fittrack.db.session import get_db
from fittrack.repositories.exercise import ExerciseRepository
from fittrack.repositories.workout import WorkoutRepository
from fittrack.schemas.workout import WorkoutCreate, WorkoutExerciseCreate, WorkoutRead, WorkoutUpdate

router = APIRouter()


async def _ensure_exercises_exist(
    db: AsyncSession,
    user_id: uuid.UUID,
    items: list[WorkoutExerciseCreate],
) -> None:
    missing = await ExerciseRepository(db, user_id).missing_ids(e.exercise_id for e in items)
    if missing:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown exercise id(s): {', '.join(sorted(str(m) for m in missing))}",
        )


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    difficulty: Difficulty | None = None,
    skip: int = 0,
    limit: int = 50,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List workouts, newest first, optionally by difficulty."""
    return await WorkoutRepository(db, user_id).list(difficulty=difficulty, skip=skip, limit=limit)


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create a workout from an ordered list of exercise prescriptions."""
    await _ensure_exercises_exist(db, user_id, payload.exercises)
    return await WorkoutRepository(db, user_id).create(payload)


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    workout_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    workout = await WorkoutRepository(db, user_id).get(workout_id)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.patch("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Update workout fields; an exercises list replaces the prescriptions."""
    if payload.exercises is not None:
        await _ensure_exercises_exist(db, user_id, payload.exercises)
    workout = await WorkoutRepository(db, user_id).update(workout_id, payload)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout. Past sessions keep their results."""
    if not await WorkoutRepository(db, user_id).delete(workout_id):
        raise HTTPException(status_code=404, detail="Workout not found")
    return None
