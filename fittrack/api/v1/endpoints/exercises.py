"""Exercise CRUD endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.api.deps import get_current_user_id
from fittrack.core.constants import DEFAULT_SEARCH_LIMIT
from fittrack.core.enums import ExerciseCategory
from fittrack.db.session import get_db
from fittrack.repositories.exercise import ExerciseRepository
from fittrack.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate

router = APIRouter()


def _repo(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> ExerciseRepository:
    return ExerciseRepository(db, user_id)


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    category: ExerciseCategory | None = None,
    skip: int = 0,
    limit: int = 100,
    repo: ExerciseRepository = Depends(_repo),
):
    """List exercises, newest first, optionally by category."""
    return await repo.list(category=category, skip=skip, limit=limit)


@router.get("/search", response_model=list[ExerciseRead])
async def search_exercises(
    q: str = Query(..., min_length=1),
    limit: int = DEFAULT_SEARCH_LIMIT,
    repo: ExerciseRepository = Depends(_repo),
):
    """Case-insensitive search on name and description."""
    return await repo.search(q, limit=limit)


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    repo: ExerciseRepository = Depends(_repo),
):
    return await repo.create(payload)


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    repo: ExerciseRepository = Depends(_repo),
):
    exercise = await repo.get(exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    repo: ExerciseRepository = Depends(_repo),
):
    """Update an exercise (partial)."""
    exercise = await repo.update(exercise_id, payload)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    repo: ExerciseRepository = Depends(_repo),
):
    if not await repo.delete(exercise_id):
        raise HTTPException(status_code=404, detail="Exercise not found")
    return None
