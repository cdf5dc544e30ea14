"""Completed workout session history."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.api.deps import get_current_user_id
from fittrack.core.constants import DEFAULT_RECENT_SESSIONS, DEFAULT_SESSION_LIST_LIMIT
from fittrack.db.session import get_db
from fittrack.repositories.workout_session import WorkoutSessionRepository
from fittrack.schemas.workout_session import WorkoutSessionRead, WorkoutSessionUpdate

router = APIRouter()


def _repo(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> WorkoutSessionRepository:
    return WorkoutSessionRepository(db, user_id)


@router.get("", response_model=list[WorkoutSessionRead])
async def list_sessions(
    limit: int = DEFAULT_SESSION_LIST_LIMIT,
    workout_id: uuid.UUID | None = None,
    repo: WorkoutSessionRepository = Depends(_repo),
):
    """Sessions by start time, newest first."""
    return await repo.list(limit=limit, workout_id=workout_id)


@router.get("/recent", response_model=list[WorkoutSessionRead])
async def recent_sessions(
    limit: int = DEFAULT_RECENT_SESSIONS,
    repo: WorkoutSessionRepository = Depends(_repo),
):
    """Completed sessions, most recently finished first."""
    return await repo.recent(limit=limit)


@router.get("/{session_id}", response_model=WorkoutSessionRead)
async def get_session(
    session_id: uuid.UUID,
    repo: WorkoutSessionRepository = Depends(_repo),
):
    session = await repo.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.patch("/{session_id}", response_model=WorkoutSessionRead)
async def update_session(
    session_id: uuid.UUID,
    payload: WorkoutSessionUpdate,
    repo: WorkoutSessionRepository = Depends(_repo),
):
    """Rename a session or edit its notes."""
    session = await repo.update(session_id, payload)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: uuid.UUID,
    repo: WorkoutSessionRepository = Depends(_repo),
):
    if not await repo.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return None
