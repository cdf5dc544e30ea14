"""Current user's profile, goals and preferences."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.api.deps import get_current_user_id
from fittrack.db.session import get_db
from fittrack.repositories.user import UserRepository
from fittrack.schemas.user import UserRead, UserUpdate, UserUpsert

router = APIRouter()


@router.get("/me", response_model=UserRead)
async def get_me(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    user = await UserRepository(db, user_id).get()
    if not user:
        raise HTTPException(status_code=404, detail="Profile not set up. PUT /users/me first.")
    return user


@router.put("/me", response_model=UserRead)
async def upsert_me(
    payload: UserUpsert,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create or replace the profile (first sign-in registers the user)."""
    other = await UserRepository.find_by_email(db, payload.email)
    if other and other.id != user_id:
        raise HTTPException(status_code=409, detail="Email already registered")
    return await UserRepository(db, user_id).upsert(payload)


@router.patch("/me", response_model=UserRead)
async def update_me(
    payload: UserUpdate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    user = await UserRepository(db, user_id).update(payload)
    if not user:
        raise HTTPException(status_code=404, detail="Profile not set up. PUT /users/me first.")
    return user
