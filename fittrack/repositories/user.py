"""User profile repository (scoped by primary key rather than a user_id column)."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.models.user import User
from fittrack.repositories.base import decode
from fittrack.schemas.user import UserRead, UserUpdate, UserUpsert


class UserRepository:
    def __init__(self, db: AsyncSession, user_id: uuid.UUID):
        self.db = db
        self.user_id = user_id

    async def _get_row(self) -> User | None:
        result = await self.db.execute(select(User).where(User.id == self.user_id))
        return result.scalar_one_or_none()

    async def get(self) -> UserRead | None:
        user = await self._get_row()
        return decode(UserRead, user, "user") if user is not None else None

    async def upsert(self, payload: UserUpsert) -> UserRead:
        """Create the profile on first sign-in, overwrite it afterwards."""
        user = await self._get_row()
        if user is None:
            user = User(id=self.user_id, **payload.model_dump())
            self.db.add(user)
        else:
            for k, v in payload.model_dump().items():
                setattr(user, k, v)
        await self.db.flush()
        await self.db.refresh(user)
        return decode(UserRead, user, "user")

    async def update(self, payload: UserUpdate) -> UserRead | None:
        user = await self._get_row()
        if user is None:
            return None
        for k, v in payload.model_dump(exclude_unset=True).items():
            setattr(user, k, v)
        await self.db.flush()
        await self.db.refresh(user)
        return decode(UserRead, user, "user")

    @staticmethod
    async def find_by_email(db: AsyncSession, email: str) -> UserRead | None:
        result = await db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        return decode(UserRead, user, "user") if user is not None else None
