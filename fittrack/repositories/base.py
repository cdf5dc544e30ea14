"""User-scoped repository base.

Every entity repository is bound to one ``AsyncSession`` and one user id, and
every query it issues starts from ``_select()``, which filters on that user id.
Rows leave the repository only as validated pydantic models.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.errors import RecordDecodeError
from fittrack.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
ReadT = TypeVar("ReadT", bound=BaseModel)


def decode(schema: type[ReadT], row: Any, entity: str) -> ReadT:
    """Validate a stored row against its read schema; reject it if malformed."""
    try:
        return schema.model_validate(row)
    except ValidationError as exc:
        logger.error("Rejecting stored %s %s: %s", entity, getattr(row, "id", "?"), exc)
        raise RecordDecodeError(entity, str(exc)) from exc


class UserScopedRepository(Generic[ModelT, ReadT]):
    model: type[ModelT]
    read_schema: type[ReadT]
    entity: str = "record"

    def __init__(self, db: AsyncSession, user_id: uuid.UUID):
        self.db = db
        self.user_id = user_id

    def _load_options(self) -> tuple:
        """Eager-load options for nested children (none for flat entities)."""
        return ()

    def _select(self) -> Select:
        stmt = select(self.model).where(self.model.user_id == self.user_id)
        options = self._load_options()
        if options:
            stmt = stmt.options(*options)
        return stmt

    def _decode(self, row: ModelT) -> ReadT:
        return decode(self.read_schema, row, self.entity)

    def _decode_all(self, rows) -> list[ReadT]:
        return [self._decode(r) for r in rows]

    async def _get_row(self, item_id: uuid.UUID) -> ModelT | None:
        result = await self.db.execute(self._select().where(self.model.id == item_id))
        return result.scalar_one_or_none()

    async def _reload(self, item_id: uuid.UUID) -> ReadT:
        """Re-select after a flush so defaults and children are fully loaded."""
        result = await self.db.execute(
            self._select()
            .where(self.model.id == item_id)
            .execution_options(populate_existing=True)
        )
        return self._decode(result.scalar_one())

    async def get(self, item_id: uuid.UUID) -> ReadT | None:
        row = await self._get_row(item_id)
        return self._decode(row) if row is not None else None

    async def create(self, payload: BaseModel) -> ReadT:
        row = self.model(user_id=self.user_id, **payload.model_dump())
        self.db.add(row)
        await self.db.flush()
        return await self._reload(row.id)

    async def update(self, item_id: uuid.UUID, payload: BaseModel) -> ReadT | None:
        """Partial update; fields left unset (or null) keep their stored value."""
        row = await self._get_row(item_id)
        if row is None:
            return None
        for k, v in payload.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(row, k, v)
        await self.db.flush()
        return await self._reload(item_id)

    async def delete(self, item_id: uuid.UUID) -> bool:
        row = await self._get_row(item_id)
        if row is None:
            return False
        await self.db.delete(row)
        await self.db.flush()
        return True
