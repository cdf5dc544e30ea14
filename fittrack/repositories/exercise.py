"""Exercise repository."""

from __future__ import annotations

import uuid
from collections.abc import Iterable

from sqlalchemy import func, or_, select

from fittrack.core.constants import DEFAULT_SEARCH_LIMIT
from fittrack.core.enums import ExerciseCategory
from fittrack.models.exercise import Exercise
from fittrack.repositories.base import UserScopedRepository
from fittrack.schemas.exercise import ExerciseRead


class ExerciseRepository(UserScopedRepository[Exercise, ExerciseRead]):
    model = Exercise
    read_schema = ExerciseRead
    entity = "exercise"

    async def list(
        self,
        category: ExerciseCategory | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[ExerciseRead]:
        """Newest first, optionally filtered by category."""
        stmt = self._select()
        if category is not None:
            stmt = stmt.where(Exercise.category == category)
        stmt = stmt.order_by(Exercise.created_at.desc()).offset(skip).limit(limit)
        result = await self.db.execute(stmt)
        return self._decode_all(result.scalars().all())

    async def search(self, term: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[ExerciseRead]:
        """Case-insensitive substring match on name or description, ordered by name."""
        pattern = f"%{term.strip().lower()}%"
        stmt = (
            self._select()
            .where(
                or_(
                    func.lower(Exercise.name).like(pattern),
                    func.lower(func.coalesce(Exercise.description, "")).like(pattern),
                )
            )
            .order_by(Exercise.name)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return self._decode_all(result.scalars().all())

    async def names(self, exercise_ids: Iterable[uuid.UUID]) -> dict[uuid.UUID, str]:
        ids = list(exercise_ids)
        if not ids:
            return {}
        result = await self.db.execute(
            select(Exercise.id, Exercise.name).where(
                Exercise.user_id == self.user_id, Exercise.id.in_(ids)
            )
        )
        return {row.id: row.name for row in result.all()}

    async def missing_ids(self, exercise_ids: Iterable[uuid.UUID]) -> set[uuid.UUID]:
        """Ids not present in this user's catalog."""
        wanted = set(exercise_ids)
        found = await self.names(wanted)
        return wanted - set(found)
