"""Personal record repository."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import func, select

from fittrack.core.enums import RecordType
from fittrack.models.personal_record import PersonalRecord
from fittrack.repositories.base import UserScopedRepository
from fittrack.schemas.personal_record import PersonalRecordCreate, PersonalRecordRead


class PersonalRecordRepository(UserScopedRepository[PersonalRecord, PersonalRecordRead]):
    model = PersonalRecord
    read_schema = PersonalRecordRead
    entity = "personal record"

    async def list(
        self,
        exercise_id: uuid.UUID | None = None,
        limit: int | None = None,
    ) -> list[PersonalRecordRead]:
        """Most recently achieved first."""
        stmt = self._select()
        if exercise_id is not None:
            stmt = stmt.where(PersonalRecord.exercise_id == exercise_id)
        stmt = stmt.order_by(PersonalRecord.achieved_at.desc(), PersonalRecord.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.db.execute(stmt)
        return self._decode_all(result.scalars().all())

    async def best(self) -> list[PersonalRecordRead]:
        """Highest-value record for every (exercise, type) pair."""
        result = await self.db.execute(
            self._select().order_by(PersonalRecord.value.desc(), PersonalRecord.achieved_at.asc())
        )
        seen: set[tuple[uuid.UUID, RecordType]] = set()
        out: list[PersonalRecordRead] = []
        for row in result.scalars().all():
            key = (row.exercise_id, row.type)
            if key not in seen:
                seen.add(key)
                out.append(self._decode(row))
        return out

    async def best_value(self, exercise_id: uuid.UUID, record_type: RecordType) -> float | None:
        result = await self.db.execute(
            select(func.max(PersonalRecord.value)).where(
                PersonalRecord.user_id == self.user_id,
                PersonalRecord.exercise_id == exercise_id,
                PersonalRecord.type == record_type,
            )
        )
        best = result.scalar()
        return float(best) if best is not None else None

    async def create(self, payload: PersonalRecordCreate) -> PersonalRecordRead:
        data = payload.model_dump()
        if data.get("achieved_at") is None:
            data["achieved_at"] = datetime.now(timezone.utc)
        record = PersonalRecord(user_id=self.user_id, **data)
        self.db.add(record)
        await self.db.flush()
        return await self._reload(record.id)
