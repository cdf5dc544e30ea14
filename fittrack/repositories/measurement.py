"""Body measurement repository."""

from __future__ import annotations

from fittrack.core.constants import DEFAULT_MEASUREMENT_LIST_LIMIT
from fittrack.core.enums import MeasurementType
from fittrack.models.measurement import Measurement
from fittrack.repositories.base import UserScopedRepository
from fittrack.schemas.measurement import MeasurementRead


class MeasurementRepository(UserScopedRepository[Measurement, MeasurementRead]):
    model = Measurement
    read_schema = MeasurementRead
    entity = "measurement"

    async def list(
        self,
        type: MeasurementType | None = None,
        limit: int = DEFAULT_MEASUREMENT_LIST_LIMIT,
    ) -> list[MeasurementRead]:
        stmt = self._select()
        if type is not None:
            stmt = stmt.where(Measurement.type == type)
        stmt = stmt.order_by(Measurement.measured_at.desc()).limit(limit)
        result = await self.db.execute(stmt)
        return self._decode_all(result.scalars().all())

    async def latest_by_type(self) -> dict[MeasurementType, MeasurementRead]:
        """Newest entry per measurement type (types never logged are absent)."""
        result = await self.db.execute(self._select().order_by(Measurement.measured_at.desc()))
        latest: dict[MeasurementType, MeasurementRead] = {}
        for row in result.scalars().all():
            if row.type not in latest:
                latest[row.type] = self._decode(row)
        return latest
