"""Body measurement endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.api.deps import get_current_user_id
from fittrack.core.constants import DEFAULT_MEASUREMENT_LIST_LIMIT
from fittrack.core.enums import MeasurementType
from fittrack.db.session import get_db
from fittrack.repositories.measurement import MeasurementRepository
from fittrack.schemas.measurement import MeasurementCreate, MeasurementRead, MeasurementUpdate

router = APIRouter()


def _repo(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> MeasurementRepository:
    return MeasurementRepository(db, user_id)


@router.get("", response_model=list[MeasurementRead])
async def list_measurements(
    type: MeasurementType | None = None,
    limit: int = DEFAULT_MEASUREMENT_LIST_LIMIT,
    repo: MeasurementRepository = Depends(_repo),
):
    """Newest first, optionally one type only."""
    return await repo.list(type=type, limit=limit)


@router.get("/latest", response_model=dict[MeasurementType, MeasurementRead])
async def latest_measurements(repo: MeasurementRepository = Depends(_repo)):
    """Newest measurement of each type logged so far."""
    return await repo.latest_by_type()


@router.post("", response_model=MeasurementRead, status_code=201)
async def create_measurement(
    payload: MeasurementCreate,
    repo: MeasurementRepository = Depends(_repo),
):
    return await repo.create(payload)


@router.get("/{measurement_id}", response_model=MeasurementRead)
async def get_measurement(
    measurement_id: uuid.UUID,
    repo: MeasurementRepository = Depends(_repo),
):
    measurement = await repo.get(measurement_id)
    if not measurement:
        raise HTTPException(status_code=404, detail="Measurement not found")
    return measurement


@router.patch("/{measurement_id}", response_model=MeasurementRead)
async def update_measurement(
    measurement_id: uuid.UUID,
    payload: MeasurementUpdate,
    repo: MeasurementRepository = Depends(_repo),
):
    measurement = await repo.update(measurement_id, payload)
    if not measurement:
        raise HTTPException(status_code=404, detail="Measurement not found")
    return measurement


@router.delete("/{measurement_id}", status_code=204)
async def delete_measurement(
    measurement_id: uuid.UUID,
    repo: MeasurementRepository = Depends(_repo),
):
    if not await repo.delete(measurement_id):
        raise HTTPException(status_code=404, detail="Measurement not found")
    return None
