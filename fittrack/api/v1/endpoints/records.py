"""Personal record endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.api.deps import get_current_user_id
from fittrack.db.session import get_db
from fittrack.repositories.personal_record import PersonalRecordRepository
from fittrack.schemas.personal_record import (
    PersonalRecordCreate,
    PersonalRecordRead,
    PersonalRecordUpdate,
    RecordCheck,
    RecordCheckResult,
)
from fittrack.services.pr_detection import check_and_record

router = APIRouter()


def _repo(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> PersonalRecordRepository:
    return PersonalRecordRepository(db, user_id)


@router.get("", response_model=list[PersonalRecordRead])
async def list_records(
    exercise_id: uuid.UUID | None = None,
    repo: PersonalRecordRepository = Depends(_repo),
):
    """All records, most recently achieved first."""
    return await repo.list(exercise_id=exercise_id)


@router.get("/best", response_model=list[PersonalRecordRead])
async def best_records(repo: PersonalRecordRepository = Depends(_repo)):
    """Current best per exercise and record type."""
    return await repo.best()


@router.post("/check", response_model=RecordCheckResult)
async def check_record(
    payload: RecordCheck,
    repo: PersonalRecordRepository = Depends(_repo),
):
    """
    Compare a value against the stored best and store it if it wins.
    Sending the same value twice only records it once.
    """
    is_new, previous = await check_and_record(
        repo,
        payload.exercise_id,
        payload.type,
        payload.value,
        payload.unit,
        workout_session_id=payload.workout_session_id,
    )
    return RecordCheckResult(is_new_record=is_new, previous_best=previous)


@router.post("", response_model=PersonalRecordRead, status_code=201)
async def create_record(
    payload: PersonalRecordCreate,
    repo: PersonalRecordRepository = Depends(_repo),
):
    """Store a record as given (manual entry, no comparison)."""
    return await repo.create(payload)


@router.get("/{record_id}", response_model=PersonalRecordRead)
async def get_record(
    record_id: uuid.UUID,
    repo: PersonalRecordRepository = Depends(_repo),
):
    record = await repo.get(record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Record not found")
    return record


@router.patch("/{record_id}", response_model=PersonalRecordRead)
async def update_record(
    record_id: uuid.UUID,
    payload: PersonalRecordUpdate,
    repo: PersonalRecordRepository = Depends(_repo),
):
    record = await repo.update(record_id, payload)
    if not record:
        raise HTTPException(status_code=404, detail="Record not found")
    return record


@router.delete("/{record_id}", status_code=204)
async def delete_record(
    record_id: uuid.UUID,
    repo: PersonalRecordRepository = Depends(_repo),
):
    if not await repo.delete(record_id):
        raise HTTPException(status_code=404, detail="Record not found")
    return None
