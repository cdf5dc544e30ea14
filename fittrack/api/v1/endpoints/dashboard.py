"""Home screen summary."""

import uuid
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.api.deps import get_current_user_id
from fittrack.core.constants import DASHBOARD_RECENT_RECORDS, DASHBOARD_WEEK_DAYS, DEFAULT_RECENT_SESSIONS
from fittrack.db.session import get_db
from fittrack.repositories.measurement import MeasurementRepository
from fittrack.repositories.personal_record import PersonalRecordRepository
from fittrack.repositories.workout import WorkoutRepository
from fittrack.repositories.workout_session import WorkoutSessionRepository
from fittrack.schemas.dashboard import DashboardRead, WeeklyStats

router = APIRouter()


@router.get("", response_model=DashboardRead)
async def get_dashboard(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Recent completed sessions, newest records, latest measurement per type,
    a suggested workout (the newest one) and this week's totals.
    """
    sessions = WorkoutSessionRepository(db, user_id)
    recent = await sessions.recent(limit=DEFAULT_RECENT_SESSIONS)
    records = await PersonalRecordRepository(db, user_id).list(limit=DASHBOARD_RECENT_RECORDS)
    latest = await MeasurementRepository(db, user_id).latest_by_type()
    workouts = await WorkoutRepository(db, user_id).list(limit=1)

    week_start = datetime.now(timezone.utc) - timedelta(days=DASHBOARD_WEEK_DAYS)
    this_week = await sessions.recent(limit=None, ended_after=week_start)

    return DashboardRead(
        recent_sessions=recent,
        recent_records=records,
        latest_measurements=latest,
        suggested_workout=workouts[0] if workouts else None,
        weekly_stats=WeeklyStats(
            total_workouts=len(this_week),
            total_duration_minutes=sum(s.duration_minutes or 0 for s in this_week),
        ),
    )
