"""Health check endpoint for load balancers and monitoring."""

import logging
import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.api.deps import get_app_settings, get_live_sessions
from fittrack.core.config import Settings
from fittrack.db.session import get_db
from fittrack.services.live_sessions import LiveSessionRegistry

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health():
    """Simple liveness check. Optionally includes built_at if BACKEND_BUILT_AT env is set."""
    payload: dict = {"status": "ok"}
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    registry: LiveSessionRegistry = Depends(get_live_sessions),
):
    """Readiness: DB connectivity (the users table must exist) plus live session count."""
    try:
        await db.execute(text("SELECT 1 FROM users LIMIT 1"))
        return {
            "status": "ok",
            "database": "connected",
            "environment": settings.environment,
            "live_sessions": len(registry),
        }
    except Exception as e:
        logger.exception("Readiness check failed")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "database": str(e)},
        )
