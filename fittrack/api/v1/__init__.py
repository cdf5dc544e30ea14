"""API v1 router aggregation."""

from fastapi import APIRouter

from fittrack.api.v1.endpoints import (
    dashboard,
    exercises,
    health,
    live_session,
    measurements,
    records,
    sessions,
    users,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
# Registered before /sessions so "live" never reaches the /{session_id} routes
api_router.include_router(live_session.router, prefix="/sessions/live", tags=["live-session"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(measurements.router, prefix="/measurements", tags=["measurements"])
api_router.include_router(records.router, prefix="/records", tags=["records"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
