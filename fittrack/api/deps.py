"""Shared request dependencies."""

import uuid

from fastapi import Header, Request

from fittrack.core.config import Settings
from fittrack.services.collaborators import DatabaseRecordChecker
from fittrack.services.live_sessions import LiveSessionRegistry


async def get_current_user_id(
    x_user_id: uuid.UUID = Header(..., description="User id issued by the identity provider"),
) -> uuid.UUID:
    """Caller identity. Authentication happens upstream; the header is trusted."""
    return x_user_id


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_live_sessions(request: Request) -> LiveSessionRegistry:
    return request.app.state.live_sessions


def get_record_checker(request: Request) -> DatabaseRecordChecker:
    """The process-wide checker, so record checks of every runner share its locks."""
    return request.app.state.record_checker
