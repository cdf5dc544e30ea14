"""User profile model - identity comes from the external auth provider."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Enum, Float, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.core.enums import ActivityLevel, UnitSystem
from fittrack.db.base import Base


class User(Base):
    """Profile, fitness goals and preferences for one account.

    The primary key is the uid issued by the identity provider; every other
    table scopes its rows by it.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    photo_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    # Fitness goals
    weight_target: Mapped[float | None] = mapped_column(Float, nullable=True)
    activity_level: Mapped[ActivityLevel | None] = mapped_column(Enum(ActivityLevel), nullable=True)
    weekly_workouts: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 1-7

    # Preferences
    units: Mapped[UnitSystem] = mapped_column(Enum(UnitSystem), default=UnitSystem.METRIC, nullable=False)
    notifications: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
