"""Exercise model - a user's catalog of trackable exercises."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Index, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.core.enums import ExerciseCategory
from fittrack.db.base import Base, JSONType


class Exercise(Base):
    """Exercise definition with category, muscle groups, equipment and instructions."""

    __tablename__ = "exercises"
    __table_args__ = (Index("ix_exercises_user_created", "user_id", "created_at"),)

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    category: Mapped[ExerciseCategory] = mapped_column(Enum(ExerciseCategory), nullable=False)

    # Flat string lists: ["chest", "triceps"], ["barbell"], ["Lie on the bench", ...]
    muscle_groups: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    equipment: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    instructions: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)

    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
