"""LoggedSet model - one set recorded against an exercise from the catalog."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, Numeric, SmallInteger, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class LoggedSet(Base):
    """Reps / weight / duration for one set. Which fields are filled depends on form_type."""

    __tablename__ = "logged_sets"
    __table_args__ = (
        Index("ix_logged_sets_exercise_logged_at", "exercise_id", "logged_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # Catalog exercise ID (exercises live in the CSV export, not in the DB)
    exercise_id: Mapped[str] = mapped_column(String(64), nullable=False)
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False)
    form_type: Mapped[int] = mapped_column(SmallInteger, nullable=False)  # 1 reps, 2 weight+reps, 3 timed
    logged_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False
    )
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight: Mapped[float | None] = mapped_column(Numeric(8, 2, asdecimal=False), nullable=True)
    duration_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
