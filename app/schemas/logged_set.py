"""Logged set and history chart schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LoggedSetCreate(BaseModel):
    exercise_id: str = Field(..., min_length=1, max_length=64)
    reps: int | None = Field(None, ge=0)
    weight: float | None = Field(None, ge=0)
    duration_seconds: int | None = Field(None, ge=0)
    logged_at: datetime | None = None


class LoggedSetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    exercise_id: str
    exercise_name: str
    form_type: int
    logged_at: datetime
    reps: int | None = None
    weight: float | None = None
    duration_seconds: int | None = None


class ChartSegment(BaseModel):
    reps_start: int
    reps_end: int
    weight: float


class ChartBucket(BaseModel):
    label: str
    segments: list[ChartSegment]
