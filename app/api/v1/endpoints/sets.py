"""Logged set endpoints: record, history, chart, export, clear."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_catalog
from app.core.enums import ChartMode
from app.core.exceptions import InvalidFormType, InvalidSetInput
from app.db.session import get_db
from app.models.logged_set import LoggedSet
from app.schemas.logged_set import ChartBucket, LoggedSetCreate, LoggedSetRead
from app.services.exercise_catalog import Catalog
from app.services.set_log import as_utc, build_chart, export_csv, validate_set

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=LoggedSetRead, status_code=201)
async def log_set(
    payload: LoggedSetCreate,
    db: AsyncSession = Depends(get_db),
    catalog: Catalog = Depends(get_catalog),
):
    """Record a set. Required fields depend on the exercise's form type."""
    exercise = catalog.get(payload.exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    try:
        form_type = exercise.require_form_type()
        values = validate_set(form_type, payload.reps, payload.weight, payload.duration_seconds)
    except (InvalidFormType, InvalidSetInput) as e:
        raise HTTPException(status_code=422, detail=str(e))

    logged = LoggedSet(
        exercise_id=exercise.exercise_id,
        exercise_name=exercise.exercise_name,
        form_type=int(form_type),
        logged_at=as_utc(payload.logged_at) if payload.logged_at else datetime.now(timezone.utc),
        **values,
    )
    db.add(logged)
    await db.flush()
    await db.refresh(logged)
    logger.info("Logged set %s for %s", logged.id, exercise.exercise_id)
    return logged


@router.get("", response_model=list[LoggedSetRead])
async def list_sets(
    db: AsyncSession = Depends(get_db),
    exercise_id: str | None = None,
    skip: int = 0,
    limit: int = 100,
):
    """History, newest first, optionally for one exercise."""
    stmt = select(LoggedSet)
    if exercise_id:
        stmt = stmt.where(LoggedSet.exercise_id == exercise_id)
    stmt = stmt.order_by(LoggedSet.logged_at.desc()).offset(skip).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.get("/export")
async def export_sets(db: AsyncSession = Depends(get_db)):
    """All sets as CSV (oldest first)."""
    result = await db.execute(select(LoggedSet).order_by(LoggedSet.logged_at))
    body = export_csv(result.scalars().all())
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="ExerciseData.csv"'},
    )


@router.get("/chart", response_model=list[ChartBucket])
async def chart_sets(
    exercise_id: str,
    db: AsyncSession = Depends(get_db),
    mode: ChartMode = ChartMode.DAY,
    anchor: datetime | None = None,
):
    """Hourly (day) or daily (week) stacked reps for one exercise around `anchor` (default now)."""
    result = await db.execute(select(LoggedSet).where(LoggedSet.exercise_id == exercise_id))
    return build_chart(result.scalars().all(), mode, anchor or datetime.now(timezone.utc))


@router.delete("/{set_id}", status_code=204)
async def delete_set(set_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Delete one logged set."""
    result = await db.execute(select(LoggedSet).where(LoggedSet.id == set_id))
    logged = result.scalar_one_or_none()
    if not logged:
        raise HTTPException(status_code=404, detail="Set not found")
    await db.delete(logged)
    return None


@router.delete("", status_code=204)
async def clear_sets(db: AsyncSession = Depends(get_db)):
    """Delete every logged set."""
    result = await db.execute(delete(LoggedSet))
    logger.info("Cleared %s logged sets", result.rowcount)
    return None
