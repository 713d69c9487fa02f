"""Logged set rules: form-type validation, chart bucketing and CSV export."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta, timezone
from typing import Any, Protocol

from app.core.constants import EXPORT_DATE_FORMAT, EXPORT_HEADER
from app.core.enums import ChartMode, FormType
from app.core.exceptions import InvalidSetInput

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


class SetLike(Protocol):
    id: Any
    exercise_name: str
    logged_at: datetime
    reps: int | None
    weight: float | None
    duration_seconds: int | None


def validate_set(
    form_type: FormType,
    reps: int | None,
    weight: float | None,
    duration_seconds: int | None,
) -> dict[str, Any]:
    """
    Check a set against the exercise's form type and return the values to store.
    Fields the form type does not use are dropped (stored as NULL).
    """
    for name, value in (("reps", reps), ("weight", weight), ("duration_seconds", duration_seconds)):
        if value is not None and value < 0:
            raise InvalidSetInput(f"{name} must be non-negative")

    if form_type == FormType.REPS:
        if reps is None:
            raise InvalidSetInput("reps is required for a reps-only exercise")
        return {"reps": reps, "weight": None, "duration_seconds": None}
    if form_type == FormType.WEIGHT_REPS:
        if reps is None or weight is None:
            raise InvalidSetInput("weight and reps are required for a weight & reps exercise")
        return {"reps": reps, "weight": weight, "duration_seconds": None}
    if duration_seconds is None:
        raise InvalidSetInput("duration_seconds is required for a timed exercise")
    return {"reps": None, "weight": None, "duration_seconds": duration_seconds}


def as_utc(dt: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _hour_label(hour: int) -> str:
    suffix = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12}{suffix}"


def _week_start(day: date) -> date:
    """Sunday on or before `day`."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def _stack(sets: Sequence[SetLike]) -> list[dict[str, float | int]]:
    segments: list[dict[str, float | int]] = []
    cumulative = 0
    for s in sets:
        start = cumulative
        end = start + int(s.reps or 0)
        segments.append({"reps_start": start, "reps_end": end, "weight": float(s.weight or 0)})
        cumulative = end
    if not segments:
        segments.append({"reps_start": 0, "reps_end": 0, "weight": 0.0})
    return segments


def build_chart(sets: Iterable[SetLike], mode: ChartMode, anchor: datetime) -> list[dict[str, Any]]:
    """
    Bucket sets for the history chart.
    Day: 24 hourly buckets of the anchor's (UTC) date.
    Week: 7 daily buckets, Sunday first, for the week holding the anchor.
    Each bucket stacks its sets' reps in log order.
    """
    anchor = as_utc(anchor)
    ordered = sorted(sets, key=lambda s: as_utc(s.logged_at))

    if mode == ChartMode.DAY:
        buckets: dict[int, list[SetLike]] = {h: [] for h in range(24)}
        for s in ordered:
            at = as_utc(s.logged_at)
            if at.date() == anchor.date():
                buckets[at.hour].append(s)
        return [{"label": _hour_label(h), "segments": _stack(buckets[h])} for h in range(24)]

    start = _week_start(anchor.date())
    days = [start + timedelta(days=i) for i in range(7)]
    by_day: dict[date, list[SetLike]] = {d: [] for d in days}
    for s in ordered:
        d = as_utc(s.logged_at).date()
        if d in by_day:
            by_day[d].append(s)
    return [{"label": WEEKDAY_LABELS[i], "segments": _stack(by_day[d])} for i, d in enumerate(days)]


def export_csv(sets: Iterable[SetLike]) -> str:
    """Render sets as the app's CSV export (missing numbers written as 0)."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for s in sets:
        weight = float(s.weight or 0)
        writer.writerow([
            str(s.id),
            s.exercise_name,
            as_utc(s.logged_at).strftime(EXPORT_DATE_FORMAT),
            s.reps or 0,
            int(weight) if weight.is_integer() else weight,
            s.duration_seconds or 0,
        ])
    return buf.getvalue()
