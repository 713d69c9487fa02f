import csv
import io
import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from app.core.enums import ChartMode, FormType
from app.core.exceptions import InvalidSetInput
from app.services.set_log import build_chart, export_csv, validate_set


def _set(at, reps=None, weight=None, duration=None, name="Bench Press"):
    return SimpleNamespace(
        id=uuid.uuid4(), exercise_name=name, logged_at=at, reps=reps, weight=weight, duration_seconds=duration
    )


def test_reps_only_drops_weight():
    assert validate_set(FormType.REPS, 12, 40.0, None) == {"reps": 12, "weight": None, "duration_seconds": None}


def test_weight_reps_requires_both():
    assert validate_set(FormType.WEIGHT_REPS, 5, 100.0, None)["weight"] == 100.0
    with pytest.raises(InvalidSetInput):
        validate_set(FormType.WEIGHT_REPS, 5, None, None)


def test_timed_requires_duration():
    assert validate_set(FormType.TIMED, None, None, 60) == {"reps": None, "weight": None, "duration_seconds": 60}
    with pytest.raises(InvalidSetInput):
        validate_set(FormType.TIMED, 10, None, None)


def test_negative_values_rejected():
    with pytest.raises(InvalidSetInput):
        validate_set(FormType.REPS, -1, None, None)


def test_day_chart_stacks_reps_per_hour():
    anchor = datetime(2026, 10, 19, 20, 0, tzinfo=timezone.utc)
    sets = [
        _set(datetime(2026, 10, 19, 8, 40, tzinfo=timezone.utc), reps=8, weight=60),
        _set(datetime(2026, 10, 19, 8, 10, tzinfo=timezone.utc), reps=10, weight=50),
        _set(datetime(2026, 10, 18, 8, 10, tzinfo=timezone.utc), reps=99, weight=10),  # other day
        _set(datetime(2026, 10, 19, 0, 5), reps=5),  # naive is UTC
    ]
    chart = build_chart(sets, ChartMode.DAY, anchor)

    assert len(chart) == 24
    assert chart[0]["label"] == "12AM"
    assert chart[13]["label"] == "1PM"
    assert chart[8]["segments"] == [
        {"reps_start": 0, "reps_end": 10, "weight": 50.0},
        {"reps_start": 10, "reps_end": 18, "weight": 60.0},
    ]
    assert chart[0]["segments"] == [{"reps_start": 0, "reps_end": 5, "weight": 0.0}]
    assert chart[9]["segments"] == [{"reps_start": 0, "reps_end": 0, "weight": 0.0}]


def test_week_chart_starts_on_sunday():
    anchor = datetime(2026, 10, 21, tzinfo=timezone.utc)  # Wednesday
    sets = [
        _set(datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc), reps=3),  # Sunday
        _set(datetime(2026, 10, 24, 9, 0, tzinfo=timezone.utc), reps=4),  # Saturday
        _set(datetime(2026, 10, 25, 9, 0, tzinfo=timezone.utc), reps=7),  # next week
    ]
    chart = build_chart(sets, ChartMode.WEEK, anchor)

    assert [b["label"] for b in chart] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert chart[0]["segments"][0]["reps_end"] == 3
    assert chart[6]["segments"][0]["reps_end"] == 4
    assert all(b["segments"][0]["reps_end"] == 0 for b in chart[1:6])


def test_export_csv():
    s = _set(datetime(2026, 10, 19, 7, 5, 9, tzinfo=timezone.utc), reps=10, weight=52.5)
    t = _set(datetime(2026, 10, 19, 7, 6, 0), duration=45, name="Plank")
    rows = list(csv.reader(io.StringIO(export_csv([s, t]))))

    assert rows[0] == ["ID", "Exercise Name", "Date", "Reps", "Weight", "Duration"]
    assert rows[1] == [str(s.id), "Bench Press", "2026-10-19 07:05:09", "10", "52.5", "0"]
    assert rows[2] == [str(t.id), "Plank", "2026-10-19 07:06:00", "0", "0", "45"]
