"""Shared fixtures: a small correlation table, exercises, and an API client on SQLite."""

import os
import tempfile
from pathlib import Path

# Point the app at a throwaway SQLite file before anything imports app.db.session
_DB_DIR = tempfile.mkdtemp(prefix="musclemap-tests-")
os.environ["DATABASE_URL_OVERRIDE"] = f"sqlite+aiosqlite:///{Path(_DB_DIR) / 'test.db'}"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

import app.models  # noqa: F401 - register tables
from app.core.config import get_settings
from app.db.base import Base
from app.main import create_application
from app.services.exercise_catalog import ExerciseRecord, build_catalog
from app.services.muscle_index import build_index


def muscle_row(muscle_id, name, group, head_type_id, unique_head_id, mesh, chirality="L"):
    """A 12-column MuscleCorrelations row."""
    return [
        name, str(muscle_id), "Region", "1", group, "1",
        f"{name} head", str(head_type_id), f"{name} {unique_head_id}", str(unique_head_id),
        chirality, mesh,
    ]


def exercise_row(exercise_id, name, form_type="2", target="", synergist="", dynamic="", stabilizer="", antagonist=""):
    """A 26-column exerciseData row."""
    row = [""] * 26
    row[0], row[1], row[7] = name, exercise_id, form_type
    row[17], row[19], row[21], row[23], row[25] = target, synergist, dynamic, stabilizer, antagonist
    return row


MUSCLE_ROWS = [
    muscle_row(12, "Pectoralis Major", "Chest", 120, 1, "pec_major_l"),
    muscle_row(13, "Pectoralis Major", "Chest", 120, 2, "pec_major_r", chirality="R"),
    muscle_row(20, "Latissimus Dorsi", "Back", 200, 3, "lat_dorsi_l"),
    muscle_row(20, "Latissimus Dorsi", "Back", 200, 4, "lat_dorsi_r", chirality="R"),
    muscle_row(30, "Rectus Abdominis", "Waist", 300, 5, "rectus_abdominis", chirality="C"),
    muscle_row(40, "Deltoid", "Shoulders", 400, 6, "deltoid_anterior_l"),
    muscle_row(50, "Triceps Brachii", "Upper Arms", 500, 7, "triceps_l"),
]

EXERCISE_ROWS = [
    exercise_row("BENCH", "Bench Press", "2", target="[12] [13]", synergist="[40] [50]"),
    exercise_row("PUSHUP", "Push-Up", "1", target="[12]", stabilizer="[30]"),
    exercise_row("ROW", "Bent-Over Row", "2", target="[20]", synergist="[12]"),
    exercise_row("PLANK", "Plank", "3", stabilizer="[30]"),
    exercise_row("MYSTERY", "Mystery Move", "9", target="[9999]"),
]


def make_exercise(**roles) -> ExerciseRecord:
    return ExerciseRecord(exercise_id=roles.pop("exercise_id", "EX"), exercise_name="Test", form_type_id="2", **roles)


@pytest.fixture
def index():
    return build_index(MUSCLE_ROWS)


@pytest.fixture
def catalog():
    return build_catalog(MUSCLE_ROWS, EXERCISE_ROWS)


@pytest.fixture
def client(catalog):
    sync_engine = create_engine(get_settings().database_url)
    Base.metadata.drop_all(sync_engine)
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    with TestClient(create_application(catalog=catalog)) as c:
        yield c
