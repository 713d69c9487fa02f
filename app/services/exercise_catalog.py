"""Exercise records and the startup catalog (muscle index + exercises)."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from app.core.constants import EXERCISE_COLUMNS, EXERCISE_MIN_COLUMNS, ROLE_COLUMNS
from app.core.enums import FormType, MuscleRole
from app.core.exceptions import DataIntegrityWarning, InvalidFormType, LoadFailure
from app.services.muscle_ids import parse_muscle_ids
from app.services.muscle_index import MuscleCorrelationIndex, build_index
from app.services.row_source import Row, is_blank_row, read_csv_rows

logger = logging.getLogger(__name__)

SOURCE_NAME = "exercises"


def parse_form_type(raw: str | int | None) -> FormType:
    """Form type code -> FormType. Anything but 1/2/3 raises InvalidFormType."""
    if isinstance(raw, int):
        code = raw
    else:
        try:
            code = int((raw or "").strip())
        except ValueError:
            raise InvalidFormType(raw) from None
    try:
        return FormType(code)
    except ValueError:
        raise InvalidFormType(raw) from None


@dataclass(frozen=True)
class ExerciseRecord:
    exercise_id: str
    exercise_name: str
    form_type_id: str  # raw code; see form_type
    target_muscle_ids: str = ""
    synergist_muscle_ids: str = ""
    dynamic_stabilizer_muscle_ids: str = ""
    stabilizer_muscle_ids: str = ""
    antagonist_stabilizer_muscle_ids: str = ""

    def role_field(self, role: MuscleRole) -> str:
        """Raw serialized ID list for a role."""
        return getattr(self, f"{role.value}_muscle_ids")

    def role_ids(self, role: MuscleRole) -> list[int]:
        return parse_muscle_ids(self.role_field(role))

    @property
    def form_type(self) -> FormType | None:
        """Parsed form type, or None when the code is invalid (never defaulted)."""
        try:
            return parse_form_type(self.form_type_id)
        except InvalidFormType:
            return None

    def require_form_type(self) -> FormType:
        return parse_form_type(self.form_type_id)


def parse_exercise_row(row: Row) -> ExerciseRecord:
    """Convert one CSV row. Raises ValueError describing what is wrong with it."""
    if len(row) < EXERCISE_MIN_COLUMNS:
        raise ValueError(f"expected at least {EXERCISE_MIN_COLUMNS} columns, got {len(row)}")
    cols = [c.strip() for c in row]
    exercise_id = cols[EXERCISE_COLUMNS["exercise_id"]]
    if not exercise_id:
        raise ValueError("empty exercise ID")
    roles = {f"{role.value}_muscle_ids": cols[pos] for role, pos in ROLE_COLUMNS.items()}
    return ExerciseRecord(
        exercise_id=exercise_id,
        exercise_name=cols[EXERCISE_COLUMNS["exercise_name"]],
        form_type_id=cols[EXERCISE_COLUMNS["form_type_id"]],
        **roles,
    )


def parse_exercise_rows(rows: Iterable[Row]) -> tuple[list[ExerciseRecord], list[DataIntegrityWarning]]:
    """Parse exercise rows, skipping malformed and duplicate-ID rows with warnings.

    Invalid form type codes are kept (and warned about): the exercise stays
    browsable, logging sets for it is refused.
    """
    exercises: list[ExerciseRecord] = []
    warnings: list[DataIntegrityWarning] = []
    seen: set[str] = set()
    for n, row in enumerate(rows, start=1):
        if is_blank_row(row):
            continue
        try:
            ex = parse_exercise_row(row)
        except ValueError as e:
            warnings.append(DataIntegrityWarning(SOURCE_NAME, n, f"skipped malformed row: {e}"))
            continue
        if ex.exercise_id in seen:
            warnings.append(DataIntegrityWarning(SOURCE_NAME, n, f"skipped duplicate exercise ID {ex.exercise_id!r}"))
            continue
        if ex.form_type is None:
            warnings.append(
                DataIntegrityWarning(SOURCE_NAME, n, f"invalid form type {ex.form_type_id!r} for {ex.exercise_id!r}")
            )
        seen.add(ex.exercise_id)
        exercises.append(ex)
    for w in warnings:
        logger.warning("%s", w)
    return exercises, warnings


@dataclass(frozen=True)
class Catalog:
    """Everything loaded from the exports at startup. Shared read-only."""

    index: MuscleCorrelationIndex
    exercises: tuple[ExerciseRecord, ...]
    warnings: tuple[DataIntegrityWarning, ...] = ()
    _by_id: dict[str, ExerciseRecord] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_by_id", {ex.exercise_id: ex for ex in self.exercises})

    def get(self, exercise_id: str) -> ExerciseRecord | None:
        return self._by_id.get(exercise_id)

    @property
    def all_warnings(self) -> list[DataIntegrityWarning]:
        return [*self.index.warnings, *self.warnings]


def build_catalog(muscle_rows: Iterable[Row], exercise_rows: Iterable[Row]) -> Catalog:
    index = build_index(muscle_rows)
    exercises, warnings = parse_exercise_rows(exercise_rows)
    return Catalog(index=index, exercises=tuple(exercises), warnings=tuple(warnings))


def load_catalog(muscle_path: str | Path, exercise_path: str | Path) -> Catalog:
    """Read both CSV exports and build the catalog. Raises LoadFailure."""
    catalog = build_catalog(read_csv_rows(muscle_path), read_csv_rows(exercise_path))
    if not catalog.exercises:
        raise LoadFailure(f"No usable exercise rows in {exercise_path}")
    logger.info(
        "Loaded catalog: %d exercises, %d muscle heads, %d warnings",
        len(catalog.exercises),
        len(catalog.index),
        len(catalog.all_warnings),
    )
    return catalog
