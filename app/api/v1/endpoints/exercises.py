"""Exercise browsing endpoints (catalog loaded from the export)."""

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_catalog
from app.core.constants import ROLE_PRECEDENCE
from app.schemas.exercise import ExerciseMuscleGroups, ExerciseRead
from app.schemas.highlight import ExerciseHighlights, HighlightRead
from app.services.exercise_catalog import Catalog, ExerciseRecord
from app.services.highlights import build_role_highlights
from app.services.resolver import exercises_for_group, muscle_groups, resolve_groups

router = APIRouter()


def _to_read(exercise: ExerciseRecord, catalog: Catalog) -> ExerciseRead:
    return ExerciseRead(
        exercise_id=exercise.exercise_id,
        exercise_name=exercise.exercise_name,
        form_type_id=exercise.form_type_id,
        form_type=exercise.form_type,
        muscle_ids={role: exercise.role_ids(role) for role in ROLE_PRECEDENCE},
        muscle_groups=resolve_groups(exercise, catalog.index),
    )


def _get_or_404(exercise_id: str, catalog: Catalog) -> ExerciseRecord:
    exercise = catalog.get(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    catalog: Catalog = Depends(get_catalog),
    group: str | None = None,
    skip: int = 0,
    limit: int = 100,
):
    """List exercises in catalog order, optionally only those working `group`."""
    exercises = (
        exercises_for_group(group, catalog.exercises, catalog.index)
        if group
        else list(catalog.exercises)
    )
    return [_to_read(ex, catalog) for ex in exercises[skip : skip + limit]]


@router.get("/groups", response_model=list[str])
async def list_exercise_groups(catalog: Catalog = Depends(get_catalog)):
    """Muscle groups that at least one exercise resolves to (sorted)."""
    return muscle_groups(catalog.exercises, catalog.index)


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(exercise_id: str, catalog: Catalog = Depends(get_catalog)):
    """Get a single exercise with parsed role IDs and resolved groups."""
    return _to_read(_get_or_404(exercise_id, catalog), catalog)


@router.get("/{exercise_id}/muscle-groups", response_model=ExerciseMuscleGroups)
async def get_exercise_muscle_groups(exercise_id: str, catalog: Catalog = Depends(get_catalog)):
    """Resolved groups (target, else synergist, else stabilizer). May be empty."""
    exercise = _get_or_404(exercise_id, catalog)
    return ExerciseMuscleGroups(
        exercise_id=exercise.exercise_id,
        muscle_groups=resolve_groups(exercise, catalog.index),
    )


@router.get("/{exercise_id}/highlights", response_model=ExerciseHighlights)
async def get_exercise_highlights(exercise_id: str, catalog: Catalog = Depends(get_catalog)):
    """Per-role mesh sets and colors for the 3D viewer."""
    exercise = _get_or_404(exercise_id, catalog)
    return ExerciseHighlights(
        exercise_id=exercise.exercise_id,
        muscle_groups=resolve_groups(exercise, catalog.index),
        highlights=[
            HighlightRead(key=h.key, color=h.color, mesh_names=sorted(h.mesh_names))
            for h in build_role_highlights(exercise, catalog.index)
        ],
    )
