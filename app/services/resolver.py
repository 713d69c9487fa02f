"""Resolve which muscle groups an exercise works.

Target muscles decide the groups; synergists are used only when no target ID
resolves, stabilizers only when neither does. Dynamic and antagonist
stabilizers never decide the group (they only refine the highlight colors).
"""

from __future__ import annotations

from collections.abc import Iterable

from app.core.constants import GROUP_RESOLUTION_ROLES
from app.services.exercise_catalog import ExerciseRecord
from app.services.muscle_index import MuscleCorrelationIndex


def groups_for_ids(muscle_ids: Iterable[int], index: MuscleCorrelationIndex) -> list[str]:
    """Unique groups in order of first appearance; unknown IDs are dropped."""
    groups: list[str] = []
    for muscle_id in muscle_ids:
        group = index.group_for(muscle_id)
        if group is not None and group not in groups:
            groups.append(group)
    return groups


def resolve_groups(exercise: ExerciseRecord, index: MuscleCorrelationIndex) -> list[str]:
    """Ordered muscle groups for an exercise; [] when nothing resolves."""
    for role in GROUP_RESOLUTION_ROLES:
        groups = groups_for_ids(exercise.role_ids(role), index)
        if groups:
            return groups
    return []


def muscle_groups(exercises: Iterable[ExerciseRecord], index: MuscleCorrelationIndex) -> list[str]:
    """Sorted groups covered by at least one exercise (the browser's group list)."""
    found: set[str] = set()
    for exercise in exercises:
        found.update(resolve_groups(exercise, index))
    return sorted(found)


def exercises_for_group(
    group: str,
    exercises: Iterable[ExerciseRecord],
    index: MuscleCorrelationIndex,
) -> list[ExerciseRecord]:
    """Exercises whose resolved groups include `group`, in catalog order."""
    return [ex for ex in exercises if group in resolve_groups(ex, index)]
