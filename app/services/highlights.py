"""Mesh highlight sets for the 3D viewer.

Two inputs drive the viewer: a single selected exercise (colored per muscle
role) or the set of muscle groups active in the browser (colored per group).
Every mesh gets at most one color per call.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import NamedTuple

from app.core.constants import DEFAULT_ROLE_COLORS, NEUTRAL_COLOR, ROLE_PRECEDENCE
from app.core.enums import MuscleRole
from app.services.exercise_catalog import ExerciseRecord
from app.services.muscle_index import MuscleCorrelationIndex


class Highlight(NamedTuple):
    key: str  # role value or group name
    color: str
    mesh_names: frozenset[str]


def build_role_highlights(
    exercise: ExerciseRecord,
    index: MuscleCorrelationIndex,
    role_colors: Mapping[MuscleRole, str] | None = None,
) -> list[Highlight]:
    """One entry per role in precedence order.

    A mesh reachable from several roles stays with the most specific one
    (target > synergist > dynamic stabilizer > stabilizer > antagonist stabilizer).
    """
    colors = {**DEFAULT_ROLE_COLORS, **(role_colors or {})}
    claimed: set[str] = set()
    out: list[Highlight] = []
    for role in ROLE_PRECEDENCE:
        meshes = index.mesh_names_for_muscle_ids(exercise.role_ids(role)) - claimed
        claimed |= meshes
        out.append(Highlight(role.value, colors[role], frozenset(meshes)))
    return out


def role_highlight_map(exercise: ExerciseRecord, index: MuscleCorrelationIndex) -> dict[MuscleRole, frozenset[str]]:
    """role -> mesh names, after the tie-break."""
    return {MuscleRole(h.key): h.mesh_names for h in build_role_highlights(exercise, index)}


def build_group_highlights(
    active_groups: Iterable[str],
    index: MuscleCorrelationIndex,
    color_map: Mapping[str, str],
) -> list[Highlight]:
    """One entry per active group, in the given order.

    Repeated group names are ignored; a mesh shared by two groups keeps the
    first group's color. Groups missing from color_map use NEUTRAL_COLOR.
    """
    claimed: set[str] = set()
    seen: set[str] = set()
    out: list[Highlight] = []
    for group in active_groups:
        if group in seen:
            continue
        seen.add(group)
        meshes = index.mesh_names_for_group(group) - claimed
        claimed |= meshes
        out.append(Highlight(group, color_map.get(group, NEUTRAL_COLOR), frozenset(meshes)))
    return out
