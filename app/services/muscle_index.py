"""Muscle correlation index: muscle ID / group / mesh-name lookups.

Built once at startup from the MuscleCorrelations export and shared read-only.
Bad rows are skipped with a recorded DataIntegrityWarning; only an empty (or
entirely unusable) source fails the build.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from app.core.constants import MUSCLE_COLUMNS, MUSCLE_MIN_COLUMNS
from app.core.exceptions import DataIntegrityWarning, LoadFailure
from app.services.row_source import Row, is_blank_row

logger = logging.getLogger(__name__)

SOURCE_NAME = "muscle_correlations"


@dataclass(frozen=True)
class MuscleRecord:
    """One anatomical head: a row of the correlation table."""

    muscle_id: int
    muscle_name: str
    muscle_group: str
    head_type_id: int
    unique_head_id: int
    mesh_reference_name: str
    muscle_group_id: int | None = None
    head_type: str = ""
    unique_head: str = ""
    chirality: str = ""


def _optional_int(value: str) -> int | None:
    value = value.strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_muscle_row(row: Row) -> MuscleRecord:
    """Convert one CSV row. Raises ValueError describing what is wrong with it."""
    if len(row) < MUSCLE_MIN_COLUMNS:
        raise ValueError(f"expected at least {MUSCLE_MIN_COLUMNS} columns, got {len(row)}")
    cols = {name: row[pos].strip() for name, pos in MUSCLE_COLUMNS.items()}
    ints: dict[str, int] = {}
    for name in ("muscle_id", "head_type_id", "unique_head_id"):
        try:
            ints[name] = int(cols[name])
        except ValueError:
            raise ValueError(f"non-numeric {name} {cols[name]!r}") from None
    if not cols["muscle_group"]:
        raise ValueError("empty muscle group")
    if not cols["mesh_reference_name"]:
        raise ValueError("empty mesh reference name")
    return MuscleRecord(
        muscle_id=ints["muscle_id"],
        muscle_name=cols["muscle_name"],
        muscle_group=cols["muscle_group"],
        head_type_id=ints["head_type_id"],
        unique_head_id=ints["unique_head_id"],
        mesh_reference_name=cols["mesh_reference_name"],
        muscle_group_id=_optional_int(cols["muscle_group_id"]),
        head_type=cols["head_type"],
        unique_head=cols["unique_head"],
        chirality=cols["chirality"],
    )


class MuscleCorrelationIndex:
    """Read-only lookups built from MuscleRecords. Use build_index() for raw rows."""

    def __init__(
        self,
        records: Iterable[MuscleRecord],
        warnings: Iterable[DataIntegrityWarning] = (),
    ):
        self._records = tuple(records)
        collected = list(warnings)

        group_by_id: dict[int, str] = {}
        meshes_by_group: dict[str, set[str]] = {}
        meshes_by_id: dict[int, set[str]] = {}
        meshes_by_head_type: dict[int, set[str]] = {}
        record_by_mesh: dict[str, MuscleRecord] = {}
        mesh_by_head: dict[int, str] = {}

        for rec in self._records:
            previous = group_by_id.get(rec.muscle_id)
            if previous is not None and previous != rec.muscle_group:
                w = DataIntegrityWarning(
                    SOURCE_NAME,
                    None,
                    f"muscle ID {rec.muscle_id} mapped to both {previous!r} and "
                    f"{rec.muscle_group!r}; keeping {rec.muscle_group!r}",
                )
                logger.warning("%s", w)
                collected.append(w)
            group_by_id[rec.muscle_id] = rec.muscle_group

            known = mesh_by_head.get(rec.unique_head_id)
            if known is not None and known != rec.mesh_reference_name:
                w = DataIntegrityWarning(
                    SOURCE_NAME,
                    None,
                    f"unique head {rec.unique_head_id} has meshes {known!r} and "
                    f"{rec.mesh_reference_name!r}",
                )
                logger.warning("%s", w)
                collected.append(w)
            mesh_by_head[rec.unique_head_id] = rec.mesh_reference_name

            meshes_by_group.setdefault(rec.muscle_group, set()).add(rec.mesh_reference_name)
            meshes_by_id.setdefault(rec.muscle_id, set()).add(rec.mesh_reference_name)
            meshes_by_head_type.setdefault(rec.head_type_id, set()).add(rec.mesh_reference_name)
            record_by_mesh.setdefault(rec.mesh_reference_name, rec)

        self.group_by_muscle_id: Mapping[int, str] = MappingProxyType(group_by_id)
        self.mesh_names_by_group: Mapping[str, frozenset[str]] = MappingProxyType(
            {g: frozenset(names) for g, names in meshes_by_group.items()}
        )
        self.mesh_names_by_muscle_id: Mapping[int, frozenset[str]] = MappingProxyType(
            {i: frozenset(names) for i, names in meshes_by_id.items()}
        )
        self.mesh_names_by_head_type_id: Mapping[int, frozenset[str]] = MappingProxyType(
            {i: frozenset(names) for i, names in meshes_by_head_type.items()}
        )
        self._record_by_mesh: Mapping[str, MuscleRecord] = MappingProxyType(record_by_mesh)
        self._warnings = tuple(collected)

    @property
    def records(self) -> tuple[MuscleRecord, ...]:
        return self._records

    @property
    def warnings(self) -> tuple[DataIntegrityWarning, ...]:
        return self._warnings

    @property
    def groups(self) -> list[str]:
        """Muscle group vocabulary, sorted."""
        return sorted(self.mesh_names_by_group)

    def __len__(self) -> int:
        return len(self._records)

    def group_for(self, muscle_id: int) -> str | None:
        """Muscle group for an ID, or None if the ID is not in the table."""
        group = self.group_by_muscle_id.get(muscle_id)
        if group is None:
            logger.debug("Unresolved muscle ID %s", muscle_id)
        return group

    def mesh_names_for_group(self, group: str) -> frozenset[str]:
        names = self.mesh_names_by_group.get(group)
        if names is None:
            logger.debug("Unresolved muscle group %r", group)
            return frozenset()
        return names

    def mesh_names_for_muscle_ids(self, muscle_ids: Iterable[int]) -> frozenset[str]:
        """Union of mesh names for the IDs; unknown IDs contribute nothing."""
        out: set[str] = set()
        for muscle_id in muscle_ids:
            names = self.mesh_names_by_muscle_id.get(muscle_id)
            if names is None:
                logger.debug("Unresolved muscle ID %s", muscle_id)
                continue
            out |= names
        return frozenset(out)

    def mesh_names_for_head_type_ids(self, head_type_ids: Iterable[int]) -> frozenset[str]:
        """Union of mesh names for head types (one head of a muscle, both sides).

        Kept apart from mesh_names_for_muscle_ids so a muscle ID never
        matches a head type by accident.
        """
        out: set[str] = set()
        for head_type_id in head_type_ids:
            names = self.mesh_names_by_head_type_id.get(head_type_id)
            if names is None:
                logger.debug("Unresolved head type ID %s", head_type_id)
                continue
            out |= names
        return frozenset(out)

    def record_for_mesh(self, mesh_name: str) -> MuscleRecord | None:
        """Reverse lookup for a tapped mesh node."""
        return self._record_by_mesh.get(mesh_name)


def build_index(rows: Iterable[Row]) -> MuscleCorrelationIndex:
    """Build the index from raw correlation rows (header already removed).

    Malformed rows are skipped and recorded on index.warnings. Raises LoadFailure
    when there are no rows at all, or none of them is usable.
    """
    records: list[MuscleRecord] = []
    warnings: list[DataIntegrityWarning] = []
    total = 0
    for n, row in enumerate(rows, start=1):
        if is_blank_row(row):
            continue
        total += 1
        try:
            records.append(parse_muscle_row(row))
        except ValueError as e:
            w = DataIntegrityWarning(SOURCE_NAME, n, f"skipped malformed row: {e}")
            logger.warning("%s", w)
            warnings.append(w)
    if total == 0:
        raise LoadFailure("Muscle correlation source is empty")
    if not records:
        raise LoadFailure(f"No usable rows in muscle correlation source ({total} malformed)")
    index = MuscleCorrelationIndex(records, warnings)
    logger.info(
        "Built muscle index: %d heads, %d muscle IDs, %d groups, %d warnings",
        len(index),
        len(index.group_by_muscle_id),
        len(index.mesh_names_by_group),
        len(index.warnings),
    )
    return index
