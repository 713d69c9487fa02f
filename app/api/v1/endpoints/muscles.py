"""Muscle lookups backed by the correlation index."""

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_catalog
from app.core.constants import DEFAULT_GROUP_COLORS
from app.schemas.muscle import HeadTypeMeshes, MuscleGroupMeshes, MuscleGroupRead, MuscleHeadRead, MuscleRead
from app.services.exercise_catalog import Catalog

router = APIRouter()


@router.get("/groups", response_model=list[MuscleGroupRead])
async def list_muscle_groups(catalog: Catalog = Depends(get_catalog)):
    """Every group in the correlation table with its palette color."""
    index = catalog.index
    return [
        MuscleGroupRead(
            name=g,
            color=DEFAULT_GROUP_COLORS.get(g),
            mesh_count=len(index.mesh_names_for_group(g)),
        )
        for g in index.groups
    ]


@router.get("/groups/{group}/meshes", response_model=MuscleGroupMeshes)
async def get_group_meshes(group: str, catalog: Catalog = Depends(get_catalog)):
    """Mesh names for every head classified under a group (empty for unknown groups)."""
    return MuscleGroupMeshes(name=group, mesh_names=sorted(catalog.index.mesh_names_for_group(group)))


@router.get("/heads/{head_type_id}/meshes", response_model=HeadTypeMeshes)
async def get_head_type_meshes(head_type_id: int, catalog: Catalog = Depends(get_catalog)):
    """Mesh names for one head of a muscle (every side of it)."""
    meshes = catalog.index.mesh_names_for_head_type_ids([head_type_id])
    if not meshes:
        raise HTTPException(status_code=404, detail="Head type not found")
    return HeadTypeMeshes(head_type_id=head_type_id, mesh_names=sorted(meshes))


@router.get("/meshes/{mesh_name}", response_model=MuscleHeadRead)
async def get_mesh(mesh_name: str, catalog: Catalog = Depends(get_catalog)):
    """Which muscle head a mesh node belongs to."""
    record = catalog.index.record_for_mesh(mesh_name)
    if record is None:
        raise HTTPException(status_code=404, detail="Mesh not found")
    return record


@router.get("/{muscle_id}", response_model=MuscleRead)
async def get_muscle(muscle_id: int, catalog: Catalog = Depends(get_catalog)):
    """Group, mesh names and heads for a muscle ID."""
    index = catalog.index
    group = index.group_for(muscle_id)
    if group is None:
        raise HTTPException(status_code=404, detail="Muscle not found")
    return MuscleRead(
        muscle_id=muscle_id,
        muscle_group=group,
        mesh_names=sorted(index.mesh_names_for_muscle_ids([muscle_id])),
        heads=[MuscleHeadRead.model_validate(r) for r in index.records if r.muscle_id == muscle_id],
    )
