"""Muscle and muscle group schemas."""

from pydantic import BaseModel, ConfigDict, Field


class MuscleHeadRead(BaseModel):
    """One head from the correlation table (also the answer for a tapped mesh)."""

    model_config = ConfigDict(from_attributes=True)
    muscle_id: int
    muscle_name: str
    muscle_group: str
    muscle_group_id: int | None = None
    head_type: str = ""
    head_type_id: int
    unique_head: str = ""
    unique_head_id: int
    chirality: str = ""
    mesh_reference_name: str


class MuscleRead(BaseModel):
    muscle_id: int
    muscle_group: str
    mesh_names: list[str] = []
    heads: list[MuscleHeadRead] = []


class MuscleGroupRead(BaseModel):
    name: str
    color: str | None = Field(None, max_length=7)
    mesh_count: int = 0


class MuscleGroupMeshes(BaseModel):
    name: str
    mesh_names: list[str] = []


class HeadTypeMeshes(BaseModel):
    head_type_id: int
    mesh_names: list[str] = []
