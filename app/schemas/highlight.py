"""Highlight schemas for the 3D viewer."""

from typing import Annotated

from pydantic import BaseModel, Field

HexColor = Annotated[str, Field(pattern=r"^#[0-9a-fA-F]{6}$")]


class HighlightRead(BaseModel):
    key: str = Field(..., description="Muscle role or muscle group name")
    color: HexColor
    mesh_names: list[str] = []


class ExerciseHighlights(BaseModel):
    exercise_id: str
    muscle_groups: list[str] = []
    highlights: list[HighlightRead] = []


class GroupHighlightRequest(BaseModel):
    active_groups: list[str] = Field(default_factory=list)
    # group -> "#rrggbb"; defaults to the selector palette
    colors: dict[str, HexColor] | None = None
