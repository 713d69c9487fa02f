"""Exercise schemas."""

from pydantic import BaseModel, Field

from app.core.enums import FormType, MuscleRole


class ExerciseRead(BaseModel):
    exercise_id: str
    exercise_name: str
    form_type_id: str = Field(..., description="Raw form type code from the export")
    form_type: FormType | None = Field(None, description="None when form_type_id is not 1, 2 or 3")
    muscle_ids: dict[MuscleRole, list[int]] = {}
    muscle_groups: list[str] = []


class ExerciseMuscleGroups(BaseModel):
    exercise_id: str
    muscle_groups: list[str] = []
