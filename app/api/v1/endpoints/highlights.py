"""Group highlights for the browser's active muscle groups."""

from fastapi import APIRouter, Depends

from app.api.deps import get_catalog
from app.core.constants import DEFAULT_GROUP_COLORS
from app.schemas.highlight import GroupHighlightRequest, HighlightRead
from app.services.exercise_catalog import Catalog
from app.services.highlights import build_group_highlights

router = APIRouter()


@router.post("/groups", response_model=list[HighlightRead])
async def highlight_groups(
    payload: GroupHighlightRequest,
    catalog: Catalog = Depends(get_catalog),
):
    """One mesh set per active group, colored from the request or the default palette."""
    colors = {**DEFAULT_GROUP_COLORS, **(payload.colors or {})}
    return [
        HighlightRead(key=h.key, color=h.color, mesh_names=sorted(h.mesh_names))
        for h in build_group_highlights(payload.active_groups, catalog.index, colors)
    ]
