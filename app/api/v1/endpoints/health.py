"""Health check endpoint for load balancers and monitoring."""

import logging
import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_catalog
from app.db.session import get_db
from app.services.exercise_catalog import Catalog

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health(catalog: Catalog = Depends(get_catalog)):
    """Liveness plus catalog sizes. Includes built_at if BACKEND_BUILT_AT env is set."""
    payload: dict = {
        "status": "ok",
        "exercises": len(catalog.exercises),
        "muscle_heads": len(catalog.index),
        "data_warnings": len(catalog.all_warnings),
    }
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/warnings")
async def data_warnings(catalog: Catalog = Depends(get_catalog)):
    """Rows skipped or overridden while loading the exports."""
    return [
        {"source": w.source, "row": w.row, "reason": w.reason}
        for w in catalog.all_warnings
    ]


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Readiness: app + DB connectivity."""
    try:
        await db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "connected"}
    except Exception as e:
        logger.exception("Readiness check failed: %s", e)
        return JSONResponse(
            status_code=500,
            content={"status": "error", "database": str(e)},
        )
