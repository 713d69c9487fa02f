"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    exercises,
    health,
    highlights,
    muscles,
    sets,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(muscles.router, prefix="/muscles", tags=["muscles"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(highlights.router, prefix="/highlights", tags=["highlights"])
api_router.include_router(sets.router, prefix="/sets", tags=["sets"])
