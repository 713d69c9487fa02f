"""Shared request dependencies."""

from fastapi import Request

from app.services.exercise_catalog import Catalog


def get_catalog(request: Request) -> Catalog:
    """Catalog built in the app lifespan (read-only, shared by all requests)."""
    return request.app.state.catalog
