"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import api_router
from app.core.config import get_settings
from app.db.session import engine
from app.services.exercise_catalog import Catalog, load_catalog

settings = get_settings()
logger = logging.getLogger(__name__)


def create_application(catalog: Catalog | None = None) -> FastAPI:
    """Build the app. Pass `catalog` to skip reading the CSV exports (tests, tooling)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: build the catalog once (LoadFailure aborts startup); shutdown: dispose the engine."""
        app.state.catalog = catalog or load_catalog(
            settings.muscle_correlations_path, settings.exercise_data_path
        )
        yield
        await engine.dispose()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # CORS: allow everything in debug; in production use CORS_ORIGINS env (comma-separated)
    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
