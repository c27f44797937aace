"""
FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from pghostel.api.router import router as api_router
from pghostel.config.logging import setup_logging
from pghostel.config.settings import Settings, settings as default_settings
from pghostel.core.error_handling import register_exception_handlers
from pghostel.core.logging import get_logger
from pghostel.core.middleware import register_middlewares
from pghostel.db.init_db import init_db
from pghostel.db.session import build_engine, build_session_factory
from pghostel.repositories import FacilitySettingsRepository
from pghostel.services.hostel import FacilitySettingsService

logger = get_logger(__name__)


def create_app(engine: Optional[Engine] = None, settings: Settings = default_settings) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the API router under API_PREFIX (/api).
    - On startup creates missing tables and seeds the settings record.

    Args:
        engine: Engine to use instead of one built from DATABASE_URL
        settings: Application settings
    """
    setup_logging(settings)

    owns_engine = engine is None
    engine = engine or build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        init_db(app.state.engine)
        with app.state.session_factory() as db:
            FacilitySettingsService(FacilitySettingsRepository(db), db).ensure_defaults()
        logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")
        yield
        if owns_engine:
            app.state.engine.dispose()

    app = FastAPI(
        lifespan=lifespan,
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    origins = settings.get_cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pghostel.main:app", host=default_settings.HOST, port=default_settings.PORT)
