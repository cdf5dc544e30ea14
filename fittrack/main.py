"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fittrack.api.v1 import api_router
from fittrack.core.config import Settings, get_settings
from fittrack.core.errors import RecordDecodeError
from fittrack.core.logging import configure_logging
from fittrack.db.session import Database
from fittrack.services.collaborators import DatabaseRecordChecker
from fittrack.services.live_sessions import LiveSessionRegistry

logger = logging.getLogger(__name__)


def create_application(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: logging, DB handle, live session registry; shutdown: cleanup."""
        configure_logging(settings.log_level)
        database = Database.from_settings(settings)
        # Optional create tables (use Alembic in production)
        if settings.auto_create_tables:
            await database.create_all()
        app.state.settings = settings
        app.state.database = database
        app.state.live_sessions = LiveSessionRegistry()
        app.state.record_checker = DatabaseRecordChecker(database)
        logger.info("%s started (%s)", settings.app_name, settings.environment)
        yield
        app.state.live_sessions.close_all()
        await database.dispose()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # CORS: allow localhost in dev; in production use CORS_ORIGINS env (comma-separated)
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

    @app.exception_handler(RecordDecodeError)
    async def record_decode_error_handler(request: Request, exc: RecordDecodeError):
        return JSONResponse(
            status_code=500,
            content={"detail": f"Stored {exc.entity} is invalid"},
        )

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
