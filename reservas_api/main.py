import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from reservas_api.config import Settings, settings as default_settings
from reservas_api.database import Database
from reservas_api.errors import ApiError, api_error_handler, validation_error_handler
from reservas_api.middleware.audit import AuditMiddleware
from reservas_api.routes import api_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None, database: Optional[Database] = None
) -> FastAPI:
    """
    Build the API. The database is created once here and shared by every
    request through app.state.
    """
    settings = settings or default_settings
    database = database or Database(settings.db_url, echo=settings.sql_echo)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.api_title} v{settings.api_version} ({settings.environment})")
        database.connect()
        if settings.create_tables_on_startup:
            database.create_tables()
        yield
        database.dispose()
        logger.info(f"Shutting down {settings.api_title}")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description=settings.api_description,
        docs_url=settings.docs_url,
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # Middlewares
    app.add_middleware(
        AuditMiddleware,
        excluded_paths={settings.docs_url, "/redoc", "/openapi.json", "/health"},
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    @app.get("/")
    async def root():
        """Service information"""
        return {
            "message": f"{settings.api_title} is running",
            "version": settings.api_version,
            "docs": settings.docs_url,
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring"""
        return {"status": "Alive"}

    # Routers
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()
