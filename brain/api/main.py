"""
Brain API entry point.

    create_application(config)
       ├── RequestContextMiddleware   request_id + access log
       ├── CORSMiddleware             outermost
       ├── exception handlers         one JSON error envelope
       └── routers                    /health /ready /live, {API_PREFIX}/...

Startup builds the TokenService first, so an unusable signing secret stops
the process before it serves traffic. It then checks the database with
SELECT 1. Shutdown disposes the connection pool.

Run:
    uvicorn brain.api.main:app --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brain.config.settings import Settings, settings
from brain.shared.db import init_db, close_db
from brain.shared.core.logging import logger
from brain.api.dependencies.services import get_token_service
from brain.api.middleware import RequestContextMiddleware, setup_exception_handlers
from brain.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Build the token service (ConfigurationError aborts startup)
    - Check the database connection

    Shutdown:
    - Close database connections
    """
    logger.info(
        "Starting Brain API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    get_token_service()
    await init_db()

    logger.info("Brain API started successfully")

    yield

    logger.info("Shutting down Brain API")
    await close_db()
    logger.info("Brain API shutdown complete")


def create_application(config: Settings = settings) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Application settings

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=config.APP_NAME,
        description="Second brain: save links, tag them, share them",
        version=config.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if config.DEBUG else None,
        redoc_url="/redoc" if config.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(RequestContextMiddleware)

    # CORS is added last so it wraps everything else
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app, prefix=config.API_PREFIX)

    return app


# Create the application instance
app = create_application()
