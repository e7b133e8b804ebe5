"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live                 → Health check endpoints
    {API_PREFIX}/signup, /signin           → Authentication
    {API_PREFIX}/content, /contents,
                 /delete-content/{id}      → Content (owner only)
    {API_PREFIX}/brain/share,
                 /brain/{share_link}       → Share links

Usage:
======
    from brain.api.routes import register_routes

    app = FastAPI()
    register_routes(app, prefix="/api/v1")
"""

from fastapi import FastAPI

from brain.shared.schemas.common import ErrorResponse

from brain.api.handlers import (
    auth_handler,
    content_handler,
    brain_handler,
    health_handler,
)


# Documented error envelope for business endpoints
ERROR_RESPONSES = {
    status_code: {"model": ErrorResponse}
    for status_code in (400, 401, 403, 404, 409, 500)
}


def register_routes(app: FastAPI, prefix: str) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
        prefix: Path prefix for business endpoints (e.g. "/api/v1")
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        auth_handler.router,
        prefix=prefix,
        responses=ERROR_RESPONSES,
        tags=["Authentication"],
    )

    app.include_router(
        content_handler.router,
        prefix=prefix,
        responses=ERROR_RESPONSES,
        tags=["Content"],
    )

    app.include_router(
        brain_handler.router,
        prefix=prefix,
        responses=ERROR_RESPONSES,
        tags=["Brain"],
    )
