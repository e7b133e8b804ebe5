"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter
from sqlalchemy import text

from brain.config.settings import settings
from brain.shared.schemas.common import HealthResponse
from brain.api.dependencies import DbSession


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check(db: DbSession):
    """
    Readiness check for Kubernetes/load balancers.

    Runs SELECT 1 against the database. A failure surfaces as a 500
    through the global exception handler.
    """
    await db.execute(text("SELECT 1"))
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """
    Liveness check for Kubernetes.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
