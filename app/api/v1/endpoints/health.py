"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from app.config import settings
from app.core.redis_client import check_redis_connection
from app.database import check_database_connection

router = APIRouter()

HEALTHY = "healthy"
UNHEALTHY = "unhealthy"


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    version: str
    environment: str


class DetailedHealthResponse(HealthResponse):
    """Health check with the status of storage and cache."""

    database: str
    redis: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Basic health check",
)
async def health_check() -> HealthResponse:
    """Liveness probe; does not touch the database or Redis."""
    return HealthResponse(
        status=HEALTHY,
        service=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )


@router.get(
    "/health/detailed",
    response_model=DetailedHealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Detailed health check",
)
async def detailed_health_check() -> DetailedHealthResponse:
    """
    Readiness probe.

    Reports "degraded" when PostgreSQL or Redis cannot be reached. Without
    Redis the API keeps working uncached; without PostgreSQL every agenda
    operation fails with 503.
    """
    db_healthy = await check_database_connection()
    redis_healthy = await check_redis_connection()

    return DetailedHealthResponse(
        status=HEALTHY if db_healthy and redis_healthy else "degraded",
        service=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        database=HEALTHY if db_healthy else UNHEALTHY,
        redis=HEALTHY if redis_healthy else UNHEALTHY,
    )


@router.get(
    "/ping",
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Simple ping",
)
async def ping() -> dict[str, str]:
    return {"message": "pong"}
