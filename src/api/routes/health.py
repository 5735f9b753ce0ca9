"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from core.config import settings
from infrastructure.database.session import async_session_factory

router = APIRouter(tags=["health"])

VERSION = "0.1.0"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    backend: str
    database: str | None = None


@router.get("/", summary="Root greeting")
async def root() -> str:
    """Plain greeting, handy for smoke checks."""
    return "Hello, World!"


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """Service status without touching the storage backend."""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        backend=settings.repository_backend,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check() -> HealthResponse:
    """
    Health check including database connectivity.

    With the in-memory backend there is no database to check.
    """
    db_status: str | None = None
    if settings.repository_backend == "database":
        try:
            async with async_session_factory() as session:
                await session.execute(text("SELECT 1"))
            db_status = "healthy"
        except (SQLAlchemyError, OSError) as e:
            db_status = f"unhealthy: {e}"

    overall_status = "healthy" if db_status in (None, "healthy") else "degraded"

    return HealthResponse(
        status=overall_status,
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        backend=settings.repository_backend,
        database=db_status,
    )
