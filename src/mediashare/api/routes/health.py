"""Health check endpoints."""

import os
from pathlib import Path

from fastapi import APIRouter, status
from pydantic import BaseModel
from sqlalchemy import text

from mediashare import __version__
from mediashare.config import settings
from mediashare.db.session import engine
from mediashare.logging import get_logger

router = APIRouter(tags=["Health"])
logger = get_logger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""

    ready: bool
    database: bool
    media_storage: bool


def _database_reachable() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("database_health_check_failed", error=str(e))
        return False
    return True


def _media_storage_writable() -> bool:
    # Only downloads touch the filesystem; URL references need nothing
    if not settings.media_download_enabled:
        return True
    path = Path(settings.media_storage_path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("media_storage_health_check_failed", path=str(path), error=str(e))
        return False
    return os.access(path, os.W_OK)


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Basic health check endpoint that verifies the API is running.",
)
async def health_check() -> HealthResponse:
    """Is the API up?"""
    return HealthResponse(status="healthy", version=__version__)


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Verifies the database is reachable and media storage is writable.",
)
def readiness_check() -> ReadinessResponse:
    database_ok = _database_reachable()
    storage_ok = _media_storage_writable()
    return ReadinessResponse(
        ready=database_ok and storage_ok,
        database=database_ok,
        media_storage=storage_ok,
    )


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    description="Simple liveness probe for Kubernetes.",
)
async def liveness_check() -> dict[str, str]:
    """Kubernetes liveness probe - is the process alive?"""
    return {"status": "alive"}
