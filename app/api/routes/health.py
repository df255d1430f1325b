"""Health check endpoints.

``/health`` and ``/health/live`` never touch the database; ``/health/ready``
pings it and reports ``degraded`` instead of failing when it is unreachable.
"""

from fastapi import APIRouter
from sqlalchemy import text

from app import __version__
from app.api.deps import DbSession
from app.config import settings
from app.infra.logging import get_logger
from app.schemas.common import HealthResponse

router = APIRouter()
logger = get_logger(__name__)


def _report(checks: dict[str, bool]) -> HealthResponse:
    return HealthResponse(
        status="healthy" if all(checks.values()) else "degraded",
        version=__version__,
        environment=settings.environment,
        checks=checks,
    )


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return _report({})


@router.get("/health/live", response_model=HealthResponse)
async def health_live() -> HealthResponse:
    return _report({"alive": True})


@router.get("/health/ready", response_model=HealthResponse)
async def health_ready(db: DbSession) -> HealthResponse:
    """Readiness: the service can reach its database."""
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database readiness check failed", error=str(e))
        await db.rollback()
        return _report({"database": False})
    return _report({"database": True})
