from datetime import datetime, timezone
import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from product_api.database import engine
from product_api.utils.cache import get_cache_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "/",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check if the database (and Redis, when configured) is ready."
)
def readiness_check():
    """
    Readiness check for all dependencies.

    Returns status of:
    - Database connection
    - Redis connection (reported as "disabled" when caching is off)
    """
    checks = {"database": False}

    # Check database
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            checks["database"] = True
    except SQLAlchemyError as e:
        logger.error(f"Database readiness check failed: {e}")
        checks["database_error"] = str(e)

    # Check Redis
    cache = get_cache_service()
    if cache is None:
        checks["redis"] = "disabled"
        redis_ok = True
    else:
        redis_ok = cache.ping()
        checks["redis"] = redis_ok

    all_healthy = checks["database"] and redis_ok

    return {
        "status": "ready" if all_healthy else "not_ready",
        "checks": checks
    }
