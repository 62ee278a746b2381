"""
Health check API routes
"""
import time
from datetime import datetime
from fastapi import APIRouter, status
from typing import Dict, Any

from pccompat.core.config import settings
from pccompat.core.cache import cache
from pccompat.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

# Store application start time for uptime calculation
start_time = time.time()


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns health status of the service and its result cache"
)
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint
    """
    request_start = time.time()

    try:
        response_data: Dict[str, Any] = {
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "version": settings.version,
            "service": settings.app_name,
            "environment": "development" if settings.debug else "production",
            "uptime_seconds": round(time.time() - start_time, 1),
            "cache": await cache.health_check(),
        }
        response_data["response_time_ms"] = round((time.time() - request_start) * 1000, 2)
        return response_data

    except Exception as e:
        logger.error(f"Health check failed: {e}", exc_info=True)
        return {
            "status": "unhealthy",
            "timestamp": datetime.utcnow().isoformat(),
            "version": settings.version,
            "service": settings.app_name,
            "response_time_ms": round((time.time() - request_start) * 1000, 2),
            "error": str(e) if settings.debug else "Internal error"
        }
