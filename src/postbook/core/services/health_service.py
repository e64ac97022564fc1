"""Health service implementation."""

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..cache import ResponseCache
from ..redis_client import get_redis_client
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, session: AsyncSession, cache: Optional[ResponseCache] = None):
        self.session = session
        self.cache = cache
        self.settings = get_settings()

    async def get_health_status(self) -> HealthCheckResponse:
        """Overall status follows the database; Redis is optional."""
        db_health = await self.check_database_health()
        redis_health = await self.check_redis_health()

        checks = {"database": db_health, "redis": redis_health}
        if self.cache is not None:
            checks["response_cache"] = {"status": "healthy", **self.cache.stats()}

        return HealthCheckResponse(
            status="healthy" if db_health["connected"] else "unhealthy",
            timestamp=datetime.now(timezone.utc),
            version=self.settings.app_version,
            checks=checks,
        )

    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        start_time = time.perf_counter()
        try:
            result = await self.session.execute(text("SELECT 1"))
            result.scalar()
        except SQLAlchemyError as e:
            return {
                "connected": False,
                "status": "unhealthy",
                "error": str(e),
                "response_time_ms": 0.0,
            }

        return {
            "connected": True,
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
        }

    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        redis_client = get_redis_client()
        start_time = time.perf_counter()
        if not await redis_client.ping():
            return {
                "connected": False,
                "status": "unavailable",
                "response_time_ms": None,
            }

        return {
            "connected": True,
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
        }
