import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.modules.vendors.gateway import VendorGateway
from src.utils.logger import get_logger

logger = get_logger(__name__)

HealthStatus = Literal["healthy", "degraded", "unhealthy"]


@dataclass
class HealthCheckResult:
    """Result of a health check."""

    service: str
    status: HealthStatus
    connected: bool
    details: dict
    error: str | None = None


@dataclass
class OverallHealthStatus:
    """Overall health status with individual service results."""

    status: HealthStatus
    services: dict[str, HealthCheckResult]
    timestamp: str


class HealthService:
    """Checks the database and AI vendor configuration."""

    def __init__(self, db: AsyncSession, gateway: VendorGateway):
        self.db = db
        self.gateway = gateway

    async def check_database_health(self) -> HealthCheckResult:
        try:
            result = await self.db.execute(text("SELECT 1"))
            return HealthCheckResult(
                service="database",
                status="healthy",
                connected=True,
                details={"test_query_result": result.scalar()},
            )
        except Exception as e:
            logger.error(f"Database health check error: {e}")
            return HealthCheckResult(
                service="database",
                status="unhealthy",
                connected=False,
                details={},
                error=str(e),
            )

    async def check_vendor_configuration(self) -> HealthCheckResult:
        """No network call: only reports which vendors have credentials."""
        configured = self.gateway.configured_vendors()
        default_vendor = self.gateway.config.default_vendor

        if not configured:
            status: HealthStatus = "unhealthy"
        elif default_vendor not in configured:
            status = "degraded"
        else:
            status = "healthy"

        return HealthCheckResult(
            service="vendors",
            status=status,
            connected=bool(configured),
            details={"configured": configured, "default": default_vendor},
        )

    async def run_all_checks(self) -> OverallHealthStatus:
        results = await asyncio.gather(
            self.check_database_health(),
            self.check_vendor_configuration(),
        )

        overall_status: HealthStatus = "healthy"
        for result in results:
            if result.status == "unhealthy":
                overall_status = "unhealthy"
            elif result.status == "degraded" and overall_status == "healthy":
                overall_status = "degraded"

        return OverallHealthStatus(
            status=overall_status,
            services={result.service: result for result in results},
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
