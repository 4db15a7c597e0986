"""Health check endpoints for monitoring."""

from fastapi import APIRouter, Request

from src.api.core.dependencies import AsyncSessionDep, VendorGatewayDep
from src.modules.health.service import HealthService, OverallHealthStatus

root_router = APIRouter()
router = APIRouter(prefix="/health", tags=["health"])


@root_router.get("/")
async def root(request: Request):
    """Service banner."""
    return {"service": "toolkitforseo-api", "version": request.app.version}


@router.get("/")
async def health_check(
    db: AsyncSessionDep,
    gateway: VendorGatewayDep,
) -> OverallHealthStatus:
    """Database connectivity and vendor credential checks."""
    health_service = HealthService(db, gateway)
    return await health_service.run_all_checks()


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive", "service": "toolkitforseo-api"}
