from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions.base import ToolkitException
from src.api.core.messages import MessageCode
from src.core.config import AppConfig
from src.core.context import AuthenticatedUserContext
from src.modules.credits.meter import CreditMeter
from src.modules.tools.service import ToolService
from src.modules.vendors.gateway import VendorGateway


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


def get_app_config(request: Request) -> AppConfig:
    """Configuration frozen at startup by the lifespan hook."""
    return request.app.state.config


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
AppConfigDep = Annotated[AppConfig, Depends(get_app_config)]


async def get_credit_meter(db: AsyncSessionDep, config: AppConfigDep) -> CreditMeter:
    """Get credit meter bound to the request session and failed-attempt policy."""
    return CreditMeter(db, charge_failed_attempts=config.credits.charge_failed_attempts)


async def get_vendor_gateway(config: AppConfigDep) -> VendorGateway:
    return VendorGateway(config.vendors)


async def get_tool_service(
    gateway: Annotated[VendorGateway, Depends(get_vendor_gateway)],
) -> ToolService:
    return ToolService(gateway)


async def get_current_user_authenticated(request: Request) -> AuthenticatedUserContext:
    """Dependency to get the subscriber resolved by the auth middleware."""
    user = getattr(request.state, "user", None)
    if not user:
        raise ToolkitException(MessageCode.AUTH_REQUIRED, status.HTTP_401_UNAUTHORIZED)

    return AuthenticatedUserContext(
        user=user, claims=getattr(request.state, "claims", None) or {}
    )


CreditMeterDep = Annotated[CreditMeter, Depends(get_credit_meter)]
VendorGatewayDep = Annotated[VendorGateway, Depends(get_vendor_gateway)]
ToolServiceDep = Annotated[ToolService, Depends(get_tool_service)]

CurrentUserAuthDep = Annotated[
    AuthenticatedUserContext, Depends(get_current_user_authenticated)
]
