"""Credit metering decorator for tool endpoints."""

from functools import wraps
from typing import Any

from fastapi import status

from src.api.core.exceptions.base import ToolkitException
from src.api.core.messages import MessageCode
from src.api.tools.schemas import ToolRequest
from src.core.context import AuthenticatedUserContext
from src.modules.credits.meter import CreditMeter, Reservation
from src.modules.tools.service import ToolService
from src.utils.logger import get_logger

logger = get_logger(__name__)


def _find(kind: type, args: tuple, kwargs: dict[str, Any]) -> Any:
    for value in (*args, *kwargs.values()):
        if isinstance(value, kind):
            return value
    return None


def _recorded_vendor(
    tool_service: ToolService | None, body: ToolRequest | None
) -> str | None:
    if body is None:
        return None
    if tool_service is None:
        return body.vendor.value if body.vendor else None
    return tool_service.gateway.resolve_vendor(body.vendor).value


async def _settle(
    meter: CreditMeter, reservation: Reservation, success: bool, vendor: str | None
) -> None:
    # A ledger write failure must not change what the caller receives
    try:
        record = await meter.settle(reservation, success=success, vendor=vendor)
    except Exception as e:
        logger.error(
            "Failed to record tool usage",
            tool_name=reservation.tool_name,
            success=success,
            error=str(e),
            error_type=type(e).__name__,
        )
        return

    logger.info(
        "Recorded tool usage",
        tool_name=reservation.tool_name,
        success=success,
        credits_used=record.credits_used,
    )


def metered(tool_name: str):
    """
    Decorator that charges a tool call against the subscriber's allowance.

    The endpoint must declare a ``CreditMeter`` and the authenticated user
    context among its parameters.

    The decorator will:
    1. Reserve the tool's credits, or raise ``InsufficientCreditsError`` (402)
    2. Execute the endpoint
    3. Settle the reservation as a success or failure usage record
    4. Re-raise any endpoint exception unchanged
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            meter = _find(CreditMeter, args, kwargs)
            current_user = _find(AuthenticatedUserContext, args, kwargs)
            body = _find(ToolRequest, args, kwargs)
            tool_service = _find(ToolService, args, kwargs)

            if meter is None:
                raise ToolkitException(
                    MessageCode.INTERNAL_SERVER_ERROR,
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    details={"description": "Metered endpoint requires CreditMeter"},
                )
            if current_user is None:
                raise ToolkitException(
                    MessageCode.AUTH_REQUIRED, status.HTTP_401_UNAUTHORIZED
                )

            vendor = _recorded_vendor(tool_service, body)
            reservation = await meter.reserve(current_user.user.id, tool_name)

            try:
                result = await func(*args, **kwargs)
            except Exception:
                await _settle(meter, reservation, success=False, vendor=vendor)
                raise

            await _settle(meter, reservation, success=True, vendor=vendor)
            return result

        return wrapper

    return decorator
