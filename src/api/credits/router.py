"""Credits domain router."""

from fastapi import APIRouter, Query, status

from src.api.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from src.api.core.dependencies import CreditMeterDep, CurrentUserAuthDep
from src.api.core.exceptions.base import ToolkitException
from src.api.core.messages import APIResponse, MessageCode, Paginated, PaginationInfo
from .schemas import (
    CreditCheckModel,
    CreditCheckResponse,
    SubscriptionModel,
    SubscriptionResponse,
    UsageHistoryResponse,
    UsageRecordModel,
    UsageStatsModel,
    UsageStatsResponse,
)

router = APIRouter(
    prefix="/credits",
    tags=["credits"],
)


@router.get("/check", response_model=CreditCheckResponse)
async def check_credits(
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool: str = Query(..., min_length=1, max_length=100),
) -> CreditCheckResponse:
    """Whether the subscriber can run ``tool`` now. Does not consume credits."""
    result = await meter.authorize(current_user.user.id, tool)
    return APIResponse.success(
        data=CreditCheckModel(
            tool=result.tool_name,
            category=result.tool_category,
            allowed=result.allowed,
            remaining=result.remaining,
            credits_required=result.credits_required,
            reason=result.reason,
        )
    )


@router.get("/usage", response_model=UsageStatsResponse)
async def get_usage_stats(
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
) -> UsageStatsResponse:
    """Current-month consumption by tool and category."""
    stats = await meter.get_usage_stats(current_user.user.id)
    return APIResponse.success(data=UsageStatsModel.model_validate(stats))


@router.get("/history", response_model=UsageHistoryResponse)
async def get_usage_history(
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
) -> UsageHistoryResponse:
    """Usage records, newest first."""
    records, total = await meter.list_usage(current_user.user.id, limit, offset)
    items = [
        UsageRecordModel(
            id=str(record.id),
            tool_name=record.tool_name,
            tool_category=record.tool_category,
            credits_used=record.credits_used,
            success=record.success,
            vendor=record.vendor,
            created_at=record.created_at,
        )
        for record in records
    ]
    pagination_info = PaginationInfo(
        total=total,
        limit=limit,
        offset=offset,
        has_more=offset + len(items) < total,
    )
    return APIResponse.success(
        data=Paginated[UsageRecordModel](items=items, pagination=pagination_info)
    )


@router.get("/subscription", response_model=SubscriptionResponse)
async def get_subscription(
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
) -> SubscriptionResponse:
    """Active subscription and its per-category monthly limits."""
    subscription = await meter.get_active_subscription(current_user.user.id)
    if subscription is None:
        raise ToolkitException(
            MessageCode.SUBSCRIPTION_NOT_FOUND, status.HTTP_404_NOT_FOUND
        )

    return APIResponse.success(
        data=SubscriptionModel(
            id=str(subscription.id),
            plan=subscription.plan,
            status=subscription.status,
            category_limits=subscription.category_limits,
            current_period_start=subscription.current_period_start,
            current_period_end=subscription.current_period_end,
        )
    )
