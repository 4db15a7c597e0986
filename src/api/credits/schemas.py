"""Credits API schemas."""

from datetime import datetime

from pydantic import BaseModel

from src.api.core.messages import APIResponse, Paginated


class CreditCheckModel(BaseModel):
    tool: str
    category: str
    allowed: bool
    remaining: int | None
    credits_required: int
    reason: str


class UsageStatsModel(BaseModel):
    period_start: datetime
    period_end: datetime
    plan: str | None
    total_used: int
    by_tool: dict[str, int]
    by_category: dict[str, int]
    remaining_by_category: dict[str, int | None]

    model_config = {"from_attributes": True}


class UsageRecordModel(BaseModel):
    id: str
    tool_name: str
    tool_category: str
    credits_used: int
    success: bool
    vendor: str | None
    created_at: datetime


class SubscriptionModel(BaseModel):
    id: str
    plan: str
    status: str
    category_limits: dict[str, int]
    current_period_start: datetime | None
    current_period_end: datetime | None


# Response Models
CreditCheckResponse = APIResponse[CreditCheckModel]
UsageStatsResponse = APIResponse[UsageStatsModel]
UsageHistoryResponse = APIResponse[Paginated[UsageRecordModel]]
SubscriptionResponse = APIResponse[SubscriptionModel]
