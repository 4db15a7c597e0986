"""Monthly credit metering for tool calls.

Usage records are the only source of truth for consumption: the credits used
in a period are always summed from ``usage_records``. ``authorize`` is a pure
read. ``reserve`` closes the gap between checking and recording by locking the
subscriber's active subscription row, re-checking the allowance including open
holds, and writing a ``CreditHold`` in the same transaction. ``settle`` swaps
the hold for the final usage record.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable
from uuid import UUID

from sqlalchemy import and_, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.base import BaseService
from src.core.exceptions import InsufficientCreditsError
from src.database.models import (
    CreditHold,
    Subscription,
    SubscriptionStatus,
    UsageRecord,
)

from .catalog import get_tool_category, get_tool_credit_cost
from .plans import is_unlimited

NO_ACTIVE_SUBSCRIPTION = "no active subscription"
UNLIMITED_PLAN = "unlimited plan"
CREDITS_AVAILABLE = "credits available"

# Holds older than this are treated as abandoned and no longer count
CREDIT_HOLD_TTL = timedelta(minutes=5)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def current_period_window(now: datetime | None = None) -> tuple[datetime, datetime]:
    """Calendar month containing ``now``: inclusive start, exclusive end (UTC)."""
    now = (now or utc_now()).astimezone(timezone.utc)
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


@dataclass(frozen=True)
class AuthorizationResult:
    allowed: bool
    # None when the plan is unlimited for the tool's category
    remaining: int | None
    reason: str
    tool_name: str
    tool_category: str
    credits_required: int
    limit: int | None = None


@dataclass(frozen=True)
class Reservation:
    hold_id: UUID
    subscriber_id: UUID
    tool_name: str
    tool_category: str
    credits: int
    remaining: int | None


@dataclass
class UsageStats:
    period_start: datetime
    period_end: datetime
    plan: str | None
    total_used: int
    by_tool: dict[str, int] = field(default_factory=dict)
    by_category: dict[str, int] = field(default_factory=dict)
    remaining_by_category: dict[str, int | None] = field(default_factory=dict)


class CreditMeter(BaseService):
    """Pre-flight authorization and usage ledger for metered tools."""

    def __init__(
        self,
        db: AsyncSession,
        charge_failed_attempts: bool = True,
        clock: Callable[[], datetime] = utc_now,
    ):
        super().__init__(db)
        self.charge_failed_attempts = charge_failed_attempts
        self._clock = clock

    async def authorize(
        self,
        subscriber_id: UUID,
        tool_name: str,
        credits_required: int | None = None,
    ) -> AuthorizationResult:
        """Check whether ``tool_name`` may run. Never writes."""
        subscription = await self.get_active_subscription(subscriber_id)
        return await self._evaluate(
            subscriber_id, subscription, tool_name, credits_required
        )

    async def reserve(
        self,
        subscriber_id: UUID,
        tool_name: str,
        credits_required: int | None = None,
    ) -> Reservation:
        """Atomically authorize and hold credits for one tool call.

        Raises:
            InsufficientCreditsError: when the allowance cannot cover the call.
        """
        subscription = await self.get_active_subscription(
            subscriber_id, for_update=True
        )
        await self._purge_expired_holds(subscriber_id)
        result = await self._evaluate(
            subscriber_id, subscription, tool_name, credits_required
        )
        if not result.allowed:
            # Nothing was written; ending the transaction releases the row lock
            await self.db.commit()
            self.logger.info(
                "Credit reservation denied",
                subscriber_id=str(subscriber_id),
                tool_name=tool_name,
                reason=result.reason,
                remaining=result.remaining,
            )
            raise InsufficientCreditsError(result)

        hold = CreditHold(
            user_id=subscriber_id,
            subscription_id=subscription.id,
            tool_name=tool_name,
            tool_category=result.tool_category,
            credits=result.credits_required,
            created_at=self._clock(),
        )
        self.db.add(hold)
        await self.db.commit()

        return Reservation(
            hold_id=hold.id,
            subscriber_id=subscriber_id,
            tool_name=tool_name,
            tool_category=result.tool_category,
            credits=result.credits_required,
            remaining=result.remaining,
        )

    async def settle(
        self,
        reservation: Reservation,
        success: bool,
        vendor: str | None = None,
    ) -> UsageRecord:
        """Replace the hold with the final usage record in one transaction."""
        hold = await self.db.get(CreditHold, reservation.hold_id)
        if hold is not None:
            await self.db.delete(hold)

        record = self._build_record(
            subscriber_id=reservation.subscriber_id,
            tool_name=reservation.tool_name,
            tool_category=reservation.tool_category,
            credits_used=reservation.credits,
            success=success,
            vendor=vendor,
        )
        self.db.add(record)
        await self.db.commit()
        return record

    async def record(
        self,
        subscriber_id: UUID,
        tool_name: str,
        tool_category: str | None = None,
        credits_used: int | None = None,
        success: bool = True,
        vendor: str | None = None,
    ) -> UsageRecord:
        """Append one usage record. Write failures propagate to the caller."""
        record = self._build_record(
            subscriber_id=subscriber_id,
            tool_name=tool_name,
            tool_category=tool_category or get_tool_category(tool_name),
            credits_used=(
                credits_used
                if credits_used is not None
                else get_tool_credit_cost(tool_name)
            ),
            success=success,
            vendor=vendor,
        )
        self.db.add(record)
        await self.db.commit()
        return record

    async def get_active_subscription(
        self, subscriber_id: UUID, for_update: bool = False
    ) -> Subscription | None:
        """Most recent active subscription for a subscriber."""
        stmt = (
            select(Subscription)
            .where(
                and_(
                    Subscription.user_id == subscriber_id,
                    Subscription.status == SubscriptionStatus.ACTIVE.value,
                )
            )
            .order_by(Subscription.created_at.desc())
            .limit(1)
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_usage_stats(self, subscriber_id: UUID) -> UsageStats:
        """Current-month consumption by tool and category."""
        period_start, period_end = current_period_window(self._clock())
        stmt = (
            select(
                UsageRecord.tool_name,
                UsageRecord.tool_category,
                func.sum(UsageRecord.credits_used),
            )
            .where(
                and_(
                    UsageRecord.user_id == subscriber_id,
                    UsageRecord.created_at >= period_start,
                    UsageRecord.created_at < period_end,
                )
            )
            .group_by(UsageRecord.tool_name, UsageRecord.tool_category)
        )
        result = await self.db.execute(stmt)

        by_tool: dict[str, int] = {}
        by_category: dict[str, int] = {}
        for tool_name, tool_category, used in result.all():
            used = int(used or 0)
            by_tool[tool_name] = by_tool.get(tool_name, 0) + used
            by_category[tool_category] = by_category.get(tool_category, 0) + used

        subscription = await self.get_active_subscription(subscriber_id)
        remaining_by_category: dict[str, int | None] = {}
        if subscription:
            # Open holds count against the allowance, as in authorize
            held = await self._held_by_category(subscriber_id)
            for category, limit in subscription.category_limits.items():
                if is_unlimited(limit):
                    remaining_by_category[category] = None
                else:
                    remaining_by_category[category] = (
                        limit - by_category.get(category, 0) - held.get(category, 0)
                    )

        return UsageStats(
            period_start=period_start,
            period_end=period_end,
            plan=subscription.plan if subscription else None,
            total_used=sum(by_category.values()),
            by_tool=by_tool,
            by_category=by_category,
            remaining_by_category=remaining_by_category,
        )

    async def list_usage(
        self, subscriber_id: UUID, limit: int = 50, offset: int = 0
    ) -> tuple[list[UsageRecord], int]:
        """Usage records newest first, with the total count for pagination."""
        count_stmt = select(func.count(UsageRecord.id)).where(
            UsageRecord.user_id == subscriber_id
        )
        total = (await self.db.execute(count_stmt)).scalar() or 0

        stmt = (
            select(UsageRecord)
            .where(UsageRecord.user_id == subscriber_id)
            .order_by(UsageRecord.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all()), int(total)

    async def _evaluate(
        self,
        subscriber_id: UUID,
        subscription: Subscription | None,
        tool_name: str,
        credits_required: int | None,
    ) -> AuthorizationResult:
        required = (
            credits_required
            if credits_required is not None
            else get_tool_credit_cost(tool_name)
        )
        if required < 0:
            raise ValueError("credits_required must not be negative")
        category = get_tool_category(tool_name)

        if subscription is None:
            return AuthorizationResult(
                allowed=False,
                remaining=0,
                reason=NO_ACTIVE_SUBSCRIPTION,
                tool_name=tool_name,
                tool_category=category,
                credits_required=required,
            )

        limit = int(subscription.category_limits.get(category, 0))
        if is_unlimited(limit):
            return AuthorizationResult(
                allowed=True,
                remaining=None,
                reason=UNLIMITED_PLAN,
                tool_name=tool_name,
                tool_category=category,
                credits_required=required,
            )

        used = await self._used_credits(subscriber_id, category)
        held = await self._held_credits(subscriber_id, category)
        remaining = limit - used - held

        if remaining >= required:
            reason = CREDITS_AVAILABLE
        else:
            reason = (
                f"Insufficient credits. You have {remaining} credits remaining, "
                f"but need {required} for {tool_name}"
            )
        return AuthorizationResult(
            allowed=remaining >= required,
            remaining=remaining,
            reason=reason,
            tool_name=tool_name,
            tool_category=category,
            credits_required=required,
            limit=limit,
        )

    async def _used_credits(self, subscriber_id: UUID, category: str) -> int:
        period_start, period_end = current_period_window(self._clock())
        stmt = select(func.coalesce(func.sum(UsageRecord.credits_used), 0)).where(
            and_(
                UsageRecord.user_id == subscriber_id,
                UsageRecord.tool_category == category,
                UsageRecord.created_at >= period_start,
                UsageRecord.created_at < period_end,
            )
        )
        result = await self.db.execute(stmt)
        return int(result.scalar() or 0)

    async def _purge_expired_holds(self, subscriber_id: UUID) -> None:
        stmt = (
            delete(CreditHold)
            .where(
                and_(
                    CreditHold.user_id == subscriber_id,
                    CreditHold.created_at < self._clock() - CREDIT_HOLD_TTL,
                )
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount:
            self.logger.info(
                "Removed expired credit holds",
                subscriber_id=str(subscriber_id),
                count=result.rowcount,
            )

    async def _held_by_category(self, subscriber_id: UUID) -> dict[str, int]:
        stmt = (
            select(CreditHold.tool_category, func.sum(CreditHold.credits))
            .where(
                and_(
                    CreditHold.user_id == subscriber_id,
                    CreditHold.created_at >= self._clock() - CREDIT_HOLD_TTL,
                )
            )
            .group_by(CreditHold.tool_category)
        )
        result = await self.db.execute(stmt)
        return {category: int(held or 0) for category, held in result.all()}

    async def _held_credits(self, subscriber_id: UUID, category: str) -> int:
        stmt = select(func.coalesce(func.sum(CreditHold.credits), 0)).where(
            and_(
                CreditHold.user_id == subscriber_id,
                CreditHold.tool_category == category,
                CreditHold.created_at >= self._clock() - CREDIT_HOLD_TTL,
            )
        )
        result = await self.db.execute(stmt)
        return int(result.scalar() or 0)

    def _build_record(
        self,
        subscriber_id: UUID,
        tool_name: str,
        tool_category: str,
        credits_used: int,
        success: bool,
        vendor: str | None,
    ) -> UsageRecord:
        if not success and not self.charge_failed_attempts:
            credits_used = 0
        return UsageRecord(
            user_id=subscriber_id,
            tool_name=tool_name,
            tool_category=tool_category,
            credits_used=credits_used,
            success=success,
            vendor=vendor,
            created_at=self._clock(),
        )
