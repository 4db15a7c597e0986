"""Subscriber lookup and first-sight provisioning."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.core.base import BaseService
from src.database.models import PlanTier, Subscription, SubscriptionStatus, User
from src.modules.credits.plans import plan_category_limits
from src.modules.user.jwt_claims import extract_user_data_from_jwt


class UserManagementService(BaseService):
    async def get_user_by_external_id(self, external_id: str) -> User | None:
        stmt = select(User).where(User.external_id == external_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def handle_jwt_authentication(self, payload: dict) -> User:
        """Return the subscriber for verified claims, creating it on first sight.

        New subscribers start without a subscription, so every metered call is
        denied until one is activated.
        """
        user_data = extract_user_data_from_jwt(payload)
        external_id = user_data["external_id"]
        if not external_id:
            raise ValueError("Token has no subject claim")

        user = await self.get_user_by_external_id(external_id)
        if user:
            if user_data["email"] and user.email != user_data["email"]:
                user.email = user_data["email"]
                await self.db.commit()
            return user

        user = User(
            external_id=external_id,
            email=user_data["email"],
            name=user_data["name"],
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            # Concurrent first requests for the same subject
            await self.db.rollback()
            user = await self.get_user_by_external_id(external_id)
            if user is None:
                raise
            return user

        self.logger.info("Provisioned new subscriber", external_id=external_id)
        return user

    async def activate_subscription(
        self, user_id: UUID, plan: PlanTier = PlanTier.FREE
    ) -> Subscription:
        """Start a subscription on ``plan``, cancelling any active one."""
        stmt = select(Subscription).where(
            Subscription.user_id == user_id,
            Subscription.status == SubscriptionStatus.ACTIVE.value,
        )
        for existing in (await self.db.execute(stmt)).scalars().all():
            existing.status = SubscriptionStatus.CANCELLED.value

        subscription = Subscription(
            user_id=user_id,
            plan=PlanTier(plan).value,
            status=SubscriptionStatus.ACTIVE.value,
            category_limits=plan_category_limits(plan),
        )
        self.db.add(subscription)
        await self.db.commit()

        self.logger.info(
            "Activated subscription", user_id=str(user_id), plan=PlanTier(plan).value
        )
        return subscription
