"""Database models for ToolkitForSEO API."""

from .base import Base
from .subscriptions import PlanTier, Subscription, SubscriptionStatus
from .usage import CreditHold, UsageRecord
from .users import User

__all__ = [
    # Base
    "Base",
    # Enums
    "PlanTier",
    "SubscriptionStatus",
    # Models
    "User",
    "Subscription",
    "UsageRecord",
    "CreditHold",
]
