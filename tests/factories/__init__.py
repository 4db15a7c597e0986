"""Test factories for ToolkitForSEO API models."""

from .base import AsyncSQLAlchemyModelFactory
from .users import UserFactory
from .subscriptions import SubscriptionFactory
from .usage import CreditHoldFactory, UsageRecordFactory

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "UserFactory",
    "SubscriptionFactory",
    "UsageRecordFactory",
    "CreditHoldFactory",
]
