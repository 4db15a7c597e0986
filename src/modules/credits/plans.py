"""Monthly allowance per tool category for each plan tier."""

from src.database.models import PlanTier

from .catalog import DEFAULT_TOOL_CATEGORY, get_all_categories

UNLIMITED_CREDITS = -1


def _uniform(limit: int) -> dict[str, int]:
    categories = [*get_all_categories(), DEFAULT_TOOL_CATEGORY]
    return {category: limit for category in categories}


PLAN_CATALOG: dict[PlanTier, dict[str, int]] = {
    PlanTier.FREE: {**_uniform(0), "content": 20, "seo": 10, "keyword": 10},
    PlanTier.BASIC: _uniform(1000),
    PlanTier.PRO: _uniform(5000),
    PlanTier.PREMIUM: {**_uniform(15000), "content": UNLIMITED_CREDITS},
}


def plan_category_limits(plan: PlanTier) -> dict[str, int]:
    """Fresh copy of a plan's limits, suitable for storing on a subscription."""
    return dict(PLAN_CATALOG[plan])


def is_unlimited(limit: int | None) -> bool:
    return limit == UNLIMITED_CREDITS
