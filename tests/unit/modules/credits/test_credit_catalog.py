"""Tests for the tool cost table and plan limits."""

import pytest

from src.database.models import PlanTier
from src.modules.credits.catalog import (
    DEFAULT_TOOL_CATEGORY,
    TOOL_CREDIT_COSTS,
    get_all_categories,
    get_tool_category,
    get_tool_credit_cost,
)
from src.modules.credits.plans import (
    PLAN_CATALOG,
    UNLIMITED_CREDITS,
    is_unlimited,
    plan_category_limits,
)


@pytest.mark.parametrize(
    "tool_name,credits,category",
    [
        ("grammar-check", 1, "content"),
        ("article-rewriter", 2, "content"),
        ("website-seo-score-checker", 2, "seo"),
        ("ssl-checker", 1, "security"),
        ("backlink-maker", 3, "link-building"),
    ],
)
def test_known_tool_costs(tool_name, credits, category):
    assert get_tool_credit_cost(tool_name) == credits
    assert get_tool_category(tool_name) == category


def test_unknown_tool_defaults():
    assert get_tool_credit_cost("mystery") == 1
    assert get_tool_category("mystery") == DEFAULT_TOOL_CATEGORY


def test_costs_are_positive():
    assert all(config.credits > 0 for config in TOOL_CREDIT_COSTS.values())


def test_categories_are_sorted_and_unique():
    categories = get_all_categories()

    assert categories == sorted(set(categories))
    assert {"content", "keyword", "seo"} <= set(categories)


@pytest.mark.parametrize("plan", list(PlanTier))
def test_every_plan_covers_every_category(plan):
    limits = PLAN_CATALOG[plan]

    for category in [*get_all_categories(), DEFAULT_TOOL_CATEGORY]:
        assert category in limits


def test_plan_category_limits_returns_copy():
    limits = plan_category_limits(PlanTier.FREE)
    limits["content"] = 999

    assert PLAN_CATALOG[PlanTier.FREE]["content"] == 20


def test_is_unlimited():
    assert is_unlimited(UNLIMITED_CREDITS)
    assert not is_unlimited(0)
    assert not is_unlimited(None)
