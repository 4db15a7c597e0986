"""Credit cost and category for every metered tool."""

from dataclasses import dataclass

DEFAULT_TOOL_CREDITS = 1
DEFAULT_TOOL_CATEGORY = "general"


@dataclass(frozen=True)
class ToolCreditConfig:
    credits: int
    category: str
    description: str = ""


TOOL_CREDIT_COSTS: dict[str, ToolCreditConfig] = {
    # SEO analysis tools
    "page-speed-test": ToolCreditConfig(
        credits=1,
        category="seo",
        description="Page speed analysis with performance metrics",
    ),
    "ssl-checker": ToolCreditConfig(
        credits=1,
        category="security",
        description="SSL certificate analysis and security check",
    ),
    "website-seo-score-checker": ToolCreditConfig(
        credits=2,
        category="seo",
        description="Comprehensive SEO analysis with recommendations",
    ),
    "google-index-checker": ToolCreditConfig(
        credits=1,
        category="seo",
        description="Google indexing status and sitemap analysis",
    ),
    "meta-tag-generator": ToolCreditConfig(
        credits=1,
        category="seo",
        description="AI-powered meta tag generation and optimization",
    ),
    "backlink-checker": ToolCreditConfig(
        credits=2,
        category="seo",
        description="Backlink analysis and quality assessment",
    ),
    "valuable-backlink-checker": ToolCreditConfig(
        credits=2,
        category="seo",
        description="High-value backlink identification and analysis",
    ),
    "website-link-count-checker": ToolCreditConfig(
        credits=1,
        category="seo",
        description="Internal and external link count analysis",
    ),
    "anchor-text-distribution": ToolCreditConfig(
        credits=1,
        category="seo",
        description="Anchor text distribution analysis",
    ),
    # Keyword research tools
    "keyword-research": ToolCreditConfig(
        credits=2,
        category="keyword",
        description="Comprehensive keyword research and analysis",
    ),
    "keyword-competition": ToolCreditConfig(
        credits=1,
        category="keyword",
        description="Keyword competition analysis",
    ),
    "seo-keyword-competition-analysis": ToolCreditConfig(
        credits=2,
        category="keyword",
        description="Advanced SEO keyword competition analysis",
    ),
    "live-keyword-analyzer": ToolCreditConfig(
        credits=1,
        category="keyword",
        description="Real-time keyword performance analysis",
    ),
    "long-tail-keyword-suggestion": ToolCreditConfig(
        credits=1,
        category="keyword",
        description="Long-tail keyword suggestions and analysis",
    ),
    # Content tools
    "ai-content-detector": ToolCreditConfig(
        credits=1,
        category="content",
        description="AI-generated content detection",
    ),
    "plagiarism": ToolCreditConfig(
        credits=2,
        category="content",
        description="Plagiarism detection and originality check",
    ),
    "grammar-check": ToolCreditConfig(
        credits=1,
        category="content",
        description="Grammar and spelling check",
    ),
    "sentence-checker": ToolCreditConfig(
        credits=1,
        category="content",
        description="Sentence structure and clarity analysis",
    ),
    "sentence-rephraser": ToolCreditConfig(
        credits=1,
        category="content",
        description="AI-powered sentence rephrasing",
    ),
    "paraphrase": ToolCreditConfig(
        credits=1,
        category="content",
        description="Text paraphrasing and rewriting",
    ),
    "article-rewriter": ToolCreditConfig(
        credits=2,
        category="content",
        description="Complete article rewriting and optimization",
    ),
    "essay-rewriter": ToolCreditConfig(
        credits=2,
        category="content",
        description="Essay rewriting and improvement",
    ),
    "text-summarize": ToolCreditConfig(
        credits=1,
        category="content",
        description="Text summarization and key points extraction",
    ),
    "online-proofreader": ToolCreditConfig(
        credits=1,
        category="content",
        description="Professional proofreading and editing",
    ),
    # Link building tools
    "backlink-maker": ToolCreditConfig(
        credits=3,
        category="link-building",
        description="Backlink opportunity identification and outreach",
    ),
}


def get_tool_credit_config(tool_name: str) -> ToolCreditConfig | None:
    return TOOL_CREDIT_COSTS.get(tool_name)


def get_tool_credit_cost(tool_name: str) -> int:
    config = get_tool_credit_config(tool_name)
    return config.credits if config else DEFAULT_TOOL_CREDITS


def get_tool_category(tool_name: str) -> str:
    config = get_tool_credit_config(tool_name)
    return config.category if config else DEFAULT_TOOL_CATEGORY


def get_all_categories() -> list[str]:
    return sorted({cfg.category for cfg in TOOL_CREDIT_COSTS.values()})
