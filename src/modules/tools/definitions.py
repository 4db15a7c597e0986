"""Registry of the AI writing and keyword tools served by the API."""

from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel

from src.api.tools import schemas

from . import prompts


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    request_model: type[schemas.ToolRequest]
    result_model: type[BaseModel]
    build_prompt: Callable[..., str]


TOOL_DEFINITIONS: dict[str, ToolDefinition] = {
    definition.name: definition
    for definition in (
        ToolDefinition(
            "grammar-check",
            schemas.GrammarCheckRequest,
            schemas.GrammarCheckResult,
            prompts.build_grammar_check_prompt,
        ),
        ToolDefinition(
            "paraphrase",
            schemas.ParaphraseRequest,
            schemas.ParaphraseResult,
            prompts.build_paraphrase_prompt,
        ),
        ToolDefinition(
            "text-summarize",
            schemas.TextSummarizeRequest,
            schemas.SummaryResult,
            prompts.build_text_summarize_prompt,
        ),
        ToolDefinition(
            "article-rewriter",
            schemas.ArticleRewriteRequest,
            schemas.ArticleRewriteResult,
            prompts.build_article_rewriter_prompt,
        ),
        ToolDefinition(
            "essay-rewriter",
            schemas.EssayRewriteRequest,
            schemas.EssayRewriteResult,
            prompts.build_essay_rewriter_prompt,
        ),
        ToolDefinition(
            "sentence-rephraser",
            schemas.SentenceRephraseRequest,
            schemas.SentenceRephraseResult,
            prompts.build_sentence_rephraser_prompt,
        ),
        ToolDefinition(
            "sentence-checker",
            schemas.SentenceCheckRequest,
            schemas.SentenceCheckResult,
            prompts.build_sentence_checker_prompt,
        ),
        ToolDefinition(
            "online-proofreader",
            schemas.ProofreadRequest,
            schemas.ProofreadingResult,
            prompts.build_online_proofreader_prompt,
        ),
        ToolDefinition(
            "ai-content-detector",
            schemas.AIContentDetectionRequest,
            schemas.AIContentDetectionResult,
            prompts.build_ai_content_detector_prompt,
        ),
        ToolDefinition(
            "plagiarism",
            schemas.PlagiarismCheckRequest,
            schemas.PlagiarismResult,
            prompts.build_plagiarism_prompt,
        ),
        ToolDefinition(
            "keyword-research",
            schemas.KeywordRequest,
            schemas.KeywordResearchResult,
            prompts.build_keyword_research_prompt,
        ),
        ToolDefinition(
            "keyword-competition",
            schemas.KeywordRequest,
            schemas.KeywordCompetitionResult,
            prompts.build_keyword_competition_prompt,
        ),
        ToolDefinition(
            "long-tail-keyword-suggestion",
            schemas.KeywordRequest,
            schemas.LongTailKeywordResult,
            prompts.build_long_tail_keyword_prompt,
        ),
        ToolDefinition(
            "live-keyword-analyzer",
            schemas.KeywordRequest,
            schemas.LiveKeywordAnalysisResult,
            prompts.build_live_keyword_analyzer_prompt,
        ),
        ToolDefinition(
            "seo-keyword-competition-analysis",
            schemas.KeywordRequest,
            schemas.SEOCompetitionAnalysisResult,
            prompts.build_seo_keyword_competition_prompt,
        ),
    )
}


def get_tool_definition(tool_name: str) -> ToolDefinition:
    try:
        return TOOL_DEFINITIONS[tool_name]
    except KeyError:
        raise ValueError(f"Unknown tool: {tool_name}") from None
