"""AI text tools router."""

from fastapi import APIRouter

from src.api.core.decorators.metered import metered
from src.api.core.dependencies import (
    CreditMeterDep,
    CurrentUserAuthDep,
    ToolServiceDep,
)
from src.api.core.messages import APIResponse, MessageCode
from src.modules.credits.catalog import TOOL_CREDIT_COSTS, get_all_categories
from src.modules.tools.definitions import TOOL_DEFINITIONS
from .schemas import (
    AIContentDetectionRequest,
    AIContentDetectionResponse,
    ArticleRewriteRequest,
    ArticleRewriteResponse,
    EssayRewriteRequest,
    EssayRewriteResponse,
    GrammarCheckRequest,
    GrammarCheckResponse,
    KeywordCompetitionResponse,
    KeywordRequest,
    KeywordResearchResponse,
    LiveKeywordAnalysisResponse,
    LongTailKeywordResponse,
    ParaphraseRequest,
    ParaphraseResponse,
    PlagiarismCheckRequest,
    PlagiarismResponse,
    ProofreadingResponse,
    ProofreadRequest,
    SentenceCheckRequest,
    SentenceCheckResponse,
    SentenceRephraseRequest,
    SentenceRephraseResponse,
    SEOCompetitionAnalysisResponse,
    SummaryResponse,
    TextSummarizeRequest,
    ToolCatalogEntry,
    ToolCatalogModel,
    ToolCatalogResponse,
)

router = APIRouter(
    prefix="/tools",
    tags=["tools"],
)


@router.get("/catalog", response_model=ToolCatalogResponse)
async def get_tool_catalog() -> ToolCatalogResponse:
    """Public list of tool credit costs and categories."""
    tools = [
        ToolCatalogEntry(
            name=name,
            credits=config.credits,
            category=config.category,
            description=config.description,
            available=name in TOOL_DEFINITIONS,
        )
        for name, config in TOOL_CREDIT_COSTS.items()
    ]
    return APIResponse.success(
        data=ToolCatalogModel(tools=tools, categories=get_all_categories())
    )


@router.post("/grammar-check", response_model=GrammarCheckResponse)
@metered("grammar-check")
async def grammar_check(
    body: GrammarCheckRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> GrammarCheckResponse:
    result = await tool_service.run("grammar-check", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/paraphrase", response_model=ParaphraseResponse)
@metered("paraphrase")
async def paraphrase(
    body: ParaphraseRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> ParaphraseResponse:
    result = await tool_service.run("paraphrase", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/text-summarize", response_model=SummaryResponse)
@metered("text-summarize")
async def text_summarize(
    body: TextSummarizeRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> SummaryResponse:
    result = await tool_service.run("text-summarize", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/article-rewriter", response_model=ArticleRewriteResponse)
@metered("article-rewriter")
async def article_rewriter(
    body: ArticleRewriteRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> ArticleRewriteResponse:
    result = await tool_service.run("article-rewriter", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/essay-rewriter", response_model=EssayRewriteResponse)
@metered("essay-rewriter")
async def essay_rewriter(
    body: EssayRewriteRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> EssayRewriteResponse:
    result = await tool_service.run("essay-rewriter", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/sentence-rephraser", response_model=SentenceRephraseResponse)
@metered("sentence-rephraser")
async def sentence_rephraser(
    body: SentenceRephraseRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> SentenceRephraseResponse:
    result = await tool_service.run("sentence-rephraser", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/sentence-checker", response_model=SentenceCheckResponse)
@metered("sentence-checker")
async def sentence_checker(
    body: SentenceCheckRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> SentenceCheckResponse:
    result = await tool_service.run("sentence-checker", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/online-proofreader", response_model=ProofreadingResponse)
@metered("online-proofreader")
async def online_proofreader(
    body: ProofreadRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> ProofreadingResponse:
    result = await tool_service.run("online-proofreader", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/ai-content-detector", response_model=AIContentDetectionResponse)
@metered("ai-content-detector")
async def ai_content_detector(
    body: AIContentDetectionRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> AIContentDetectionResponse:
    result = await tool_service.run("ai-content-detector", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/plagiarism", response_model=PlagiarismResponse)
@metered("plagiarism")
async def plagiarism(
    body: PlagiarismCheckRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> PlagiarismResponse:
    result = await tool_service.run("plagiarism", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


# Keyword research


@router.post("/keyword-research", response_model=KeywordResearchResponse)
@metered("keyword-research")
async def keyword_research(
    body: KeywordRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> KeywordResearchResponse:
    result = await tool_service.run("keyword-research", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/keyword-competition", response_model=KeywordCompetitionResponse)
@metered("keyword-competition")
async def keyword_competition(
    body: KeywordRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> KeywordCompetitionResponse:
    result = await tool_service.run("keyword-competition", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/long-tail-keyword-suggestion", response_model=LongTailKeywordResponse)
@metered("long-tail-keyword-suggestion")
async def long_tail_keyword_suggestion(
    body: KeywordRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> LongTailKeywordResponse:
    result = await tool_service.run("long-tail-keyword-suggestion", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post("/live-keyword-analyzer", response_model=LiveKeywordAnalysisResponse)
@metered("live-keyword-analyzer")
async def live_keyword_analyzer(
    body: KeywordRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> LiveKeywordAnalysisResponse:
    result = await tool_service.run("live-keyword-analyzer", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)


@router.post(
    "/seo-keyword-competition-analysis",
    response_model=SEOCompetitionAnalysisResponse,
)
@metered("seo-keyword-competition-analysis")
async def seo_keyword_competition_analysis(
    body: KeywordRequest,
    current_user: CurrentUserAuthDep,
    meter: CreditMeterDep,
    tool_service: ToolServiceDep,
) -> SEOCompetitionAnalysisResponse:
    result = await tool_service.run("seo-keyword-competition-analysis", body)
    return APIResponse.success(message_code=MessageCode.TOOL_COMPLETED, data=result)
