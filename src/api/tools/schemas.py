"""Request and result schemas for the AI text tools."""

from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, Field

from src.api.core.messages import APIResponse
from src.modules.vendors.base import VendorType

MAX_TEXT_LENGTH = 50_000
MAX_SENTENCE_LENGTH = 2_000
MAX_KEYWORD_LENGTH = 200


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


Text = Annotated[str, Field(max_length=MAX_TEXT_LENGTH), AfterValidator(_not_blank)]
Sentence = Annotated[
    str, Field(max_length=MAX_SENTENCE_LENGTH), AfterValidator(_not_blank)
]
Keyword = Annotated[
    str, Field(max_length=MAX_KEYWORD_LENGTH), AfterValidator(_not_blank)
]
Score = Annotated[float, Field(ge=0, le=100)]
Count = Annotated[int, Field(ge=0)]


class ToolRequest(BaseModel):
    """Fields shared by every tool request."""

    # None falls back to the configured default vendor
    vendor: VendorType | None = None
    model: str | None = Field(default=None, max_length=100)


# Requests


class GrammarCheckSettings(BaseModel):
    check_type: Literal["basic", "advanced", "academic"] = "basic"


class GrammarCheckRequest(ToolRequest):
    text: Text
    settings: GrammarCheckSettings = Field(default_factory=GrammarCheckSettings)


class ParaphraseRequest(ToolRequest):
    text: Text
    style: Literal["formal", "casual", "creative", "academic"] = "formal"


class TextSummarizeRequest(ToolRequest):
    text: Text
    length: Literal["short", "medium", "long"] = "medium"
    style: Literal["bullet_points", "paragraph", "abstract"] = "paragraph"


class ArticleRewriteRequest(ToolRequest):
    text: Text
    style: Literal["formal", "casual", "academic", "creative", "professional"] = (
        "professional"
    )


class EssayRewriteRequest(ToolRequest):
    text: Text
    essay_type: Literal[
        "argumentative",
        "descriptive",
        "narrative",
        "expository",
        "persuasive",
        "analytical",
    ] = "expository"
    academic_level: Literal[
        "high_school", "undergraduate", "graduate", "professional"
    ] = "undergraduate"


class SentenceRephraseRequest(ToolRequest):
    sentence: Sentence
    style: Literal[
        "formal", "casual", "academic", "creative", "concise", "detailed"
    ] = "formal"


class SentenceCheckRequest(ToolRequest):
    sentence: Sentence
    check_type: Literal["grammar", "style", "clarity", "all"] = "all"


class ProofreadingSettings(BaseModel):
    grammar: bool = True
    spelling: bool = True
    punctuation: bool = True
    style: bool = False
    word_choice: bool = False


class ProofreadRequest(ToolRequest):
    text: Text
    settings: ProofreadingSettings = Field(default_factory=ProofreadingSettings)


class AIContentDetectionRequest(ToolRequest):
    text: Text


class PlagiarismSettings(BaseModel):
    detection_model: Literal["standard", "academic", "thorough"] = "standard"


class PlagiarismCheckRequest(ToolRequest):
    text: Text
    settings: PlagiarismSettings = Field(default_factory=PlagiarismSettings)


class KeywordRequest(ToolRequest):
    """Seed keyword for the keyword research family of tools."""

    keyword: Keyword


# Results


class TextPosition(BaseModel):
    start: int
    end: int


class WordCount(BaseModel):
    original: int
    rewritten: int | None = None
    paraphrased: int | None = None
    summary: int | None = None
    corrected: int | None = None


class GrammarError(BaseModel):
    text: str
    suggestion: str
    type: str
    position: TextPosition | None = None


class GrammarCheckResult(BaseModel):
    original_text: str
    corrected_text: str
    errors: list[GrammarError] = []
    score: Score


class ParaphraseResult(BaseModel):
    original_text: str
    paraphrased_text: str
    similarity_score: Score
    readability_score: Score
    word_count: WordCount


class KeyPoint(BaseModel):
    point: str
    importance: Annotated[float, Field(ge=1, le=10)]


class ReadingTime(BaseModel):
    original_minutes: float
    summary_minutes: float


class SummaryResult(BaseModel):
    original_text: str
    summary: str
    key_points: list[KeyPoint] = []
    compression_ratio: float
    word_count: WordCount
    reading_time: ReadingTime


class ReadabilityComparison(BaseModel):
    original: float
    rewritten: float


class ArticleRewriteResult(BaseModel):
    original_text: str
    rewritten_text: str
    rewrite_style: str
    changes_made: list[str] = []
    word_count: WordCount
    readability_score: ReadabilityComparison
    improvements: list[str] = []
    uniqueness_percentage: Score


class EssayImprovements(BaseModel):
    structure: list[str] = []
    content: list[str] = []
    language: list[str] = []
    citations: list[str] = []


class ReadabilityMetrics(BaseModel):
    grade_level: str
    reading_ease: float
    complexity_score: float


class EssayRewriteResult(BaseModel):
    original_text: str
    rewritten_text: str
    essay_type: str
    academic_level: str
    improvements: EssayImprovements
    word_count: WordCount
    readability_metrics: ReadabilityMetrics
    plagiarism_risk: str
    quality_score: Score


class SentenceRephrase(BaseModel):
    original_sentence: str
    rephrased_sentence: str
    style: str
    changes_made: list[str] = []
    improvement_type: str
    readability_improvement: float


class RephraseWordCount(BaseModel):
    original: int
    average_rephrased: float


class RephraseReadability(BaseModel):
    original: float
    best_rephrased: float


class SentenceRephraseResult(BaseModel):
    original_sentence: str
    rephrase_options: list[SentenceRephrase]
    best_option: SentenceRephrase
    style_applied: str
    word_count: RephraseWordCount
    readability_scores: RephraseReadability
    suggestions: list[str] = []


class SentenceError(BaseModel):
    type: str
    message: str
    suggestion: str
    position: TextPosition | None = None
    severity: str


class SentenceSuggestions(BaseModel):
    clarity: list[str] = []
    conciseness: list[str] = []
    style: list[str] = []


class SentenceCheckResult(BaseModel):
    original_sentence: str
    corrected_sentence: str
    errors: list[SentenceError] = []
    improvements: list[str] = []
    readability_score: Score
    complexity_level: str
    word_count: int
    character_count: int
    suggestions: SentenceSuggestions
    overall_score: Score


class ProofreadingError(BaseModel):
    type: str
    text: str
    suggestion: str
    explanation: str
    severity: str
    position: TextPosition | None = None


class ProofreadingReadability(BaseModel):
    original: float
    corrected: float


class ProofreadingSuggestions(BaseModel):
    grammar: list[str] = []
    style: list[str] = []
    clarity: list[str] = []


class ProofreadingResult(BaseModel):
    original_text: str
    corrected_text: str
    errors: list[ProofreadingError] = []
    corrections_made: int
    improvement_score: Score
    readability_score: ProofreadingReadability
    word_count: WordCount
    suggestions: ProofreadingSuggestions
    overall_quality_score: Score


class DetectionAnalysis(BaseModel):
    sentence_structure: str
    vocabulary_complexity: str
    writing_style: str
    repetition_patterns: str


class AIContentDetectionResult(BaseModel):
    original_text: str
    ai_probability: Score
    human_probability: Score
    confidence_score: Score
    detected_patterns: list[str] = []
    analysis: DetectionAnalysis
    recommendation: str


class PlagiarismSource(BaseModel):
    url: str
    similarity: Score


class PlagiarismResult(BaseModel):
    score: Score
    original_content: Score
    plagiarized_content: Score
    sources: list[PlagiarismSource] = []


class KeywordData(BaseModel):
    keyword: str
    search_volume: Count
    difficulty: Score
    cpc: float
    competition: str
    trend: str
    related_keywords: list[str] = []


class KeywordResearchResult(BaseModel):
    primary_keyword: KeywordData
    related_keywords: list[KeywordData] = []
    long_tail_keywords: list[KeywordData] = []
    questions: list[str] = []
    suggestions: list[str] = []


class CompetitorOverlap(BaseModel):
    url: str
    keyword_overlap: Score
    competitors_keywords: Count
    common_keywords: Count
    share: Score
    target_keywords: Count
    dr: Score
    traffic: Count
    value: float


class KeywordCompetitionResult(BaseModel):
    keywords: list[CompetitorOverlap]


class LongTailKeyword(BaseModel):
    keyword: str
    search_volume: Count
    difficulty: Score
    cpc: float
    competition: str
    intent: str
    word_count: Count
    opportunity_score: Score


class LongTailKeywordResult(BaseModel):
    seed_keyword: str
    total_suggestions: Count
    long_tail_keywords: list[LongTailKeyword] = []
    question_based: list[LongTailKeyword] = []
    location_based: list[LongTailKeyword] = []
    commercial_intent: list[LongTailKeyword] = []
    informational_intent: list[LongTailKeyword] = []


class SeasonalVolume(BaseModel):
    month: str
    volume: Count
    trend: str


class RelatedKeywordMetrics(BaseModel):
    keyword: str
    volume: Count
    difficulty: Score
    relevance: Score


class IntentDistribution(BaseModel):
    informational: Score
    commercial: Score
    transactional: Score
    navigational: Score


class IntentAnalysis(BaseModel):
    primary_intent: str
    intent_distribution: IntentDistribution


class RankingDifficulty(BaseModel):
    content_requirement: str
    backlink_requirement: str
    domain_authority_needed: Score
    time_to_rank: str


class MarketAnalysis(BaseModel):
    market_size: str
    growth_potential: str
    competition_density: str
    monetization_potential: str


class KeywordRecommendations(BaseModel):
    content_type: list[str] = []
    target_audience: list[str] = []
    content_length: str
    optimization_tips: list[str] = []


class LiveKeywordAnalysisResult(BaseModel):
    keyword: str
    search_volume: Count
    keyword_difficulty: Score
    cpc: float
    competition: str
    trend: str
    seasonal_data: list[SeasonalVolume] = []
    related_keywords: list[RelatedKeywordMetrics] = []
    serp_features: list[str] = []
    intent_analysis: IntentAnalysis
    opportunity_score: Score
    ranking_difficulty: RankingDifficulty
    market_analysis: MarketAnalysis
    recommendations: KeywordRecommendations


class CompetitorPage(BaseModel):
    domain: str
    title: str
    meta_description: str
    content_length: Count
    domain_authority: Score
    page_authority: Score
    backlinks: Count
    social_signals: Count
    estimated_traffic: Count
    keyword_density: float
    content_quality_score: Score
    technical_seo_score: Score
    user_experience_score: Score
    strengths: list[str] = []
    weaknesses: list[str] = []
    opportunities: list[str] = []


class MarketInsights(BaseModel):
    average_content_length: float
    average_domain_authority: float
    average_backlinks: float
    content_gaps: list[str] = []
    ranking_factors: list[str] = []


class CompetitionRecommendations(BaseModel):
    content_strategy: list[str] = []
    technical_improvements: list[str] = []
    link_building: list[str] = []
    competitive_advantages: list[str] = []


class DifficultyBreakdown(BaseModel):
    content_competition: Score
    domain_authority_barrier: Score
    backlink_requirement: Score
    technical_complexity: Score


class SEOCompetitionAnalysisResult(BaseModel):
    keyword: str
    search_volume: Count
    keyword_difficulty: Score
    competition_level: str
    cpc: float
    top_competitors: list[CompetitorPage] = []
    market_insights: MarketInsights
    recommendations: CompetitionRecommendations
    difficulty_breakdown: DifficultyBreakdown


# Catalog


class ToolCatalogEntry(BaseModel):
    name: str
    credits: int
    category: str
    description: str
    available: bool


class ToolCatalogModel(BaseModel):
    tools: list[ToolCatalogEntry]
    categories: list[str]


# Response Models
ToolCatalogResponse = APIResponse[ToolCatalogModel]
GrammarCheckResponse = APIResponse[GrammarCheckResult]
ParaphraseResponse = APIResponse[ParaphraseResult]
SummaryResponse = APIResponse[SummaryResult]
ArticleRewriteResponse = APIResponse[ArticleRewriteResult]
EssayRewriteResponse = APIResponse[EssayRewriteResult]
SentenceRephraseResponse = APIResponse[SentenceRephraseResult]
SentenceCheckResponse = APIResponse[SentenceCheckResult]
ProofreadingResponse = APIResponse[ProofreadingResult]
AIContentDetectionResponse = APIResponse[AIContentDetectionResult]
PlagiarismResponse = APIResponse[PlagiarismResult]
KeywordResearchResponse = APIResponse[KeywordResearchResult]
KeywordCompetitionResponse = APIResponse[KeywordCompetitionResult]
LongTailKeywordResponse = APIResponse[LongTailKeywordResult]
LiveKeywordAnalysisResponse = APIResponse[LiveKeywordAnalysisResult]
SEOCompetitionAnalysisResponse = APIResponse[SEOCompetitionAnalysisResult]
