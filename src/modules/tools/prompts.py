"""Prompt templates for the AI text tools.

Every prompt asks for a single JSON object inside a ```json fenced block, which
is the only shape the output parser accepts.
"""

import json
from textwrap import dedent

from src.api.tools.schemas import (
    AIContentDetectionRequest,
    ArticleRewriteRequest,
    EssayRewriteRequest,
    GrammarCheckRequest,
    KeywordRequest,
    ParaphraseRequest,
    PlagiarismCheckRequest,
    ProofreadRequest,
    SentenceCheckRequest,
    SentenceRephraseRequest,
    TextSummarizeRequest,
)

RESPONSE_FORMAT_INSTRUCTION = (
    "Respond only with the JSON object wrapped in a ```json fenced code block."
)

GRAMMAR_CHECK_INSTRUCTIONS = {
    "basic": "Perform basic grammar, spelling, and punctuation checking.",
    "advanced": (
        "Perform comprehensive grammar checking including style, clarity, "
        "and advanced grammar rules."
    ),
    "academic": (
        "Focus on academic writing standards, formal tone, and scholarly "
        "language conventions."
    ),
}

PARAPHRASE_STYLES = {
    "formal": (
        "Convert to formal, professional language suitable for business or "
        "academic contexts."
    ),
    "casual": "Use casual, conversational language that's easy to understand.",
    "creative": (
        "Use creative and varied language expressions while keeping the "
        "original meaning."
    ),
    "academic": "Use academic language with scholarly tone and precise terminology.",
}

SUMMARY_LENGTHS = {
    "short": "Create a very concise summary (10-20% of original length).",
    "medium": "Create a balanced summary (25-35% of original length).",
    "long": "Create a comprehensive summary (40-60% of original length).",
}

SUMMARY_STYLES = {
    "bullet_points": "Format the summary as clear bullet points.",
    "paragraph": "Write in paragraph format with smooth transitions.",
    "abstract": "Write in academic abstract style with structured sections.",
}

ARTICLE_STYLES = {
    "formal": (
        "Use formal language, professional tone, and structured sentences. "
        "Avoid contractions and colloquialisms."
    ),
    "casual": (
        "Use conversational tone, simple language, and relatable examples. "
        "Include contractions where appropriate."
    ),
    "academic": (
        "Use scholarly language, complex sentence structures, and academic "
        "terminology."
    ),
    "creative": (
        "Use imaginative language, varied sentence structures, and engaging "
        "storytelling elements."
    ),
    "professional": (
        "Use business-appropriate language, clear communication, and "
        "industry-standard terminology."
    ),
}

ESSAY_TYPES = {
    "argumentative": (
        "Present clear arguments with evidence, counterarguments, and logical "
        "reasoning."
    ),
    "descriptive": (
        "Use vivid imagery, sensory details, and descriptive language to paint "
        "a clear picture."
    ),
    "narrative": (
        "Tell a story with clear sequence, character development, and engaging plot."
    ),
    "expository": (
        "Explain concepts clearly with facts, examples, and logical organization."
    ),
    "persuasive": (
        "Convince readers with emotional appeals, logical arguments, and credible "
        "evidence."
    ),
    "analytical": (
        "Break down complex topics, analyze components, and provide critical "
        "evaluation."
    ),
}

ACADEMIC_LEVELS = {
    "high_school": (
        "Use clear, straightforward language appropriate for high school level."
    ),
    "undergraduate": (
        "Use college-level vocabulary and more complex sentence structures."
    ),
    "graduate": (
        "Use advanced academic language, complex arguments, and scholarly tone."
    ),
    "professional": (
        "Use professional terminology, industry-specific language, and "
        "expert-level analysis."
    ),
}

REPHRASE_STYLES = {
    "formal": (
        "Use formal language, professional tone, and structured phrasing. "
        "Avoid contractions."
    ),
    "casual": (
        "Use conversational tone, simple language, and relaxed phrasing. "
        "Include contractions where natural."
    ),
    "academic": (
        "Use scholarly language, precise terminology, and complex sentence "
        "structures."
    ),
    "creative": (
        "Use imaginative language, varied sentence structures, and engaging "
        "expressions."
    ),
    "concise": "Make the sentence shorter and more direct while maintaining meaning.",
    "detailed": (
        "Expand the sentence with more descriptive language and additional context."
    ),
}

SENTENCE_CHECK_TYPES = {
    "grammar": (
        "Focus on grammatical errors, verb tenses, subject-verb agreement, and "
        "sentence structure."
    ),
    "style": "Focus on writing style, tone, word choice, and flow improvements.",
    "clarity": (
        "Focus on clarity, conciseness, and making the sentence easier to "
        "understand."
    ),
    "all": (
        "Check for grammar, style, clarity, punctuation, spelling, and overall "
        "sentence quality."
    ),
}

PROOFREADING_CHECKS = {
    "grammar": "grammar errors",
    "spelling": "spelling mistakes",
    "punctuation": "punctuation errors",
    "style": "style improvements",
    "word_choice": "word choice enhancements",
}

PLAGIARISM_DETECTION_MODELS = {
    "standard": "A balanced approach, suitable for general plagiarism checks.",
    "academic": "More sensitive and thorough, designed for academic content.",
    "thorough": "The most rigorous analysis, checking for subtle similarities.",
}


def _render(task: str, body: str, structure: str, requirements: list[str]) -> str:
    parts = [dedent(task).strip(), dedent(body).strip()]
    parts.append(
        "Return a JSON object with the following structure:\n"
        + dedent(structure).strip()
    )
    if requirements:
        parts.append(
            "Requirements:\n" + "\n".join(f"- {item}" for item in requirements)
        )
    parts.append(RESPONSE_FORMAT_INSTRUCTION)
    return "\n\n".join(parts)


def build_grammar_check_prompt(request: GrammarCheckRequest) -> str:
    check_type = request.settings.check_type
    return _render(
        "You are an expert grammar checker. Analyze the following text for "
        "grammar, spelling, and punctuation errors.",
        f"Check Type: {check_type}\n"
        f"Additional Instructions: {GRAMMAR_CHECK_INSTRUCTIONS[check_type]}\n\n"
        f"Text to analyze:\n{request.text}",
        """
        {
          "original_text": "<original text>",
          "corrected_text": "<corrected version of the text>",
          "score": <numeric score from 0 to 100 representing grammar quality>,
          "errors": [
            {
              "text": "<error text>",
              "suggestion": "<suggested correction>",
              "type": "<grammar/spelling/punctuation/style>",
              "position": {"start": <start position>, "end": <end position>}
            }
          ]
        }
        """,
        [],
    )


def build_paraphrase_prompt(request: ParaphraseRequest) -> str:
    return _render(
        "You are an expert text paraphrasing tool. Paraphrase the following text "
        "according to the specified style.",
        f"Style: {request.style}\n"
        f"Style Instructions: {PARAPHRASE_STYLES[request.style]}\n\n"
        f"Text to paraphrase:\n{request.text}",
        """
        {
          "original_text": "<original text>",
          "paraphrased_text": "<paraphrased version of the text>",
          "similarity_score": <numeric score from 0 to 100, similarity to original>,
          "readability_score": <numeric score from 0 to 100 representing readability>,
          "word_count": {
            "original": <word count of original text>,
            "paraphrased": <word count of paraphrased text>
          }
        }
        """,
        [],
    )


def build_text_summarize_prompt(request: TextSummarizeRequest) -> str:
    return _render(
        "You are an expert text summarization tool. Summarize the following text "
        "according to the specified parameters.",
        f"Length: {request.length}\n"
        f"Style: {request.style}\n"
        f"Length Instructions: {SUMMARY_LENGTHS[request.length]}\n"
        f"Style Instructions: {SUMMARY_STYLES[request.style]}\n\n"
        f"Text to summarize:\n{request.text}",
        """
        {
          "original_text": "<original text>",
          "summary": "<summarized text>",
          "key_points": [
            {"point": "<key point>", "importance": <numeric score from 1 to 10>}
          ],
          "compression_ratio": <percentage of original length>,
          "word_count": {
            "original": <word count of original text>,
            "summary": <word count of summary>
          },
          "reading_time": {
            "original_minutes": <estimated reading time in minutes>,
            "summary_minutes": <estimated reading time in minutes>
          }
        }
        """,
        [],
    )


def build_article_rewriter_prompt(request: ArticleRewriteRequest) -> str:
    return _render(
        f"You are an expert article rewriter. Rewrite the following article in "
        f"{request.style} style while maintaining the original meaning and key "
        f"information.",
        f"Original Article:\n{request.text}\n\n"
        f"Style Instructions: {ARTICLE_STYLES[request.style]}",
        """
        {
          "original_text": "<original article text>",
          "rewritten_text": "<completely rewritten article>",
          "rewrite_style": "%s",
          "changes_made": ["<change1>", "<change2>", "<change3>"],
          "word_count": {
            "original": <original word count>,
            "rewritten": <rewritten word count>
          },
          "readability_score": {
            "original": <score from 1-100>,
            "rewritten": <score from 1-100>
          },
          "improvements": ["<improvement1>", "<improvement2>", "<improvement3>"],
          "uniqueness_percentage": <percentage of uniqueness from original>
        }
        """
        % request.style,
        [
            "Maintain the original meaning and key points",
            "Ensure the rewritten text is completely unique",
            "Improve readability and flow",
            "Use appropriate vocabulary for the selected style",
            "Make substantial changes to sentence structure",
            "Preserve important facts and data",
        ],
    )


def build_essay_rewriter_prompt(request: EssayRewriteRequest) -> str:
    return _render(
        "You are an expert essay rewriter specializing in academic writing. "
        "Rewrite the following essay to improve its quality while maintaining "
        "the original meaning and arguments.",
        f"Original Essay:\n{request.text}\n\n"
        f"Essay Type: {request.essay_type}\n"
        f"Academic Level: {request.academic_level}\n"
        f"Essay Type Instructions: {ESSAY_TYPES[request.essay_type]}\n"
        f"Academic Level Instructions: {ACADEMIC_LEVELS[request.academic_level]}",
        """
        {
          "original_text": "<original essay text>",
          "rewritten_text": "<completely rewritten essay>",
          "essay_type": "%s",
          "academic_level": "%s",
          "improvements": {
            "structure": ["<structural improvement>"],
            "content": ["<content improvement>"],
            "language": ["<language improvement>"],
            "citations": ["<citation improvement>"]
          },
          "word_count": {
            "original": <original word count>,
            "rewritten": <rewritten word count>
          },
          "readability_metrics": {
            "grade_level": "<appropriate grade level>",
            "reading_ease": <score from 0-100>,
            "complexity_score": <score from 1-10>
          },
          "plagiarism_risk": "<low/medium/high>",
          "quality_score": <score from 1-100>
        }
        """
        % (request.essay_type, request.academic_level),
        [
            "Maintain the original thesis and main arguments",
            "Improve essay structure and flow",
            "Enhance vocabulary and sentence variety",
            "Add transitional phrases for better coherence",
            "Improve introduction and conclusion",
            "Maintain appropriate tone for academic level",
        ],
    )


def build_sentence_rephraser_prompt(request: SentenceRephraseRequest) -> str:
    option = """{
              "original_sentence": "<original sentence>",
              "rephrased_sentence": "<rephrased version>",
              "style": "%s",
              "changes_made": ["<change1>", "<change2>"],
              "improvement_type": "<type of improvement made>",
              "readability_improvement": <score from -10 to +10>
            }""" % request.style
    return _render(
        f"You are an expert sentence rephraser. Rephrase the following sentence "
        f"in multiple ways using the {request.style} style.",
        f"Original Sentence:\n{request.sentence}\n\n"
        f"Style Instructions: {REPHRASE_STYLES[request.style]}",
        """
        {
          "original_sentence": "<original sentence>",
          "rephrase_options": [
            %s
          ],
          "best_option": %s,
          "style_applied": "%s",
          "word_count": {
            "original": <original word count>,
            "average_rephrased": <average word count of rephrased options>
          },
          "readability_scores": {
            "original": <score from 0-100>,
            "best_rephrased": <score from 0-100>
          },
          "suggestions": ["<suggestion1>", "<suggestion2>", "<suggestion3>"]
        }
        """
        % (option, option, request.style),
        [
            "Provide 3 different rephrasing options",
            "Maintain the original meaning",
            "Apply the specified style consistently",
            "Identify the best option based on clarity and style",
            "Explain what changes were made",
        ],
    )


def build_sentence_checker_prompt(request: SentenceCheckRequest) -> str:
    return _render(
        "You are an expert sentence checker and editor. Analyze the following "
        "sentence for errors and improvements.",
        f"Sentence to check:\n{request.sentence}\n\n"
        f"Check Type: {request.check_type}\n"
        f"Instructions: {SENTENCE_CHECK_TYPES[request.check_type]}",
        """
        {
          "original_sentence": "<original sentence>",
          "corrected_sentence": "<corrected and improved sentence>",
          "errors": [
            {
              "type": "<grammar/punctuation/spelling/style/clarity/structure>",
              "message": "<description of the error>",
              "suggestion": "<suggested correction>",
              "position": {"start": <start position>, "end": <end position>},
              "severity": "<low/medium/high>"
            }
          ],
          "improvements": ["<improvement1>", "<improvement2>"],
          "readability_score": <score from 0-100>,
          "complexity_level": "<simple/moderate/complex>",
          "word_count": <number of words>,
          "character_count": <number of characters>,
          "suggestions": {
            "clarity": ["<clarity suggestion>"],
            "conciseness": ["<conciseness suggestion>"],
            "style": ["<style suggestion>"]
          },
          "overall_score": <overall quality score from 0-100>
        }
        """,
        [
            "Identify all types of errors based on the check type",
            "Provide specific, actionable suggestions",
            "Calculate accurate position indices for errors",
        ],
    )


def build_online_proofreader_prompt(request: ProofreadRequest) -> str:
    enabled = [
        label
        for setting, label in PROOFREADING_CHECKS.items()
        if getattr(request.settings, setting)
    ]
    check_instructions = (
        f"Focus on: {', '.join(enabled)}."
        if enabled
        else "Perform a comprehensive proofreading check."
    )
    return _render(
        "You are an expert proofreader and editor. Analyze the following text "
        "and provide comprehensive proofreading results.",
        # Quoted as a JSON string so the text cannot break out of the prompt
        f"{check_instructions}\n\nText to proofread:\n{json.dumps(request.text)}",
        """
        {
          "original_text": "<original text>",
          "corrected_text": "<corrected version of the text>",
          "errors": [
            {
              "type": "<grammar|spelling|punctuation|style|word_choice>",
              "text": "<the problematic text>",
              "suggestion": "<suggested correction>",
              "explanation": "<brief explanation of the error>",
              "severity": "<low|medium|high>",
              "position": {"start": <start position>, "end": <end position>}
            }
          ],
          "corrections_made": <number of corrections made>,
          "improvement_score": <score from 0-100>,
          "readability_score": {
            "original": <readability score 0-100 for original text>,
            "corrected": <readability score 0-100 for corrected text>
          },
          "word_count": {
            "original": <word count of original text>,
            "corrected": <word count of corrected text>
          },
          "suggestions": {
            "grammar": ["<grammar improvement suggestions>"],
            "style": ["<style improvement suggestions>"],
            "clarity": ["<clarity improvement suggestions>"]
          },
          "overall_quality_score": <overall quality score 0-100>
        }
        """,
        [
            "Provide accurate character positions for errors",
            "Ensure the corrected text maintains the original meaning",
            "If no errors are found, return the original text as corrected_text "
            "with an empty errors array",
        ],
    )


def build_ai_content_detector_prompt(request: AIContentDetectionRequest) -> str:
    return _render(
        "You are an expert AI content detection tool. Analyze the following text "
        "to determine if it was written by AI or humans.",
        f"Text to analyze:\n{request.text}",
        """
        {
          "original_text": "<original text>",
          "ai_probability": <score from 0 to 100, probability of AI generation>,
          "human_probability": <score from 0 to 100, probability of human writing>,
          "confidence_score": <score from 0 to 100, confidence in detection>,
          "detected_patterns": ["<pattern1>", "<pattern2>", "<pattern3>"],
          "analysis": {
            "sentence_structure": "<analysis of sentence patterns and complexity>",
            "vocabulary_complexity": "<analysis of word choice and vocabulary>",
            "writing_style": "<analysis of overall writing style>",
            "repetition_patterns": "<analysis of repetitive elements>"
          },
          "recommendation": "<recommendation based on the analysis>"
        }
        """,
        [
            "Consider sentence structure and complexity",
            "Consider vocabulary usage and repetition",
            "Consider common AI writing patterns",
            "Consider human-like inconsistencies, emotion and personal touches",
        ],
    )


def build_plagiarism_prompt(request: PlagiarismCheckRequest) -> str:
    detection_model = request.settings.detection_model
    return _render(
        "You are an expert plagiarism detection system. Analyze the following "
        "text and determine if any part of it appears to be plagiarized from "
        "online sources.",
        f"Detection Model: {detection_model}\n"
        f"Model Instructions: {PLAGIARISM_DETECTION_MODELS[detection_model]}\n\n"
        f"Text to analyze:\n{request.text}",
        """
        {
          "score": <score from 0 to 100, overall likelihood of plagiarism>,
          "original_content": <percentage of original content, 0 to 100>,
          "plagiarized_content": <percentage of plagiarized content, 0 to 100>,
          "sources": [
            {
              "url": "<source URL that closely matches the plagiarized content>",
              "similarity": <percentage similarity to this source, 0 to 100>
            }
          ]
        }
        """,
        [
            "Adjust sensitivity and thoroughness to the detection model",
            "List every matching source, or return an empty sources array",
            "original_content and plagiarized_content should add up to 100",
        ],
    )


def _keyword_metrics(keyword: str = "<keyword>") -> str:
    return """{
              "keyword": %s,
              "search_volume": <estimated monthly search volume>,
              "difficulty": <SEO difficulty score 0-100>,
              "cpc": <estimated cost per click in USD>,
              "competition": "<low/medium/high>",
              "trend": "<rising/stable/declining>",
              "related_keywords": ["<keyword1>", "<keyword2>"]
            }""" % json.dumps(keyword)


def build_keyword_research_prompt(request: KeywordRequest) -> str:
    return _render(
        "You are an SEO expert conducting comprehensive keyword research. "
        "Analyze the keyword below and provide detailed keyword research data.",
        f"Keyword: {request.keyword}",
        """
        {
          "primary_keyword": %s,
          "related_keywords": [%s],
          "long_tail_keywords": [%s],
          "questions": ["<question searchers ask about the keyword>"],
          "suggestions": ["<keyword suggestion>"]
        }
        """
        % (
            _keyword_metrics(request.keyword),
            _keyword_metrics("<related keyword>"),
            _keyword_metrics("<long tail keyword>"),
        ),
        [
            "Provide 5 related keywords and 4 long tail keywords",
            "Provide 5 questions and 5 keyword suggestions",
            "Base estimates on commercial intent, industry and search patterns",
            "Competition levels must align with the difficulty scores",
        ],
    )


def build_keyword_competition_prompt(request: KeywordRequest) -> str:
    return _render(
        "You are an SEO expert analyzing keyword competition. Analyze the "
        "keyword below and provide comprehensive competitor insights.",
        f"Keyword: {request.keyword}",
        """
        {
          "keywords": [
            {
              "url": "<competitor domain>",
              "keyword_overlap": <percentage 0-100>,
              "competitors_keywords": <estimated total keywords for this competitor>,
              "common_keywords": <estimated common keywords with target keyword>,
              "share": <estimated market share percentage>,
              "target_keywords": <estimated target keywords count>,
              "dr": <domain rating 0-100>,
              "traffic": <estimated monthly traffic>,
              "value": <estimated traffic value in USD>
            }
          ]
        }
        """,
        [
            "Identify 5 realistic top competitors for this keyword",
            "Provide realistic domain ratings based on typical competitors",
            "Estimate keyword overlap based on semantic similarity",
            "Market share estimates should add up to reasonable percentages",
        ],
    )


def _long_tail_keyword(keyword: str, intent: str) -> str:
    return """{
              "keyword": %s,
              "search_volume": <estimated monthly search volume>,
              "difficulty": <SEO difficulty score 0-100>,
              "cpc": <estimated cost per click in USD>,
              "competition": "<low/medium/high>",
              "intent": "%s",
              "word_count": <number of words in keyword>,
              "opportunity_score": <opportunity score 0-100>
            }""" % (json.dumps(keyword), intent)


def build_long_tail_keyword_prompt(request: KeywordRequest) -> str:
    keyword = request.keyword
    return _render(
        "You are an SEO expert specializing in long tail keyword research. "
        "Analyze the seed keyword below and generate comprehensive long tail "
        "keyword suggestions.",
        f"Seed Keyword: {keyword}",
        """
        {
          "seed_keyword": %s,
          "total_suggestions": <total number of suggestions>,
          "long_tail_keywords": [%s],
          "question_based": [%s],
          "location_based": [%s],
          "commercial_intent": [%s],
          "informational_intent": [%s]
        }
        """
        % (
            json.dumps(keyword),
            _long_tail_keyword(
                "<long tail keyword>",
                "<commercial/informational/navigational/transactional>",
            ),
            _long_tail_keyword(f"what is {keyword}", "informational"),
            _long_tail_keyword(f"{keyword} near me", "navigational"),
            _long_tail_keyword(f"best {keyword} for", "commercial"),
            _long_tail_keyword(f"{keyword} guide", "informational"),
        ),
        [
            "Provide 6 long tail keywords and 2 to 3 entries in every other group",
            "Long tail keywords should have 3 or more words",
            "Long tail keywords generally have lower volume and lower difficulty",
            "Calculate opportunity_score as (search_volume / difficulty) * 10, "
            "capped at 100",
        ],
    )


def build_live_keyword_analyzer_prompt(request: KeywordRequest) -> str:
    return _render(
        "You are an advanced SEO expert and keyword research specialist. "
        "Provide a comprehensive live analysis of the keyword below.",
        f"Target Keyword: {request.keyword}",
        """
        {
          "keyword": %s,
          "search_volume": <estimated monthly search volume>,
          "keyword_difficulty": <difficulty score 0-100>,
          "cpc": <estimated cost per click in USD>,
          "competition": "<low/medium/high>",
          "trend": "<rising/stable/declining>",
          "seasonal_data": [
            {
              "month": "<Jan..Dec>",
              "volume": <estimated volume for the month>,
              "trend": "<rising/stable/declining>"
            }
          ],
          "related_keywords": [
            {
              "keyword": "<related keyword>",
              "volume": <search volume>,
              "difficulty": <difficulty 0-100>,
              "relevance": <relevance percentage 0-100>
            }
          ],
          "serp_features": ["<SERP feature>"],
          "intent_analysis": {
            "primary_intent": "<informational/commercial/transactional/navigational>",
            "intent_distribution": {
              "informational": <percentage>,
              "commercial": <percentage>,
              "transactional": <percentage>,
              "navigational": <percentage>
            }
          },
          "opportunity_score": <opportunity score 0-100 based on volume vs difficulty>,
          "ranking_difficulty": {
            "content_requirement": "<detailed content requirement description>",
            "backlink_requirement": "<detailed backlink requirement description>",
            "domain_authority_needed": <minimum DA score needed>,
            "time_to_rank": "<estimated time to rank description>"
          },
          "market_analysis": {
            "market_size": "<small/medium/large>",
            "growth_potential": "<low/medium/high>",
            "competition_density": "<low/medium/high>",
            "monetization_potential": "<low/medium/high>"
          },
          "recommendations": {
            "content_type": ["<content type>"],
            "target_audience": ["<audience segment>"],
            "content_length": "<recommended content length description>",
            "optimization_tips": ["<optimization tip>"]
          }
        }
        """
        % json.dumps(request.keyword),
        [
            "Provide seasonal_data for all 12 months",
            "Provide 5 related keywords and 5 optimization tips",
            "Reflect seasonal patterns typical for this type of keyword",
            "The percentages in intent_distribution must add up to 100",
        ],
    )


def build_seo_keyword_competition_prompt(request: KeywordRequest) -> str:
    return _render(
        "You are an advanced SEO expert specializing in competitive analysis. "
        "Analyze the keyword below and provide a comprehensive competition "
        "analysis.",
        f"Target Keyword: {request.keyword}",
        """
        {
          "keyword": %s,
          "search_volume": <estimated monthly search volume>,
          "keyword_difficulty": <difficulty score 0-100>,
          "competition_level": "<low/medium/high>",
          "cpc": <estimated cost per click in USD>,
          "top_competitors": [
            {
              "domain": "<competitor domain>",
              "title": "<page title>",
              "meta_description": "<meta description>",
              "content_length": <estimated word count>,
              "domain_authority": <DA score 0-100>,
              "page_authority": <PA score 0-100>,
              "backlinks": <estimated backlink count>,
              "social_signals": <social media engagement>,
              "estimated_traffic": <monthly organic traffic>,
              "keyword_density": <keyword density percentage>,
              "content_quality_score": <content quality 0-100>,
              "technical_seo_score": <technical SEO 0-100>,
              "user_experience_score": <UX score 0-100>,
              "strengths": ["<strength>"],
              "weaknesses": ["<weakness>"],
              "opportunities": ["<opportunity>"]
            }
          ],
          "market_insights": {
            "average_content_length": <average word count of top 10 results>,
            "average_domain_authority": <average DA of top 10 results>,
            "average_backlinks": <average backlinks of top 10 results>,
            "content_gaps": ["<content gap>"],
            "ranking_factors": ["<ranking factor>"]
          },
          "recommendations": {
            "content_strategy": ["<content recommendation>"],
            "technical_improvements": ["<technical recommendation>"],
            "link_building": ["<link building recommendation>"],
            "competitive_advantages": ["<competitive advantage>"]
          },
          "difficulty_breakdown": {
            "content_competition": <content competition difficulty 0-100>,
            "domain_authority_barrier": <DA barrier difficulty 0-100>,
            "backlink_requirement": <backlink difficulty 0-100>,
            "technical_complexity": <technical SEO difficulty 0-100>
          }
        }
        """
        % json.dumps(request.keyword),
        [
            "Analyze the top 3 competitors",
            "Consider search volume, commercial value and industry competition",
            "Consider content depth, technical SEO and link building difficulty",
            "Make sure all scores and estimates are realistic",
        ],
    )
