from __future__ import annotations

import asyncio
import logging

from resume_feedback.core.config import settings
from resume_feedback.core.observability import text_preview
from resume_feedback.features import build_resume_features
from resume_feedback.schemas.analysis import AnalysisData
from resume_feedback.scoring import compute_scores
from resume_feedback.taxonomy import normalize_industry

from .feedback import build_strengths, build_suggestions, build_weaknesses
from .keyword_gaps import build_ats_analysis, build_industry_analysis, build_keyword_suggestions

logger = logging.getLogger(__name__)


def analyze_resume(text: str, industry: str | None = None) -> AnalysisData:
    """Score a resume and build the full feedback payload.

    The result depends only on ``text`` and ``industry``. Unknown industries keep their
    name in the output but are evaluated against the general keyword set.
    """
    if not isinstance(text, str):
        raise TypeError(f"resume text must be a str, got {type(text).__name__}")

    industry_key = normalize_industry(industry)
    logger.debug("resume_analysis_started industry=%s preview=%r", industry_key, text_preview(text))

    features = build_resume_features(text, industry_key)
    scores = compute_scores(features)

    analysis = AnalysisData(
        overall_score=scores.overall,
        readability_score=scores.readability,
        relevance_score=scores.relevance,
        keywords_score=scores.keywords,
        ats_compatibility_score=scores.ats_compatibility,
        industry_fit_score=scores.industry_fit,
        strengths=build_strengths(features, scores),
        weaknesses=build_weaknesses(features, scores),
        suggestions=build_suggestions(features, scores),
        keyword_suggestions=build_keyword_suggestions(features),
        industry_analysis=build_industry_analysis(features),
        ats_analysis=build_ats_analysis(features, scores),
    )
    logger.info(
        "resume_analysis_completed overall=%s industry=%s words=%s",
        analysis.overall_score,
        industry_key,
        features.statistics.word_count,
    )
    return analysis


async def analyze_resume_async(
    text: str,
    industry: str | None = None,
    *,
    delay_seconds: float | None = None,
) -> AnalysisData:
    """Same result as :func:`analyze_resume`, returned after an optional cosmetic delay."""
    delay = settings.analysis_delay_seconds if delay_seconds is None else max(0.0, delay_seconds)
    if delay:
        await asyncio.sleep(delay)
    return analyze_resume(text, industry)
