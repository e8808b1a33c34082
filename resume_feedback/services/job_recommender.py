from __future__ import annotations

import logging
from typing import Literal

from resume_feedback.core.config.scoring import get_scoring_number
from resume_feedback.normalize import normalize_resume_text, unique_capped
from resume_feedback.taxonomy import get_term_matcher
from resume_feedback.taxonomy.roles import FALLBACK_JOB_TITLES, JOB_TITLES, ROLE_KEYWORDS

logger = logging.getLogger(__name__)

ExperienceTier = Literal["entry", "mid", "senior"]


def _role_hits(text: str) -> dict[str, int]:
    normalized = normalize_resume_text(text)
    return {role: get_term_matcher(keywords).total_hits(normalized) for role, keywords in ROLE_KEYWORDS.items()}


def classify_roles(text: str) -> list[str]:
    """Role categories with at least one whole-word hit, most hits first, top three."""
    hits = _role_hits(text)
    order = {role: index for index, role in enumerate(ROLE_KEYWORDS)}
    ranked = sorted(
        (role for role, count in hits.items() if count > 0),
        key=lambda role: (-hits[role], order[role]),
    )
    return ranked[: int(get_scoring_number("jobs.max_categories", 3))]


def experience_tier(overall_score: int) -> ExperienceTier:
    if overall_score >= get_scoring_number("jobs.senior_min_score", 80):
        return "senior"
    if overall_score >= get_scoring_number("jobs.mid_min_score", 60):
        return "mid"
    return "entry"


def recommend_jobs(text: str, overall_score: int) -> list[str]:
    limit = int(get_scoring_number("limits.job_titles", 5))
    categories = classify_roles(text)
    if not categories:
        logger.debug("job_recommendation_fallback overall=%s", overall_score)
        return unique_capped(list(FALLBACK_JOB_TITLES), limit)

    tier = experience_tier(overall_score)
    titles: list[str] = []
    for category in categories:
        titles.extend(JOB_TITLES[category][tier])
    logger.debug("job_recommendation categories=%s tier=%s", categories, tier)
    return unique_capped(titles, limit)
