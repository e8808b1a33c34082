from __future__ import annotations

from resume_feedback.core.config.scoring import get_scoring_number
from resume_feedback.normalize import unique_capped
from resume_feedback.schemas.analysis import AtsAnalysis, IndustryAnalysis, KeywordSuggestion, ScoreCard
from resume_feedback.schemas.features import ResumeFeatures
from resume_feedback.scoring import compatibility_level
from resume_feedback.taxonomy import industry_trends
from resume_feedback.taxonomy.resume_terms import SKILL_MARKERS

TECHNICAL_SKILLS = "Technical Skills"
SOFT_SKILLS = "Soft Skills"
INDUSTRY_TERMS = "Industry Terms"


def _limit(name: str, default: int) -> int:
    return int(get_scoring_number(f"limits.{name}", default))


def looks_like_skill(keyword: str) -> bool:
    lowered = keyword.lower()
    return any(marker in lowered for marker in SKILL_MARKERS)


def _is_skill_phrase(phrase: str) -> bool:
    return "skill" in phrase or "proficient" in phrase


def missing_industry_keywords(features: ResumeFeatures) -> list[str]:
    return unique_capped(features.industry.missing, _limit("missing_keywords", 5))


def build_keyword_suggestions(features: ResumeFeatures) -> list[KeywordSuggestion]:
    missing_limit = _limit("missing_keywords", 5)
    overused_limit = _limit("overused_terms", 3)
    missing = missing_industry_keywords(features)
    overused = features.overused_phrases
    industry_terms = set(features.industry.present) | set(features.industry.missing)

    return [
        KeywordSuggestion(
            category=TECHNICAL_SKILLS,
            missing=unique_capped([term for term in missing if looks_like_skill(term)], missing_limit),
            overused=unique_capped([term for term in overused if _is_skill_phrase(term)], overused_limit),
        ),
        KeywordSuggestion(
            category=SOFT_SKILLS,
            missing=unique_capped(features.missing_soft_skills, missing_limit),
            overused=unique_capped([term for term in overused if not _is_skill_phrase(term)], overused_limit),
        ),
        KeywordSuggestion(
            category=INDUSTRY_TERMS,
            missing=unique_capped([term for term in missing if not looks_like_skill(term)], missing_limit),
            overused=unique_capped([term for term in overused if term in industry_terms], overused_limit),
        ),
    ]


def build_industry_analysis(features: ResumeFeatures) -> IndustryAnalysis:
    coverage = features.industry
    return IndustryAnalysis(
        industry=coverage.industry,
        relevant_skills=unique_capped(coverage.present, _limit("relevant_skills", 5)),
        missing_skills=unique_capped(coverage.missing, _limit("missing_skills", 5)),
        industry_trends=unique_capped(list(industry_trends(coverage.industry)), _limit("industry_trends", 3)),
    )


def build_ats_analysis(features: ResumeFeatures, scores: ScoreCard) -> AtsAnalysis:
    issues = [*features.ats_issues.formatting, *features.ats_issues.structural]
    return AtsAnalysis(
        is_parseable=scores.ats_compatibility > get_scoring_number("ats.parseable_above", 60),
        missing_keywords=missing_industry_keywords(features),
        format_issues=unique_capped(issues, _limit("format_issues", 3)),
        overall_compatibility=compatibility_level(scores.ats_compatibility),
    )
