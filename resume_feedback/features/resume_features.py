from __future__ import annotations

import logging
import re

from resume_feedback.core.config.scoring import get_scoring_number
from resume_feedback.normalize import clamp_int, normalize_resume_text
from resume_feedback.schemas.features import (
    AchievementFeature,
    CategoryFeature,
    ContactFeature,
    IndustryCoverage,
    ResumeFeatures,
)
from resume_feedback.taxonomy import get_term_matcher, industry_keywords, is_known_industry
from resume_feedback.taxonomy.resume_terms import (
    ACHIEVEMENT_VERBS,
    EDUCATION_TERMS,
    EXPERIENCE_TERMS,
    GENERIC_PHRASES,
    QUANTIFIER_TERMS,
    SKILL_TERMS,
    SOFT_SKILLS,
)

from .ats_issues import detect_ats_issues
from .text_stats import compute_text_statistics

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}")
_PHONE_RE = re.compile(r"(\+\d{1,3}[\s.-])?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}")
_LINKEDIN_RE = re.compile(r"linkedin\.com/in/[a-z0-9_-]+")


def _category_score(category: str, *weighted_counts: tuple[str, int]) -> int:
    score = get_scoring_number(f"categories.{category}.base_offset", 40)
    for weight_key, count in weighted_counts:
        score += count * get_scoring_number(f"categories.{category}.{weight_key}", 0)
    return clamp_int(min(100.0, score), 0, 100)


def extract_category(category: str, terms: tuple[str, ...], normalized: str) -> CategoryFeature:
    matched = get_term_matcher(terms).matched(normalized)
    return CategoryFeature(
        present=bool(matched),
        matched_terms=matched,
        score=_category_score(category, ("per_term_weight", len(matched))),
    )


def extract_achievements(normalized: str) -> AchievementFeature:
    verbs = get_term_matcher(ACHIEVEMENT_VERBS).matched(normalized)
    quantifiers = get_term_matcher(QUANTIFIER_TERMS).matched(normalized)
    return AchievementFeature(
        has_achievements=bool(verbs),
        has_quantifiable_results=bool(quantifiers),
        matched_verbs=verbs,
        matched_quantifiers=quantifiers,
        score=_category_score(
            "achievements",
            ("per_term_weight", len(verbs)),
            ("per_quantifier_weight", len(quantifiers)),
        ),
    )


def extract_contact(normalized: str) -> ContactFeature:
    has_email = bool(_EMAIL_RE.search(normalized))
    has_phone = bool(_PHONE_RE.search(normalized))
    has_linkedin = bool(_LINKEDIN_RE.search(normalized))
    points = (
        (get_scoring_number("contact.email", 40) if has_email else 0)
        + (get_scoring_number("contact.phone", 30) if has_phone else 0)
        + (get_scoring_number("contact.linkedin", 30) if has_linkedin else 0)
    )
    return ContactFeature(
        has_email=has_email,
        has_phone=has_phone,
        has_linkedin=has_linkedin,
        score=clamp_int(points, 0, 100),
    )


def measure_industry_coverage(industry: str, normalized: str) -> IndustryCoverage:
    matcher = get_term_matcher(industry_keywords(industry))
    return IndustryCoverage(
        industry=industry,
        evaluated=is_known_industry(industry),
        present=matcher.matched(normalized),
        missing=matcher.missing(normalized),
        total_terms=len(matcher),
    )


def find_overused_phrases(text: str) -> list[str]:
    """Generic phrases whose case-insensitive count in the raw text reaches the threshold."""
    threshold = int(get_scoring_number("feedback.overused_min_occurrences", 3))
    counts = get_term_matcher(GENERIC_PHRASES).occurrences(text)
    return [phrase for phrase, count in counts.items() if count >= threshold]


def find_missing_soft_skills(normalized: str) -> list[str]:
    matcher = get_term_matcher(tuple(skill.lower() for skill in SOFT_SKILLS))
    absent = set(matcher.missing(normalized))
    return [skill for skill in SOFT_SKILLS if skill.lower() in absent]


def build_resume_features(text: str, industry: str) -> ResumeFeatures:
    normalized = normalize_resume_text(text)
    statistics = compute_text_statistics(text)
    education = extract_category("education", EDUCATION_TERMS, normalized)
    experience = extract_category("experience", EXPERIENCE_TERMS, normalized)
    contact = extract_contact(normalized)

    features = ResumeFeatures(
        education=education,
        experience=experience,
        skills=extract_category("skills", SKILL_TERMS, normalized),
        achievements=extract_achievements(normalized),
        contact=contact,
        statistics=statistics,
        ats_issues=detect_ats_issues(
            text,
            word_count=statistics.word_count,
            has_education=education.present,
            has_experience=experience.present,
            contact_score=contact.score,
        ),
        industry=measure_industry_coverage(industry, normalized),
        overused_phrases=find_overused_phrases(text),
        missing_soft_skills=find_missing_soft_skills(normalized),
    )
    logger.debug(
        "resume_features_extracted education=%s experience=%s skills=%s achievements=%s contact=%s",
        features.education.score,
        features.experience.score,
        features.skills.score,
        features.achievements.score,
        features.contact.score,
    )
    return features
