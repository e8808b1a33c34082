from __future__ import annotations

from resume_feedback.core.config.scoring import get_scoring_number, get_weight_group
from resume_feedback.normalize import clamp_int, round_half_up
from resume_feedback.schemas.analysis import ScoreCard
from resume_feedback.schemas.features import IndustryCoverage, ResumeFeatures, TextStatistics


def _weighted_sum(group: str, values: dict[str, float]) -> float:
    weights = get_weight_group(group)
    missing = set(weights) - set(values)
    if missing:
        raise KeyError(f"No values supplied for weights {sorted(missing)} in '{group}'.")
    return sum(values[key] * weight for key, weight in weights.items())


def score_readability(statistics: TextStatistics) -> int:
    baseline = get_scoring_number("readability.baseline", 80)
    sentence_penalty = abs(
        statistics.words_per_sentence - get_scoring_number("readability.ideal_words_per_sentence", 17)
    ) * get_scoring_number("readability.sentence_length_penalty", 2)
    word_penalty = abs(
        statistics.average_word_length - get_scoring_number("readability.ideal_word_length", 5)
    ) * get_scoring_number("readability.word_length_penalty", 3)
    paragraph_bonus = min(
        get_scoring_number("readability.paragraph_bonus_cap", 20),
        statistics.paragraph_count * get_scoring_number("readability.paragraph_bonus", 2),
    )
    raw = baseline - sentence_penalty - word_penalty + paragraph_bonus
    return clamp_int(
        raw,
        int(get_scoring_number("readability.floor", 40)),
        int(get_scoring_number("readability.ceiling", 100)),
    )


def _category_values(features: ResumeFeatures) -> dict[str, float]:
    return {
        "education": features.education.score,
        "experience": features.experience.score,
        "skills": features.skills.score,
        "achievements": features.achievements.score,
    }


def score_keywords(features: ResumeFeatures) -> int:
    return clamp_int(_weighted_sum("weights.keywords", _category_values(features)), 0, 100)


def score_relevance(features: ResumeFeatures) -> int:
    return clamp_int(_weighted_sum("weights.relevance", _category_values(features)), 0, 100)


def score_ats_compatibility(features: ResumeFeatures) -> int:
    issues = features.ats_issues
    raw = (
        get_scoring_number("ats.baseline", 100)
        - len(issues.structural) * get_scoring_number("ats.structural_penalty", 10)
        - len(issues.formatting) * get_scoring_number("ats.formatting_penalty", 8)
    )
    return clamp_int(raw, int(get_scoring_number("ats.floor", 40)), 100)


def score_industry_fit(coverage: IndustryCoverage) -> int:
    floor = int(get_scoring_number("industry_fit.floor", 40))
    ceiling = int(get_scoring_number("industry_fit.ceiling", 100))
    if not coverage.evaluated or coverage.total_terms == 0:
        return clamp_int(get_scoring_number("industry_fit.default", 50), floor, ceiling)
    fraction = len(coverage.present) / coverage.total_terms
    return clamp_int(round_half_up(fraction * 100), floor, ceiling)


def compute_scores(features: ResumeFeatures) -> ScoreCard:
    readability = score_readability(features.statistics)
    relevance = score_relevance(features)
    keywords = score_keywords(features)
    ats_compatibility = score_ats_compatibility(features)
    industry_fit = score_industry_fit(features.industry)
    overall = _weighted_sum(
        "weights.overall",
        {
            "readability": readability,
            "relevance": relevance,
            "keywords": keywords,
            "ats_compatibility": ats_compatibility,
            "industry_fit": industry_fit,
        },
    )
    return ScoreCard(
        overall=clamp_int(overall, 0, 100),
        readability=readability,
        relevance=relevance,
        keywords=keywords,
        ats_compatibility=ats_compatibility,
        industry_fit=industry_fit,
    )


def compatibility_level(ats_compatibility: int) -> str:
    if ats_compatibility > get_scoring_number("ats.high_above", 75):
        return "high"
    if ats_compatibility > get_scoring_number("ats.parseable_above", 60):
        return "medium"
    return "low"
