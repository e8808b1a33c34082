from .scorer import (
    compatibility_level,
    compute_scores,
    score_ats_compatibility,
    score_industry_fit,
    score_keywords,
    score_readability,
    score_relevance,
)

__all__ = [
    "compatibility_level",
    "compute_scores",
    "score_ats_compatibility",
    "score_industry_fit",
    "score_keywords",
    "score_readability",
    "score_relevance",
]
