from .industries import (
    GENERAL_INDUSTRY,
    INDUSTRY_KEYWORDS,
    industry_keywords,
    industry_trends,
    is_known_industry,
    normalize_industry,
)
from .matcher import TermMatcher, compile_term, get_term_matcher

__all__ = [
    "GENERAL_INDUSTRY",
    "INDUSTRY_KEYWORDS",
    "industry_keywords",
    "industry_trends",
    "is_known_industry",
    "normalize_industry",
    "TermMatcher",
    "compile_term",
    "get_term_matcher",
]
