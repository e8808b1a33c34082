from .ats_issues import detect_ats_issues
from .resume_features import (
    build_resume_features,
    extract_achievements,
    extract_category,
    extract_contact,
    find_missing_soft_skills,
    find_overused_phrases,
    measure_industry_coverage,
)
from .text_stats import compute_text_statistics

__all__ = [
    "build_resume_features",
    "compute_text_statistics",
    "detect_ats_issues",
    "extract_achievements",
    "extract_category",
    "extract_contact",
    "find_missing_soft_skills",
    "find_overused_phrases",
    "measure_industry_coverage",
]
