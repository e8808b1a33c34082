from .analysis_service import analyze_resume, analyze_resume_async
from .job_recommender import classify_roles, experience_tier, recommend_jobs
from .report import format_analysis_report
from .sentence_improver import improve_sentence

__all__ = [
    "analyze_resume",
    "analyze_resume_async",
    "classify_roles",
    "experience_tier",
    "recommend_jobs",
    "format_analysis_report",
    "improve_sentence",
]
