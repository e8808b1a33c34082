from .services.analysis_service import analyze_resume, analyze_resume_async
from .services.job_recommender import classify_roles, recommend_jobs
from .services.report import format_analysis_report
from .services.sentence_improver import improve_sentence

__all__ = [
    "analyze_resume",
    "analyze_resume_async",
    "classify_roles",
    "recommend_jobs",
    "format_analysis_report",
    "improve_sentence",
]
