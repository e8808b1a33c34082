from .analysis import (
    AnalysisData,
    AtsAnalysis,
    Compatibility,
    IndustryAnalysis,
    KeywordSuggestion,
    Priority,
    ScoreCard,
    Strength,
    Suggestion,
    Weakness,
)
from .features import (
    AchievementFeature,
    AtsIssues,
    CategoryFeature,
    ContactFeature,
    IndustryCoverage,
    ResumeFeatures,
    TextStatistics,
)

__all__ = [
    "AnalysisData",
    "AtsAnalysis",
    "Compatibility",
    "IndustryAnalysis",
    "KeywordSuggestion",
    "Priority",
    "ScoreCard",
    "Strength",
    "Suggestion",
    "Weakness",
    "AchievementFeature",
    "AtsIssues",
    "CategoryFeature",
    "ContactFeature",
    "IndustryCoverage",
    "ResumeFeatures",
    "TextStatistics",
]
