from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Priority = Literal["high", "medium", "low"]
Compatibility = Literal["high", "medium", "low"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ScoreCard(_CamelModel):
    overall: int = Field(ge=0, le=100)
    readability: int = Field(ge=40, le=100)
    relevance: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)
    ats_compatibility: int = Field(ge=40, le=100)
    industry_fit: int = Field(ge=40, le=100)


class Strength(_CamelModel):
    id: str
    text: str
    impact: str


class Weakness(_CamelModel):
    id: str
    text: str
    suggestion: str


class Suggestion(_CamelModel):
    id: str
    title: str
    description: str
    examples: tuple[str, ...] = Field(default_factory=tuple, max_length=3)
    priority: Priority


class KeywordSuggestion(_CamelModel):
    category: str
    missing: tuple[str, ...] = Field(default_factory=tuple, max_length=5)
    overused: tuple[str, ...] = Field(default_factory=tuple, max_length=3)


class IndustryAnalysis(_CamelModel):
    industry: str
    relevant_skills: tuple[str, ...] = Field(default_factory=tuple, max_length=5)
    missing_skills: tuple[str, ...] = Field(default_factory=tuple, max_length=5)
    industry_trends: tuple[str, ...] = Field(default_factory=tuple, max_length=3)


class AtsAnalysis(_CamelModel):
    is_parseable: bool
    missing_keywords: tuple[str, ...] = Field(default_factory=tuple, max_length=5)
    format_issues: tuple[str, ...] = Field(default_factory=tuple, max_length=3)
    overall_compatibility: Compatibility


class AnalysisData(_CamelModel):
    overall_score: int = Field(ge=0, le=100)
    readability_score: int = Field(ge=0, le=100)
    relevance_score: int = Field(ge=0, le=100)
    keywords_score: int = Field(ge=0, le=100)
    ats_compatibility_score: int | None = Field(default=None, ge=0, le=100)
    industry_fit_score: int | None = Field(default=None, ge=0, le=100)
    strengths: tuple[Strength, ...] = Field(min_length=1)
    weaknesses: tuple[Weakness, ...] = Field(min_length=1)
    suggestions: tuple[Suggestion, ...] = Field(default_factory=tuple)
    keyword_suggestions: tuple[KeywordSuggestion, ...] = Field(default_factory=tuple)
    industry_analysis: IndustryAnalysis | None = None
    ats_analysis: AtsAnalysis | None = None
