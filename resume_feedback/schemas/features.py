from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class CategoryFeature(_FrozenModel):
    present: bool
    matched_terms: list[str] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)

    @property
    def match_count(self) -> int:
        return len(self.matched_terms)


class AchievementFeature(_FrozenModel):
    has_achievements: bool
    has_quantifiable_results: bool
    matched_verbs: list[str] = Field(default_factory=list)
    matched_quantifiers: list[str] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)


class ContactFeature(_FrozenModel):
    has_email: bool
    has_phone: bool
    has_linkedin: bool
    score: int = Field(ge=0, le=100)


class TextStatistics(_FrozenModel):
    word_count: int = Field(ge=0)
    sentence_count: int = Field(ge=0)
    paragraph_count: int = Field(ge=0)
    average_word_length: float = Field(ge=0.0)
    words_per_sentence: float = Field(ge=0.0)


class AtsIssues(_FrozenModel):
    structural: list[str] = Field(default_factory=list)
    formatting: list[str] = Field(default_factory=list)


class IndustryCoverage(_FrozenModel):
    industry: str
    evaluated: bool
    present: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    total_terms: int = Field(ge=0)


class ResumeFeatures(_FrozenModel):
    education: CategoryFeature
    experience: CategoryFeature
    skills: CategoryFeature
    achievements: AchievementFeature
    contact: ContactFeature
    statistics: TextStatistics
    ats_issues: AtsIssues
    industry: IndustryCoverage
    overused_phrases: list[str] = Field(default_factory=list)
    missing_soft_skills: list[str] = Field(default_factory=list)
