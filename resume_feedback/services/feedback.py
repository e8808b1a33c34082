from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from resume_feedback.core.config.scoring import get_scoring_number
from resume_feedback.schemas.analysis import ScoreCard, Strength, Suggestion, Weakness
from resume_feedback.schemas.features import ResumeFeatures

Signal = Callable[[ResumeFeatures, ScoreCard], bool]


@dataclass(frozen=True)
class _Finding:
    when: Signal
    text: str
    detail: str


def _threshold(path: str, default: float) -> float:
    return get_scoring_number(path, default)


def _is_verbose(features: ResumeFeatures, _: ScoreCard) -> bool:
    return features.statistics.word_count > _threshold("feedback.verbose_word_count_above", 700)


def _is_too_short(features: ResumeFeatures, scores: ScoreCard) -> bool:
    return not _is_verbose(features, scores) and features.statistics.word_count < _threshold(
        "feedback.short_word_count_below", 300
    )


_STRENGTHS: tuple[_Finding, ...] = (
    _Finding(
        lambda f, s: f.education.present,
        "Strong educational background",
        "This establishes your academic qualifications for the role.",
    ),
    _Finding(
        lambda f, s: f.experience.present,
        "Clear professional experience",
        "This demonstrates your relevant work history to employers.",
    ),
    _Finding(
        lambda f, s: f.skills.present,
        "Well-defined skill set",
        "This highlights your capabilities that match job requirements.",
    ),
    _Finding(
        lambda f, s: f.achievements.has_achievements,
        "Achievement-focused content",
        "This shows your ability to deliver results, which employers value highly.",
    ),
    _Finding(
        lambda f, s: f.achievements.has_quantifiable_results,
        "Quantified accomplishments",
        "This provides concrete evidence of your contributions and impact.",
    ),
    _Finding(
        lambda f, s: f.contact.score > _threshold("feedback.strong_contact_above", 70),
        "Clear contact information",
        "This makes it easy for employers to reach out to you.",
    ),
    _Finding(
        lambda f, s: s.readability > _threshold("feedback.good_readability_above", 70),
        "Good readability and structure",
        "This helps hiring managers quickly scan and understand your resume.",
    ),
)

_WEAKNESSES: tuple[_Finding, ...] = (
    _Finding(
        lambda f, s: not f.education.present,
        "Missing or unclear education section",
        "Add a dedicated education section with your degrees, institutions, and graduation dates.",
    ),
    _Finding(
        lambda f, s: not f.experience.present,
        "Work experience not clearly defined",
        "Structure your work experience with company names, job titles, dates, and bullet points for responsibilities.",
    ),
    _Finding(
        lambda f, s: not f.skills.present,
        "Skills section could be improved",
        "Add a dedicated skills section with relevant technical and soft skills for your target role.",
    ),
    _Finding(
        lambda f, s: not f.achievements.has_achievements,
        "Lacks achievement-focused content",
        "Reframe job duties as accomplishments by describing problems solved and results achieved.",
    ),
    _Finding(
        lambda f, s: not f.achievements.has_quantifiable_results,
        "Achievements not quantified",
        "Add numbers, percentages, and metrics to demonstrate the scale and impact of your work.",
    ),
    _Finding(
        _is_verbose,
        "Resume may be too verbose",
        "Consider condensing content to make it more focused and scannable.",
    ),
    _Finding(
        _is_too_short,
        "Resume appears too short",
        "Add more detail about your experience, skills, and achievements.",
    ),
    _Finding(
        lambda f, s: s.readability < _threshold("feedback.weak_readability_below", 70),
        "Readability could be improved",
        "Use shorter sentences, bullet points, and clear section headings to improve scannability.",
    ),
)

DEFAULT_STRENGTH = Strength(
    id="strength-default",
    text="Resume content detected",
    impact="You've provided content that can be improved with our suggestions.",
)

DEFAULT_WEAKNESS = Weakness(
    id="weakness-default",
    text="Resume needs more specific content",
    suggestion="Add more detailed information about your experience, skills, and achievements.",
)


@dataclass(frozen=True)
class _SuggestionRule:
    when: Signal
    title: str
    description: str
    examples: tuple[str, ...]
    priority: str


_SUGGESTION_RULES: tuple[_SuggestionRule, ...] = (
    _SuggestionRule(
        lambda f, s: not f.achievements.has_achievements or not f.achievements.has_quantifiable_results,
        "Add more measurable achievements",
        "Focus on quantifiable results instead of just listing job responsibilities.",
        (
            "Increased sales by 25% in the first quarter",
            "Reduced operational costs by $50,000 annually",
            "Managed a team of 12 developers across 3 projects",
        ),
        "high",
    ),
    _SuggestionRule(
        lambda f, s: s.industry_fit < _threshold("suggestions.industry_fit_below", 70),
        "Incorporate more industry-specific keywords",
        "Add relevant terminology and skills for your target industry.",
        (
            "Use technical terms specific to your field",
            "Include industry certifications and specialized training",
            "Mention industry-standard tools and methodologies",
        ),
        "high",
    ),
    _SuggestionRule(
        lambda f, s: s.readability < _threshold("suggestions.readability_below", 70),
        "Improve the formatting for better readability",
        "Make your resume easier to scan quickly by improving its structure and layout.",
        (
            "Use clear section headings with consistent formatting",
            "Ensure proper alignment and spacing throughout",
            "Employ bullet points for better readability",
        ),
        "medium",
    ),
    _SuggestionRule(
        lambda f, s: s.ats_compatibility < _threshold("suggestions.ats_compatibility_below", 70),
        "Optimize for ATS systems",
        "Ensure your resume can be properly parsed by Applicant Tracking Systems.",
        (
            "Use standard section headings (Experience, Education, Skills)",
            "Avoid tables, text boxes, headers, and footers",
            "Match keywords from job descriptions",
        ),
        "high",
    ),
    _SuggestionRule(
        lambda f, s: True,
        "Tailor your resume for specific job targets",
        "Customize your content for each application to show you're a perfect fit.",
        (
            "Emphasize relevant experience for each specific role",
            "Adjust skills section to highlight job requirements",
            "Mirror language from the job description",
        ),
        "medium",
    ),
)


def build_strengths(features: ResumeFeatures, scores: ScoreCard) -> list[Strength]:
    triggered = [finding for finding in _STRENGTHS if finding.when(features, scores)]
    if not triggered:
        return [DEFAULT_STRENGTH]
    return [
        Strength(id=f"strength-{index}", text=finding.text, impact=finding.detail)
        for index, finding in enumerate(triggered, start=1)
    ]


def build_weaknesses(features: ResumeFeatures, scores: ScoreCard) -> list[Weakness]:
    triggered = [finding for finding in _WEAKNESSES if finding.when(features, scores)]
    if not triggered:
        return [DEFAULT_WEAKNESS]
    return [
        Weakness(id=f"weakness-{index}", text=finding.text, suggestion=finding.detail)
        for index, finding in enumerate(triggered, start=1)
    ]


def build_suggestions(features: ResumeFeatures, scores: ScoreCard) -> list[Suggestion]:
    triggered = [rule for rule in _SUGGESTION_RULES if rule.when(features, scores)]
    return [
        Suggestion(
            id=f"suggestion-{index}",
            title=rule.title,
            description=rule.description,
            examples=rule.examples,
            priority=rule.priority,
        )
        for index, rule in enumerate(triggered, start=1)
    ]
