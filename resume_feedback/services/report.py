from __future__ import annotations

from resume_feedback.schemas.analysis import AnalysisData


def _join(values: tuple[str, ...]) -> str:
    return ", ".join(values) if values else "none"


def format_analysis_report(data: AnalysisData, job_titles: list[str] | None = None) -> str:
    """Render an analysis as the plain-text summary users can save or share."""
    lines = [
        "Resume Analysis Results",
        "",
        f"Overall Score: {data.overall_score}/100",
        f"Readability Score: {data.readability_score}/100",
        f"Relevance Score: {data.relevance_score}/100",
        f"Keywords Score: {data.keywords_score}/100",
    ]
    if data.ats_compatibility_score is not None:
        lines.append(f"ATS Compatibility Score: {data.ats_compatibility_score}/100")
    if data.industry_fit_score is not None:
        lines.append(f"Industry Fit Score: {data.industry_fit_score}/100")

    lines.extend(["", "Strengths:"])
    for strength in data.strengths:
        lines.append(f"- {strength.text}")
        lines.append(f"  Impact: {strength.impact}")

    lines.extend(["", "Areas to Improve:"])
    for weakness in data.weaknesses:
        lines.append(f"- {weakness.text}")
        lines.append(f"  Suggestion: {weakness.suggestion}")

    lines.extend(["", "Key Recommendations:"])
    for suggestion in data.suggestions:
        lines.append(f"- {suggestion.title} ({suggestion.priority} priority)")
        lines.append(f"  {suggestion.description}")
        lines.append("  Examples:")
        lines.extend(f"    * {example}" for example in suggestion.examples)

    if data.keyword_suggestions:
        lines.extend(["", "Keyword Optimization:"])
        for group in data.keyword_suggestions:
            lines.append(f"- {group.category}:")
            lines.append(f"  Missing: {_join(group.missing)}")
            lines.append(f"  Overused: {_join(group.overused)}")

    if data.ats_analysis is not None:
        ats = data.ats_analysis
        lines.extend(
            [
                "",
                "ATS Compatibility Analysis:",
                f"- Parseable by ATS: {'Yes' if ats.is_parseable else 'No'}",
                f"- Overall Compatibility: {ats.overall_compatibility.upper()}",
                f"- Missing Keywords: {_join(ats.missing_keywords)}",
                f"- Format Issues: {_join(ats.format_issues)}",
            ]
        )

    if data.industry_analysis is not None:
        industry = data.industry_analysis
        lines.extend(
            [
                "",
                f"Industry Analysis ({industry.industry}):",
                f"- Relevant Skills: {_join(industry.relevant_skills)}",
                f"- Missing Skills: {_join(industry.missing_skills)}",
                f"- Industry Trends: {_join(industry.industry_trends)}",
            ]
        )

    if job_titles:
        lines.extend(["", "Job Recommendations:"])
        lines.extend(f"- {title}" for title in job_titles)

    return "\n".join(lines) + "\n"
