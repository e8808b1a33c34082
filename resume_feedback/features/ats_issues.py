from __future__ import annotations

import re

from resume_feedback.core.config.scoring import get_scoring_number
from resume_feedback.schemas.features import AtsIssues
from resume_feedback.taxonomy.resume_terms import PROBLEMATIC_CHARACTERS

_TABLE_LIKE_SPACING_RE = re.compile(r"\s{3,}|\t{2,}")

SHORT_DOCUMENT = "Resume is too short for effective ATS scanning"
MISSING_EDUCATION = "Education section may be missing or not clearly identified"
MISSING_EXPERIENCE = "Work experience section may be missing or not clearly formatted"
MISSING_CONTACT = "Contact information may be missing or not clearly formatted"
TABLE_SPACING = "Text alignment using spaces or tabs may be interpreted as tables by ATS systems"
PAGE_MARKERS = "Headers or footers with page numbers detected which can confuse ATS systems"


def _structural_issues(
    *, word_count: int, has_education: bool, has_experience: bool, contact_score: int
) -> list[str]:
    issues: list[str] = []
    if word_count < get_scoring_number("ats.min_word_count", 300):
        issues.append(SHORT_DOCUMENT)
    if not has_education:
        issues.append(MISSING_EDUCATION)
    if not has_experience:
        issues.append(MISSING_EXPERIENCE)
    if contact_score < get_scoring_number("ats.min_contact_score", 70):
        issues.append(MISSING_CONTACT)
    return issues


def _formatting_issues(text: str) -> list[str]:
    issues: list[str] = []
    found = [char for char in PROBLEMATIC_CHARACTERS if char in text]
    if found:
        issues.append(f"Special characters like {', '.join(found)} may cause ATS parsing issues")

    if _TABLE_LIKE_SPACING_RE.search(text):
        issues.append(TABLE_SPACING)

    lines = text.split("\n")
    if len(lines) > get_scoring_number("ats.min_lines_for_page_markers", 5):
        head = " ".join(lines[:3]).lower()
        tail = " ".join(lines[-3:]).lower()
        if "page" in head or "page" in tail:
            issues.append(PAGE_MARKERS)
    return issues


def detect_ats_issues(
    text: str,
    *,
    word_count: int,
    has_education: bool,
    has_experience: bool,
    contact_score: int,
) -> AtsIssues:
    """Structural issues come from extracted features; formatting issues need the original glyphs."""
    return AtsIssues(
        structural=_structural_issues(
            word_count=word_count,
            has_education=has_education,
            has_experience=has_experience,
            contact_score=contact_score,
        ),
        formatting=_formatting_issues(text),
    )
