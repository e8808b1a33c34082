from __future__ import annotations

import random
import re

from resume_feedback.taxonomy import normalize_industry
from resume_feedback.taxonomy.industries import INDUSTRY_SENTENCE_TERMS

INVALID_SENTENCE_MESSAGE = "Please provide a valid sentence to improve."

_PASSIVE_REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bwas (?:responsible for|tasked with)\b", re.IGNORECASE), "managed"),
    (re.compile(r"\bwas (?:involved in|part of)\b", re.IGNORECASE), "contributed to"),
)

_ACTION_START_RE = re.compile(
    r"^(?:led|managed|created|developed|implemented|achieved|increased|reduced|improved|"
    r"spearheaded|delivered|orchestrated)\b",
    re.IGNORECASE,
)
_NUMBER_RE = re.compile(r"\d|%")

# Keyword stems checked in order; the first hit picks the leading verb.
_VERB_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("develop", "creat"), "Developed"),
    (("manage", "lead"), "Managed"),
    (("improv", "enhanc"), "Improved"),
)

FILLER_ACTION_VERBS: tuple[str, ...] = (
    "Spearheaded", "Implemented", "Delivered", "Orchestrated", "Developed", "Managed", "Achieved",
)

QUANTIFIED_RESULTS: tuple[str, ...] = (
    "resulting in 20% efficiency improvement",
    "increasing team productivity by 25%",
    "reducing costs by 15%",
    "saving over 10 hours per week",
    "achieving 30% faster delivery",
)

_MIN_WORDS_FOR_RESULT = 5


def _active_voice(sentence: str) -> str:
    for pattern, replacement in _PASSIVE_REWRITES:
        sentence = pattern.sub(replacement, sentence)
    return sentence


def _leading_verb(sentence: str, rng: random.Random) -> str:
    lowered = sentence.lower()
    for stems, verb in _VERB_HINTS:
        if any(stem in lowered for stem in stems):
            return verb
    return rng.choice(FILLER_ACTION_VERBS)


def _with_leading_verb(sentence: str, rng: random.Random) -> str:
    if _ACTION_START_RE.match(sentence):
        return sentence
    verb = _leading_verb(sentence, rng)
    return f"{verb} {sentence[:1].lower()}{sentence[1:]}"


def improve_sentence(sentence: str, industry: str | None = None, *, rng: random.Random | None = None) -> str:
    """Rewrite one resume line into a stronger, action-led statement.

    Phrasing is picked at random among equivalent options; pass a seeded ``rng`` for
    repeatable output.
    """
    if not sentence or not sentence.strip():
        return INVALID_SENTENCE_MESSAGE

    rng = rng or random.Random()
    word_count = len(sentence.split())
    improved = _with_leading_verb(_active_voice(sentence.strip()), rng)

    if not _NUMBER_RE.search(improved) and word_count > _MIN_WORDS_FOR_RESULT:
        improved = f"{improved}, {rng.choice(QUANTIFIED_RESULTS)}"

    if industry:
        terms = INDUSTRY_SENTENCE_TERMS.get(normalize_industry(industry), ())
        lowered = improved.lower()
        if terms and not any(term.lower() in lowered for term in terms):
            improved = f"{improved} utilizing {rng.choice(terms)}"

    return improved
