from __future__ import annotations

import re

from resume_feedback.schemas.features import TextStatistics

_WORD_RE = re.compile(r"\b\w+\b")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


def compute_text_statistics(text: str) -> TextStatistics:
    words = _WORD_RE.findall(text)
    sentences = [chunk for chunk in _SENTENCE_SPLIT_RE.split(text) if chunk]
    paragraphs = [chunk for chunk in _PARAGRAPH_SPLIT_RE.split(text) if chunk]

    word_count = len(words)
    # Denominators are floored at 1 so empty documents never divide by zero.
    average_word_length = sum(len(word) for word in words) / max(1, word_count)
    words_per_sentence = word_count / max(1, len(sentences))

    return TextStatistics(
        word_count=word_count,
        sentence_count=len(sentences),
        paragraph_count=len(paragraphs),
        average_word_length=average_word_length,
        words_per_sentence=words_per_sentence,
    )
