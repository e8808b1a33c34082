from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache


def compile_term(term: str) -> re.Pattern[str]:
    """Compile a whole-word, case-insensitive pattern for a term.

    Word-boundary anchors are only added on sides where the term starts or ends with a
    word character, so symbols such as ``%``, ``$`` or ``c++`` still match.
    """
    escaped = re.escape(term)
    prefix = r"\b" if re.match(r"\w", term) else ""
    suffix = r"\b" if re.search(r"\w$", term) else ""
    return re.compile(f"{prefix}{escaped}{suffix}", re.IGNORECASE)


class TermMatcher:
    def __init__(self, terms: Iterable[str]) -> None:
        unique = tuple(dict.fromkeys(term.strip().lower() for term in terms if term and term.strip()))
        self._terms = unique
        self._patterns = tuple((term, compile_term(term)) for term in unique)

    @property
    def terms(self) -> tuple[str, ...]:
        return self._terms

    def __len__(self) -> int:
        return len(self._terms)

    def matched(self, text: str) -> list[str]:
        return [term for term, pattern in self._patterns if pattern.search(text)]

    def missing(self, text: str) -> list[str]:
        return [term for term, pattern in self._patterns if not pattern.search(text)]

    def occurrences(self, text: str) -> dict[str, int]:
        return {term: len(pattern.findall(text)) for term, pattern in self._patterns}

    def total_hits(self, text: str) -> int:
        return sum(len(pattern.findall(text)) for _, pattern in self._patterns)


@lru_cache(maxsize=64)
def get_term_matcher(terms: tuple[str, ...]) -> TermMatcher:
    return TermMatcher(terms)
