from __future__ import annotations

import math
import re

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def normalize_resume_text(text: str) -> str:
    """Lowercase copy of the text with C0/C1 control characters replaced by spaces."""
    return _CONTROL_CHARS_RE.sub(" ", (text or "").lower())


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_int(value: float, min_value: int, max_value: int) -> int:
    return max(min_value, min(max_value, round_half_up(value)))


def unique_capped(items: list[str], limit: int) -> list[str]:
    return list(dict.fromkeys(items))[: max(0, limit)]
