from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from resume_feedback.core.config import settings

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_WEIGHT_SUM_TOLERANCE = 1e-6


class ScoringConfigError(RuntimeError):
    pass


def _config_path() -> Path:
    return settings.scoring_config_path


def get_scoring_config() -> dict[str, Any]:
    """Load scoring config from the bundled resume_feedback/config/scoring.yaml and cache it."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    path = _config_path()
    if not path.exists():
        raise ScoringConfigError(
            f"Scoring config not found at '{path}'. "
            "Expected file: resume_feedback/config/scoring.yaml (or set SCORING_CONFIG_PATH)"
        )

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScoringConfigError(f"Failed to read scoring config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ScoringConfigError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise ScoringConfigError(
            f"Invalid scoring config '{path}': expected a top-level mapping."
        )

    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def reset_scoring_config_cache() -> None:
    global _SCORING_CONFIG_CACHE
    _SCORING_CONFIG_CACHE = None


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'weights.overall.readability'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def get_scoring_number(path: str, default: float) -> float:
    value = get_scoring_value(path, default)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ScoringConfigError(f"Scoring value '{path}' must be numeric, got {value!r}.") from exc


def get_weight_group(path: str) -> dict[str, float]:
    """Return a weight mapping and check that it sums to 1.0."""
    group = get_scoring_value(path)
    if not isinstance(group, dict) or not group:
        raise ScoringConfigError(f"Scoring weight group '{path}' is missing or empty.")

    weights: dict[str, float] = {}
    for key, value in group.items():
        try:
            weights[str(key)] = float(value)
        except (TypeError, ValueError) as exc:
            raise ScoringConfigError(f"Weight '{path}.{key}' must be numeric, got {value!r}.") from exc

    total = sum(weights.values())
    if abs(total - 1.0) > _WEIGHT_SUM_TOLERANCE:
        raise ScoringConfigError(f"Weights in '{path}' must sum to 1.0, got {total:.4f}.")
    return weights
