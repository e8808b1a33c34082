from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "scoring.yaml"


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    analysis_delay_seconds: float
    scoring_config_path: Path
    log_text_preview_chars: int


settings = Settings(
    log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").strip().upper(),
    sentry_dsn=_get_env("SENTRY_DSN"),
    analysis_delay_seconds=_get_env_float("ANALYSIS_DELAY_SECONDS", 0.0),
    scoring_config_path=Path(_get_env("SCORING_CONFIG_PATH", str(DEFAULT_SCORING_CONFIG_PATH)) or DEFAULT_SCORING_CONFIG_PATH),
    log_text_preview_chars=max(0, _get_env_int("LOG_TEXT_PREVIEW_CHARS", 100)),
)

if settings.analysis_delay_seconds < 0:
    raise RuntimeError("ANALYSIS_DELAY_SECONDS must be zero or positive.")

__all__ = ["Settings", "settings", "DEFAULT_SCORING_CONFIG_PATH"]
