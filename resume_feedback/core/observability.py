from __future__ import annotations

import logging

import sentry_sdk

from resume_feedback.core.config import settings

logger = logging.getLogger(__name__)

_CONFIGURED = False


def configure_logging() -> None:
    """Set up root logging once and hook Sentry in when a DSN is configured."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn)
        logger.info("sentry_enabled")
    _CONFIGURED = True


def text_preview(text: str) -> str:
    limit = settings.log_text_preview_chars
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
