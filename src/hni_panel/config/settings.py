from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from hni_panel._defaults import (
    DEFAULT_CONCURRENCY,
    DEFAULT_MODEL,
    DEFAULT_NEWS_LIMIT,
    MAX_NEWS_LIMIT,
)

logger = logging.getLogger(__name__)


def _int_from_env(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %s", name, raw, default)
        return default


@dataclass(slots=True)
class PanelSettings:
    """Runtime settings for a panel run."""

    model: str = DEFAULT_MODEL
    news_limit: int = DEFAULT_NEWS_LIMIT
    concurrency: int = DEFAULT_CONCURRENCY
    seed: int | None = None

    def __post_init__(self) -> None:
        self.news_limit = max(0, min(MAX_NEWS_LIMIT, self.news_limit))
        self.concurrency = max(1, self.concurrency)

    @classmethod
    def from_env(cls) -> "PanelSettings":
        """Build settings from ``HNI_PANEL_*`` environment variables."""
        return cls(
            model=os.environ.get("HNI_PANEL_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
            news_limit=_int_from_env("HNI_PANEL_NEWS_LIMIT", DEFAULT_NEWS_LIMIT),
            concurrency=_int_from_env("HNI_PANEL_CONCURRENCY", DEFAULT_CONCURRENCY),
            seed=_int_from_env("HNI_PANEL_SEED", None),
        )
