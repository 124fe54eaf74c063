"""Application settings loaded from environment variables.

Uses Pydantic Settings v2 for validated, type-safe configuration.
The process environment is read only here; the scrape pipeline receives a
``Settings`` instance and never calls ``os.getenv`` itself.

Usage::

    from selector_scraper.config.settings import get_settings

    settings = get_settings()
    target_dir = settings.target_path
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide configuration backed by environment variables and an optional .env file.

    Only ``TARGET_PATH`` is needed for a run; everything else has a default
    matching the behaviour of the original single-binary scraper.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # ------------------------------------------------------------------
    # Target
    # ------------------------------------------------------------------

    target_path: Optional[Path] = None
    """Directory holding ``setting.json``; ``result.json`` is written beside it."""

    @field_validator("target_path", mode="before")
    @classmethod
    def _empty_target_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    user_agent: str = "SelectorScraper/1.0"
    """User-Agent header sent with both the robots.txt and the page request."""

    request_timeout: Optional[float] = None
    """Per-request timeout in seconds.  ``None`` keeps httpx's default."""

    # ------------------------------------------------------------------
    # Compliance
    # ------------------------------------------------------------------

    robots_user_agent: str = "bot"
    """Agent token matched against ``User-agent`` groups in robots.txt."""

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    strict_url_scheme: bool = False
    """Pass hrefs through unresolved only when their scheme is exactly
    ``http`` or ``https``.

    The default keeps the historical prefix check, where any href starting
    with the letters ``http`` (including ``httpfoo://x``) is kept as-is.
    """

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    log_level: str = "INFO"
    """Root log level.  ``DEBUG`` switches to coloured console output."""


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings singleton.

    Uses ``functools.lru_cache`` so that Pydantic Settings reads the environment
    and .env file exactly once per process lifetime.  In tests, call
    ``get_settings.cache_clear()`` after patching environment variables.

    Returns:
        Settings: The validated, immutable settings object.
    """
    return Settings()
