"""Configuration package for the selector scraper.

Re-exports the settings symbols so that callers can write::

    from selector_scraper.config import get_settings
"""

from __future__ import annotations

from selector_scraper.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
