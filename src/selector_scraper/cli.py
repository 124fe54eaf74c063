"""Command-line entry point: one scrape per invocation.

The target directory comes from the ``TARGET_PATH`` environment variable
(via :class:`~selector_scraper.config.settings.Settings`).  There are no
command-line flags.

Usage::

    TARGET_PATH=/srv/scrapes/example selector-scraper

Every handled failure is logged as a single ``scrape_failed`` record and the
process returns normally, so a scheduler running one invocation per site
keeps going.
"""

from __future__ import annotations

import uuid

import structlog

from selector_scraper.config.settings import Settings, get_settings
from selector_scraper.core.exceptions import SelectorScraperError
from selector_scraper.core.logging_config import configure_logging, run_id_var
from selector_scraper.scraper.pipeline import run

logger = structlog.get_logger(__name__)


def run_once(settings: Settings) -> bool:
    """Run one scrape for ``settings.target_path`` and log the outcome.

    Returns:
        ``True`` if ``result.json`` was written, ``False`` if the run
        stopped on a handled failure.
    """
    token = run_id_var.set(uuid.uuid4().hex[:12])
    try:
        records = run(settings.target_path, settings=settings)
    except SelectorScraperError as exc:
        logger.error(
            "scrape_failed",
            error_type=type(exc).__name__,
            error=str(exc),
            **exc.context(),
        )
        return False
    else:
        logger.info(
            "scrape_completed",
            records=len(records),
            path=str(settings.target_path),
        )
        return True
    finally:
        run_id_var.reset(token)


def main() -> None:
    """Console-script entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)
    run_once(settings)


if __name__ == "__main__":
    main()
