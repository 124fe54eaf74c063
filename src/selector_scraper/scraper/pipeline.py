"""Single-run scrape pipeline.

Steps run strictly in order and never loop back::

    load config -> validate -> robots check -> fetch -> parse -> extract -> write

Every fatal step raises a
:class:`~selector_scraper.core.exceptions.SelectorScraperError` subclass and
ends the run; ``result.json`` is only written once extraction has finished.
"""

from __future__ import annotations

from pathlib import Path

import httpx
import structlog

from selector_scraper.config.settings import Settings
from selector_scraper.scraper.config import SETTING_FILE_NAME
from selector_scraper.scraper.config_loader import load_config, resolve_target_dir
from selector_scraper.scraper.extractor import extract
from selector_scraper.scraper.http_fetcher import build_client, fetch_page, parse_page
from selector_scraper.scraper.models import ExtractedRecord, ScrapeConfig, validate_config
from selector_scraper.scraper.result_writer import write_results
from selector_scraper.scraper.robots import check_robots

logger = structlog.get_logger(__name__)


def scrape(config: ScrapeConfig, *, settings: Settings, client: httpx.Client) -> list[ExtractedRecord]:
    """Run the network part of the pipeline for a loaded, validated *config*.

    Callers outside :func:`run` must call :func:`validate_config` first.

    Args:
        config: Decoded target config.
        settings: Process settings (agent token, scheme strictness).
        client: HTTP client for the robots.txt and page requests.

    Returns:
        The extracted records in document order.

    Raises:
        RobotsCheckError: If the robots.txt check fails or denies the crawl.
        PageError: If the page cannot be fetched or parsed.
    """
    check_robots(config.url, settings.robots_user_agent, client=client)
    logger.debug("robots_checked", url=config.url)

    fetched = fetch_page(config.url, client=client)
    document = parse_page(fetched)
    logger.debug("page_parsed", url=config.url, final_url=fetched.final_url)

    return extract(
        document,
        config.selector,
        config.url,
        strict_scheme=settings.strict_url_scheme,
    )


def run(
    target_path: Path | str | None,
    *,
    settings: Settings,
    client: httpx.Client | None = None,
) -> list[ExtractedRecord]:
    """Scrape the page configured in *target_path* and write ``result.json``.

    Args:
        target_path: Directory holding ``setting.json``.
        settings: Process settings.
        client: Optional HTTP client.  When omitted one is built from
            *settings* and closed before returning.

    Returns:
        The records written to ``result.json``.

    Raises:
        SelectorScraperError: Any fatal failure; see
            :mod:`selector_scraper.core.exceptions` for the hierarchy.
    """
    target_dir = resolve_target_dir(target_path)
    config = load_config(target_dir)
    validate_config(config, source=str(target_dir / SETTING_FILE_NAME))

    log = logger.bind(url=config.url, selector=config.selector)
    log.info("scrape_started", path=str(target_dir))

    if client is None:
        with build_client(settings) as owned_client:
            records = scrape(config, settings=settings, client=owned_client)
    else:
        records = scrape(config, settings=settings, client=client)

    result_file = write_results(target_dir, records)
    log.info("results_written", records=len(records), path=str(result_file))
    return records
