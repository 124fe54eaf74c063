"""Synchronous HTTP fetch and HTML parse of the target page.

Uses ``httpx`` for the request and BeautifulSoup for parsing.  There is no
retry: a network error, a status other than 200, or a parse failure ends the
run.
"""

from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup

from selector_scraper.config.settings import Settings
from selector_scraper.core.exceptions import (
    PageFetchError,
    PageHttpStatusError,
    PageParseError,
)
from selector_scraper.scraper.config import PAGE_OK_STATUS
from selector_scraper.scraper.models import FetchResult

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> httpx.Client:
    """Return an :class:`httpx.Client` configured from *settings*.

    The caller owns the client and must close it (use it as a context
    manager).  When ``request_timeout`` is unset httpx's default applies.
    """
    kwargs: dict = {"headers": {"User-Agent": settings.user_agent}}
    if settings.request_timeout is not None:
        kwargs["timeout"] = settings.request_timeout
    return httpx.Client(**kwargs)


def fetch_page(url: str, *, client: httpx.Client) -> FetchResult:
    """Fetch the target page.

    Args:
        url: Page URL.
        client: HTTP client to send the request with.

    Returns:
        A :class:`FetchResult` for a 200 response.

    Raises:
        PageFetchError: On any network-level failure.
        PageHttpStatusError: If the final response status is not 200.
    """
    try:
        response = client.get(url, follow_redirects=True)
    except httpx.RequestError as exc:
        raise PageFetchError(f"HTTP request failed: {exc}", url=url) from exc

    if response.status_code != PAGE_OK_STATUS:
        raise PageHttpStatusError(url, response.status_code, response.reason_phrase)

    logger.debug(
        "scraper: fetched %s (%d bytes) from %s",
        url,
        len(response.content),
        response.url,
    )
    return FetchResult(
        url=url,
        final_url=str(response.url),
        status_code=response.status_code,
        content=response.content,
    )


def parse_page(result: FetchResult) -> BeautifulSoup:
    """Parse the fetched body into a document.

    Raw bytes are handed over so that BeautifulSoup can detect the encoding
    from the markup itself.

    Raises:
        PageParseError: If the body cannot be parsed.
    """
    try:
        return BeautifulSoup(result.content, "html.parser")
    except Exception as exc:  # noqa: BLE001
        raise PageParseError(f"Failed to parse HTML: {exc}", url=result.url) from exc
