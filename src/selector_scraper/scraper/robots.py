"""robots.txt compliance check run before the target page is fetched.

The policy is deliberately asymmetric:

- robots.txt answering **403 or any 5xx** denies the crawl (fail closed).
- robots.txt answering any **other non-200** status (e.g. 404) allows it,
  since there are no rules to enforce.
- A **200** response whose body cannot be parsed allows the crawl
  (fail open), while a parsed ruleset is enforced for the target path.
- A **network error** fetching robots.txt is neither: the run stops with
  :class:`~selector_scraper.core.exceptions.RobotsFetchError`.
"""

from __future__ import annotations

import logging
import urllib.parse
import urllib.robotparser

import httpx

from selector_scraper.core.exceptions import (
    DisallowedError,
    RobotsFetchError,
    RobotsUrlParseError,
    UrlParseError,
)
from selector_scraper.scraper.config import (
    ROBOTS_FORBIDDEN_STATUS,
    ROBOTS_OK_STATUS,
    ROBOTS_PATH,
)
from selector_scraper.scraper.url_resolver import parse_origin

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def robots_url_for(url: str) -> str:
    """Return the robots.txt location for *url*'s origin.

    Raises:
        RobotsUrlParseError: If *url* cannot be parsed.
    """
    try:
        origin = parse_origin(url)
    except UrlParseError as exc:
        raise RobotsUrlParseError(str(exc), url=url) from exc
    return f"{origin}{ROBOTS_PATH}"


def _is_server_block(status_code: int) -> bool:
    """Return ``True`` for statuses that deny crawling outright."""
    return status_code == ROBOTS_FORBIDDEN_STATUS or 500 <= status_code < 600


def parse_ruleset(body: bytes) -> urllib.robotparser.RobotFileParser:
    """Parse a robots.txt body into a ruleset.

    Bytes that are not valid UTF-8 (a Latin-1 comment, say) are replaced
    rather than rejected, so the remaining rules are still enforced.

    Raises:
        ValueError: If the body is binary (contains NUL bytes) and so cannot
            be a robots.txt file at all.
    """
    if b"\x00" in body:
        raise ValueError("robots.txt body is binary")
    text = body.decode("utf-8-sig", errors="replace")
    ruleset = urllib.robotparser.RobotFileParser()
    ruleset.parse(text.splitlines())
    return ruleset


# ---------------------------------------------------------------------------
# Public check
# ---------------------------------------------------------------------------


def check_robots(url: str, agent: str, *, client: httpx.Client) -> None:
    """Raise unless robots.txt permits *agent* to fetch *url*.

    Args:
        url: Target page URL.
        agent: robots.txt user-agent token to evaluate rules for.
        client: HTTP client used for the robots.txt request.

    Raises:
        RobotsUrlParseError: If *url* cannot be parsed.
        RobotsFetchError: If robots.txt cannot be fetched (network error).
        DisallowedError: If the server blocks robots.txt (403 / 5xx) or its
            rules disallow the target path for *agent*.
    """
    robots_url = robots_url_for(url)

    try:
        response = client.get(robots_url, follow_redirects=True)
    except httpx.RequestError as exc:
        raise RobotsFetchError(
            f"robots.txt request failed: {exc}", url=robots_url
        ) from exc

    status = response.status_code
    if _is_server_block(status):
        raise DisallowedError(
            f"Crawling not permitted: robots.txt answered {status} {response.reason_phrase}",
            url=robots_url,
            status_code=status,
        )

    if status != ROBOTS_OK_STATUS:
        logger.info(
            "scraper: robots.txt answered HTTP %d for %s; no rules to enforce",
            status,
            robots_url,
        )
        return

    try:
        ruleset = parse_ruleset(response.content)
    except ValueError as exc:
        logger.warning("scraper: failed to parse robots.txt at %s: %s; allowing", robots_url, exc)
        return

    path = urllib.parse.urlsplit(url).path or "/"
    if not ruleset.can_fetch(agent, path):
        raise DisallowedError(
            f"Crawling not permitted for agent '{agent}' by robots.txt rules",
            url=url,
        )
    logger.debug("scraper: robots.txt allows %s for agent %s", path, agent)
