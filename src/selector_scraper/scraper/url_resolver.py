"""Resolution of element hrefs into absolute URLs.

Resolution is origin-based: a relative href is always joined to the root of
the page's origin, never to the page's own path.  ``guide/intro`` found on
``https://example.com/docs/index.html`` resolves to
``https://example.com/guide/intro``.
"""

from __future__ import annotations

import urllib.parse
from typing import NamedTuple

from selector_scraper.core.exceptions import UrlParseError
from selector_scraper.scraper.config import ABSOLUTE_SCHEMES


class Origin(NamedTuple):
    """Scheme and host (with port, if any) of a URL."""

    scheme: str
    host: str

    def __str__(self) -> str:
        return f"{self.scheme}://{self.host}"


def parse_origin(url: str) -> Origin:
    """Return the origin of an absolute URL.

    Raises:
        UrlParseError: If *url* cannot be parsed or lacks a scheme or host.
    """
    try:
        parsed = urllib.parse.urlsplit(url)
        # Accessing ``port`` validates the netloc (e.g. rejects ``host:abc``).
        parsed.port  # noqa: B018
    except ValueError as exc:
        raise UrlParseError(f"Failed to parse URL: {exc}", url=url) from exc
    # Userinfo (``user:pass@``) is not part of the origin.
    host = parsed.netloc.rpartition("@")[2]
    if not parsed.scheme or not host:
        raise UrlParseError("URL has no scheme or host", url=url)
    return Origin(parsed.scheme, host)


def _is_absolute(href: str, strict_scheme: bool) -> bool:
    if not strict_scheme:
        # Loose prefix match; ``httpfoo://x`` passes through as well.
        return href.startswith("http")
    scheme, sep, _ = href.partition("://")
    return bool(sep) and scheme.lower() in ABSOLUTE_SCHEMES


def resolve_url(base_url: str, href: str, *, strict_scheme: bool = False) -> str:
    """Turn *href* into an absolute URL relative to *base_url*'s origin.

    Args:
        base_url: URL of the page the href was found on.
        href: Raw ``href`` attribute value.
        strict_scheme: Only pass hrefs through unchanged when their scheme
            is exactly ``http`` or ``https``.

    Returns:
        *href* unchanged if it is already absolute, otherwise the origin of
        *base_url* joined with *href*.

    Raises:
        UrlParseError: If *href* is relative and *base_url* cannot be parsed.
    """
    if _is_absolute(href, strict_scheme):
        return href
    origin = parse_origin(base_url)
    if href.startswith("/"):
        return f"{origin}{href}"
    return f"{origin}/{href}"
