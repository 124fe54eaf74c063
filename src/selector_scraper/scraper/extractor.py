"""Selector-driven extraction of ``(title, url)`` records from a parsed page.

Element-level problems never abort the extraction:

- A matched element with no ``href`` is skipped silently; selectors often
  match non-link elements too.
- An href that cannot be resolved is skipped with a warning.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from selector_scraper.core.exceptions import UrlParseError
from selector_scraper.scraper.config import LINK_ATTRIBUTE
from selector_scraper.scraper.models import ExtractedRecord
from selector_scraper.scraper.url_resolver import resolve_url

logger = logging.getLogger(__name__)

# ASCII whitespace only; U+3000 and NBSP are part of the title.
_WHITESPACE_RUN = re.compile(r"[\t\n\f\r ]+")


def normalize_title(raw: str) -> str:
    """Drop tab characters and collapse each whitespace run into one space.

    Leading and trailing whitespace is collapsed, not stripped:
    ``"\\n  Title\\n"`` becomes ``" Title "``.
    """
    return _WHITESPACE_RUN.sub(" ", raw.replace("\t", ""))


def extract(
    document: BeautifulSoup,
    selector: str,
    base_url: str,
    *,
    strict_scheme: bool = False,
) -> list[ExtractedRecord]:
    """Return one record per matched link element, in document order.

    Args:
        document: Parsed page.
        selector: CSS selector picking candidate elements.
        base_url: URL of the page, used to resolve relative hrefs.
        strict_scheme: Forwarded to :func:`resolve_url`.

    Returns:
        A possibly empty list of :class:`ExtractedRecord`.
    """
    try:
        elements = document.select(selector)
    except SelectorSyntaxError as exc:
        logger.warning("scraper: invalid selector %r matches nothing: %s", selector, exc)
        return []

    records: list[ExtractedRecord] = []
    for element in elements:
        href = element.get(LINK_ATTRIBUTE)
        if href is None:
            continue
        try:
            url = resolve_url(base_url, href, strict_scheme=strict_scheme)
        except UrlParseError as exc:
            logger.warning("scraper: skipping element with href %r: %s", href, exc)
            continue
        records.append(ExtractedRecord(title=normalize_title(element.get_text()), url=url))

    logger.debug(
        "scraper: selector %r matched %d elements, extracted %d records",
        selector,
        len(elements),
        len(records),
    )
    return records
