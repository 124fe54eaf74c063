"""Data models for the scrape pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

from selector_scraper.core.exceptions import MissingSelectorError, MissingUrlError


class ScrapeConfig(BaseModel):
    """Contents of a target directory's ``setting.json``.

    Missing keys decode to empty strings so that :func:`validate_config`
    can report which field is absent; unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    url: str = ""
    """Absolute URL of the page to scrape."""

    selector: str = ""
    """CSS selector picking the link elements to extract."""


def validate_config(config: ScrapeConfig, source: str | None = None) -> None:
    """Check that both required fields of *config* are set.

    URL syntax is not checked here; a malformed URL surfaces later as a
    :class:`~selector_scraper.core.exceptions.UrlParseError`.

    Args:
        config: The decoded config.
        source: Path of the setting file, used in error context.

    Raises:
        MissingUrlError: If ``config.url`` is empty.
        MissingSelectorError: If ``config.selector`` is empty.
    """
    if not config.url:
        raise MissingUrlError(source)
    if not config.selector:
        raise MissingSelectorError(source)


@dataclass(frozen=True)
class ExtractedRecord:
    """One matched element: its normalized text and resolved absolute link."""

    title: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class FetchResult:
    """Successful response for the target page.

    Attributes:
        url: The requested URL.
        final_url: URL after following redirects.
        status_code: HTTP status code (always 200 once returned by the fetcher).
        content: Raw response body bytes.
    """

    url: str
    final_url: str
    status_code: int
    content: bytes
