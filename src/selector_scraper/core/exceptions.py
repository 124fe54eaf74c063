"""Application-wide exception hierarchy for the selector scraper.

All custom exceptions subclass ``SelectorScraperError`` so that the CLI
adapter can catch every handled failure with a single ``except`` clause and
log it once.

Hierarchy::

    SelectorScraperError
    ├── ConfigError
    │   ├── ConfigMissingPathError
    │   ├── PathNotDirectoryError        (exists: bool)
    │   ├── SettingFileMissingError
    │   ├── SettingFileIsDirectoryError
    │   ├── SettingFileUnreadableError
    │   ├── ConfigDecodeError
    │   └── ConfigValidationError
    │       ├── MissingUrlError
    │       └── MissingSelectorError
    ├── UrlParseError
    ├── RobotsCheckError
    │   ├── RobotsUrlParseError
    │   ├── RobotsFetchError
    │   └── DisallowedError              (status_code: int | None)
    ├── PageError
    │   ├── PageFetchError
    │   ├── PageHttpStatusError          (status_code: int)
    │   └── PageParseError
    └── ResultWriteError
        ├── ResultFileCreateError
        └── ResultEncodeError

Element-level problems (a matched element without ``href``, or an href that
cannot be resolved) never surface through this hierarchy; the extractor
handles them locally.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class SelectorScraperError(Exception):
    """Base class for all selector scraper exceptions.

    Args:
        message: Human-readable description of the failure.
        path: Filesystem path involved in the failure, if any.
        url: URL involved in the failure, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None
        self.url = url

    def context(self) -> dict[str, Any]:
        """Return the non-empty diagnostic fields for structured logging."""
        fields: dict[str, Any] = {"path": self.path, "url": self.url}
        return {key: value for key, value in fields.items() if value is not None}


# ---------------------------------------------------------------------------
# Configuration exceptions
# ---------------------------------------------------------------------------


class ConfigError(SelectorScraperError):
    """Base class for target directory and ``setting.json`` failures."""


class ConfigMissingPathError(ConfigError):
    """Raised when no target directory was supplied (``TARGET_PATH`` unset)."""

    def __init__(self) -> None:
        super().__init__("TARGET_PATH is not set")


class PathNotDirectoryError(ConfigError):
    """Raised when the target path is missing or is not a directory.

    Args:
        path: The offending target path.
        exists: ``False`` when nothing exists at ``path`` at all.
    """

    def __init__(self, path: Path | str, *, exists: bool = True) -> None:
        if exists:
            message = "Target path is not a directory"
        else:
            message = "Target directory does not exist"
        super().__init__(message, path=path)
        self.exists = exists


class SettingFileMissingError(ConfigError):
    """Raised when ``setting.json`` is absent from the target directory."""

    def __init__(self, path: Path | str) -> None:
        super().__init__("Setting file does not exist", path=path)


class SettingFileIsDirectoryError(ConfigError):
    """Raised when a directory sits where ``setting.json`` is expected."""

    def __init__(self, path: Path | str) -> None:
        super().__init__("A directory exists with the setting file's name", path=path)


class SettingFileUnreadableError(ConfigError):
    """Raised when ``setting.json`` exists but cannot be opened or read."""


class ConfigDecodeError(ConfigError):
    """Raised when ``setting.json`` is not a JSON object of string fields."""


class ConfigValidationError(ConfigError):
    """Raised when a decoded config is missing a required field.

    Args:
        field: Name of the empty field (``"url"`` or ``"selector"``).
        path: Setting file the config was loaded from, if known.
    """

    def __init__(self, field: str, path: Path | str | None = None) -> None:
        super().__init__(f"'{field}' is not set", path=path)
        self.field = field


class MissingUrlError(ConfigValidationError):
    """Raised when the config's ``url`` field is empty."""

    def __init__(self, path: Path | str | None = None) -> None:
        super().__init__("url", path=path)


class MissingSelectorError(ConfigValidationError):
    """Raised when the config's ``selector`` field is empty."""

    def __init__(self, path: Path | str | None = None) -> None:
        super().__init__("selector", path=path)


# ---------------------------------------------------------------------------
# URL exceptions
# ---------------------------------------------------------------------------


class UrlParseError(SelectorScraperError):
    """Raised when a URL cannot be parsed into a scheme and host."""


# ---------------------------------------------------------------------------
# robots.txt exceptions
# ---------------------------------------------------------------------------


class RobotsCheckError(SelectorScraperError):
    """Base class for failures of the robots.txt compliance check."""


class RobotsUrlParseError(RobotsCheckError):
    """Raised when the target URL cannot be parsed to locate robots.txt."""


class RobotsFetchError(RobotsCheckError):
    """Raised when robots.txt cannot be fetched because of a network error."""


class DisallowedError(RobotsCheckError):
    """Raised when crawling the target is not permitted.

    Either the robots.txt endpoint answered 403 or 5xx, or its rules deny
    the target path for the configured agent.

    Args:
        message: Human-readable description of the denial.
        url: The robots.txt or target URL involved.
        status_code: HTTP status of the robots.txt response, when the denial
            came from a server-level block rather than from the rules.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code

    def context(self) -> dict[str, Any]:
        fields = super().context()
        if self.status_code is not None:
            fields["status_code"] = self.status_code
        return fields


# ---------------------------------------------------------------------------
# Page exceptions
# ---------------------------------------------------------------------------


class PageError(SelectorScraperError):
    """Base class for failures fetching or parsing the target page."""


class PageFetchError(PageError):
    """Raised when the target page cannot be fetched because of a network error."""


class PageHttpStatusError(PageError):
    """Raised when the target page answers with any status other than 200.

    Args:
        url: The page URL.
        status_code: HTTP status code received.
        reason: HTTP reason phrase, if available.
    """

    def __init__(self, url: str, status_code: int, reason: str = "") -> None:
        message = f"HTTP status {status_code}"
        if reason:
            message += f" {reason}"
        super().__init__(message, url=url)
        self.status_code = status_code
        self.reason = reason

    def context(self) -> dict[str, Any]:
        fields = super().context()
        fields["status_code"] = self.status_code
        return fields


class PageParseError(PageError):
    """Raised when the page body cannot be parsed as HTML."""


# ---------------------------------------------------------------------------
# Result exceptions
# ---------------------------------------------------------------------------


class ResultWriteError(SelectorScraperError):
    """Base class for failures producing ``result.json``."""


class ResultFileCreateError(ResultWriteError):
    """Raised when ``result.json`` cannot be created or written."""


class ResultEncodeError(ResultWriteError):
    """Raised when the extracted records cannot be encoded as JSON."""
