"""Constants for the single-page scraper."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Target directory layout
# ---------------------------------------------------------------------------

#: Name of the per-directory input file holding ``{"url", "selector"}``.
SETTING_FILE_NAME: str = "setting.json"

#: Name of the output file written beside ``setting.json``.
RESULT_FILE_NAME: str = "result.json"

#: Scratch file the result is written to before being moved over
#: ``RESULT_FILE_NAME``.
RESULT_TMP_FILE_NAME: str = ".result.json.tmp"

#: Indentation used when writing ``result.json``.
RESULT_JSON_INDENT: int = 2

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

#: The only page status treated as a successful fetch.
PAGE_OK_STATUS: int = 200

# ---------------------------------------------------------------------------
# robots.txt
# ---------------------------------------------------------------------------

#: Path of the robots file relative to the target's origin.
ROBOTS_PATH: str = "/robots.txt"

#: Status that means "crawling forbidden" at the server level.  Any 5xx
#: status is treated the same way.
ROBOTS_FORBIDDEN_STATUS: int = 403

#: Status for which the robots.txt body is parsed and evaluated.
ROBOTS_OK_STATUS: int = 200

# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

#: Attribute holding a matched element's link target.
LINK_ATTRIBUTE: str = "href"

#: Schemes passed through unresolved when strict scheme matching is on.
ABSOLUTE_SCHEMES: frozenset[str] = frozenset({"http", "https"})
