"""Selector scraper: fetch one page, extract selector-matched links, write JSON.

Sub-packages:
- ``config``  — environment-backed settings
- ``core``    — exception hierarchy and logging configuration
- ``scraper`` — the robots check, fetch, extraction and output pipeline
"""

__version__ = "1.0.0"
