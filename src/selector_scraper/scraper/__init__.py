"""Single-page scrape pipeline.

Sub-modules:
- ``config``        — file names, status codes and other constants
- ``models``        — ``ScrapeConfig``, ``ExtractedRecord``, ``FetchResult``
- ``config_loader`` — target directory checks and ``setting.json`` decoding
- ``robots``        — robots.txt compliance check
- ``http_fetcher``  — httpx page fetch and BeautifulSoup parse
- ``url_resolver``  — origin-based href resolution
- ``extractor``     — selector matching and title normalization
- ``result_writer`` — ``result.json`` output
- ``pipeline``      — orchestration of one run
"""
