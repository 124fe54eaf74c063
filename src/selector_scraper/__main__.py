"""Allow ``python -m selector_scraper``."""

from selector_scraper.cli import main

main()
