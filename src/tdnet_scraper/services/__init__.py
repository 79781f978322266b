"""
Service layer for tdnet-scraper.

- PageFetcher: single listing page fetch with 404 / failure classification
- DisclosureScraper: pagination loop over a day's listing pages
- write_disclosures_csv / get_output_path: dated CSV output
"""

from tdnet_scraper.services.page_fetcher import PageFetcher, build_page_url
from tdnet_scraper.services.disclosure_scraper import DisclosureScraper
from tdnet_scraper.services.csv_writer import get_output_path, write_disclosures_csv

__all__ = [
    'PageFetcher',
    'build_page_url',
    'DisclosureScraper',
    'get_output_path',
    'write_disclosures_csv',
]
