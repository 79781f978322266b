"""
tdnet-scraper: daily TDnet disclosure listing to CSV.

Main package exports for user-facing API.
"""

from tdnet_scraper.api import DailyDisclosurePipeline
from tdnet_scraper.dates import get_formatted_date
from tdnet_scraper.exceptions import FetchFailure, InvalidDateFormat, TDnetScraperError
from tdnet_scraper.models import Disclosure, FormattedDate
from tdnet_scraper.services import DisclosureScraper, PageFetcher

__all__ = [
    'DailyDisclosurePipeline',
    'DisclosureScraper',
    'PageFetcher',
    'Disclosure',
    'FormattedDate',
    'get_formatted_date',
    'TDnetScraperError',
    'InvalidDateFormat',
    'FetchFailure',
]
