"""
Data models for tdnet-scraper.

Pydantic value objects for disclosures and dates, dataclasses for
operation results.
"""

from tdnet_scraper.models.disclosure import Disclosure
from tdnet_scraper.models.date import FormattedDate
from tdnet_scraper.models.results import PageResult, ScrapeResult

__all__ = [
    'Disclosure',
    'FormattedDate',
    'PageResult',
    'ScrapeResult',
]
