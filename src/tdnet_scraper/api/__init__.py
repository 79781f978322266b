"""
User-facing API for tdnet-scraper.
"""

from tdnet_scraper.api.pipeline import DailyDisclosurePipeline

__all__ = [
    'DailyDisclosurePipeline',
]
