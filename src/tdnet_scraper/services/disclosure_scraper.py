"""
Disclosure Scraper

Collects every disclosure of one date by walking the numbered listing
pages (I_list_001_..., I_list_002_..., ...) in order.

Pagination rules:
- Pages are contiguous from 001, so the first 404 ends the listing
- A page that loads but has no rows also ends the listing
- At most MAX_PAGES_LIMIT (100) pages are requested per run
- Any other fetch failure aborts the run with FetchFailure
"""

import logging
from typing import Callable, List, Optional

from tdnet_scraper.config import MAX_PAGES_LIMIT, get_app_config
from tdnet_scraper.models.date import FormattedDate
from tdnet_scraper.models.disclosure import Disclosure
from tdnet_scraper.models.results import ScrapeResult
from tdnet_scraper.parsers.disclosure_parser import parse_disclosures
from tdnet_scraper.services.page_fetcher import PageFetcher, build_page_url

logger = logging.getLogger(__name__)


class DisclosureScraper:
    """
    Pagination loop over the TDnet daily listing.

    Usage:
        with DisclosureScraper() as scraper:
            disclosures = scraper.scrape(get_formatted_date('2024-01-15'))

            # With run statistics
            result = scraper.collect(date)
            print(result.pages_fetched, result.stop_reason)
    """

    def __init__(
        self,
        fetcher: Optional[PageFetcher] = None,
        base_url: Optional[str] = None,
        max_pages: Optional[int] = None,
        parse: Callable[..., List[Disclosure]] = parse_disclosures
    ):
        """
        Initialize scraper.

        Args:
            fetcher: PageFetcher to use (created from config if not provided)
            base_url: Listing base URL (default: config TDNET_BASE_URL)
            max_pages: Page cap, clamped to 1..100 (default: config MAX_PAGES)
            parse: Page body → disclosures function, called with the body and
                   an encoding keyword (default: parse_disclosures)
        """
        config = get_app_config()

        self._owns_fetcher = fetcher is None
        self._fetcher = fetcher or PageFetcher()
        self.base_url = base_url or config.tdnet_base_url
        self.max_pages = max(1, min(max_pages or config.max_pages, MAX_PAGES_LIMIT))
        self._parse = parse

    def collect(self, date: FormattedDate) -> ScrapeResult:
        """
        Fetch and parse listing pages until the listing ends.

        Args:
            date: Target date

        Returns:
            ScrapeResult with disclosures in page/row order, the number of
            pages requested, and why the loop stopped

        Raises:
            FetchFailure: If any page fails with something other than 404
        """
        result = ScrapeResult()

        for page in range(1, self.max_pages + 1):
            url = build_page_url(self.base_url, date, page)

            page_result = self._fetcher.fetch(url)
            result.pages_fetched += 1

            if page_result.is_not_found:
                logger.info(f"{date}: page {page:03d} does not exist, end of listing")
                result.stop_reason = 'not_found'
                break

            page_result.raise_for_failure()

            page_disclosures = self._parse(page_result.body, encoding=page_result.encoding)
            if not page_disclosures:
                logger.info(f"{date}: page {page:03d} has no disclosures, end of listing")
                result.stop_reason = 'empty_page'
                break

            logger.debug(f"{date}: page {page:03d} yielded {len(page_disclosures)} disclosures")
            result.disclosures.extend(page_disclosures)
        else:
            logger.warning(
                f"{date}: stopped after {self.max_pages} pages without reaching the end of listing"
            )
            result.stop_reason = 'page_limit'

        logger.info(
            f"{date}: collected {len(result.disclosures)} disclosures "
            f"from {result.pages_fetched} page request(s)"
        )
        return result

    def scrape(self, date: FormattedDate) -> List[Disclosure]:
        """
        Collect all disclosures for a date.

        Raises:
            FetchFailure: If any page fails with something other than 404
        """
        return self.collect(date).disclosures

    def close(self) -> None:
        """Close the fetcher if this scraper created it."""
        if self._owns_fetcher:
            self._fetcher.close()

    def __enter__(self) -> 'DisclosureScraper':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
