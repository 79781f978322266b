"""
High-level pipeline for one day of TDnet disclosures.

DailyDisclosurePipeline coordinates the complete workflow:
- Parse the target date
- Collect disclosures from every listing page (via DisclosureScraper)
- Write the dated CSV file

Design Philosophy:
- Fail fast: invalid dates and fetch failures abort before anything is written
- No output for no data: an empty day produces no file
"""

import logging
from pathlib import Path
from typing import Optional, Union

from tdnet_scraper.config import get_app_config
from tdnet_scraper.dates import get_formatted_date
from tdnet_scraper.services.csv_writer import get_output_path, write_disclosures_csv
from tdnet_scraper.services.disclosure_scraper import DisclosureScraper

logger = logging.getLogger(__name__)


class DailyDisclosurePipeline:
    """
    Scrape one day's disclosure listing and save it as CSV.

    Usage:
        >>> pipeline = DailyDisclosurePipeline()
        >>> path = pipeline.run('2024-01-15')
        >>> print(path)
        2024-01-15.csv

        >>> # Custom output directory
        >>> pipeline = DailyDisclosurePipeline(output_dir='data/tdnet')
    """

    def __init__(
        self,
        scraper: Optional[DisclosureScraper] = None,
        output_dir: Optional[Union[str, Path]] = None
    ):
        """
        Initialize pipeline.

        Args:
            scraper: DisclosureScraper to use. If not provided, one is created
                     from config for each run and closed when the run ends
            output_dir: CSV directory (default: config CSV_DIRECTORY)
        """
        config = get_app_config()

        self._scraper = scraper
        self.output_dir = output_dir if output_dir is not None else config.csv_directory

    def run(self, date_string: Optional[str] = None) -> Optional[Path]:
        """
        Run the pipeline for one date.

        Args:
            date_string: Target date (e.g., '2024-01-15'); None means today

        Returns:
            Path of the written CSV, or None if no disclosures were found

        Raises:
            InvalidDateFormat: If date_string cannot be parsed (no request is made)
            FetchFailure: If a listing page fails with something other than 404
        """
        date = get_formatted_date(date_string)
        logger.info(f"Collecting TDnet disclosures for {date}")

        if self._scraper is not None:
            result = self._scraper.collect(date)
        else:
            with DisclosureScraper() as scraper:
                result = scraper.collect(date)

        output_path = get_output_path(self.output_dir, date)
        written = write_disclosures_csv(output_path, result.disclosures)

        logger.info(
            f"{date}: {len(result.disclosures)} disclosures, "
            f"{result.pages_fetched} page request(s), "
            f"stop_reason={result.stop_reason}, "
            f"output={written if written else 'none'}"
        )
        return written
