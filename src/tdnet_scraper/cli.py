"""
Command-line entry point.

Usage:
    tdnet-scraper 2024-01-15
    tdnet-scraper                  # today
    python -m tdnet_scraper 2024-01-15 --output-dir data/tdnet -v
"""

import argparse
import logging
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from tdnet_scraper.api.pipeline import DailyDisclosurePipeline
from tdnet_scraper.config import get_app_config
from tdnet_scraper.exceptions import FetchFailure, InvalidDateFormat

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tdnet-scraper",
        description="Save one day's TDnet disclosure listing as CSV"
    )
    parser.add_argument(
        "date",
        nargs="?",
        default=None,
        help="Target date in YYYY-MM-DD format (default: today)"
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the CSV file (overrides CSV_DIRECTORY)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the scraper from the command line.

    Returns:
        Process exit code: 0 on success (including days with no
        disclosures), 1 on invalid configuration, invalid date or
        fetch failure
    """
    load_dotenv()
    args = parse_args(argv)

    try:
        config = get_app_config()
    except ValidationError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format=LOG_FORMAT
    )

    pipeline = DailyDisclosurePipeline(output_dir=args.output_dir)

    try:
        path = pipeline.run(args.date)
    except InvalidDateFormat as e:
        logger.error(str(e))
        return 1
    except FetchFailure as e:
        logger.error(f"Aborted: {e}", exc_info=args.verbose)
        return 1

    if path is None:
        logger.info("No disclosures found, no file written")
    return 0
