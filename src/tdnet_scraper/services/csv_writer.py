"""
CSV output for collected disclosures.

Files are named after the listing date: {directory}/{YYYY}-{MM}-{DD}.csv
Nothing is written when there are no disclosures.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from tdnet_scraper.models.date import FormattedDate
from tdnet_scraper.models.disclosure import Disclosure

logger = logging.getLogger(__name__)


def get_output_path(directory: Union[str, Path], date: FormattedDate) -> Path:
    """
    Build the CSV path for a date.

    An empty directory means the current working directory.

    Example:
        >>> get_output_path('data', FormattedDate(year='2024', month='01', day='05'))
        PosixPath('data/2024-01-05.csv')
    """
    return Path(directory or '.') / f"{date.iso}.csv"


def write_disclosures_csv(
    path: Union[str, Path],
    disclosures: List[Disclosure]
) -> Optional[Path]:
    """
    Write disclosures to a UTF-8 CSV file with a header row.

    Args:
        path: Target file (overwritten if it exists)
        disclosures: Records in output order

    Returns:
        Path written, or None if disclosures was empty (no file is created
        or truncated in that case)
    """
    if not disclosures:
        logger.info(f"No disclosures to write, skipping {path}")
        return None

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(
        [d.to_row() for d in disclosures],
        columns=list(Disclosure.column_names()),
        dtype=str
    )
    df.to_csv(path, index=False, encoding='utf-8', lineterminator='\n')

    logger.info(f"✓ Saved {len(df)} disclosures to {path}")
    return path
