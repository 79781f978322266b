"""
Date handling for the target listing date.

Turns the user-supplied date argument into a FormattedDate used for both
the listing URLs and the output filename.
"""

from datetime import datetime
from typing import Optional

from dateutil.parser import parse as parse_date
from dateutil.parser import ParserError

from tdnet_scraper.exceptions import InvalidDateFormat
from tdnet_scraper.models.date import FormattedDate


def get_formatted_date(date_string: Optional[str] = None) -> FormattedDate:
    """
    Parse a date string into zero-padded year/month/day components.

    Args:
        date_string: Date to parse (e.g., '2024-01-15'). None means today
                     in the local timezone.
                     Missing month or day defaults to January / the 1st.

    Returns:
        FormattedDate for the parsed calendar date

    Raises:
        InvalidDateFormat: If the string does not parse to a valid date

    Example:
        >>> get_formatted_date('2024-01-05').compact
        '20240105'
        >>> get_formatted_date('not-a-date')  # Raises InvalidDateFormat
    """
    if date_string is None:
        return FormattedDate.from_date(datetime.now())

    try:
        parsed = parse_date(date_string, default=datetime(datetime.now().year, 1, 1))
    except (ParserError, ValueError, OverflowError) as e:
        raise InvalidDateFormat(date_string) from e

    return FormattedDate.from_date(parsed)
