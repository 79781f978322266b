"""
Exceptions raised by tdnet-scraper.

Only fatal conditions are exceptions. A missing listing page (HTTP 404) and
a page without disclosure rows are normal end-of-listing outcomes and are
reported through return values instead.
"""

from typing import Optional


class TDnetScraperError(Exception):
    """Base exception for tdnet-scraper errors."""
    pass


class InvalidDateFormat(TDnetScraperError, ValueError):
    """Raised when the target date string cannot be parsed into a calendar date."""

    def __init__(self, date_string: str):
        self.date_string = date_string
        super().__init__(
            f"Invalid date format: '{date_string}'. "
            f"Please enter a date in YYYY-MM-DD format (e.g., '2024-01-15')."
        )


class FetchFailure(TDnetScraperError):
    """
    Raised when a listing page cannot be fetched.

    Covers transport errors, timeouts and any HTTP error status other than
    404. The underlying exception is chained as __cause__.
    """

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to get data from {url}: {reason}")
