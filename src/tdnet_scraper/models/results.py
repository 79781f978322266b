"""
Result objects for page fetches and scrape runs.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from tdnet_scraper.exceptions import FetchFailure
from tdnet_scraper.models.disclosure import Disclosure


@dataclass
class PageResult:
    """
    Outcome of fetching a single listing page.

    Exactly one of three states:
        - 'ok': body holds the response content
        - 'not_found': the server answered 404 (end of the listing)
        - 'failed': transport error or any other error status; error holds the cause
    """
    url: str
    status: str  # 'ok', 'not_found', 'failed'
    body: Optional[bytes] = None
    status_code: Optional[int] = None
    error: Optional[BaseException] = None
    encoding: Optional[str] = None  # charset from the Content-Type header, if any

    @classmethod
    def ok(
        cls,
        url: str,
        body: bytes,
        status_code: int = 200,
        encoding: Optional[str] = None
    ) -> 'PageResult':
        return cls(url=url, status='ok', body=body, status_code=status_code, encoding=encoding)

    @classmethod
    def not_found(cls, url: str) -> 'PageResult':
        return cls(url=url, status='not_found', status_code=404)

    @classmethod
    def failed(
        cls,
        url: str,
        error: BaseException,
        status_code: Optional[int] = None
    ) -> 'PageResult':
        return cls(url=url, status='failed', status_code=status_code, error=error)

    @property
    def is_ok(self) -> bool:
        return self.status == 'ok'

    @property
    def is_not_found(self) -> bool:
        return self.status == 'not_found'

    @property
    def is_failed(self) -> bool:
        return self.status == 'failed'

    def raise_for_failure(self) -> None:
        """
        Raise FetchFailure if this fetch failed.

        Raises:
            FetchFailure: With the original error chained as __cause__
        """
        if not self.is_failed:
            return
        raise FetchFailure(
            url=self.url,
            reason=str(self.error),
            status_code=self.status_code
        ) from self.error


@dataclass
class ScrapeResult:
    """Records collected for one date plus how the page loop ended."""
    disclosures: List[Disclosure] = field(default_factory=list)
    pages_fetched: int = 0
    stop_reason: Optional[str] = None  # 'not_found', 'empty_page', 'page_limit'

    def __len__(self) -> int:
        return len(self.disclosures)
