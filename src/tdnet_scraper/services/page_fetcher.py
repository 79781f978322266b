"""
Page Fetcher

Fetches a single TDnet listing page and classifies the outcome:
- 'ok': 2xx response, body returned for parsing
- 'not_found': 404, the listing has no page with this number
- 'failed': anything else (transport error, timeout, other status)

No retries. Classification is returned as a PageResult; the caller decides
whether a failure is fatal.
"""

import logging
from typing import Optional

import requests

from tdnet_scraper.config import get_app_config
from tdnet_scraper.models.date import FormattedDate
from tdnet_scraper.models.results import PageResult

logger = logging.getLogger(__name__)


def build_page_url(base_url: str, date: FormattedDate, page: int) -> str:
    """
    Build the URL of one listing page.

    Example:
        >>> build_page_url('https://www.release.tdnet.info/inbs',
        ...                FormattedDate(year='2024', month='01', day='05'), 1)
        'https://www.release.tdnet.info/inbs/I_list_001_20240105.html'
    """
    return f"{base_url.rstrip('/')}/I_list_{page:03d}_{date.compact}.html"


def header_charset(response: requests.Response) -> Optional[str]:
    """
    Charset declared in the Content-Type header, or None if absent.

    requests reports ISO-8859-1 for any text/* response without a charset;
    that guess is not passed on.
    """
    content_type = response.headers.get('Content-Type', '')
    if 'charset' not in content_type.lower():
        return None
    return requests.utils.get_encoding_from_headers(response.headers)


class PageFetcher:
    """
    HTTP client for TDnet listing pages.

    Usage:
        with PageFetcher() as fetcher:
            result = fetcher.fetch(url)
            if result.is_ok:
                parse_disclosures(result.body)
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None
    ):
        """
        Initialize fetcher.

        Args:
            session: requests Session to use (created if not provided)
            timeout: Request timeout in seconds (default: config REQUEST_TIMEOUT)
            user_agent: User-Agent header (default: config USER_AGENT)
        """
        config = get_app_config()

        self._owns_session = session is None
        self._session = session or requests.Session()
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.user_agent = user_agent or config.user_agent

    @property
    def headers(self) -> dict:
        return {'User-Agent': self.user_agent} if self.user_agent else {}

    def fetch(self, url: str) -> PageResult:
        """
        Perform one GET request and classify the response.

        Args:
            url: Fully-formed listing page URL

        Returns:
            PageResult with status 'ok', 'not_found' or 'failed'
        """
        logger.debug(f"Requesting {url}")

        try:
            response = self._session.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed for {url}: {e}")
            return PageResult.failed(url, e)
        except Exception as e:
            logger.error(f"Unexpected error while fetching {url}: {e}", exc_info=True)
            return PageResult.failed(url, e)

        status_code = response.status_code

        if status_code == 404:
            logger.info(f"Page not found: {url}")
            return PageResult.not_found(url)

        if not 200 <= status_code < 300:
            try:
                response.raise_for_status()
                error = requests.exceptions.HTTPError(
                    f"Unexpected status {status_code} for url: {url}",
                    response=response
                )
            except requests.exceptions.HTTPError as e:
                error = e
            logger.error(f"HTTP {status_code} for {url}: {error}")
            return PageResult.failed(url, error, status_code=status_code)

        encoding = header_charset(response)
        logger.debug(
            f"Fetched {url}: HTTP {status_code}, {len(response.content)} bytes, "
            f"charset={encoding or 'unspecified'}"
        )
        return PageResult.ok(url, response.content, status_code=status_code, encoding=encoding)

    def close(self) -> None:
        """Close the underlying session if this fetcher created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> 'PageFetcher':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
