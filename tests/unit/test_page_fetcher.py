"""
Unit tests for PageFetcher.

All HTTP traffic goes through a mocked requests.Session.
"""

import pytest
from unittest.mock import Mock

import requests

from conftest import make_response

from tdnet_scraper.models import FormattedDate
from tdnet_scraper.services.page_fetcher import PageFetcher, build_page_url


URL = "https://www.release.tdnet.info/inbs/I_list_001_20240105.html"


@pytest.fixture
def session() -> Mock:
    return Mock(spec=requests.Session)


class TestBuildPageUrl:
    """Test listing URL construction."""

    def test_first_page(self):
        date = FormattedDate(year="2024", month="01", day="05")

        assert build_page_url("https://www.release.tdnet.info/inbs", date, 1) == URL

    def test_page_number_zero_padded(self):
        date = FormattedDate(year="2023", month="12", day="29")

        url = build_page_url("https://www.release.tdnet.info/inbs/", date, 42)

        assert url == "https://www.release.tdnet.info/inbs/I_list_042_20231229.html"

    def test_last_page(self):
        date = FormattedDate(year="2023", month="12", day="29")

        assert build_page_url("http://h", date, 100).endswith("I_list_100_20231229.html")


class TestPageFetcherClassification:
    """Test the three-way outcome of a fetch."""

    def test_success_returns_body(self, session):
        session.get.return_value = make_response(200, b"<html>ok</html>", URL)
        fetcher = PageFetcher(session=session)

        result = fetcher.fetch(URL)

        assert result.is_ok
        assert result.body == b"<html>ok</html>"
        assert result.status_code == 200
        session.get.assert_called_once_with(URL, headers={}, timeout=None)

    def test_404_is_not_found(self, session):
        """404 should be the not-found sentinel, not a failure."""
        session.get.return_value = make_response(404, b"Not Found", URL)
        fetcher = PageFetcher(session=session)

        result = fetcher.fetch(URL)

        assert result.is_not_found
        assert not result.is_failed

    @pytest.mark.parametrize("status_code", [500, 503, 403, 400])
    def test_other_error_status_is_failure(self, session, status_code):
        session.get.return_value = make_response(status_code, b"", URL)
        fetcher = PageFetcher(session=session)

        result = fetcher.fetch(URL)

        assert result.is_failed
        assert result.status_code == status_code
        assert isinstance(result.error, requests.exceptions.HTTPError)

    def test_non_2xx_without_http_error_is_failure(self, session):
        """Statuses outside 2xx that requests does not raise for still fail."""
        session.get.return_value = make_response(304, b"", URL)
        fetcher = PageFetcher(session=session)

        result = fetcher.fetch(URL)

        assert result.is_failed
        assert result.status_code == 304

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("connection refused"),
        requests.exceptions.Timeout("read timed out"),
        requests.exceptions.TooManyRedirects("redirect loop"),
    ])
    def test_transport_errors_are_failures(self, session, error):
        session.get.side_effect = error
        fetcher = PageFetcher(session=session)

        result = fetcher.fetch(URL)

        assert result.is_failed
        assert result.error is error
        assert result.status_code is None

    def test_unexpected_exception_is_failure(self, session):
        """Non-requests exceptions during the fetch are failures too."""
        error = RuntimeError("socket exploded")
        session.get.side_effect = error
        fetcher = PageFetcher(session=session)

        result = fetcher.fetch(URL)

        assert result.is_failed
        assert result.error is error

    def test_no_retry(self, session):
        """A failed fetch should be attempted exactly once."""
        session.get.return_value = make_response(500, b"", URL)
        fetcher = PageFetcher(session=session)

        fetcher.fetch(URL)

        assert session.get.call_count == 1


class TestPageFetcherEncoding:
    """Test the charset handed on with the page body."""

    @pytest.mark.parametrize("content_type,expected", [
        ("text/html; charset=UTF-8", "UTF-8"),
        ('text/html; charset="Shift_JIS"', "Shift_JIS"),
    ])
    def test_header_charset_carried(self, session, content_type, expected):
        session.get.return_value = make_response(200, b"<html></html>", URL, content_type=content_type)

        result = PageFetcher(session=session).fetch(URL)

        assert result.encoding == expected

    @pytest.mark.parametrize("content_type", [None, "text/html"])
    def test_no_header_charset_gives_none(self, session, content_type):
        """requests' ISO-8859-1 guess for bare text/html is not passed on."""
        session.get.return_value = make_response(200, b"<html></html>", URL, content_type=content_type)

        result = PageFetcher(session=session).fetch(URL)

        assert result.encoding is None


class TestPageFetcherConfiguration:
    """Test timeout and header configuration."""

    def test_explicit_timeout_and_user_agent(self, session):
        session.get.return_value = make_response(200, b"", URL)
        fetcher = PageFetcher(session=session, timeout=5.0, user_agent="tdnet-scraper/0.1")

        fetcher.fetch(URL)

        session.get.assert_called_once_with(
            URL, headers={"User-Agent": "tdnet-scraper/0.1"}, timeout=5.0
        )

    def test_settings_from_environment(self, session, monkeypatch):
        monkeypatch.setenv("REQUEST_TIMEOUT", "30")
        monkeypatch.setenv("USER_AGENT", "env-agent")
        session.get.return_value = make_response(200, b"", URL)
        fetcher = PageFetcher(session=session)

        fetcher.fetch(URL)

        session.get.assert_called_once_with(URL, headers={"User-Agent": "env-agent"}, timeout=30.0)


class TestPageFetcherLifecycle:
    """Test session ownership."""

    def test_injected_session_not_closed(self, session):
        with PageFetcher(session=session):
            pass

        session.close.assert_not_called()

    def test_own_session_closed(self, monkeypatch):
        created = Mock(spec=requests.Session)
        monkeypatch.setattr(
            "tdnet_scraper.services.page_fetcher.requests.Session",
            Mock(return_value=created)
        )

        with PageFetcher():
            pass

        created.close.assert_called_once()
