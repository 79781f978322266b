"""
Pytest configuration for unit tests.

Provides fixtures and mocks that apply to all unit tests.
"""

import pytest
from pathlib import Path
from typing import Dict, List, Optional
from unittest.mock import Mock

import requests

# Bound at import so tests that patch requests.Session can still spec mocks.
_REAL_SESSION = requests.Session

from tdnet_scraper import config as config_module


FIXTURES_DIR = Path(__file__).parent.parent / 'fixtures'

CONFIG_ENV_VARS = [
    'CSV_DIRECTORY',
    'TDNET_BASE_URL',
    'MAX_PAGES',
    'REQUEST_TIMEOUT',
    'USER_AGENT',
    'LOG_LEVEL',
]


@pytest.fixture(autouse=True, scope="function")
def isolated_config(monkeypatch, tmp_path):
    """
    Reset the config singleton and environment for ALL unit tests.

    Runs each test from an empty working directory so a developer's .env
    file or CSV_DIRECTORY setting cannot leak into assertions.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    config_module.reset_app_config()
    yield
    config_module.reset_app_config()


def build_row(
    time: str = "15:00",
    code: str = "72030",
    name: str = "トヨタ自動車",
    title: str = "決算短信",
    place: str = "東名"
) -> str:
    """One listing table row in TDnet markup."""
    return (
        "<tr>"
        f'<td class="oddnew-L kjTime" noWrap>{time}</td>'
        f'<td class="oddnew-M kjCode" noWrap>{code}</td>'
        f'<td class="oddnew-M kjName" noWrap>{name}</td>'
        f'<td class="oddnew-M kjTitle" align="left"><a href="x.pdf" target="_blank">{title}</a></td>'
        '<td class="oddnew-M kjXbrl" noWrap></td>'
        f'<td class="oddnew-M kjPlace" noWrap>{place}</td>'
        '<td class="oddnew-R kjHistroy" noWrap></td>'
        "</tr>"
    )


def build_listing_page(rows: List[str], tbody: bool = True, meta_charset: bool = True) -> str:
    """Listing page HTML containing the given rows."""
    body = "".join(rows)
    if tbody:
        body = f"<tbody>{body}</tbody>"
    head = '<meta http-equiv="Content-Type" content="text/html; charset=UTF-8">' if meta_charset else ""
    return (
        f'<html><head>{head}</head>'
        '<body><div id="main-list">'
        f'<table id="main-list-table">{body}</table>'
        '</div></body></html>'
    )


def make_response(
    status_code: int = 200,
    content: bytes = b"",
    url: str = "",
    content_type: Optional[str] = None
) -> requests.Response:
    """A real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    if content_type:
        response.headers["Content-Type"] = content_type
    response._content = content
    response.url = url
    return response


def make_session(pages: Dict[int, object]) -> Mock:
    """
    Mock requests.Session serving listing pages by page number.

    Values may be an int status code (empty body), a str/bytes body (200),
    or an exception instance to raise. Unlisted pages return 404.
    """
    session = Mock(spec=_REAL_SESSION)

    def get(url, headers=None, timeout=None):
        page = int(url.rsplit('/', 1)[-1].split('_')[2])
        value: Optional[object] = pages.get(page, 404)
        if isinstance(value, BaseException):
            raise value
        if isinstance(value, int):
            return make_response(value, b"", url)
        if isinstance(value, str):
            value = value.encode('utf-8')
        return make_response(200, value, url)

    session.get = Mock(side_effect=get)
    return session


@pytest.fixture
def sample_page_bytes() -> bytes:
    """Realistic listing page saved from the portal layout."""
    return (FIXTURES_DIR / 'I_list_001_20240105.html').read_bytes()


@pytest.fixture
def two_row_page() -> str:
    return build_listing_page([
        build_row(time="15:30", code="72030", name="トヨタ自動車", title="決算短信", place="東名"),
        build_row(time="15:00", code="13010", name="極洋", title="自己株式の取得", place="東"),
    ])


@pytest.fixture
def empty_table_page() -> str:
    return build_listing_page([])
