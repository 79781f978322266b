"""
Disclosure extraction from TDnet listing pages.

A listing page holds one table (id="main-list-table") with one row per
disclosure. Cells are identified by class:

    kjTime   disclosure time
    kjCode   security code (5 characters on the site, e.g. '72030')
    kjName   company name
    kjTitle  title, inside an <a> linking to the PDF
    kjPlace  exchange

Malformed or unexpected markup never raises: the page is treated as
having no disclosures.
"""

import logging
from typing import List, Optional

from tdnet_scraper.models.disclosure import Disclosure
from tdnet_scraper.parsers.markup import (
    LxmlMarkupParser,
    Markup,
    MarkupNode,
    MarkupParser,
    css_class,
)

logger = logging.getLogger(__name__)


CODE_LENGTH = 4

# HTML5 parsers always insert <tbody>; lxml keeps rows where the source put them
ROW_ANCHOR = (
    "//table[@id='main-list-table']/tbody/tr"
    " | //table[@id='main-list-table']/tr"
)

CELL_ANCHORS = {
    'time': f"td[{css_class('kjTime')}]",
    'code': f"td[{css_class('kjCode')}]",
    'name': f"td[{css_class('kjName')}]",
    'title': f"td[{css_class('kjTitle')}]/a",
    'place': f"td[{css_class('kjPlace')}]",
}


def parse_disclosures(
    markup: Markup,
    parser: Optional[MarkupParser] = None,
    encoding: Optional[str] = None
) -> List[Disclosure]:
    """
    Extract disclosures from one listing page.

    Args:
        markup: Raw HTML of the page (str or bytes)
        parser: MarkupParser to build the tree (default: LxmlMarkupParser)
        encoding: Charset from the HTTP response, used when the page
                  declares none itself (default: UTF-8)

    Returns:
        Disclosures in row order; empty list if the table is missing,
        has no rows, or the markup cannot be processed

    Example:
        >>> disclosures = parse_disclosures(response.content)
        >>> disclosures[0].code
        '7203'
    """
    parser = parser or LxmlMarkupParser()

    try:
        root = parser.parse(markup, encoding=encoding)
        return [parse_row(row) for row in root.select(ROW_ANCHOR)]
    except Exception as e:
        logger.warning(f"Could not extract disclosures from page: {e}")
        return []


def parse_row(row: MarkupNode) -> Disclosure:
    """
    Build a Disclosure from one table row.

    Missing cells produce empty fields.

    Raises:
        pydantic.ValidationError: If the extracted values are not valid
    """
    values = {
        field: row.select_text(anchor).strip()
        for field, anchor in CELL_ANCHORS.items()
    }
    values['code'] = values['code'][:CODE_LENGTH]
    return Disclosure(**values)
