"""
HTML parsing modules for TDnet listing pages.

- Markup capability: parse raw HTML into a queryable tree (lxml-backed)
- Disclosure parser: table rows → Disclosure records
"""

from .markup import MarkupNode, MarkupParser, LxmlMarkupNode, LxmlMarkupParser, css_class
from .disclosure_parser import parse_disclosures, parse_row

__all__ = [
    # Markup capability
    'MarkupNode',
    'MarkupParser',
    'LxmlMarkupNode',
    'LxmlMarkupParser',
    'css_class',
    # Extraction
    'parse_disclosures',
    'parse_row',
]
