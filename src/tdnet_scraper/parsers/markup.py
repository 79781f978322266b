"""
Markup tree abstraction.

Extraction code talks to these interfaces instead of a concrete HTML
library, so the disclosure parser can be tested with fake trees.

Design:
- MarkupParser turns raw markup into a root MarkupNode
- MarkupNode.select() finds descendants by a structural anchor
- Anchors for the lxml implementation are relative XPath expressions
"""

import re
from abc import ABC, abstractmethod
from typing import List, Optional, Union

from lxml import etree
from lxml import html as lxml_html


Markup = Union[str, bytes]

DEFAULT_ENCODING = 'utf-8'

# Browsers look for a charset declaration within the first 1024 bytes
CHARSET_SCAN_BYTES = 1024
META_CHARSET = re.compile(rb'<meta[^>]+charset\s*=', re.IGNORECASE)


class MarkupNode(ABC):
    """A node in a parsed document that can be queried by anchor."""

    @abstractmethod
    def select(self, anchor: str) -> List['MarkupNode']:
        """
        Select nodes matching a structural anchor, in document order.

        Args:
            anchor: Anchor expression understood by the implementation

        Returns:
            Matching nodes (empty list if none match)
        """
        pass

    @abstractmethod
    def text(self) -> str:
        """Concatenated text content of this node and its descendants."""
        pass

    def select_text(self, anchor: str) -> str:
        """
        Text of all nodes matching the anchor, concatenated.

        Returns an empty string when nothing matches.
        """
        return ''.join(node.text() for node in self.select(anchor))


class MarkupParser(ABC):
    """Parses raw markup into a queryable tree."""

    @abstractmethod
    def parse(self, markup: Markup, encoding: Optional[str] = None) -> MarkupNode:
        """
        Parse markup into a root node.

        Args:
            markup: Raw document
            encoding: Charset to assume for bytes that do not declare one

        Raises:
            ValueError: If the markup is empty or cannot be parsed
        """
        pass


class LxmlMarkupNode(MarkupNode):
    """MarkupNode backed by an lxml element; anchors are XPath expressions."""

    def __init__(self, element: etree._Element):
        self._element = element

    def select(self, anchor: str) -> List[MarkupNode]:
        return [
            LxmlMarkupNode(match)
            for match in self._element.xpath(anchor)
            if isinstance(match, etree._Element)
        ]

    def text(self) -> str:
        return ''.join(self._element.itertext())

    def __repr__(self) -> str:
        return f"LxmlMarkupNode(<{self._element.tag}>)"


class LxmlMarkupParser(MarkupParser):
    """
    HTML parser based on lxml.html.

    Decoding rules:
        - str input is re-encoded as UTF-8 and parsed as UTF-8, so an XML
          encoding declaration inside the string is harmless
        - bytes declaring their own charset (<meta charset=...>) are left
          to lxml
        - other bytes are decoded with the given encoding, else UTF-8
    """

    def __init__(self, default_encoding: str = DEFAULT_ENCODING):
        self.default_encoding = default_encoding

    def parse(self, markup: Markup, encoding: Optional[str] = None) -> MarkupNode:
        if not markup or not markup.strip():
            raise ValueError("Document is empty")

        if isinstance(markup, str):
            markup, encoding = markup.encode('utf-8'), 'utf-8'
        elif declares_charset(markup):
            encoding = None
        else:
            encoding = encoding or self.default_encoding

        try:
            parser = lxml_html.HTMLParser(encoding=encoding)
            root = lxml_html.document_fromstring(markup, parser=parser)
        except (etree.ParserError, etree.XMLSyntaxError, LookupError) as e:
            raise ValueError(f"Failed to parse HTML: {e}") from e

        return LxmlMarkupNode(root)


def declares_charset(markup: bytes) -> bool:
    """True if the head of the document carries a <meta ... charset=...> tag."""
    return META_CHARSET.search(markup[:CHARSET_SCAN_BYTES]) is not None


def css_class(name: str) -> str:
    """
    XPath predicate matching elements whose class list contains `name`.

    Example:
        >>> f"td[{css_class('kjTime')}]"
        "td[contains(concat(' ', normalize-space(@class), ' '), ' kjTime ')]"
    """
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')"
