"""Read-only query access to a parsed product page.

Wraps a BeautifulSoup tree (or any node inside it) behind a small set of
selector queries. Every query reports a missing node as ``None``, never as an
empty string, so callers can tell "absent" from "present but empty".
"""

from typing import List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__ = ["Document", "PARSER"]

# BeautifulSoup backend used when parsing raw markup
PARSER = "html.parser"


class Document:
    """A queryable view over one node of a parsed HTML tree.

    Usage:
        doc = Document.from_html(html)
        title = doc.text_of_first("h1.ui-pdp-title")
        for row in doc.all_matching("table > tbody > tr"):
            row.first_string()
    """

    __slots__ = ("_node",)

    def __init__(self, node: Union[BeautifulSoup, Tag]) -> None:
        self._node = node

    @classmethod
    def from_html(cls, markup: Union[str, bytes]) -> "Document":
        """Parse raw markup into a Document rooted at the whole page."""
        return cls(BeautifulSoup(markup, PARSER))

    @property
    def node(self) -> Tag:
        return self._node

    def __repr__(self) -> str:
        return f"<Document {self._node.name!r}>"

    # -------------------------------------------------------------------------
    # Queries against descendants
    # -------------------------------------------------------------------------

    def _first(self, selector: str) -> Optional[Tag]:
        return self._node.select_one(selector)

    def text_of_first(self, selector: str) -> Optional[str]:
        """Trimmed text content of the first match, or None if nothing matches."""
        el = self._first(selector)
        if el is None:
            return None
        return _node_text(el)

    def attribute_of_first(self, selector: str, attr: str) -> Optional[str]:
        """Attribute value of the first match.

        Returns None if nothing matches or the first match lacks the attribute.
        """
        el = self._first(selector)
        if el is None:
            return None
        return _node_attribute(el, attr)

    def html_of_first(self, selector: str) -> Optional[str]:
        """Inner markup of the first match, or None if nothing matches."""
        el = self._first(selector)
        if el is None:
            return None
        return el.decode_contents().strip()

    def all_matching(self, selector: str) -> List["Document"]:
        """All matches in document order, each scoped to its own subtree."""
        return [Document(el) for el in self._node.select(selector)]

    def first_string(self, selector: Optional[str] = None) -> Optional[str]:
        """First non-blank text node under the first match (or under this node).

        Useful for label elements that also wrap a nested value, e.g.
        ``<p>Color: <span>Red</span></p>`` gives ``"Color:"``.
        """
        el = self._node if selector is None else self._first(selector)
        if el is None:
            return None
        return next(el.stripped_strings, None)

    # -------------------------------------------------------------------------
    # The node itself
    # -------------------------------------------------------------------------

    def text(self) -> str:
        return _node_text(self._node)

    def attribute(self, attr: str) -> Optional[str]:
        return _node_attribute(self._node, attr)

    def children(self) -> List["Document"]:
        """Direct element children in document order (text nodes skipped)."""
        return [Document(el) for el in self._node.find_all(True, recursive=False)]


def _node_text(el: Tag) -> str:
    return el.get_text().strip()


def _node_attribute(el: Tag, attr: str) -> Optional[str]:
    value = el.get(attr)
    if value is None:
        return None
    # Multi-valued attributes (class, rel, ...) come back as lists
    if isinstance(value, list):
        return " ".join(value)
    return str(value)
