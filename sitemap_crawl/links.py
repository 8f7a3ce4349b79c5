# sitemap_crawl/links.py
from typing import Iterator, NamedTuple

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag


class HTMLParseError(RuntimeError):
    pass


class Link(NamedTuple):
    href: str
    text: str


def parse_document(body) -> BeautifulSoup:
    """Build the document tree for a fetched page (bytes or str)."""
    try:
        # first of duplicate attributes wins, as in HTML5 tokenizing
        return BeautifulSoup(body, "html.parser", on_duplicate_attribute="ignore")
    except Exception as e:
        raise HTMLParseError(f"unable to parse HTML: {e}") from e


def _text(node) -> str:
    # comments, doctypes, CDATA etc. are NavigableStrings too, but not text
    if isinstance(node, NavigableString):
        return "" if isinstance(node, PreformattedString) else str(node)
    if not isinstance(node, Tag):
        return ""
    joined = "".join(_text(child) for child in node.children)
    return " ".join(joined.split())


def _walk(node):
    yield node
    if isinstance(node, Tag):
        yield from node.descendants


def extract_links(document) -> Iterator[Link]:
    """Yield every <a href> under *document*, in document order.

    Links are produced one at a time while the tree is walked, so the caller
    can filter each before the next is found. A fresh call is needed to walk
    the tree again.
    """
    for node in _walk(document):
        if isinstance(node, Tag) and node.name == "a" and "href" in node.attrs:
            yield Link(node["href"], _text(node))
