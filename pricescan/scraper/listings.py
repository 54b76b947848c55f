"""Locate the listings container in a result page and collect its prices.

Both searches walk the document depth-first in pre-order with an explicit
stack, so arbitrarily deep markup cannot exhaust the interpreter's
recursion limit.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from bs4 import Tag

from pricescan.scraper.errors import ListingError, ParseError
from pricescan.scraper.extractor import class_attribute, extract_price
from pricescan.scraper.models import DEFAULT_LAYOUT, PageLayout


def _iter_elements(root: Tag) -> Iterator[Tag]:
    """Yield *root* and every descendant element in document pre-order."""
    stack: List[Tag] = [root]
    while stack:
        node = stack.pop()
        yield node
        children = [c for c in node.children if isinstance(c, Tag)]
        stack.extend(reversed(children))


def _is_marked(node: Tag, role: str, layout: PageLayout) -> bool:
    return node.name == layout.container_tag and layout.has_marker(class_attribute(node), role)


def find_listings_container(root: Tag, layout: PageLayout = DEFAULT_LAYOUT) -> Optional[Tag]:
    """Return the first element marked as the listings container, or ``None``.

    Document order decides between several candidates; there is no scoring.
    """
    for node in _iter_elements(root):
        if _is_marked(node, "listings_container", layout):
            return node
    return None


def scan_listings(container: Tag, layout: PageLayout = DEFAULT_LAYOUT) -> List[int]:
    """Collect the price of every price container below *container*.

    A listing whose price cannot be found or parsed is reported and skipped;
    it never aborts the scan of the rest of the page.
    """
    prices: List[int] = []
    for node in _iter_elements(container):
        if not _is_marked(node, "price_container", layout):
            continue
        try:
            prices.append(extract_price(node, layout))
        except (ListingError, ParseError) as exc:
            print(f"[scan] skipping listing: {exc}")
    return prices


def parse_listings_page(root: Tag, layout: PageLayout = DEFAULT_LAYOUT) -> List[int]:
    """Return the prices on one parsed result page (``[]`` if it has no listings)."""
    listings = find_listings_container(root, layout)
    if listings is None:
        print("[scan] no listings container in response")
        return []
    return scan_listings(listings, layout)
