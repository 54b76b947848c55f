"""Price extraction: turns a price-container element into an integer price."""

from __future__ import annotations

import re

from bs4 import NavigableString, Tag

from pricescan.config import settings
from pricescan.scraper.errors import NoTextError, NotFoundError, ParseError
from pricescan.scraper.models import DEFAULT_LAYOUT, PageLayout

_DIGITS = re.compile(r"[0-9]+")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def class_attribute(tag: Tag) -> str | None:
    """Return the ``class`` attribute as one string, or ``None`` if unset.

    BeautifulSoup splits ``class`` into a list; markers are matched against
    the attribute as written, so the list is joined back up.
    """
    value = tag.get("class")
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return " ".join(value)


def _node_text(node) -> str:
    if isinstance(node, NavigableString):
        return str(node)
    return node.get_text()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_price(raw: str, currency_symbol: str | None = None) -> int:
    """Parse a display price such as ``"£435,000"`` into ``435000``.

    Surrounding whitespace is trimmed, every comma is removed and then at
    most one leading currency symbol is stripped.  What remains must be a
    plain base-10 unsigned integer.

    Raises:
        ParseError: If the normalised text is empty or not all digits.
    """
    symbol = settings.currency_symbol if currency_symbol is None else currency_symbol

    text = raw.strip().replace(",", "")
    if symbol and text.startswith(symbol):
        text = text[len(symbol):]

    if not _DIGITS.fullmatch(text):
        raise ParseError(f"cannot parse price from {raw!r}", raw=raw)
    return int(text)


def extract_price(node: Tag, layout: PageLayout = DEFAULT_LAYOUT) -> int:
    """Find the price text among *node*'s direct children and parse it.

    The first child element with the inline-text tag whose class carries the
    ``price_text`` marker but not the ``price_title_text`` marker is used.
    Only direct children are searched.

    Raises:
        NotFoundError: No such child element exists.
        NoTextError: The child exists but is empty.
        ParseError: Its text is not a valid price.
    """
    for child in node.children:
        if not isinstance(child, Tag) or child.name != layout.text_tag:
            continue

        class_value = class_attribute(child)
        if not layout.has_marker(class_value, "price_text"):
            continue
        if layout.has_marker(class_value, "price_title_text"):
            continue

        if not child.contents:
            raise NoTextError("no price in Text node")
        return parse_price(_node_text(child.contents[0]))

    raise NotFoundError("cannot find price data to parse")
