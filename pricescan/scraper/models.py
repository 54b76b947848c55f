"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

# (attribute value, marker) -> bool
Matcher = Callable[[str, str], bool]


def substring_match(value: str, marker: str) -> bool:
    """Case-sensitive substring test; tolerant of generated class-name suffixes."""
    return marker in value


@dataclass
class SearchParams:
    """Search filters for one run; ``None`` bounds are left out of the URL."""

    postcode: str
    price_min: Optional[int] = None
    price_max: Optional[int] = None
    beds_min: Optional[int] = None
    beds_max: Optional[int] = None
    radius: int = 0


@dataclass
class RawPage:
    """The raw HTTP response for a single result-page fetch."""

    url: str
    html: str
    status_code: int


DEFAULT_MARKERS: Dict[str, str] = {
    "listings_container": "ListingsContainer",
    "price_container": "PriceContainer",
    "price_text": "Text",
    "price_title_text": "PriceTitleText",
}


@dataclass(frozen=True)
class PageLayout:
    """Where prices live in a result page.

    ``markers`` maps each structural role to the marker matched against the
    element's ``class`` attribute; ``match`` decides what "matches" means.
    """

    container_tag: str = "div"
    text_tag: str = "p"
    markers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_MARKERS))
    match: Matcher = substring_match

    def has_marker(self, class_value: str | None, role: str) -> bool:
        if class_value is None:
            return False
        return self.match(class_value, self.markers[role])


DEFAULT_LAYOUT = PageLayout()
