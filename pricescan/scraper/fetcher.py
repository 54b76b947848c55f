"""HTTP fetcher for search-result pages."""

from __future__ import annotations

from urllib.parse import quote, urlencode

import httpx
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from pricescan.config import settings
from pricescan.scraper.errors import ParseError
from pricescan.scraper.models import RawPage, SearchParams

# Filters applied to every search; not exposed as options.
_FIXED_FILTERS = {
    "is_retirement_home": "false",
    "is_shared_ownership": "false",
}


def build_page_url(params: SearchParams, page_number: int, base_url: str | None = None) -> str:
    """Return the URL of result page *page_number* for *params*.

    The postcode becomes the last path segment.  Unset bounds are omitted;
    ``radius`` and ``pn`` are always present.  Query keys are sorted so the
    same search always produces the same URL.
    """
    base = (base_url or settings.base_url).rstrip("/")
    url = f"{base}/{quote(params.postcode.strip('/'))}"

    query: dict[str, str] = dict(_FIXED_FILTERS)
    for key in ("price_min", "price_max", "beds_min", "beds_max"):
        value = getattr(params, key)
        if value is not None:
            query[key] = str(value)
    query["radius"] = str(params.radius)
    query["pn"] = str(page_number)

    return f"{url}?{urlencode(sorted(query.items()))}"


def fetch_raw_page(url: str) -> RawPage:
    """GET *url* and return the body as a :class:`RawPage`.

    Raises:
        httpx.TransportError: On network / DNS failure.
        httpx.HTTPStatusError: If the server answers with anything but 200.
    """
    with httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        if response.status_code != httpx.codes.OK:
            raise httpx.HTTPStatusError(
                f"unexpected status {response.status_code} {response.reason_phrase} for {url}",
                request=response.request,
                response=response,
            )
        html = response.text
        status_code = response.status_code

    return RawPage(url=url, html=html, status_code=status_code)


def parse_page(raw: RawPage) -> BeautifulSoup:
    """Build the document tree for *raw*.

    Raises:
        ParseError: If the parser rejects the markup.
    """
    try:
        return BeautifulSoup(raw.html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"while parsing {raw.url} as HTML: {exc}") from exc


def fetch_page(url: str) -> BeautifulSoup:
    """Fetch *url* and return its parsed document tree."""
    return parse_page(fetch_raw_page(url))
