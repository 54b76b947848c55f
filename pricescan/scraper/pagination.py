"""Walk the result pages of a search until one comes back empty.

``collect_all_prices`` is the driver; it only knows how to ask for "the
prices on page N", which keeps it testable with a fake collaborator.
``scrape_prices`` binds it to the real fetch → parse → scan pipeline:

    build URL → fetch → parse → locate listings → scan prices
"""

from __future__ import annotations

from typing import Callable, List

import httpx

from pricescan.config import settings
from pricescan.scraper.errors import PageFetchError, PriceScanError
from pricescan.scraper.fetcher import build_page_url, fetch_page
from pricescan.scraper.listings import parse_listings_page
from pricescan.scraper.models import DEFAULT_LAYOUT, PageLayout, SearchParams

PageFetcher = Callable[[int], List[int]]


def collect_all_prices(fetch_prices: PageFetcher, start_page: int = 1) -> List[int]:
    """Fetch pages ``start_page, start_page + 1, …`` and concatenate their prices.

    Stops at the first page with no prices.  An empty page is the end of the
    results whether its listings container was missing or present but empty.

    Raises:
        PageFetchError: If any page fails to fetch or parse.  Nothing collected
            so far is returned and the page is not retried.
    """
    all_prices: List[int] = []
    page_number = start_page
    while True:
        try:
            prices = fetch_prices(page_number)
        except (httpx.HTTPError, PriceScanError) as exc:
            raise PageFetchError(page_number, exc) from exc

        if not prices:
            return all_prices

        all_prices.extend(prices)
        page_number += 1


def scrape_prices(
    params: SearchParams,
    base_url: str | None = None,
    layout: PageLayout = DEFAULT_LAYOUT,
) -> List[int]:
    """Collect every listing price for *params* across all result pages.

    Args:
        params: Postcode and optional price/bedroom bounds.
        base_url: Search endpoint; defaults to ``settings.base_url``.
        layout: Markup markers used to find listings and prices.
    """
    base = base_url or settings.base_url

    def _fetch_prices(page_number: int) -> List[int]:
        page_url = build_page_url(params, page_number, base_url=base)
        print(f"[scrape] pageUrl = {page_url}")
        root = fetch_page(page_url)
        return parse_listings_page(root, layout)

    return collect_all_prices(_fetch_prices)
