"""Scraper package — result-page fetch & price extraction."""

from pricescan.scraper.errors import (
    NoTextError,
    NotFoundError,
    PageFetchError,
    ParseError,
    PriceScanError,
)
from pricescan.scraper.extractor import extract_price, parse_price
from pricescan.scraper.fetcher import build_page_url, fetch_page
from pricescan.scraper.listings import find_listings_container, parse_listings_page, scan_listings
from pricescan.scraper.models import DEFAULT_LAYOUT, PageLayout, RawPage, SearchParams
from pricescan.scraper.pagination import collect_all_prices, scrape_prices

__all__ = [
    "build_page_url",
    "fetch_page",
    "parse_price",
    "extract_price",
    "find_listings_container",
    "scan_listings",
    "parse_listings_page",
    "collect_all_prices",
    "scrape_prices",
    "SearchParams",
    "RawPage",
    "PageLayout",
    "DEFAULT_LAYOUT",
    "PriceScanError",
    "ParseError",
    "NotFoundError",
    "NoTextError",
    "PageFetchError",
]
