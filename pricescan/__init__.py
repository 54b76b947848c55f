"""pricescan — collect property listing prices from paginated search results.

Public re-exports so callers can write::

    from pricescan import scrape_prices, SearchParams
"""

from pricescan.output import read_prices, write_prices
from pricescan.scraper import PageFetchError, SearchParams, scrape_prices
from pricescan.stats import PriceStats, calculate_price_stats

__all__ = [
    "scrape_prices",
    "SearchParams",
    "PageFetchError",
    "write_prices",
    "read_prices",
    "PriceStats",
    "calculate_price_stats",
]
