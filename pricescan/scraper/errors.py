"""Exceptions raised by the scraper pipeline.

Per-listing failures (:class:`ParseError`, :class:`NotFoundError`,
:class:`NoTextError`) are recovered by the listing scanner.  Page-level
failures are wrapped in :class:`PageFetchError` and abort the run.
Transport and HTTP status failures are the ``httpx`` exceptions themselves.
"""

from __future__ import annotations


class PriceScanError(Exception):
    """Base class for all pricescan errors."""


class ParseError(PriceScanError, ValueError):
    """Text that should hold a price (or a page/file of them) could not be parsed."""

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class ListingError(PriceScanError):
    """A single listing did not have the expected structure."""


class NotFoundError(ListingError):
    """No price text element inside a price container."""


class NoTextError(ListingError):
    """The price text element exists but holds no child nodes."""


class PageFetchError(PriceScanError):
    """Fetching or parsing a result page failed; carries the page number."""

    def __init__(self, page_number: int, cause: Exception) -> None:
        super().__init__(f"while getting page {page_number}: {cause}")
        self.page_number = page_number
