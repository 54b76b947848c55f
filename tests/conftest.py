"""Shared HTML fixtures for the scraper tests."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

# A trimmed-down result page: generated class names carry hash suffixes, and
# each listing has a "Guide price" title next to the real price text.
RESULTS_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Property for sale</title></head>
<body>
  <header><div class="SearchBar-a1b2">Search</div></header>
  <main>
    <div class="css-kdnpqc-ListingsContainer e1uq3vtv1">
      <div class="css-wfndrn-Listing">
        <div class="css-1e28vvi-PriceContainer e2uk8e7">
          <p class="css-1qh4k0o-PriceTitleText e2uk8e6">Guide price</p>
          <p class="css-1o565rw-Text eczcs4p0">£435,000</p>
        </div>
      </div>
      <div class="css-wfndrn-Listing">
        <div class="css-1e28vvi-PriceContainer e2uk8e7">
          <p class="css-1o565rw-Text eczcs4p0">
            £1,250,000
          </p>
        </div>
      </div>
      <div class="css-wfndrn-Listing">
        <div class="css-1e28vvi-PriceContainer e2uk8e7">
          <p class="css-1o565rw-Text eczcs4p0">£99,950</p>
        </div>
      </div>
    </div>
  </main>
</body>
</html>
"""

EMPTY_RESULTS_HTML = """\
<html><body>
  <main><div class="css-kdnpqc-ListingsContainer e1uq3vtv1"></div></main>
</body></html>
"""

NO_RESULTS_HTML = """\
<html><body>
  <main><h1>No results found</h1></main>
</body></html>
"""


@pytest.fixture
def results_soup() -> BeautifulSoup:
    return BeautifulSoup(RESULTS_HTML, "html.parser")


@pytest.fixture
def results_html() -> str:
    return RESULTS_HTML


@pytest.fixture
def empty_results_soup() -> BeautifulSoup:
    return BeautifulSoup(EMPTY_RESULTS_HTML, "html.parser")


@pytest.fixture
def no_results_soup() -> BeautifulSoup:
    return BeautifulSoup(NO_RESULTS_HTML, "html.parser")
