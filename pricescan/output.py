"""Read and write the JSON price file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence

from pricescan.scraper.errors import ParseError


def write_prices(prices: Sequence[int], path: str | Path) -> Path:
    """Write *prices* to *path* as a JSON array, replacing any existing file."""
    path = Path(path)
    path.write_text(json.dumps(list(prices)), encoding="utf-8")
    return path


def read_prices(path: str | Path) -> List[int]:
    """Load a price file written by :func:`write_prices`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ParseError: If the file is not a JSON array of non-negative integers.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(data, list) or not all(
        isinstance(p, int) and not isinstance(p, bool) and p >= 0 for p in data
    ):
        raise ParseError(f"{path} does not contain a list of prices")
    return data
