"""Tests for summary statistics and the JSON price file."""

from __future__ import annotations

import json

import pytest

from pricescan.output import read_prices, write_prices
from pricescan.scraper.errors import ParseError
from pricescan.stats import PriceStats, calculate_price_stats


class TestCalculatePriceStats:
    def test_mean_and_sample_stddev(self) -> None:
        stats = calculate_price_stats([100, 200, 300])
        assert stats.mean == pytest.approx(200.0)
        assert stats.stddev == pytest.approx(100.0)

    def test_single_price_has_zero_stddev(self) -> None:
        stats = calculate_price_stats([100])
        assert stats.mean == pytest.approx(100.0)
        assert stats.stddev == 0.0

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            calculate_price_stats([])

    def test_string_format_has_no_decimals(self) -> None:
        assert str(PriceStats(mean=200.4, stddev=99.6)) == "mean = 200, stddev = 100"

    def test_is_immutable(self) -> None:
        stats = calculate_price_stats([1, 2])
        with pytest.raises(AttributeError):
            stats.mean = 0.0  # type: ignore[misc]


class TestPriceFile:
    def test_round_trip_preserves_order(self, tmp_path) -> None:
        prices = [435000, 99950, 1250000, 99950]
        path = write_prices(prices, tmp_path / "prices.json")
        assert read_prices(path) == prices

    def test_written_as_json_array(self, tmp_path) -> None:
        path = write_prices([1, 2, 3], tmp_path / "prices.json")
        assert json.loads(path.read_text(encoding="utf-8")) == [1, 2, 3]

    def test_overwrites_existing_file(self, tmp_path) -> None:
        path = tmp_path / "prices.json"
        path.write_text("[9, 9, 9, 9, 9, 9]", encoding="utf-8")
        write_prices([1], path)
        assert read_prices(path) == [1]

    def test_accepts_string_path(self, tmp_path) -> None:
        target = str(tmp_path / "prices.json")
        write_prices([5], target)
        assert read_prices(target) == [5]

    def test_invalid_json_raises_parse_error(self, tmp_path) -> None:
        path = tmp_path / "prices.json"
        path.write_text("not json", encoding="utf-8")
        with pytest.raises(ParseError):
            read_prices(path)

    @pytest.mark.parametrize("content", ['{"a": 1}', "[1, -2]", '["1"]', "[1.5]", "[true]"])
    def test_non_price_content_raises_parse_error(self, tmp_path, content: str) -> None:
        path = tmp_path / "prices.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ParseError):
            read_prices(path)

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            read_prices(tmp_path / "absent.json")
