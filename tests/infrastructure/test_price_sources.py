"""Tests for the price source adapters."""

from datetime import datetime, timezone
from decimal import Decimal
import json
from pathlib import Path
from unittest.mock import MagicMock

from wallet_dashboard.infrastructure.price_sources import (
    JsonPriceSource,
    StaticPriceSource,
    parse_quote_time,
)


def test_parse_quote_time_handles_zulu_and_naive_values() -> None:
    expected = datetime(2023, 8, 29, 7, 10, 40, tzinfo=timezone.utc)

    assert parse_quote_time("2023-08-29T07:10:40.000Z") == expected
    assert parse_quote_time("2023-08-29T07:10:40") == expected
    assert parse_quote_time("yesterday") is None
    assert parse_quote_time(None) is None


def test_json_price_source_keeps_latest_quote(tmp_path: Path) -> None:
    path = tmp_path / "prices.json"
    path.write_text(
        json.dumps(
            [
                {"currency": "USDC", "date": "2023-08-29T07:10:30.000Z", "price": 0.98},
                {"currency": "USDC", "date": "2023-08-29T07:10:40.000Z", "price": 1},
                {"currency": "ATOM", "date": "2023-08-29T07:10:40.000Z", "price": 7.186},
                {"currency": "BROKEN", "date": "2023-08-29T07:10:40.000Z"},
            ]
        ),
        encoding="utf-8",
    )
    logger = MagicMock()

    prices = JsonPriceSource(path, logger=logger).fetch_prices()

    assert dict(prices) == {"USDC": Decimal("1"), "ATOM": Decimal("7.186")}
    logger.warning.assert_called_once()


def test_static_price_source_coerces_values() -> None:
    source = StaticPriceSource({"ETH": 1645.93, "USDC": "1"})

    assert dict(source.fetch_prices()) == {
        "ETH": Decimal("1645.93"),
        "USDC": Decimal("1"),
    }
    assert dict(StaticPriceSource().fetch_prices()) == {}
    assert source.fetch_prices() is source.fetch_prices()


def test_json_price_source_skips_null_prices(tmp_path: Path) -> None:
    path = tmp_path / "prices.json"
    path.write_text(
        json.dumps(
            [
                {"currency": "ATOM", "date": "2023-08-29T07:10:40.000Z", "price": None},
                {"currency": "USDC", "date": "2023-08-29T07:10:40.000Z", "price": 1},
            ]
        ),
        encoding="utf-8",
    )
    logger = MagicMock()

    prices = JsonPriceSource(path, logger=logger).fetch_prices()

    assert dict(prices) == {"USDC": Decimal("1")}
    assert "ATOM" not in prices
    logger.warning.assert_called_once()
    assert "malformed price record #0" in logger.warning.call_args.args[0]


def test_json_price_source_reuses_table_until_file_changes(tmp_path: Path) -> None:
    path = tmp_path / "prices.json"
    path.write_text(
        json.dumps([{"currency": "USDC", "price": 1}]),
        encoding="utf-8",
    )
    source = JsonPriceSource(path, logger=MagicMock())

    first = source.fetch_prices()
    assert source.fetch_prices() is first

    path.write_text(
        json.dumps([{"currency": "USDC", "price": 1}, {"currency": "ETH", "price": 1600}]),
        encoding="utf-8",
    )
    second = source.fetch_prices()

    assert second is not first
    assert dict(second) == {"USDC": Decimal("1"), "ETH": Decimal("1600")}
