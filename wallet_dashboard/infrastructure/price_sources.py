"""Price source adapters."""

from collections.abc import Mapping
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path
from types import MappingProxyType

from wallet_dashboard.domain.models import PriceRow
from wallet_dashboard.domain.services.prices import build_price_map
from wallet_dashboard.infrastructure.balance_sources import (
    load_json_records,
    snapshot_version,
)
from wallet_dashboard.infrastructure.logging.logger import get_app_logger
from wallet_dashboard.utils.decimal_utils import coerce_decimal, require_decimal


def parse_quote_time(value: str | None) -> datetime | None:
    """Parse an ISO-8601 quote timestamp, treating naive values as UTC.

    Args:
        value: Timestamp such as ``2023-08-29T07:10:40.000Z``.

    Returns:
        datetime | None: Aware timestamp, or None when absent or invalid.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class StaticPriceSource:
    """In-memory price source returning one read-only snapshot."""

    def __init__(self, prices: Mapping[str, object] | None = None) -> None:
        self._prices = MappingProxyType({
            currency: coerce_decimal(price)
            for currency, price in (prices or {}).items()
        })

    def fetch_prices(self) -> Mapping[str, Decimal]:
        return self._prices


class JsonPriceSource:
    """Read prices from a JSON list of currency/date/price quotes.

    The price table is reused until the file changes on disk.
    """

    def __init__(self, path: Path | str, logger=None) -> None:
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        self._version: tuple[int, int] | None = None
        self._snapshot: Mapping[str, Decimal] = MappingProxyType({})

    def fetch_prices(self) -> Mapping[str, Decimal]:
        """Return the latest USD price per currency.

        Returns:
            Mapping[str, Decimal]: USD unit price per currency code.
        """
        version = snapshot_version(self._path)
        if version is not None and version == self._version:
            return self._snapshot
        records = load_json_records(self._path, "prices")
        rows: list[PriceRow] = []
        for position, record in enumerate(records):
            try:
                rows.append(
                    PriceRow(
                        currency=str(record["currency"]),
                        price=require_decimal(record["price"]),
                        quoted_at=parse_quote_time(record.get("date")),
                    )
                )
            except (KeyError, TypeError, AttributeError, InvalidOperation):
                self._logger.warning(
                    f"Skipping malformed price record #{position}: {record!r}"
                )
        prices = build_price_map(rows, logger=self._logger)
        self._logger.info(
            f"Loaded {len(prices)} prices from {self._path}"
        )
        self._version = version
        self._snapshot = MappingProxyType(prices)
        return self._snapshot


__all__ = ["StaticPriceSource", "JsonPriceSource", "parse_quote_time"]
