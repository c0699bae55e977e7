"""Port for reading USD unit prices."""

from collections.abc import Mapping
from decimal import Decimal
from typing import Protocol


class PriceSourcePort(Protocol):
    """Port exposing a currency to USD price table.

    Implementations may omit currencies they do not know about, and return
    the same mapping object until the prices change.
    """

    def fetch_prices(self) -> Mapping[str, Decimal]:
        """Return a snapshot of USD unit prices keyed by currency code."""


__all__ = ["PriceSourcePort"]
