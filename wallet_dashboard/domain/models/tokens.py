"""Domain models for the token swap calculator."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Token:
    """Swappable token with an optional USD unit price."""

    symbol: str
    name: str
    price: Decimal | None = None
    address: str = ""
    logo: str | None = None


@dataclass(frozen=True)
class SwapQuote:
    """Computed amounts for a sell/buy token pair."""

    sell_amount: str
    buy_amount: str
    rate_label: str
    enabled: bool


__all__ = ["Token", "SwapQuote"]
