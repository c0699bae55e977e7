"""Domain models for wallet balances and rendered rows."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class WalletBalance:
    """Raw balance held on a blockchain, as read from a balance source."""

    currency: str
    amount: Decimal
    blockchain: str


@dataclass(frozen=True)
class FormattedWalletBalance:
    """Balance with its amount rendered for display."""

    currency: str
    amount: Decimal
    blockchain: str
    formatted: str


@dataclass(frozen=True)
class WalletRow:
    """Terminal row handed to the rendering layer.

    Attributes:
        currency: Currency code of the balance.
        amount: Signed balance amount.
        blockchain: Chain the balance belongs to.
        formatted: Amount rendered with no fractional digits.
        usd_value: ``amount * price``; ``Decimal("NaN")`` when unpriced.
        key: Rendering identity, ``"{currency}-{index}"``.
    """

    currency: str
    amount: Decimal
    blockchain: str
    formatted: str
    usd_value: Decimal
    key: str

    @property
    def is_priced(self) -> bool:
        """Return True when the USD value is a number."""
        return not self.usd_value.is_nan()


@dataclass(frozen=True)
class PriceRow:
    """Single quote from a price snapshot."""

    currency: str
    price: Decimal
    quoted_at: datetime | None = None


__all__ = [
    "WalletBalance",
    "FormattedWalletBalance",
    "WalletRow",
    "PriceRow",
]
