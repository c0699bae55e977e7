"""Domain models package."""

from .balances import (
    FormattedWalletBalance,
    PriceRow,
    WalletBalance,
    WalletRow,
)
from .tokens import SwapQuote, Token

__all__ = [
    "WalletBalance",
    "FormattedWalletBalance",
    "WalletRow",
    "PriceRow",
    "Token",
    "SwapQuote",
]
