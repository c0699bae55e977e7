"""Application ports package."""

from .balance_source import BalanceSourcePort
from .price_source import PriceSourcePort

__all__ = ["BalanceSourcePort", "PriceSourcePort"]
