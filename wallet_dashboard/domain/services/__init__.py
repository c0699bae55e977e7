"""Domain services package."""

from .priority import priority_of
from .selection import select_and_order
from .formatting import format_all, format_amount, format_usd
from .valuation import MISSING_PRICE, usd_value, valuate_all
from .pipeline import build_wallet_rows
from .prices import build_price_map
from .swap import (
    calculate_token_amount,
    exchange_rate_label,
    is_swap_enabled,
    parse_amount,
    quote_swap,
    resolve_token_price,
)

__all__ = [
    "priority_of",
    "select_and_order",
    "format_all",
    "format_amount",
    "format_usd",
    "MISSING_PRICE",
    "usd_value",
    "valuate_all",
    "build_wallet_rows",
    "build_price_map",
    "calculate_token_amount",
    "exchange_rate_label",
    "is_swap_enabled",
    "parse_amount",
    "quote_swap",
    "resolve_token_price",
]
