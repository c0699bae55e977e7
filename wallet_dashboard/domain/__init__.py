"""Domain package for wallet balance rules and core models."""

from .constants import BLOCKCHAIN_PRIORITIES, LOWEST_PRIORITY
from .models import (
    FormattedWalletBalance,
    PriceRow,
    SwapQuote,
    Token,
    WalletBalance,
    WalletRow,
)
from .services import (
    build_wallet_rows,
    calculate_token_amount,
    format_all,
    format_amount,
    priority_of,
    select_and_order,
    valuate_all,
)
from .policies import is_eligible_balance

__all__ = [
    "BLOCKCHAIN_PRIORITIES",
    "LOWEST_PRIORITY",
    "WalletBalance",
    "FormattedWalletBalance",
    "WalletRow",
    "PriceRow",
    "Token",
    "SwapQuote",
    "build_wallet_rows",
    "calculate_token_amount",
    "format_all",
    "format_amount",
    "priority_of",
    "select_and_order",
    "valuate_all",
    "is_eligible_balance",
]
