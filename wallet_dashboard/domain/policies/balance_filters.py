"""Eligibility rules for balances shown on the wallet page."""

from wallet_dashboard.domain.constants import LOWEST_PRIORITY
from wallet_dashboard.domain.models import WalletBalance
from wallet_dashboard.domain.services.priority import priority_of
from wallet_dashboard.utils.decimal_utils import coerce_decimal


def is_eligible_balance(balance: WalletBalance) -> bool:
    """Return True when the balance should be listed.

    A balance is kept only when its chain is recognized and its amount is
    zero or negative. NaN amounts never qualify.

    Args:
        balance: Balance to evaluate.

    Returns:
        bool: True when the balance is retained.
    """
    if priority_of(balance.blockchain) <= LOWEST_PRIORITY:
        return False
    amount = coerce_decimal(balance.amount)
    if amount.is_nan():
        return False
    return amount <= 0


__all__ = ["is_eligible_balance"]
