"""Selection and ordering of raw wallet balances."""

from collections.abc import Iterable

from wallet_dashboard.domain.models import WalletBalance
from wallet_dashboard.domain.policies.balance_filters import (
    is_eligible_balance,
)
from wallet_dashboard.domain.services.priority import priority_of


def select_and_order(
    balances: Iterable[WalletBalance],
) -> list[WalletBalance]:
    """Keep eligible balances and sort them by descending chain priority.

    The sort is stable: balances with equal priority keep their input order.

    Args:
        balances: Raw balances from a balance source.

    Returns:
        list[WalletBalance]: Eligible balances, highest priority first.
    """
    eligible = [balance for balance in balances if is_eligible_balance(balance)]
    return sorted(
        eligible,
        key=lambda balance: priority_of(balance.blockchain),
        reverse=True,
    )


__all__ = ["select_and_order"]
