"""Port for reading wallet balance snapshots."""

from collections.abc import Sequence
from typing import Protocol

from wallet_dashboard.domain.models import WalletBalance


class BalanceSourcePort(Protocol):
    """Port exposing the current wallet balances.

    Implementations return the same sequence object until the underlying
    balances change, so callers can cache on identity.
    """

    def fetch_balances(self) -> Sequence[WalletBalance]:
        """Return a snapshot of raw balances in source order."""


__all__ = ["BalanceSourcePort"]
