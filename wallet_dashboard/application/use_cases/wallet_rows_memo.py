"""Identity-keyed memoization of the wallet pipeline."""

from collections.abc import Mapping, Sequence
from logging import Logger

from wallet_dashboard.domain.models import WalletBalance, WalletRow
from wallet_dashboard.domain.services.pipeline import build_wallet_rows


class WalletRowsMemo:
    """Recompute wallet rows only when an input reference changes.

    The pipeline is pure, so the last result stays valid while both the
    balances sequence and the price mapping are the same objects.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger
        self._balances: Sequence[WalletBalance] | None = None
        self._prices: Mapping[str, object] | None = None
        self._rows: list[WalletRow] | None = None
        self.computations = 0

    def __call__(
        self,
        balances: Sequence[WalletBalance],
        prices: Mapping[str, object],
    ) -> list[WalletRow]:
        if (
            self._rows is not None
            and balances is self._balances
            and prices is self._prices
        ):
            return self._rows
        self._rows = build_wallet_rows(balances, prices, logger=self._logger)
        self._balances = balances
        self._prices = prices
        self.computations += 1
        return self._rows

    def clear(self) -> None:
        self._balances = None
        self._prices = None
        self._rows = None


__all__ = ["WalletRowsMemo"]
