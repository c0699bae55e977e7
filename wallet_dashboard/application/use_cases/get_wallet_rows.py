"""Use case to build the wallet page rows."""

from wallet_dashboard.application.ports.balance_source import (
    BalanceSourcePort,
)
from wallet_dashboard.application.ports.price_source import PriceSourcePort
from wallet_dashboard.application.use_cases.wallet_rows_memo import (
    WalletRowsMemo,
)
from wallet_dashboard.domain.models import WalletRow
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


class GetWalletRowsUseCase:
    """Read balances and prices, then run the wallet pipeline."""

    def __init__(
        self,
        balance_source: BalanceSourcePort,
        price_source: PriceSourcePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            balance_source: Port providing raw wallet balances.
            price_source: Port providing USD unit prices.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._balance_source = balance_source
        self._price_source = price_source
        self._logger = logger or get_app_logger()
        self._memo = WalletRowsMemo(logger=self._logger)

    def execute(self) -> list[WalletRow]:
        """Return the valued wallet rows in display order.

        Returns:
            list[WalletRow]: Rows for the rendering layer.
        """
        balances = self._balance_source.fetch_balances()
        prices = self._price_source.fetch_prices()
        rows = self._memo(balances, prices)
        unpriced = sum(1 for row in rows if not row.is_priced)
        self._logger.info(
            f"Built {len(rows)} wallet rows from {len(balances)} balances "
            f"({unpriced} without a USD price)"
        )
        return rows


__all__ = ["GetWalletRowsUseCase", "WalletRow"]
