"""End-to-end wallet balance pipeline."""

from collections.abc import Iterable, Mapping
from logging import Logger

from wallet_dashboard.domain.models import WalletBalance, WalletRow
from wallet_dashboard.domain.services.formatting import format_all
from wallet_dashboard.domain.services.selection import select_and_order
from wallet_dashboard.domain.services.valuation import valuate_all


def build_wallet_rows(
    balances: Iterable[WalletBalance],
    prices: Mapping[str, object],
    *,
    logger: Logger | None = None,
) -> list[WalletRow]:
    """Filter, sort, format and value balances for display.

    Args:
        balances: Raw balances from a balance source.
        prices: Mapping of currency code to USD unit price.
        logger: Optional logger used to report missing prices.

    Returns:
        list[WalletRow]: Rows ready for rendering.
    """
    ordered = select_and_order(balances)
    return valuate_all(format_all(ordered), prices, logger=logger)


__all__ = ["build_wallet_rows"]
