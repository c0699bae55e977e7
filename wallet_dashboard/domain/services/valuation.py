"""USD valuation of formatted wallet balances."""

from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation, localcontext
from logging import Logger

from wallet_dashboard.domain.models import FormattedWalletBalance, WalletRow
from wallet_dashboard.utils.decimal_utils import coerce_decimal


MISSING_PRICE = Decimal("NaN")


def usd_value(amount, price) -> Decimal:
    """Multiply an amount by a unit price without ever raising.

    A missing price, NaN operands and ``Infinity * 0`` all yield NaN.

    Args:
        amount: Signed balance amount.
        price: USD unit price, or None when unknown.

    Returns:
        Decimal: USD value, possibly NaN or infinite.
    """
    if price is None:
        return MISSING_PRICE
    with localcontext() as ctx:
        ctx.traps[InvalidOperation] = False
        return coerce_decimal(amount) * coerce_decimal(price)


def valuate_all(
    balances: Iterable[FormattedWalletBalance],
    prices: Mapping[str, object],
    *,
    logger: Logger | None = None,
) -> list[WalletRow]:
    """Compute the USD value of each balance, preserving order.

    Rows whose currency has no price are kept with a NaN value.

    Args:
        balances: Formatted balances in display order.
        prices: Mapping of currency code to USD unit price.
        logger: Optional logger used to report missing prices.

    Returns:
        list[WalletRow]: Rows keyed by ``"{currency}-{index}"``.
    """
    rows: list[WalletRow] = []
    for index, balance in enumerate(balances):
        price = prices.get(balance.currency)
        if price is None and logger is not None:
            logger.warning(f"Missing USD price for {balance.currency}")
        rows.append(
            WalletRow(
                currency=balance.currency,
                amount=balance.amount,
                blockchain=balance.blockchain,
                formatted=balance.formatted,
                usd_value=usd_value(balance.amount, price),
                key=f"{balance.currency}-{index}",
            )
        )
    return rows


__all__ = ["MISSING_PRICE", "usd_value", "valuate_all"]
