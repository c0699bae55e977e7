"""Display formatting for wallet balance amounts."""

from collections.abc import Iterable
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from wallet_dashboard.domain.constants import MISSING_VALUE_LABEL
from wallet_dashboard.domain.models import (
    FormattedWalletBalance,
    WalletBalance,
)
from wallet_dashboard.utils.decimal_utils import coerce_decimal


_WHOLE = Decimal("1")


def format_amount(amount) -> str:
    """Render an amount as a whole number string.

    Rounds half to even, uses no thousands separators and never prints a
    negative zero. Non-finite values render as ``NaN``, ``Infinity`` or
    ``-Infinity``.

    Args:
        amount: Numeric amount.

    Returns:
        str: Base-10 integer string.
    """
    value = coerce_decimal(amount)
    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return str(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 2)
        rounded = value.quantize(_WHOLE, rounding=ROUND_HALF_EVEN)
    if rounded.is_zero():
        return "0"
    return f"{rounded:f}"


def format_all(
    balances: Iterable[WalletBalance],
) -> list[FormattedWalletBalance]:
    """Attach a formatted amount to each balance, preserving order."""
    return [
        FormattedWalletBalance(
            currency=balance.currency,
            amount=balance.amount,
            blockchain=balance.blockchain,
            formatted=format_amount(balance.amount),
        )
        for balance in balances
    ]


def format_usd(value) -> str:
    """Render a USD value with two decimals, or a dash when unpriced."""
    amount = coerce_decimal(value)
    if amount.is_nan():
        return MISSING_VALUE_LABEL
    sign = "-" if amount.is_signed() and not amount.is_zero() else ""
    return f"{sign}${abs(amount):,.2f}"


__all__ = ["format_amount", "format_all", "format_usd"]
