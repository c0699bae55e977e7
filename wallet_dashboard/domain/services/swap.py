"""Token swap arithmetic."""

from collections.abc import Mapping
from decimal import (
    ROUND_HALF_UP,
    Decimal,
    InvalidOperation,
    Overflow,
    localcontext,
)
from logging import Logger

from wallet_dashboard.domain.models import SwapQuote, Token
from wallet_dashboard.utils.decimal_utils import coerce_decimal


RATE_PLACEHOLDER = "Loading rate..."


def parse_amount(value: str | None) -> Decimal | None:
    """Parse a user-entered amount.

    Args:
        value: Raw text from an input field.

    Returns:
        Decimal | None: Parsed finite amount, or None when unusable.
    """
    if not value:
        return None
    try:
        amount = Decimal(value.strip())
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    return amount


def _convert(
    amount: Decimal,
    from_price: object,
    to_price: object,
    places: int,
) -> str:
    """Return ``amount * from_price / to_price`` with ``places`` decimals.

    Results that overflow or cannot be quantized come back as an empty
    string instead of raising.
    """
    with localcontext() as ctx:
        ctx.traps[InvalidOperation] = False
        ctx.traps[Overflow] = False
        value = amount * coerce_decimal(from_price) / coerce_decimal(to_price)
        if not value.is_finite():
            return ""
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        result = value.quantize(
            Decimal(1).scaleb(-places),
            rounding=ROUND_HALF_UP,
        )
    if not result.is_finite():
        return ""
    return f"{result:f}"


def calculate_token_amount(
    input_amount: str | None,
    input_token: Token | None,
    output_token: Token | None,
    places: int = 4,
) -> str:
    """Convert an amount of one token into another through USD prices.

    Args:
        input_amount: Amount of the input token, as typed.
        input_token: Token being sold.
        output_token: Token being bought.
        places: Decimal places in the result.

    Returns:
        str: Output amount, or an empty string when it cannot be computed.
    """
    if input_token is None or output_token is None:
        return ""
    if not input_token.price or not output_token.price:
        return ""
    amount = parse_amount(input_amount)
    if amount is None:
        return ""
    return _convert(amount, input_token.price, output_token.price, places)


def exchange_rate_label(sell_token: Token, buy_token: Token) -> str:
    """Return a ``1 SELL = rate BUY`` label for the pair."""
    if not sell_token.price or not buy_token.price:
        return RATE_PLACEHOLDER
    rate = _convert(Decimal(1), sell_token.price, buy_token.price, 6)
    if not rate:
        return RATE_PLACEHOLDER
    return f"1 {sell_token.symbol} = {rate} {buy_token.symbol}"


def is_swap_enabled(sell_amount: str | None, buy_amount: str | None) -> bool:
    """Return True when both amounts parse and are strictly positive."""
    sell = parse_amount(sell_amount)
    buy = parse_amount(buy_amount)
    if sell is None or buy is None:
        return False
    return sell > 0 and buy > 0


def resolve_token_price(
    symbol: str,
    prices: Mapping[str, object],
    *,
    fallback: Decimal = Decimal("1"),
    logger: Logger | None = None,
) -> Decimal:
    """Look up a token price, falling back when the symbol is unknown.

    Args:
        symbol: Token symbol (e.g., ETH).
        prices: Mapping of currency code to USD unit price.
        fallback: Price used when the symbol is missing.
        logger: Optional logger used to report the fallback.

    Returns:
        Decimal: Resolved unit price.
    """
    price = prices.get(symbol)
    if price is None:
        if logger is not None:
            logger.warning(
                f"Price not found for token: {symbol}, "
                f"using fallback price of {fallback}"
            )
        return fallback
    return coerce_decimal(price)


def quote_swap(
    sell_amount: str | None,
    sell_token: Token,
    buy_token: Token,
) -> SwapQuote:
    """Build the buy side of a swap from the sell amount.

    Args:
        sell_amount: Amount of ``sell_token`` typed by the user.
        sell_token: Token being sold.
        buy_token: Token being bought.

    Returns:
        SwapQuote: Amounts, rate label and whether the swap can proceed.
    """
    buy_amount = calculate_token_amount(
        sell_amount,
        sell_token,
        buy_token,
        places=6,
    )
    return SwapQuote(
        sell_amount=sell_amount or "",
        buy_amount=buy_amount,
        rate_label=exchange_rate_label(sell_token, buy_token),
        enabled=is_swap_enabled(sell_amount, buy_amount),
    )


__all__ = [
    "RATE_PLACEHOLDER",
    "parse_amount",
    "calculate_token_amount",
    "exchange_rate_label",
    "is_swap_enabled",
    "resolve_token_price",
    "quote_swap",
]
