"""Price table construction from quote rows."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from wallet_dashboard.domain.models import PriceRow


def build_price_map(
    rows: Iterable[PriceRow],
    logger: Logger,
) -> dict[str, Decimal]:
    """Keep the most recent usable quote per currency.

    Dated quotes win over undated ones; on equal timestamps the first
    quote seen is kept. NaN and negative prices are skipped.

    Args:
        rows: Price quotes in source order.
        logger: Logger used for warnings.

    Returns:
        dict[str, Decimal]: USD unit price per currency code.
    """
    latest: dict[str, PriceRow] = {}
    for row in rows:
        if row.price.is_nan() or row.price < 0:
            logger.warning(
                f"Skipping unusable price for {row.currency}: {row.price}"
            )
            continue
        current = latest.get(row.currency)
        if current is None or _is_newer(row, current):
            latest[row.currency] = row
    return {currency: row.price for currency, row in latest.items()}


def _is_newer(candidate: PriceRow, current: PriceRow) -> bool:
    if candidate.quoted_at is None:
        return False
    if current.quoted_at is None:
        return True
    return candidate.quoted_at > current.quoted_at


__all__ = ["build_price_map"]
