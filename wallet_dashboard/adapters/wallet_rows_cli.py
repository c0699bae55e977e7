"""CLI adapter printing the wallet rows.

Sources are selected through ``WALLET_SOURCE``, ``WALLET_BALANCES_FILE``
and ``WALLET_PRICES_FILE`` (see ``WalletSettings``).
"""

from wallet_dashboard.domain.services.formatting import format_usd
from wallet_dashboard.infrastructure.container import (
    build_wallet_rows_use_case,
)
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Build the wallet rows and print one line per row."""
    logger = get_app_logger()
    try:
        use_case = build_wallet_rows_use_case()
        rows = use_case.execute()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    if not rows:
        print("No wallet balances to display.")
        return

    print(f"Wallet balances ({len(rows)} rows)")
    for row in rows:
        print(
            f"{row.key}: {row.formatted} {row.currency} "
            f"on {row.blockchain} = {format_usd(row.usd_value)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
