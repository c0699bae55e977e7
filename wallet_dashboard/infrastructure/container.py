"""Composition root for wiring infrastructure adapters."""

from wallet_dashboard.application.ports.balance_source import (
    BalanceSourcePort,
)
from wallet_dashboard.application.ports.price_source import PriceSourcePort
from wallet_dashboard.application.use_cases.get_wallet_rows import (
    GetWalletRowsUseCase,
)
from wallet_dashboard.infrastructure.balance_sources import (
    JsonBalanceSource,
    StaticBalanceSource,
)
from wallet_dashboard.infrastructure.demo_snapshot import (
    DEMO_BALANCES,
    DEMO_PRICES,
)
from wallet_dashboard.infrastructure.logging.logger import get_app_logger
from wallet_dashboard.infrastructure.price_sources import (
    JsonPriceSource,
    StaticPriceSource,
)
from wallet_dashboard.infrastructure.settings import WalletSettings


def build_balance_source(
    settings: WalletSettings | None = None,
) -> BalanceSourcePort:
    """Return the configured balance source adapter."""
    resolved = settings or WalletSettings.from_env()
    if resolved.source == "static":
        return StaticBalanceSource(DEMO_BALANCES)
    if resolved.balances_file is None:
        raise RuntimeError("JSON source requires a WALLET_BALANCES_FILE value.")
    return JsonBalanceSource(resolved.balances_file, logger=get_app_logger())


def build_price_source(
    settings: WalletSettings | None = None,
) -> PriceSourcePort:
    """Return the configured price source adapter."""
    resolved = settings or WalletSettings.from_env()
    if resolved.source == "static":
        return StaticPriceSource(DEMO_PRICES)
    if resolved.prices_file is None:
        raise RuntimeError("JSON source requires a WALLET_PRICES_FILE value.")
    return JsonPriceSource(resolved.prices_file, logger=get_app_logger())


def build_wallet_rows_use_case(
    settings: WalletSettings | None = None,
) -> GetWalletRowsUseCase:
    """Return the wallet rows use case wired to the configured sources."""
    resolved = settings or WalletSettings.from_env()
    return GetWalletRowsUseCase(
        balance_source=build_balance_source(resolved),
        price_source=build_price_source(resolved),
        logger=get_app_logger(),
    )


__all__ = [
    "build_balance_source",
    "build_price_source",
    "build_wallet_rows_use_case",
]
