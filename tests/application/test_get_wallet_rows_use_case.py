"""Tests for the GetWalletRowsUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from wallet_dashboard.application.use_cases.get_wallet_rows import (
    GetWalletRowsUseCase,
)
from wallet_dashboard.domain.models import WalletBalance
from wallet_dashboard.infrastructure.balance_sources import StaticBalanceSource
from wallet_dashboard.infrastructure.price_sources import StaticPriceSource


def _build_sources(
    balances: list[WalletBalance],
    prices: dict[str, Decimal],
) -> tuple[MagicMock, MagicMock]:
    balance_source = MagicMock()
    balance_source.fetch_balances.return_value = balances
    price_source = MagicMock()
    price_source.fetch_prices.return_value = prices
    return balance_source, price_source


def test_execute_returns_ranked_valued_rows() -> None:
    """Use case should filter, sort, format and value the balances."""
    balances = [
        WalletBalance(currency="ZIL", amount=Decimal("-10.6"), blockchain="Zilliqa"),
        WalletBalance(currency="ETH", amount=Decimal("2"), blockchain="Ethereum"),
        WalletBalance(currency="USDC", amount=Decimal("-3"), blockchain="Ethereum"),
        WalletBalance(currency="ATOM", amount=Decimal("-1"), blockchain="Osmosis"),
    ]
    balance_source, price_source = _build_sources(
        balances,
        {"USDC": Decimal("1"), "ATOM": Decimal("7")},
    )
    logger = MagicMock()

    use_case = GetWalletRowsUseCase(
        balance_source=balance_source,
        price_source=price_source,
        logger=logger,
    )

    result = use_case.execute()

    assert [row.key for row in result] == ["ATOM-0", "USDC-1", "ZIL-2"]
    assert [row.formatted for row in result] == ["-1", "-3", "-11"]
    assert result[0].usd_value == Decimal("-7")
    assert result[1].usd_value == Decimal("-3")
    assert result[2].usd_value.is_nan()
    balance_source.fetch_balances.assert_called_once_with()
    price_source.fetch_prices.assert_called_once_with()
    logger.warning.assert_called_once_with("Missing USD price for ZIL")
    logger.info.assert_called_once_with(
        "Built 3 wallet rows from 4 balances (1 without a USD price)"
    )


def test_execute_with_empty_snapshot() -> None:
    balance_source, price_source = _build_sources([], {})

    use_case = GetWalletRowsUseCase(
        balance_source=balance_source,
        price_source=price_source,
        logger=MagicMock(),
    )

    assert use_case.execute() == []


def test_execute_reuses_rows_while_sources_are_unchanged() -> None:
    use_case = GetWalletRowsUseCase(
        balance_source=StaticBalanceSource(
            [WalletBalance(currency="ATOM", amount=Decimal("-5"), blockchain="Osmosis")]
        ),
        price_source=StaticPriceSource({"ATOM": Decimal("10")}),
        logger=MagicMock(),
    )

    first = use_case.execute()
    second = use_case.execute()

    assert second is first
    assert use_case._memo.computations == 1
    assert first[0].usd_value == Decimal("-50")
