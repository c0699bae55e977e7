"""Tests for identity-keyed memoization of the wallet pipeline."""

from decimal import Decimal

from wallet_dashboard.application.use_cases.wallet_rows_memo import (
    WalletRowsMemo,
)
from wallet_dashboard.domain.models import WalletBalance


def _balances() -> list[WalletBalance]:
    return [
        WalletBalance(currency="ATOM", amount=Decimal("-5"), blockchain="Osmosis"),
    ]


def test_memo_reuses_result_for_same_inputs() -> None:
    memo = WalletRowsMemo()
    balances = _balances()
    prices = {"ATOM": Decimal("10")}

    first = memo(balances, prices)
    second = memo(balances, prices)

    assert first is second
    assert memo.computations == 1


def test_memo_recomputes_when_any_reference_changes() -> None:
    memo = WalletRowsMemo()
    balances = _balances()
    prices = {"ATOM": Decimal("10")}

    memo(balances, prices)
    updated = memo(balances, {"ATOM": Decimal("20")})
    memo(_balances(), {"ATOM": Decimal("20")})

    assert updated[0].usd_value == Decimal("-100")
    assert memo.computations == 3


def test_memo_clear_forces_recompute() -> None:
    memo = WalletRowsMemo()
    balances = _balances()
    prices: dict[str, Decimal] = {}

    memo(balances, prices)
    memo.clear()
    memo(balances, prices)

    assert memo.computations == 2
