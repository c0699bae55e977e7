"""Tests for the wallet_rows_cli adapter."""

from decimal import Decimal

from wallet_dashboard.adapters import wallet_rows_cli
from wallet_dashboard.domain.models import WalletRow


class _Logger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def error(self, msg: str) -> None:
        self.messages.append(msg)


class _UseCase:
    def __init__(self, rows) -> None:
        self._rows = rows

    def execute(self):
        return self._rows


def test_main_prints_rows(monkeypatch, capsys) -> None:
    """The CLI should print one line per row with a dash for NaN values."""
    rows = [
        WalletRow(
            currency="ATOM",
            amount=Decimal("-5"),
            blockchain="Osmosis",
            formatted="-5",
            usd_value=Decimal("-50"),
            key="ATOM-0",
        ),
        WalletRow(
            currency="NEO",
            amount=Decimal("0"),
            blockchain="Neo",
            formatted="0",
            usd_value=Decimal("NaN"),
            key="NEO-1",
        ),
    ]
    monkeypatch.setattr(wallet_rows_cli, "get_app_logger", lambda: _Logger())
    monkeypatch.setattr(
        wallet_rows_cli,
        "build_wallet_rows_use_case",
        lambda: _UseCase(rows),
    )

    wallet_rows_cli.main()

    output = capsys.readouterr().out.splitlines()
    assert output == [
        "Wallet balances (2 rows)",
        "ATOM-0: -5 ATOM on Osmosis = -$50.00",
        "NEO-1: 0 NEO on Neo = —",
    ]


def test_main_reports_empty_wallet(monkeypatch, capsys) -> None:
    monkeypatch.setattr(wallet_rows_cli, "get_app_logger", lambda: _Logger())
    monkeypatch.setattr(
        wallet_rows_cli,
        "build_wallet_rows_use_case",
        lambda: _UseCase([]),
    )

    wallet_rows_cli.main()

    assert capsys.readouterr().out == "No wallet balances to display.\n"


def test_main_logs_configuration_errors(monkeypatch, capsys) -> None:
    logger = _Logger()

    def _raise():
        raise RuntimeError("Missing balances file: /tmp/none.json")

    monkeypatch.setattr(wallet_rows_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(wallet_rows_cli, "build_wallet_rows_use_case", _raise)

    wallet_rows_cli.main()

    assert logger.messages == ["Missing balances file: /tmp/none.json"]
    assert capsys.readouterr().out == ""
