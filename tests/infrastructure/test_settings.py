"""Tests for infrastructure settings."""

from pathlib import Path

import pytest

from wallet_dashboard.infrastructure import settings as settings_module
from wallet_dashboard.infrastructure.settings import WalletSettings


@pytest.fixture(autouse=True)
def _quiet_logger(monkeypatch):
    class _Logger:
        def __init__(self) -> None:
            self.messages: list[str] = []

        def warning(self, msg: str) -> None:
            self.messages.append(msg)

    logger = _Logger()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    return logger


def test_from_env_uses_file_paths(monkeypatch, tmp_path: Path) -> None:
    """File paths should resolve to Path instances."""
    balances = tmp_path / "balances.json"
    balances.write_text("[]", encoding="utf-8")
    monkeypatch.setenv("WALLET_BALANCES_FILE", str(balances))
    monkeypatch.setenv("WALLET_PRICES_FILE", f"file://{tmp_path}/prices.json")
    monkeypatch.delenv("WALLET_SOURCE", raising=False)

    settings = WalletSettings.from_env()

    assert settings.source == "json"
    assert settings.balances_file == balances.resolve()
    assert settings.prices_file == (tmp_path / "prices.json").resolve()


def test_from_env_warns_for_missing_file(
    monkeypatch,
    tmp_path: Path,
    _quiet_logger,
) -> None:
    missing = tmp_path / "nope.json"
    monkeypatch.setenv("WALLET_BALANCES_FILE", str(missing))

    WalletSettings.from_env()

    assert any(str(missing) in msg for msg in _quiet_logger.messages)


def test_from_env_defaults_to_project_data_dir(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    monkeypatch.delenv("WALLET_BALANCES_FILE", raising=False)
    monkeypatch.delenv("WALLET_PRICES_FILE", raising=False)

    settings = WalletSettings.from_env()

    assert settings.balances_file == tmp_path / "data" / "balances.json"
    assert settings.prices_file == tmp_path / "data" / "prices.json"


def test_from_env_normalizes_source(monkeypatch) -> None:
    monkeypatch.setenv("WALLET_SOURCE", " Static ")

    assert WalletSettings.from_env().source == "static"


def test_from_env_rejects_unknown_source(monkeypatch) -> None:
    monkeypatch.setenv("WALLET_SOURCE", "postgres")

    with pytest.raises(RuntimeError, match="Unsupported WALLET_SOURCE"):
        WalletSettings.from_env()


def test_from_env_rejects_remote_uri(monkeypatch) -> None:
    monkeypatch.setenv("WALLET_PRICES_FILE", "https://example.com/prices.json")

    with pytest.raises(RuntimeError, match="Only local snapshot files"):
        WalletSettings.from_env()
