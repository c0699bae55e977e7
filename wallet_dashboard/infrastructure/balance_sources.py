"""Balance source adapters."""

from collections.abc import Iterable, Sequence
from decimal import InvalidOperation
import json
from pathlib import Path

from wallet_dashboard.domain.models import WalletBalance
from wallet_dashboard.infrastructure.logging.logger import get_app_logger
from wallet_dashboard.utils.decimal_utils import require_decimal


def load_json_records(path: Path, label: str) -> list:
    """Read a JSON snapshot whose root is a list.

    Args:
        path: Snapshot file path.
        label: Human readable snapshot name used in errors.

    Returns:
        list: Raw records.

    Raises:
        RuntimeError: If the file is missing, malformed or not a list.
    """
    if not path.exists():
        raise RuntimeError(f"Missing {label} file: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"Invalid JSON in {label} file {path}: {exc}") from exc
    if not isinstance(payload, list):
        raise RuntimeError(f"Expected a list of records in {label} file {path}")
    return payload


def snapshot_version(path: Path) -> tuple[int, int] | None:
    """Return a marker that changes whenever the snapshot file is rewritten.

    Returns:
        tuple[int, int] | None: ``(mtime_ns, size)``, or None if missing.
    """
    try:
        stat = path.stat()
    except FileNotFoundError:
        return None
    return stat.st_mtime_ns, stat.st_size


class StaticBalanceSource:
    """In-memory balance source returning one immutable snapshot."""

    def __init__(self, balances: Iterable[WalletBalance] = ()) -> None:
        self._balances = tuple(balances)

    def fetch_balances(self) -> Sequence[WalletBalance]:
        return self._balances


class JsonBalanceSource:
    """Read balances from a JSON list of currency/amount/blockchain records.

    The parsed snapshot is reused until the file changes on disk.
    """

    def __init__(self, path: Path | str, logger=None) -> None:
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        self._version: tuple[int, int] | None = None
        self._snapshot: tuple[WalletBalance, ...] = ()

    def fetch_balances(self) -> Sequence[WalletBalance]:
        """Return the balances in file order, skipping malformed records.

        Returns:
            Sequence[WalletBalance]: Parsed balances.
        """
        version = snapshot_version(self._path)
        if version is not None and version == self._version:
            return self._snapshot
        records = load_json_records(self._path, "balances")
        balances: list[WalletBalance] = []
        for position, record in enumerate(records):
            try:
                balances.append(
                    WalletBalance(
                        currency=str(record["currency"]),
                        amount=require_decimal(record["amount"]),
                        blockchain=str(record["blockchain"]),
                    )
                )
            except (KeyError, TypeError, InvalidOperation):
                self._logger.warning(
                    f"Skipping malformed balance record #{position}: {record!r}"
                )
        self._logger.info(
            f"Loaded {len(balances)} balances from {self._path}"
        )
        self._version = version
        self._snapshot = tuple(balances)
        return self._snapshot


__all__ = [
    "StaticBalanceSource",
    "JsonBalanceSource",
    "load_json_records",
    "snapshot_version",
]
