"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from urllib.parse import unquote, urlparse

from wallet_dashboard.infrastructure.logging.logger import get_app_logger
from wallet_dashboard.utils.utils import get_project_root


SUPPORTED_SOURCES = ("json", "static")


@dataclass(frozen=True)
class WalletSettings:
    """Settings for selecting balance and price sources.

    Attributes:
        source: Source identifier (json or static).
        balances_file: Path to the balances snapshot.
        prices_file: Path to the prices snapshot.
    """

    source: str = "json"
    balances_file: Path | None = None
    prices_file: Path | None = None

    @classmethod
    def from_env(cls) -> "WalletSettings":
        """Build settings from environment variables.

        Returns:
            WalletSettings: Settings sourced from environment variables.

        Raises:
            RuntimeError: If WALLET_SOURCE names an unknown source.
        """
        logger = get_app_logger()
        source = os.getenv("WALLET_SOURCE", "json").strip().lower()
        if source not in SUPPORTED_SOURCES:
            raise RuntimeError(
                f"Unsupported WALLET_SOURCE '{source}'. "
                f"Expected one of: {', '.join(SUPPORTED_SOURCES)}"
            )
        balances_file = cls._resolve_file(
            os.getenv("WALLET_BALANCES_FILE"),
            "balances.json",
            logger=logger,
        )
        prices_file = cls._resolve_file(
            os.getenv("WALLET_PRICES_FILE"),
            "prices.json",
            logger=logger,
        )
        return cls(
            source=source,
            balances_file=balances_file,
            prices_file=prices_file,
        )

    @classmethod
    def _resolve_file(
        cls,
        raw_path: str | None,
        default_name: str,
        logger,
    ) -> Path:
        if raw_path:
            return cls._normalize_path(raw_path, logger=logger)
        path = get_project_root() / "data" / default_name
        if not path.exists():
            logger.warning(f"Default snapshot file not found at {path}")
        return path

    @staticmethod
    def _normalize_path(
        raw_path: str,
        logger,
    ) -> Path:
        """Normalize a snapshot file path or file:// URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.

        Raises:
            RuntimeError: If the value is a non-file URI.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        elif parsed.scheme and len(parsed.scheme) > 1:
            raise RuntimeError(
                f"Only local snapshot files are supported, got {raw_path}"
            )
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Snapshot file does not exist at {path}")
        return path


__all__ = ["WalletSettings", "SUPPORTED_SOURCES"]
