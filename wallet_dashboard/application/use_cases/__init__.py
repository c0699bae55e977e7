"""Application use cases package."""

from .get_wallet_rows import GetWalletRowsUseCase, WalletRow
from .wallet_rows_memo import WalletRowsMemo

__all__ = ["GetWalletRowsUseCase", "WalletRow", "WalletRowsMemo"]
