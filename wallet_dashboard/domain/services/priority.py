"""Blockchain priority resolution."""

from wallet_dashboard.domain.constants import (
    BLOCKCHAIN_PRIORITIES,
    LOWEST_PRIORITY,
)


def priority_of(blockchain: str) -> int:
    """Return the sort rank of a blockchain.

    Matching is exact and case-sensitive. Unknown chains get
    ``LOWEST_PRIORITY``, which sorts after every recognized chain.

    Args:
        blockchain: Chain identifier (e.g., Ethereum).

    Returns:
        int: Rank, higher sorts earlier.
    """
    return BLOCKCHAIN_PRIORITIES.get(blockchain, LOWEST_PRIORITY)


__all__ = ["priority_of"]
