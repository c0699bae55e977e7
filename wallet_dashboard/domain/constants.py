"""Domain constants for wallet balance ranking."""

from types import MappingProxyType

# Most-preferred chain first. Zilliqa and Neo share a rank on purpose.
BLOCKCHAIN_PRIORITIES = MappingProxyType(
    {
        "Osmosis": 100,
        "Ethereum": 50,
        "Arbitrum": 30,
        "Zilliqa": 20,
        "Neo": 20,
    }
)

LOWEST_PRIORITY = -99

MISSING_VALUE_LABEL = "—"


__all__ = ["BLOCKCHAIN_PRIORITIES", "LOWEST_PRIORITY", "MISSING_VALUE_LABEL"]
