"""Built-in snapshot served by the static sources."""

from decimal import Decimal

from wallet_dashboard.domain.models import WalletBalance


DEMO_BALANCES = (
    WalletBalance(currency="ATOM", amount=Decimal("-5"), blockchain="Osmosis"),
    WalletBalance(currency="ETH", amount=Decimal("3"), blockchain="Ethereum"),
    WalletBalance(currency="ZIL", amount=Decimal("-12.5"), blockchain="Zilliqa"),
    WalletBalance(currency="NEO", amount=Decimal("0"), blockchain="Neo"),
    WalletBalance(currency="ARB", amount=Decimal("-0.4"), blockchain="Arbitrum"),
    WalletBalance(currency="USDC", amount=Decimal("-20"), blockchain="Ethereum"),
    WalletBalance(currency="X", amount=Decimal("-1"), blockchain="Unknown"),
)

DEMO_PRICES = {
    "ATOM": Decimal("7.186"),
    "ETH": Decimal("1645.93"),
    "ZIL": Decimal("0.0165"),
    "USDC": Decimal("1"),
    "ARB": Decimal("1.1"),
}


__all__ = ["DEMO_BALANCES", "DEMO_PRICES"]
