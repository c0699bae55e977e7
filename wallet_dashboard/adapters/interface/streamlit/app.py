"""Streamlit dashboard entry point."""

from collections.abc import Mapping, Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from wallet_dashboard.application.use_cases.get_wallet_rows import WalletRow
from wallet_dashboard.domain.models import SwapQuote, Token
from wallet_dashboard.domain.services.formatting import format_usd
from wallet_dashboard.domain.services.swap import (
    quote_swap,
    resolve_token_price,
)
from wallet_dashboard.infrastructure.container import (
    build_price_source,
    build_wallet_rows_use_case,
)
from wallet_dashboard.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


SWAP_SYMBOLS = ("ETH", "USDC", "SOL", "ATOM", "ARB", "ZIL")


def _fetch_wallet_rows() -> Sequence[WalletRow]:
    """Build the wallet rows from the configured sources."""
    use_case = build_wallet_rows_use_case()
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_wallet_rows(schema_version: int = 1) -> Sequence[WalletRow]:
    """Cached wrapper around _fetch_wallet_rows for Streamlit sessions."""
    _ = schema_version
    return _fetch_wallet_rows()


def _fetch_prices() -> dict[str, Decimal]:
    """Read USD prices from the configured price source."""
    return dict(build_price_source().fetch_prices())


@st.cache_data(show_spinner=False)
def _load_prices() -> dict[str, Decimal]:
    """Cached wrapper around _fetch_prices."""
    return _fetch_prices()


def _rows_table(rows: Sequence[WalletRow]) -> list[dict[str, str]]:
    """Return table records in display order."""
    return [
        {
            "Key": row.key,
            "Currency": row.currency,
            "Blockchain": row.blockchain,
            "Amount": row.formatted,
            "USD Value": format_usd(row.usd_value),
        }
        for row in rows
    ]


def _prepare_value_chart_data(
    rows: Sequence[WalletRow],
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready values, dropping rows without a finite value."""
    return [
        {
            "key": row.key,
            "currency": row.currency,
            "usd_value": float(row.usd_value),
            "usd_label": format_usd(row.usd_value),
        }
        for row in rows
        if row.usd_value.is_finite()
    ]


def _render_value_chart(rows: Sequence[WalletRow]) -> None:
    """Render a bar chart of USD values per row."""
    data = _prepare_value_chart_data(rows)
    if not data:
        st.info("No priced balances available for the chart.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadius=4,
    ).encode(
        x=alt.X("key:N", sort=None, title=None),
        y=alt.Y("usd_value:Q", title="USD"),
        color=alt.Color("currency:N", legend=None),
        tooltip=[
            alt.Tooltip("currency:N"),
            alt.Tooltip("usd_label:N"),
        ],
    ).configure_view(
        stroke=None
    )
    st.subheader("USD Value by Balance")
    st.altair_chart(chart, width="stretch")


def _render_wallet(rows: Sequence[WalletRow]) -> None:
    """Render the wallet table and chart."""
    st.subheader("Balances")
    unpriced = [row for row in rows if not row.is_priced]
    st.caption(f"{len(rows)} balances shown")
    if unpriced:
        currencies = ", ".join(sorted({row.currency for row in unpriced}))
        st.warning(f"No USD price available for: {currencies}")
    st.dataframe(_rows_table(rows), width="stretch", hide_index=True)
    _render_value_chart(rows)


def _build_tokens(prices: Mapping[str, object]) -> dict[str, Token]:
    """Build swappable tokens priced from the price table."""
    logger = get_app_logger()
    return {
        symbol: Token(
            symbol=symbol,
            name=symbol,
            price=resolve_token_price(symbol, prices, logger=logger),
        )
        for symbol in SWAP_SYMBOLS
    }


def _render_swap(prices: Mapping[str, object]) -> SwapQuote:
    """Render the swap calculator and return the current quote."""
    st.subheader("Swap")
    tokens = _build_tokens(prices)
    symbols = list(tokens)
    sell_col, buy_col = st.columns(2)
    with sell_col:
        sell_symbol = st.selectbox("Sell", options=symbols, index=0)
        sell_amount = st.text_input("Amount to sell", placeholder="0.0")
    with buy_col:
        buy_symbol = st.selectbox("Buy", options=symbols, index=1)
    quote = quote_swap(sell_amount, tokens[sell_symbol], tokens[buy_symbol])
    with buy_col:
        st.metric("You receive", quote.buy_amount or "—")
    st.caption(quote.rate_label)
    if st.button("Confirm swap", disabled=not quote.enabled):
        get_usage_logger().info(
            f"Swap confirmed: {quote.sell_amount} {sell_symbol} "
            f"-> {quote.buy_amount} {buy_symbol}"
        )
        st.success(
            f"Swapped {quote.sell_amount} {sell_symbol} "
            f"for {quote.buy_amount} {buy_symbol}"
        )
    return quote


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Wallet Dashboard", layout="wide")
    st.title("Wallet Dashboard")

    page = st.sidebar.selectbox("Page", ["Wallet", "Swap"])

    try:
        if page == "Wallet":
            rows = _load_wallet_rows(schema_version=1)
            if not rows:
                st.warning("No eligible balances found.")
                return
            _render_wallet(rows)
        else:
            _render_swap(_load_prices())
    except RuntimeError as exc:
        get_app_logger().error(str(exc))
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
