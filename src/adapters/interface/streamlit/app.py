"""Streamlit page showing wallet balances without hidden tokens."""

from collections.abc import Sequence

import streamlit as st

from src.application.ports.hidden_token_store import HiddenTokenWriterPort
from src.application.use_cases.get_visible_balances import (
    GetVisibleBalancesUseCase,
    VisibleBalances,
)
from src.domain.models.balances import BalanceEntry
from src.infrastructure.container import (
    build_hidden_token_store,
    build_visible_balances_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger


@st.cache_resource(show_spinner=False)
def _load_hidden_token_store() -> HiddenTokenWriterPort:
    """Cached hidden-token store shared across Streamlit reruns."""
    return build_hidden_token_store()


@st.cache_resource(show_spinner=False)
def _load_use_case() -> GetVisibleBalancesUseCase:
    """Cached use case so unchanged inputs reuse the last view."""
    return build_visible_balances_use_case(
        hidden_token_store=_load_hidden_token_store(),
    )


def _fetch_visible_balances() -> VisibleBalances:
    """Run the visible balances use case."""
    return _load_use_case().execute()


def _token_label(entry: BalanceEntry) -> str:
    token = entry.token
    return token.symbol or token.name or token.address


def _build_rows(items: Sequence[BalanceEntry]) -> list[dict[str, str]]:
    """Convert visible entries to table rows."""
    return [
        {
            "Token": _token_label(entry),
            "Address": entry.token.address,
            "Balance": entry.balance,
            "Fiat balance": entry.fiat_balance,
        }
        for entry in items
    ]


def _render_hidden_token_picker(
    store: HiddenTokenWriterPort,
    items: Sequence[BalanceEntry],
) -> None:
    """Let the user choose which non-native tokens are hidden."""
    hidden = store.get_hidden_tokens()
    candidates = sorted(
        {entry.token.address for entry in items if not entry.token.is_native}
        | set(hidden)
    )
    selected = st.multiselect(
        "Hidden tokens",
        candidates,
        default=sorted(hidden),
    )
    chosen = set(selected)
    if chosen == set(hidden):
        return
    usage_logger = get_usage_logger()
    for address in sorted(chosen - hidden):
        store.hide_token(address)
        usage_logger.info(f"Token hidden from dashboard: {address}")
    for address in sorted(hidden - chosen):
        store.unhide_token(address)
        usage_logger.info(f"Token unhidden from dashboard: {address}")
    st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Wallet Balances", layout="wide")
    st.title("Wallet Balances")

    result = _fetch_visible_balances()
    if result.error:
        st.warning(f"Balances unavailable: {result.error}")
        return
    if result.loading:
        st.caption("Balances are loading...")

    view = result.balances
    st.caption(f"{len(view.items)} visible tokens")
    st.metric("Total", view.fiat_total or "Unknown")
    if view.items:
        st.dataframe(
            _build_rows(view.items),
            use_container_width=True,
            hide_index=True,
        )

    _render_hidden_token_picker(_load_hidden_token_store(), view.items)


if __name__ == "__main__":  # pragma: no cover
    main()
