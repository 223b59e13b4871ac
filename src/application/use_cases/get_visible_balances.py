"""Use case exposing wallet balances without hidden tokens."""

from src.application.ports.balance_source import BalanceSourcePort
from src.application.ports.hidden_token_store import HiddenTokenStorePort
from src.domain.constants import FIAT_PRECISION
from src.domain.models.balances import (
    BalanceSet,
    HiddenTokenSet,
    VisibleBalances,
    VisibleBalanceView,
)
from src.domain.services.balances import build_visible_balance_view
from src.infrastructure.logging.logger import get_app_logger


class GetVisibleBalancesUseCase:
    """Combine balances and hidden tokens into the visible view.

    The last computed view is reused while neither input changes.
    """

    def __init__(
        self,
        balance_source: BalanceSourcePort,
        hidden_token_store: HiddenTokenStorePort,
        logger=None,
        precision: int = FIAT_PRECISION,
    ) -> None:
        """Initialize the use case.

        Args:
            balance_source: Port providing the balance snapshot.
            hidden_token_store: Port providing the hidden-token set.
            logger: Optional logger compatible with logging.Logger-like API.
            precision: Fractional digits kept when recomputing totals.
        """
        self._balance_source = balance_source
        self._hidden_token_store = hidden_token_store
        self._logger = logger or get_app_logger()
        self._precision = precision
        self._last_inputs: tuple[BalanceSet, HiddenTokenSet] | None = None
        self._last_view: VisibleBalanceView | None = None

    def execute(self) -> VisibleBalances:
        """Return the visible balances with the source's state.

        Returns:
            VisibleBalances: Visible view plus loading and error flags.
        """
        snapshot = self._balance_source.get_balances()
        hidden = frozenset(self._hidden_token_store.get_hidden_tokens())
        view = self._view_for(snapshot.balances, hidden)
        return VisibleBalances(
            balances=view,
            loading=snapshot.loading,
            error=snapshot.error,
        )

    def _view_for(
        self,
        balances: BalanceSet,
        hidden: HiddenTokenSet,
    ) -> VisibleBalanceView:
        if self._last_view is not None and self._same_inputs(balances, hidden):
            return self._last_view

        view = build_visible_balance_view(
            balances,
            hidden,
            precision=self._precision,
            logger=self._logger,
        )
        self._logger.debug(
            f"Visible balances recomputed: {len(view.items)} of "
            f"{len(balances.items)} items, total={view.fiat_total!r}"
        )
        self._last_inputs = (balances, hidden)
        self._last_view = view
        return view

    def _same_inputs(
        self,
        balances: BalanceSet,
        hidden: HiddenTokenSet,
    ) -> bool:
        if self._last_inputs is None:
            return False
        last_balances, last_hidden = self._last_inputs
        same_balances = last_balances is balances or last_balances == balances
        same_hidden = last_hidden is hidden or last_hidden == hidden
        return same_balances and same_hidden


__all__ = ["GetVisibleBalancesUseCase", "VisibleBalances"]
