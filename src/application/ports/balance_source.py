"""Port for reading wallet balances."""

from typing import Protocol

from src.domain.models.balances import BalanceSnapshot


class BalanceSourcePort(Protocol):
    """Port exposing the current balance snapshot.

    Implementations own fetching, retries and caching; the snapshot carries
    their loading and error state.
    """

    def get_balances(self) -> BalanceSnapshot:
        """Return the latest balance snapshot."""


__all__ = ["BalanceSourcePort"]
