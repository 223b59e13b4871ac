"""Application use cases package."""

from .get_visible_balances import GetVisibleBalancesUseCase, VisibleBalances

__all__ = [
    "GetVisibleBalancesUseCase",
    "VisibleBalances",
]
