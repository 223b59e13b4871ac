"""Domain models package."""

from .balances import (
    BalanceEntry,
    BalanceSet,
    BalanceSnapshot,
    HiddenTokenSet,
    TokenDescriptor,
    VisibleBalances,
    VisibleBalanceView,
)
from .fixed_point import FixedPointAmount

__all__ = [
    "BalanceEntry",
    "BalanceSet",
    "BalanceSnapshot",
    "FixedPointAmount",
    "HiddenTokenSet",
    "TokenDescriptor",
    "VisibleBalances",
    "VisibleBalanceView",
]
