"""Domain models for wallet balances and their visible projection."""

from dataclasses import dataclass, field


HiddenTokenSet = frozenset[str]


@dataclass(frozen=True)
class TokenDescriptor:
    """Token identity as reported by the balance service.

    Attributes:
        address: Chain identifier of the token, unique per token.
        is_native: True for the chain's intrinsic asset.
    """

    address: str
    is_native: bool = False
    symbol: str | None = None
    name: str | None = None
    decimals: int | None = None
    logo_uri: str | None = None


@dataclass(frozen=True)
class BalanceEntry:
    """Single holding in display order.

    ``balance`` and ``fiat_conversion`` are carried through untouched; only
    ``fiat_balance`` takes part in total recomputation.
    """

    token: TokenDescriptor
    fiat_balance: str = ""
    balance: str = ""
    fiat_conversion: str = ""


@dataclass(frozen=True)
class BalanceSet:
    """Ordered holdings plus the upstream fiat total.

    An empty ``fiat_total`` means no total is known.
    """

    items: tuple[BalanceEntry, ...] = ()
    fiat_total: str = ""


@dataclass(frozen=True)
class VisibleBalanceView:
    """Holdings left after hiding, with the recomputed fiat total."""

    items: tuple[BalanceEntry, ...] = ()
    fiat_total: str = ""


@dataclass(frozen=True)
class BalanceSnapshot:
    """Current state exposed by a balance source."""

    balances: BalanceSet = field(default_factory=BalanceSet)
    loading: bool = False
    error: str | None = None


@dataclass(frozen=True)
class VisibleBalances:
    """Visible view with the source's loading and error state."""

    balances: VisibleBalanceView = field(default_factory=VisibleBalanceView)
    loading: bool = False
    error: str | None = None


__all__ = [
    "HiddenTokenSet",
    "TokenDescriptor",
    "BalanceEntry",
    "BalanceSet",
    "VisibleBalanceView",
    "BalanceSnapshot",
    "VisibleBalances",
]
