"""Visibility rules for hidden tokens."""

from collections.abc import Iterable, Sequence

from src.domain.models.balances import (
    BalanceEntry,
    HiddenTokenSet,
    TokenDescriptor,
)


def is_visible(token: TokenDescriptor, hidden: HiddenTokenSet) -> bool:
    """Return True when the token should be shown.

    Native tokens cannot be hidden.

    Args:
        token: Token to evaluate.
        hidden: Addresses the user has hidden.

    Returns:
        bool: True when the token is native or not hidden.
    """
    if token.is_native:
        return True
    return token.address not in hidden


def filter_visible(
    items: Sequence[BalanceEntry],
    hidden: HiddenTokenSet,
) -> tuple[BalanceEntry, ...]:
    """Keep visible entries in their original order."""
    return tuple(item for item in items if is_visible(item.token, hidden))


def normalize_hidden_tokens(addresses: Iterable[str]) -> HiddenTokenSet:
    """Build a hidden-token set, dropping blank addresses."""
    cleaned = (address.strip() for address in addresses if address)
    return frozenset(address for address in cleaned if address)


__all__ = ["is_visible", "filter_visible", "normalize_hidden_tokens"]
