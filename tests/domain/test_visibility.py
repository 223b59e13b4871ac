"""Tests for token visibility rules."""

from src.domain.models.balances import BalanceEntry, TokenDescriptor
from src.domain.policies.visibility import (
    filter_visible,
    is_visible,
    normalize_hidden_tokens,
)


def _entry(address: str, fiat: str, is_native: bool = False) -> BalanceEntry:
    return BalanceEntry(
        token=TokenDescriptor(address=address, is_native=is_native),
        fiat_balance=fiat,
    )


def test_is_visible_hides_listed_tokens() -> None:
    token = TokenDescriptor(address="0x1")

    assert is_visible(token, frozenset()) is True
    assert is_visible(token, frozenset({"0x1"})) is False
    assert is_visible(token, frozenset({"0x2"})) is True


def test_native_tokens_are_always_visible() -> None:
    """Native assets ignore the hidden set."""
    native = TokenDescriptor(address="0x0", is_native=True)

    assert is_visible(native, frozenset({"0x0"})) is True


def test_filter_visible_preserves_order() -> None:
    """Output is the ordered subsequence of visible entries."""
    items = (
        _entry("0x1", "1"),
        _entry("0x2", "2"),
        _entry("0x0", "3", is_native=True),
        _entry("0x3", "4"),
    )

    result = filter_visible(items, frozenset({"0x2", "0x0"}))

    assert result == (items[0], items[2], items[3])


def test_filter_visible_handles_empty_input() -> None:
    assert filter_visible((), frozenset({"0x1"})) == ()


def test_normalize_hidden_tokens_drops_blank_addresses() -> None:
    hidden = normalize_hidden_tokens(["0x1", " 0x2 ", "", "   ", "0x1"])

    assert hidden == frozenset({"0x1", "0x2"})
