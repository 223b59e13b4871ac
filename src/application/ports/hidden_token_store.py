"""Ports for the user's hidden-token set."""

from typing import Protocol

from src.domain.models.balances import HiddenTokenSet


class HiddenTokenStorePort(Protocol):
    """Port exposing read access to hidden token addresses."""

    def get_hidden_tokens(self) -> HiddenTokenSet:
        """Return the current hidden-token snapshot."""


class HiddenTokenWriterPort(HiddenTokenStorePort, Protocol):
    """Port exposing write access for presentation adapters."""

    def prepare_store(self) -> None:
        """Ensure the store is ready to persist hidden tokens."""

    def hide_token(self, address: str) -> None:
        """Mark a token address as hidden."""

    def unhide_token(self, address: str) -> None:
        """Remove a token address from the hidden set."""


__all__ = ["HiddenTokenStorePort", "HiddenTokenWriterPort"]
