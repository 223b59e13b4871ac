"""Application ports package."""

from .balance_source import BalanceSourcePort
from .database import DatabaseEnginePort
from .hidden_token_store import HiddenTokenStorePort, HiddenTokenWriterPort

__all__ = [
    "BalanceSourcePort",
    "DatabaseEnginePort",
    "HiddenTokenStorePort",
    "HiddenTokenWriterPort",
]
