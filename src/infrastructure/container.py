"""Composition root for wiring infrastructure adapters."""

from src.application.ports.balance_source import BalanceSourcePort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.hidden_token_store import HiddenTokenWriterPort
from src.application.use_cases.get_visible_balances import (
    GetVisibleBalancesUseCase,
)
from src.infrastructure.balance_sources import JsonFileBalanceSource
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.hidden_token_store import (
    InMemoryHiddenTokenStore,
    SqlAlchemyHiddenTokenStore,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import WalletSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_balance_source(
    settings: WalletSettings | None = None,
) -> BalanceSourcePort:
    """Return the configured balance source."""
    resolved = settings or WalletSettings.from_env()
    return JsonFileBalanceSource(
        resolved.balances_file,
        logger=get_app_logger(),
    )


def build_hidden_token_store(
    settings: WalletSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> HiddenTokenWriterPort:
    """Return the configured hidden-token store."""
    resolved = settings or WalletSettings.from_env()
    backend = resolved.hidden_tokens_backend
    if backend == "memory":
        return InMemoryHiddenTokenStore(resolved.hidden_tokens)
    if backend != "sql":
        raise RuntimeError(f"Unsupported HIDDEN_TOKENS_BACKEND: {backend}")
    store = SqlAlchemyHiddenTokenStore(
        db_port or build_database_adapter(),
        chain_id=resolved.chain_id,
        safe_address=resolved.safe_address,
        logger=get_app_logger(),
    )
    store.prepare_store()
    return store


def build_visible_balances_use_case(
    settings: WalletSettings | None = None,
    hidden_token_store: HiddenTokenWriterPort | None = None,
) -> GetVisibleBalancesUseCase:
    """Return the visible balances use case wired to configured adapters."""
    resolved = settings or WalletSettings.from_env()
    return GetVisibleBalancesUseCase(
        balance_source=build_balance_source(resolved),
        hidden_token_store=(
            hidden_token_store or build_hidden_token_store(resolved)
        ),
        logger=get_app_logger(),
        precision=resolved.fiat_precision,
    )


__all__ = [
    "build_database_adapter",
    "build_balance_source",
    "build_hidden_token_store",
    "build_visible_balances_use_case",
]
