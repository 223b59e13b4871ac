"""Hidden-token store adapters."""

from collections.abc import Iterable

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.hidden_token_store import HiddenTokenWriterPort
from src.domain.models.balances import HiddenTokenSet
from src.domain.policies.visibility import normalize_hidden_tokens
from src.infrastructure.logging.logger import get_app_logger


CREATE_HIDDEN_TOKENS_SQL = """
CREATE TABLE IF NOT EXISTS hidden_tokens (
    chain_id TEXT NOT NULL,
    safe_address TEXT NOT NULL,
    token_address TEXT NOT NULL,
    PRIMARY KEY (chain_id, safe_address, token_address)
)
"""

SELECT_HIDDEN_TOKENS_SQL = text(
    """
    SELECT token_address
    FROM hidden_tokens
    WHERE chain_id = :chain_id AND safe_address = :safe_address
    """
)

INSERT_HIDDEN_TOKEN_SQL = text(
    """
    INSERT INTO hidden_tokens (chain_id, safe_address, token_address)
    VALUES (:chain_id, :safe_address, :token_address)
    """
)

DELETE_HIDDEN_TOKEN_SQL = text(
    """
    DELETE FROM hidden_tokens
    WHERE chain_id = :chain_id
      AND safe_address = :safe_address
      AND token_address = :token_address
    """
)


class InMemoryHiddenTokenStore(HiddenTokenWriterPort):
    """Hidden-token store kept in process memory."""

    def __init__(self, addresses: Iterable[str] = ()) -> None:
        self._hidden = normalize_hidden_tokens(addresses)

    def prepare_store(self) -> None:
        return None

    def get_hidden_tokens(self) -> HiddenTokenSet:
        return self._hidden

    def hide_token(self, address: str) -> None:
        self._hidden = normalize_hidden_tokens([*self._hidden, address])

    def unhide_token(self, address: str) -> None:
        self._hidden = self._hidden - {address.strip()}


class SqlAlchemyHiddenTokenStore(HiddenTokenWriterPort):
    """Hidden-token store persisted through SQLAlchemy.

    Hidden sets are scoped per chain and wallet address.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        chain_id: str,
        safe_address: str,
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the wallet engine.
            chain_id: Chain the hidden set belongs to.
            safe_address: Wallet the hidden set belongs to.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._chain_id = chain_id
        self._safe_address = safe_address
        self._logger = logger or get_app_logger()

    def prepare_store(self) -> None:
        """Create the hidden_tokens table when missing."""
        engine = self._db_port.get_wallet_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_HIDDEN_TOKENS_SQL)

    def get_hidden_tokens(self) -> HiddenTokenSet:
        """Return hidden token addresses for the configured wallet."""
        engine = self._db_port.get_wallet_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_HIDDEN_TOKENS_SQL,
                self._scope(),
            ).all()
        return normalize_hidden_tokens(row.token_address for row in rows)

    def hide_token(self, address: str) -> None:
        """Persist a hidden token address; hiding twice is a no-op."""
        token_address = address.strip()
        if not token_address:
            self._logger.warning("Ignoring empty token address to hide")
            return
        if token_address in self.get_hidden_tokens():
            return
        engine = self._db_port.get_wallet_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_HIDDEN_TOKEN_SQL,
                {**self._scope(), "token_address": token_address},
            )
        self._logger.info(
            f"Token {token_address} hidden for chain={self._chain_id} "
            f"safe={self._safe_address}"
        )

    def unhide_token(self, address: str) -> None:
        """Remove a hidden token address."""
        token_address = address.strip()
        engine = self._db_port.get_wallet_engine()
        with engine.begin() as conn:
            conn.execute(
                DELETE_HIDDEN_TOKEN_SQL,
                {**self._scope(), "token_address": token_address},
            )
        self._logger.info(
            f"Token {token_address} unhidden for chain={self._chain_id} "
            f"safe={self._safe_address}"
        )

    def _scope(self) -> dict[str, str]:
        return {
            "chain_id": self._chain_id,
            "safe_address": self._safe_address,
        }


__all__ = [
    "CREATE_HIDDEN_TOKENS_SQL",
    "InMemoryHiddenTokenStore",
    "SqlAlchemyHiddenTokenStore",
]
