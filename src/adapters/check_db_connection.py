"""Simple CLI to validate the wallet database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer, runs a basic health check
and makes sure the hidden_tokens table exists.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.hidden_token_store import CREATE_HIDDEN_TOKENS_SQL
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a connectivity check against the configured wallet database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_wallet_engine()
    logger.info(f"Wallet DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
        conn.exec_driver_sql(CREATE_HIDDEN_TOKENS_SQL)
        conn.commit()

    logger.info("Wallet database connection is working.")


if __name__ == "__main__":
    main()
