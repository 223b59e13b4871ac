"""Database infrastructure for the wallet balances application.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine backing wallet preferences such as hidden tokens. It belongs to the
infrastructure layer because it deals with an external system.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_wallet_engine: Optional[Engine] = None


def get_wallet_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the wallet database.

    Returns:
        Engine: Lazily initialized engine connected to WALLET_DB_URL.
    """
    global _wallet_engine
    if _wallet_engine is None:
        db_url = _get_env_var("WALLET_DB_URL")
        _wallet_engine = _create_engine(db_url)
    return _wallet_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so stores can depend only on the protocol.
    """

    def get_wallet_engine(self) -> Engine:
        """Get the engine for the wallet database.

        Returns:
            Engine: SQLAlchemy engine connected to the wallet database.
        """
        return get_wallet_engine()


__all__ = [
    "get_wallet_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
