"""Database ports for the wallet balances application.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine backing wallet preferences.

    Adapters can depend on this protocol instead of concrete database
    drivers or configuration details.
    """

    def get_wallet_engine(self) -> Engine:
        """Get the engine for the wallet preferences database.

        Returns:
            Engine: SQLAlchemy engine connected to the wallet database.
        """


__all__ = ["DatabaseEnginePort"]
