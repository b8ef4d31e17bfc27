"""Database port for the finance tracker.

Infrastructure implementations provide concrete adapters that satisfy this
protocol so use cases never depend on drivers or configuration details.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the finance database engine."""

    def get_engine(self) -> Engine:
        """Get the engine for the finance database.

        Returns:
            Engine: SQLAlchemy engine connected to the finance backend.
        """


__all__ = ["DatabaseEnginePort"]
