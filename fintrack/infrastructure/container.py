"""Composition root for wiring infrastructure adapters."""

from fintrack.application.ports.bill_source import BillSourcePort
from fintrack.application.ports.database import DatabaseEnginePort
from fintrack.application.ports.goals_repository import GoalsRepositoryPort
from fintrack.application.ports.transaction_store import TransactionStorePort
from fintrack.domain.models import UserSession
from fintrack.infrastructure.bill_source import MockBillSource
from fintrack.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from fintrack.infrastructure.goals_repository import SqlAlchemyGoalsRepository
from fintrack.infrastructure.logging.logger import get_app_logger
from fintrack.infrastructure.settings import FinTrackSettings
from fintrack.infrastructure.transaction_repository import (
    SqlAlchemyTransactionStore,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_session(settings: FinTrackSettings | None = None) -> UserSession:
    """Return the session for the configured user."""
    resolved = settings or FinTrackSettings.from_env()
    return resolved.session()


def build_transaction_store(
    session: UserSession | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> TransactionStorePort:
    """Return the transaction store for a user session."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionStore(
        resolved_db,
        session or build_session(),
        logger=get_app_logger(),
    )


def build_goals_repository(
    session: UserSession | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> GoalsRepositoryPort:
    """Return the goals repository for a user session."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyGoalsRepository(resolved_db, session or build_session())


def build_bill_source() -> BillSourcePort:
    """Return the (mocked) payment platform bill source."""
    return MockBillSource()


__all__ = [
    "build_database_adapter",
    "build_session",
    "build_transaction_store",
    "build_goals_repository",
    "build_bill_source",
]
