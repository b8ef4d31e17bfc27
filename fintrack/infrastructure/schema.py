"""Table definitions for the finance database."""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)

from fintrack.application.ports.database import DatabaseEnginePort


metadata = MetaData()


def _transaction_table(name: str) -> Table:
    return Table(
        name,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("user_id", Integer, nullable=False, index=True),
        Column("amount", Numeric(12, 2), nullable=False),
        Column("category", String(64), nullable=False),
        Column("date", Date, nullable=False),
        Column("description", Text),
        Column("notes", Text),
    )


income_table = _transaction_table("income")
expenses_table = _transaction_table("expenses")

financial_goals_table = Table(
    "financial_goals",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, nullable=False, index=True),
    Column("name", String(128), nullable=False),
    Column("target_amount", Numeric(12, 2), nullable=False),
    Column("current_amount", Numeric(12, 2), nullable=False, default=0),
    Column("deadline", Date),
    Column("description", Text),
    Column("status", String(16), nullable=False, default="active"),
    Column("created_at", DateTime, nullable=False),
)


def create_schema(db_port: DatabaseEnginePort) -> list[str]:
    """Create the finance tables if they do not exist.

    Returns:
        list[str]: Names of the managed tables.
    """
    engine = db_port.get_engine()
    metadata.create_all(engine, checkfirst=True)
    return sorted(metadata.tables)


__all__ = [
    "metadata",
    "income_table",
    "expenses_table",
    "financial_goals_table",
    "create_schema",
]
