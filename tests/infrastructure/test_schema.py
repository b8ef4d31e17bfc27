"""Tests for the finance table definitions."""

from unittest.mock import MagicMock

from sqlalchemy import create_engine, inspect

from fintrack.infrastructure import schema


def test_create_schema_creates_tables_in_sqlite() -> None:
    """create_schema should create every managed table."""
    engine = create_engine("sqlite://")
    db_port = MagicMock()
    db_port.get_engine.return_value = engine

    tables = schema.create_schema(db_port)

    assert tables == ["expenses", "financial_goals", "income"]
    assert set(inspect(engine).get_table_names()) == set(tables)


def test_create_schema_is_idempotent() -> None:
    """Running twice should not fail on existing tables."""
    engine = create_engine("sqlite://")
    db_port = MagicMock()
    db_port.get_engine.return_value = engine

    schema.create_schema(db_port)

    assert schema.create_schema(db_port) == [
        "expenses",
        "financial_goals",
        "income",
    ]
