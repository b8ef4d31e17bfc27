"""Tests for the SqlAlchemyTransactionStore adapter."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from fintrack.domain.constants import TransactionKind
from fintrack.domain.models import (
    ImportedTransaction,
    Transaction,
    UserSession,
)
from fintrack.infrastructure.transaction_repository import (
    SqlAlchemyTransactionStore,
)


def _build_db_port(rows=None) -> tuple[MagicMock, MagicMock, MagicMock]:
    """Create a database port whose engine yields the given rows."""
    engine = MagicMock()
    read_conn = MagicMock()
    read_ctx = MagicMock()
    read_ctx.__enter__.return_value = read_conn
    engine.connect.return_value = read_ctx
    read_conn.execute.return_value.all.return_value = list(rows or [])

    write_conn = MagicMock()
    write_ctx = MagicMock()
    write_ctx.__enter__.return_value = write_conn
    engine.begin.return_value = write_ctx

    db_port = MagicMock()
    db_port.get_engine.return_value = engine
    return db_port, read_conn, write_conn


def test_get_transactions_filters_by_user_and_period() -> None:
    """Rows should map to transactions with normalized categories."""
    db_port, read_conn, _ = _build_db_port(
        rows=[
            SimpleNamespace(
                id=1,
                amount="12.50",
                category="Category.Food",
                date="2025-03-02",
                description=None,
                notes=None,
            ),
            SimpleNamespace(
                id=2,
                amount=Decimal("3"),
                category=None,
                date=datetime(2025, 3, 1, 9, 30),
                description="Bus",
                notes="Imported from wechat",
            ),
        ]
    )
    store = SqlAlchemyTransactionStore(
        db_port,
        UserSession(user_id=9),
        logger=MagicMock(),
    )

    result = store.get_transactions(
        TransactionKind.EXPENSE,
        date(2025, 3, 1),
        date(2025, 3, 31),
    )

    query, params = read_conn.execute.call_args.args
    assert "FROM expenses" in str(query)
    assert "date >= :start_date" in str(query)
    assert "date <= :end_date" in str(query)
    assert params == {
        "user_id": 9,
        "start_date": date(2025, 3, 1),
        "end_date": date(2025, 3, 31),
    }
    assert [t.category for t in result] == ["food", "other"]
    assert result[0].amount == Decimal("12.50")
    assert result[0].description == ""
    assert result[1].date == date(2025, 3, 1)
    assert all(t.kind == TransactionKind.EXPENSE for t in result)


def test_get_transactions_without_bounds_reads_all_rows() -> None:
    """Open periods should only filter by user."""
    db_port, read_conn, _ = _build_db_port()
    store = SqlAlchemyTransactionStore(
        db_port,
        UserSession(user_id=1),
        logger=MagicMock(),
    )

    assert store.get_transactions(TransactionKind.INCOME, None, None) == []

    query, params = read_conn.execute.call_args.args
    assert "FROM income" in str(query)
    assert ":start_date" not in str(query)
    assert params == {"user_id": 1}


def test_add_transactions_inserts_one_batch_per_kind() -> None:
    """Imported rows should be written to their kind's table."""
    db_port, _, write_conn = _build_db_port()
    store = SqlAlchemyTransactionStore(
        db_port,
        UserSession(user_id=4),
        logger=MagicMock(),
    )
    imported = [
        ImportedTransaction(
            reference="a1",
            amount=Decimal("25.8"),
            category="Shopping",
            date=date(2025, 3, 20),
            description="Groceries",
            kind=TransactionKind.EXPENSE,
            source="alipay",
        ),
        ImportedTransaction(
            reference="a2",
            amount=Decimal("1000"),
            category="income",
            date=date(2025, 3, 10),
            description="Gift",
            kind=TransactionKind.INCOME,
            source="alipay",
        ),
    ]

    inserted = store.add_transactions(imported)

    assert inserted == 2
    assert write_conn.execute.call_count == 2
    tables = {
        str(call.args[0]).split("INSERT INTO")[1].split("(")[0].strip(): (
            call.args[1]
        )
        for call in write_conn.execute.call_args_list
    }
    assert tables["expenses"] == [
        {
            "user_id": 4,
            "amount": Decimal("25.8"),
            "category": "shopping",
            "date": date(2025, 3, 20),
            "description": "Groceries",
            "notes": "Imported from alipay",
        }
    ]
    assert tables["income"][0]["amount"] == Decimal("1000")


def test_add_transaction_inserts_single_row() -> None:
    """A single entry should be inserted and returned with its id."""
    db_port, _, write_conn = _build_db_port()
    write_conn.execute.return_value.lastrowid = 21
    store = SqlAlchemyTransactionStore(
        db_port,
        UserSession(user_id=6),
        logger=MagicMock(),
    )

    stored = store.add_transaction(
        Transaction(
            id=None,
            amount=Decimal("3000"),
            category="Salary",
            date=date(2025, 3, 1),
            description="March pay",
            kind=TransactionKind.INCOME,
        )
    )

    assert stored.id == 21
    assert stored.category == "salary"
    sql, params = write_conn.execute.call_args.args
    assert "INSERT INTO income" in str(sql)
    assert params == {
        "user_id": 6,
        "amount": Decimal("3000"),
        "category": "salary",
        "date": date(2025, 3, 1),
        "description": "March pay",
        "notes": None,
    }
