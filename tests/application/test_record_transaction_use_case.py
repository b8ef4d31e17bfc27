"""Tests for the RecordTransactionUseCase."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from fintrack.application.use_cases.record_transaction import (
    RecordTransactionUseCase,
)
from fintrack.domain.constants import TransactionKind
from fintrack.domain.errors import InvalidTransactionError


def _use_case(store: MagicMock) -> RecordTransactionUseCase:
    return RecordTransactionUseCase(
        transaction_store=store,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )


def test_execute_stores_validated_expense() -> None:
    """A valid expense should reach the store with cleaned fields."""
    store = MagicMock()
    store.add_transaction.side_effect = lambda tx: replace(tx, id=15)

    stored = _use_case(store).execute(
        kind="expense",
        amount="42.10",
        category=" Food ",
        day="2025-03-05",
        description=" Lunch ",
    )

    assert stored.id == 15
    sent = store.add_transaction.call_args.args[0]
    assert sent.kind == TransactionKind.EXPENSE
    assert sent.amount == Decimal("42.10")
    assert sent.category == "food"
    assert sent.date == date(2025, 3, 5)
    assert sent.description == "Lunch"


def test_execute_stores_income() -> None:
    """Income entries should keep their kind."""
    store = MagicMock()
    store.add_transaction.side_effect = lambda tx: tx

    stored = _use_case(store).execute(
        TransactionKind.INCOME,
        Decimal("3000"),
        "Salary",
        date(2025, 3, 1),
    )

    assert stored.kind == TransactionKind.INCOME
    assert stored.category == "salary"


def test_execute_rejects_missing_amount() -> None:
    """Invalid entries should not be stored."""
    store = MagicMock()

    with pytest.raises(InvalidTransactionError):
        _use_case(store).execute("income", None, "salary", "2025-03-01")

    store.add_transaction.assert_not_called()


def test_execute_rejects_unknown_kind() -> None:
    """Only income and expense can be recorded."""
    store = MagicMock()

    with pytest.raises(InvalidTransactionError):
        _use_case(store).execute("transfer", "10", "other", "2025-03-01")

    store.add_transaction.assert_not_called()
