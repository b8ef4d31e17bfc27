"""Tests for the GetFinancialAdviceUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from fintrack.application.use_cases.get_financial_advice import (
    GetFinancialAdviceUseCase,
)
from fintrack.domain.constants import TransactionKind
from fintrack.domain.models import Period, Transaction


def _store() -> MagicMock:
    data = {
        TransactionKind.INCOME: [
            Transaction(
                id=1,
                amount=Decimal("1000"),
                category="salary",
                date=date(2025, 3, 1),
                description="",
                kind=TransactionKind.INCOME,
            ),
        ],
        TransactionKind.EXPENSE: [
            Transaction(
                id=2,
                amount=Decimal("250"),
                category="food",
                date=date(2025, 3, 2),
                description="",
                kind=TransactionKind.EXPENSE,
            ),
        ],
    }
    store = MagicMock()
    store.get_transactions.side_effect = lambda kind, start, end: data[kind]
    return store


def test_execute_returns_localized_advice() -> None:
    """Advice should combine the summary text with locale tables."""
    use_case = GetFinancialAdviceUseCase(_store(), logger=MagicMock())

    advice = use_case.execute(
        period=Period(start=date(2025, 3, 1), end=date(2025, 3, 31)),
        locale="es-ES",
        target_currency="EUR",
    )

    assert advice.locale == "es"
    assert "- Total Income: €930.00" in advice.summary_text
    assert "- Saving Rate: 75.0%" in advice.summary_text
    assert "- Highest expense category: food (€232.50)" in advice.summary_text
    assert advice.suggestions[0].startswith("Crear un presupuesto")
    assert len(advice.questions) == 4


def test_execute_extracts_summary_highlights() -> None:
    """Highlights should be the summary bullets without markers."""
    use_case = GetFinancialAdviceUseCase(_store(), logger=MagicMock())

    advice = use_case.execute(
        period=Period(start=date(2025, 3, 1), end=date(2025, 3, 31)),
    )

    assert advice.highlights == [
        "Total Income: $1000.00",
        "Total Expenses: $250.00",
        "Balance: $750.00",
        "Saving Rate: 75.0%",
        "Highest expense category: food ($250.00)",
    ]
