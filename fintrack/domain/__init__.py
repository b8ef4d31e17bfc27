"""Domain package for business rules and core models.

Services live in ``fintrack.domain.services``.
"""

from .constants import CurrencyCode, TransactionKind
from .errors import FinTrackError, InvalidNumericInput
from .models import (
    CategoryAggregate,
    FinancialGoal,
    GoalStatus,
    ImportedTransaction,
    ImportSummary,
    Period,
    PeriodSummary,
    StatisticsReport,
    Transaction,
    UserSession,
)

__all__ = [
    "CurrencyCode",
    "TransactionKind",
    "FinTrackError",
    "InvalidNumericInput",
    "CategoryAggregate",
    "FinancialGoal",
    "GoalStatus",
    "ImportedTransaction",
    "ImportSummary",
    "Period",
    "PeriodSummary",
    "StatisticsReport",
    "Transaction",
    "UserSession",
]
