"""Domain models package."""

from .finance import (
    CategoryAggregate,
    ImportSummary,
    PeriodSummary,
    StatisticsReport,
)
from .goals import FinancialGoal, GoalStatus
from .transactions import (
    ImportedTransaction,
    Period,
    Transaction,
    UserSession,
)

__all__ = [
    "CategoryAggregate",
    "ImportSummary",
    "PeriodSummary",
    "StatisticsReport",
    "FinancialGoal",
    "GoalStatus",
    "ImportedTransaction",
    "Period",
    "Transaction",
    "UserSession",
]
