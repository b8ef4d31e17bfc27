"""Application use cases package."""

from .get_category_breakdown import GetCategoryBreakdownUseCase
from .get_financial_advice import FinancialAdvice, GetFinancialAdviceUseCase
from .get_period_summary import GetPeriodSummaryUseCase, StatisticsReport
from .import_transactions import ImportTransactionsUseCase
from .manage_goals import ManageGoalsUseCase
from .record_transaction import RecordTransactionUseCase

__all__ = [
    "GetCategoryBreakdownUseCase",
    "GetFinancialAdviceUseCase",
    "FinancialAdvice",
    "GetPeriodSummaryUseCase",
    "StatisticsReport",
    "ImportTransactionsUseCase",
    "ManageGoalsUseCase",
    "RecordTransactionUseCase",
]
