"""Domain models for financial aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from fintrack.domain.constants import CurrencyCode


@dataclass(frozen=True)
class CategoryAggregate:
    """Total for a single category and its share of the overall total.

    Attributes:
        category: Normalized category name.
        total_amount: Sum of transaction amounts in the category.
        percentage_of_total: Share of the total, 0-100 with one decimal.
    """

    category: str
    total_amount: Decimal
    percentage_of_total: Decimal


@dataclass(frozen=True)
class PeriodSummary:
    """Income and expense totals for a period.

    Attributes:
        period_start: First day of the period.
        period_end: Last day of the period.
        total_income: Sum of income aggregates.
        total_expense: Sum of expense aggregates.
        balance: Income minus expenses.
        savings_rate: Balance as a percentage of income, 0 without income.
    """

    period_start: date
    period_end: date
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    savings_rate: Decimal


@dataclass(frozen=True)
class StatisticsReport:
    """Summary and category breakdowns expressed in a display currency."""

    summary: PeriodSummary
    income_categories: list[CategoryAggregate]
    expense_categories: list[CategoryAggregate]
    currency_code: CurrencyCode


@dataclass(frozen=True)
class ImportSummary:
    """Counts and totals of an imported batch."""

    income_count: int
    income_total: Decimal
    expense_count: int
    expense_total: Decimal

    @property
    def total_count(self) -> int:
        return self.income_count + self.expense_count


__all__ = [
    "CategoryAggregate",
    "PeriodSummary",
    "StatisticsReport",
    "ImportSummary",
]
