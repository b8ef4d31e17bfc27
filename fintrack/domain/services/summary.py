"""Period summary built from income and expense aggregates."""

from collections.abc import Sequence
from decimal import Decimal

from fintrack.domain.models import CategoryAggregate, Period, PeriodSummary
from fintrack.domain.services.aggregation import total_of
from fintrack.utils.decimal_utils import round_money


def build_summary(
    income_aggregates: Sequence[CategoryAggregate],
    expense_aggregates: Sequence[CategoryAggregate],
    period: Period,
) -> PeriodSummary:
    """Combine income and expense aggregates into a period summary.

    Args:
        income_aggregates: Output of aggregate_by_category for income.
        expense_aggregates: Output of aggregate_by_category for expenses.
        period: Window the aggregates were computed for.

    Returns:
        PeriodSummary: Totals, balance, and savings rate. The savings rate
            is 0 when there is no income.
    """
    total_income = total_of(income_aggregates)
    total_expense = total_of(expense_aggregates)
    balance = total_income - total_expense
    if total_income > 0:
        savings_rate = round_money(balance / total_income * Decimal("100"))
    else:
        savings_rate = Decimal("0")
    return PeriodSummary(
        period_start=period.start,
        period_end=period.end,
        total_income=total_income,
        total_expense=total_expense,
        balance=balance,
        savings_rate=savings_rate,
    )


__all__ = ["build_summary"]
