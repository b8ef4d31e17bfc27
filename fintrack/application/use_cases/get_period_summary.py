"""Use case to build the statistics report for a period."""

from datetime import date

from fintrack.application.ports.transaction_store import TransactionStorePort
from fintrack.application.use_cases.get_category_breakdown import (
    convert_aggregates,
)
from fintrack.domain.constants import CANONICAL_CURRENCY, TransactionKind
from fintrack.domain.models import Period, StatisticsReport
from fintrack.domain.services.aggregation import aggregate_by_category
from fintrack.domain.services.currency import resolve_currency
from fintrack.domain.services.summary import build_summary
from fintrack.infrastructure.logging.logger import get_app_logger


class GetPeriodSummaryUseCase:
    """Compute income/expense totals, balance, and category breakdowns."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_store: Port providing the user's transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_store = transaction_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        period: Period | None = None,
        target_currency=CANONICAL_CURRENCY,
        today: date | None = None,
    ) -> StatisticsReport:
        """Return the statistics report for the period.

        Args:
            period: Inclusive window; defaults to the month containing today.
            target_currency: Display currency.
            today: Reference date used when no period is given.

        Returns:
            StatisticsReport: Summary and breakdowns in the display currency.
        """
        resolved_period = period or Period.month_of(today or date.today())
        currency = resolve_currency(target_currency, self._logger)

        income = self._transaction_store.get_transactions(
            TransactionKind.INCOME,
            resolved_period.start,
            resolved_period.end,
        )
        expenses = self._transaction_store.get_transactions(
            TransactionKind.EXPENSE,
            resolved_period.start,
            resolved_period.end,
        )
        self._logger.info(
            f"Fetched {len(income)} income and {len(expenses)} expense "
            f"transactions for {resolved_period.start}..{resolved_period.end}"
        )

        # Build the summary from converted aggregates so balance stays
        # exactly income minus expense in the display currency.
        income_aggregates = convert_aggregates(
            aggregate_by_category(income, self._logger),
            currency,
            self._logger,
        )
        expense_aggregates = convert_aggregates(
            aggregate_by_category(expenses, self._logger),
            currency,
            self._logger,
        )
        summary = build_summary(
            income_aggregates,
            expense_aggregates,
            resolved_period,
        )
        self._logger.info(
            f"Period summary computed: income={summary.total_income}, "
            f"expense={summary.total_expense}, "
            f"savings_rate={summary.savings_rate}, currency={currency.value}"
        )
        return StatisticsReport(
            summary=summary,
            income_categories=income_aggregates,
            expense_categories=expense_aggregates,
            currency_code=currency,
        )


__all__ = ["GetPeriodSummaryUseCase", "StatisticsReport"]
