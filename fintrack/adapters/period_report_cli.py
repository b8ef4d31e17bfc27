"""CLI adapter printing the statistics report for a month.

Reads ``REPORT_MONTH`` (YYYY-MM, defaults to the current month) and the
display currency from ``FINTRACK_DISPLAY_CURRENCY``.
"""

import os

from fintrack.adapters.cli_utils import parse_month
from fintrack.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
)
from fintrack.domain.errors import FinTrackError
from fintrack.domain.services.currency import format_amount
from fintrack.infrastructure.container import build_transaction_store
from fintrack.infrastructure.logging.logger import get_app_logger
from fintrack.infrastructure.settings import FinTrackSettings


def main() -> None:
    """Print the period summary and category breakdowns."""
    logger = get_app_logger()
    settings = FinTrackSettings.from_env()
    period = parse_month(os.getenv("REPORT_MONTH"), logger)
    use_case = GetPeriodSummaryUseCase(
        transaction_store=build_transaction_store(settings.session()),
        logger=logger,
    )
    try:
        report = use_case.execute(
            period=period,
            target_currency=settings.display_currency,
        )
    except FinTrackError as exc:
        logger.error(str(exc))
        print(f"Could not build the report: {exc}")
        return

    currency = report.currency_code
    summary = report.summary
    print(
        f"Summary {summary.period_start} .. {summary.period_end} "
        f"({currency.value})"
    )
    print(f"Income:       {format_amount(summary.total_income, currency)}")
    print(f"Expenses:     {format_amount(summary.total_expense, currency)}")
    print(f"Balance:      {format_amount(summary.balance, currency)}")
    print(f"Savings rate: {summary.savings_rate}%")
    for title, aggregates in (
        ("Income breakdown", report.income_categories),
        ("Expense breakdown", report.expense_categories),
    ):
        print(title)
        if not aggregates:
            print("  (none)")
        for aggregate in aggregates:
            print(
                f"  {aggregate.category:<20} "
                f"{format_amount(aggregate.total_amount, currency):>14} "
                f"{aggregate.percentage_of_total:>6}%"
            )


if __name__ == "__main__":  # pragma: no cover
    main()
