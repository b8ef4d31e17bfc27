"""CLI adapter importing (mocked) Alipay or WeChat bills.

Reads ``IMPORT_SOURCE`` (alipay or wechat), ``IMPORT_START_DATE`` and
``IMPORT_END_DATE`` (YYYY-MM-DD).
"""

from datetime import date
import os

from fintrack.adapters.cli_utils import parse_date
from fintrack.application.use_cases.import_transactions import (
    ImportTransactionsUseCase,
)
from fintrack.domain.errors import FinTrackError
from fintrack.domain.models import Period
from fintrack.infrastructure.container import (
    build_bill_source,
    build_transaction_store,
)
from fintrack.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the bill import."""
    logger = get_app_logger()
    source = os.getenv("IMPORT_SOURCE", "alipay").strip().lower()
    today = date.today()
    start_date = parse_date(os.getenv("IMPORT_START_DATE"), logger)
    end_date = parse_date(os.getenv("IMPORT_END_DATE"), logger) or today
    start_date = start_date or date(end_date.year, 1, 1)

    use_case = ImportTransactionsUseCase(
        transaction_store=build_transaction_store(),
        bill_source=build_bill_source(),
        logger=logger,
    )
    try:
        summary = use_case.import_from_source(
            source,
            Period(start=start_date, end=end_date),
        )
    except (FinTrackError, ValueError) as exc:
        logger.error(f"Import from {source} failed: {exc}")
        print(f"Import failed: {exc}")
        return

    print(
        f"Imported {summary.total_count} transactions from {source}: "
        f"{summary.income_count} income ({summary.income_total}), "
        f"{summary.expense_count} expense ({summary.expense_total})."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
