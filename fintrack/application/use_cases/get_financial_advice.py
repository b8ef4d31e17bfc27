"""Use case producing the canned financial advisor content."""

from dataclasses import dataclass

from fintrack.application.ports.transaction_store import TransactionStorePort
from fintrack.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
)
from fintrack.domain.constants import CANONICAL_CURRENCY
from fintrack.domain.models import Period, StatisticsReport
from fintrack.domain.services.advice import (
    extract_points,
    get_suggested_questions,
    get_suggestions,
    render_financial_summary,
)
from fintrack.domain.services.currency import resolve_currency
from fintrack.domain.services.normalization import normalize_locale
from fintrack.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinancialAdvice:
    """Advisor payload rendered by the interfaces.

    Attributes:
        locale: Language the suggestions are in.
        summary_text: Plain-text financial summary.
        highlights: Summary lines without their bullet markers.
        suggestions: Canned savings suggestions.
        questions: Canned questions offered to the user.
    """

    locale: str
    summary_text: str
    highlights: list[str]
    suggestions: list[str]
    questions: list[str]


class GetFinancialAdviceUseCase:
    """Combine the period report with locale-specific canned advice."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
    ) -> None:
        self._logger = logger or get_app_logger()
        self._summary_use_case = GetPeriodSummaryUseCase(
            transaction_store,
            logger=self._logger,
        )

    def execute(
        self,
        period: Period | None = None,
        locale: str | None = None,
        target_currency=CANONICAL_CURRENCY,
    ) -> FinancialAdvice:
        """Return the advisor content for the period and locale."""
        resolved_locale = normalize_locale(locale)
        currency = resolve_currency(target_currency, self._logger)
        # Summary text converts on render, so aggregate canonically.
        report: StatisticsReport = self._summary_use_case.execute(
            period=period,
            target_currency=CANONICAL_CURRENCY,
        )
        summary_text = render_financial_summary(
            report.summary,
            report.expense_categories,
            currency,
            self._logger,
        )
        self._logger.info(f"Financial advice generated for {resolved_locale}")
        return FinancialAdvice(
            locale=resolved_locale,
            summary_text=summary_text,
            highlights=extract_points(summary_text),
            suggestions=get_suggestions(resolved_locale),
            questions=get_suggested_questions(resolved_locale),
        )


__all__ = ["GetFinancialAdviceUseCase", "FinancialAdvice"]
