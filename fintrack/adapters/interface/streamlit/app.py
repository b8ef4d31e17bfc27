"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

import altair as alt
import streamlit as st

from fintrack.application.use_cases.get_financial_advice import (
    FinancialAdvice,
    GetFinancialAdviceUseCase,
)
from fintrack.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
    StatisticsReport,
)
from fintrack.application.use_cases.import_transactions import (
    ImportTransactionsUseCase,
)
from fintrack.application.use_cases.manage_goals import ManageGoalsUseCase
from fintrack.application.use_cases.record_transaction import (
    RecordTransactionUseCase,
)
from fintrack.domain.constants import (
    ENTRY_CATEGORIES,
    CurrencyCode,
    TransactionKind,
)
from fintrack.domain.errors import FinTrackError
from fintrack.domain.models import (
    CategoryAggregate,
    FinancialGoal,
    Period,
    Transaction,
)
from fintrack.domain.services.bills import ALIPAY, WECHAT
from fintrack.domain.services.currency import (
    format_amount,
    format_display_amount,
)
from fintrack.domain.services.goals import calculate_progress
from fintrack.infrastructure.container import (
    build_bill_source,
    build_goals_repository,
    build_transaction_store,
)
from fintrack.infrastructure.logging.logger import get_app_logger
from fintrack.infrastructure.settings import FinTrackSettings


INCOME_COLOR = "#2ecc71"
EXPENSE_COLOR = "#e74c3c"


def _fetch_report(
    period: Period,
    currency: CurrencyCode,
) -> StatisticsReport:
    """Fetch the statistics report from the finance database."""
    use_case = GetPeriodSummaryUseCase(
        transaction_store=build_transaction_store(),
    )
    return use_case.execute(period=period, target_currency=currency)


@st.cache_data(show_spinner=False)
def _load_report(
    period: Period,
    currency: CurrencyCode,
) -> StatisticsReport:
    """Cached wrapper around _fetch_report."""
    return _fetch_report(period, currency)


def _fetch_advice(
    period: Period,
    locale: str,
    currency: CurrencyCode,
) -> FinancialAdvice:
    """Fetch the canned advisor content."""
    use_case = GetFinancialAdviceUseCase(
        transaction_store=build_transaction_store(),
    )
    return use_case.execute(
        period=period,
        locale=locale,
        target_currency=currency,
    )


def _record_transaction(
    kind: TransactionKind,
    amount,
    category: str,
    day: date,
    description: str,
) -> Transaction:
    """Store one transaction entered on the record page."""
    use_case = RecordTransactionUseCase(
        transaction_store=build_transaction_store(),
    )
    return use_case.execute(
        kind=kind,
        amount=amount,
        category=category,
        day=day,
        description=description,
    )


def _goals_use_case() -> ManageGoalsUseCase:
    return ManageGoalsUseCase(goals_repository=build_goals_repository())


def _get_period(selection: str, today: date) -> Period:
    """Return the period for the selected sidebar option."""
    if selection == "Last Month":
        first_of_month = date(today.year, today.month, 1)
        return Period.month_of(first_of_month - timedelta(days=1))
    if selection == "YTD":
        return Period(start=date(today.year, 1, 1), end=today)
    return Period.month_of(today)


def _prepare_bar_chart_data(
    aggregates: Sequence[CategoryAggregate],
    currency: CurrencyCode,
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows for a category bar chart."""
    return [
        {
            "category": aggregate.category,
            "amount": float(aggregate.total_amount),
            "amount_label": format_amount(aggregate.total_amount, currency),
            "share": float(aggregate.percentage_of_total),
            "share_label": f"{aggregate.percentage_of_total}%",
        }
        for aggregate in aggregates
    ]


def _render_breakdown(
    title: str,
    aggregates: Sequence[CategoryAggregate],
    currency: CurrencyCode,
    color: str,
) -> None:
    """Render a horizontal bar chart of category shares."""
    st.subheader(title)
    if not aggregates:
        st.info("No transactions in this period.")
        return
    data = _prepare_bar_chart_data(aggregates, currency)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        color=color,
        cornerRadiusEnd=4,
    ).encode(
        x=alt.X(
            "share:Q",
            title="Share (%)",
            scale=alt.Scale(domain=[0, 100]),
        ),
        y=alt.Y("category:N", sort=None, title=None),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_statistics(report: StatisticsReport) -> None:
    """Render the monthly summary metrics and breakdown charts."""
    summary = report.summary
    currency = report.currency_code
    st.caption(f"{summary.period_start} to {summary.period_end}")
    income_col, expense_col, balance_col, rate_col = st.columns(4)
    income_col.metric("Income", format_amount(summary.total_income, currency))
    expense_col.metric(
        "Expenses",
        format_amount(summary.total_expense, currency),
    )
    balance_col.metric("Balance", format_amount(summary.balance, currency))
    rate_col.metric("Savings Rate", f"{summary.savings_rate:.1f}%")

    left, right = st.columns(2)
    with left:
        _render_breakdown(
            "Income Breakdown",
            report.income_categories,
            currency,
            INCOME_COLOR,
        )
    with right:
        _render_breakdown(
            "Expense Breakdown",
            report.expense_categories,
            currency,
            EXPENSE_COLOR,
        )


def _goal_rows(
    goals: Sequence[FinancialGoal],
    currency: CurrencyCode,
) -> list[dict[str, str]]:
    """Build the goals table rows."""
    logger = get_app_logger()
    return [
        {
            "Goal": goal.name,
            "Saved": format_display_amount(
                goal.current_amount,
                currency,
                logger,
            ),
            "Target": format_display_amount(
                goal.target_amount,
                currency,
                logger,
            ),
            "Progress": "{}%".format(
                calculate_progress(goal.current_amount, goal.target_amount)
            ),
            "Deadline": goal.deadline.isoformat() if goal.deadline else "-",
            "Status": goal.status.value,
        }
        for goal in goals
    ]


def _render_record() -> None:
    """Render the form recording one income or expense."""
    st.subheader("Record Transaction")
    kind = st.radio(
        "Type",
        list(TransactionKind),
        format_func=lambda item: item.value.title(),
        horizontal=True,
    )
    with st.form("record_transaction", clear_on_submit=True):
        amount = st.number_input("Amount (USD)", min_value=0.0, step=0.01)
        category = st.selectbox("Category", ENTRY_CATEGORIES[kind])
        day = st.date_input("Date", value=date.today())
        description = st.text_input("Description")
        submitted = st.form_submit_button("Save")
    if not submitted:
        return
    try:
        stored = _record_transaction(
            kind,
            Decimal(str(amount)),
            category,
            day,
            description,
        )
    except FinTrackError as exc:
        st.error(str(exc))
        return
    st.cache_data.clear()
    st.success(
        f"Saved {stored.kind.value} of "
        f"{format_amount(stored.amount, CurrencyCode.USD)} "
        f"({stored.category})."
    )


def _render_goals(currency: CurrencyCode) -> None:
    """Render the goals table and the new-goal form."""
    use_case = _goals_use_case()
    goals = use_case.list_goals()
    st.subheader("My Plan")
    if goals:
        st.dataframe(
            _goal_rows(goals, currency),
            width="stretch",
            hide_index=True,
        )
    else:
        st.info("No goals yet.")

    with st.form("new_goal"):
        name = st.text_input("Goal name")
        target = st.number_input("Target amount (USD)", min_value=0.0)
        current = st.number_input("Saved so far (USD)", min_value=0.0)
        description = st.text_area("Description")
        submitted = st.form_submit_button("Save goal")
    if submitted:
        try:
            use_case.create_goal(
                name=name,
                target_amount=Decimal(str(target)),
                current_amount=Decimal(str(current)),
                description=description,
            )
        except FinTrackError as exc:
            st.error(str(exc))
        else:
            st.success("Goal saved.")


def _render_advice(advice: FinancialAdvice) -> None:
    """Render the advisor summary and canned suggestions."""
    st.subheader("Financial Summary")
    for highlight in advice.highlights:
        st.markdown(f"- {highlight}")
    st.subheader("Suggestions")
    for suggestion in advice.suggestions:
        st.markdown(f"- {suggestion}")
    st.subheader("Suggested Questions")
    for question in advice.questions:
        st.markdown(f"- {question}")


def _render_import(period: Period) -> None:
    """Render the (mocked) payment platform import page."""
    st.subheader("Import Bills")
    source = st.selectbox("Source", [ALIPAY, WECHAT])
    if not st.button("Import"):
        return
    use_case = ImportTransactionsUseCase(
        transaction_store=build_transaction_store(),
        bill_source=build_bill_source(),
    )
    try:
        summary = use_case.import_from_source(source, period)
    except FinTrackError as exc:
        get_app_logger().error(f"Import from {source} failed: {exc}")
        st.error(str(exc))
        return
    st.cache_data.clear()
    st.success(
        f"Imported {summary.income_count} income and "
        f"{summary.expense_count} expense transactions."
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Tracker", layout="wide")
    st.title("Finance Tracker")

    settings = FinTrackSettings.from_env()
    page = st.sidebar.selectbox(
        "Page",
        ["Statistics", "Record", "My Plan", "Advisor", "Import"],
    )
    selection = st.sidebar.selectbox(
        "Period",
        ["This Month", "Last Month", "YTD"],
    )
    currency = st.sidebar.selectbox(
        "Currency",
        list(CurrencyCode),
        index=list(CurrencyCode).index(settings.display_currency),
        format_func=lambda code: code.value,
    )
    period = _get_period(selection, date.today())

    try:
        if page == "Statistics":
            _render_statistics(_load_report(period, currency))
        elif page == "Record":
            _render_record()
        elif page == "My Plan":
            _render_goals(currency)
        elif page == "Advisor":
            _render_advice(_fetch_advice(period, settings.locale, currency))
        else:
            _render_import(period)
    except FinTrackError as exc:
        get_app_logger().error(str(exc))
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
