"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from fintrack.adapters.interface.streamlit import app
from fintrack.application.use_cases.get_financial_advice import (
    FinancialAdvice,
)
from fintrack.domain.constants import CurrencyCode, TransactionKind
from fintrack.domain.models import (
    CategoryAggregate,
    FinancialGoal,
    Period,
    Transaction,
)


def test_fetch_report_invokes_use_case(monkeypatch):
    """_fetch_report should build the store and run the use case."""
    captured = {}

    class _FakeUseCase:
        def __init__(self, transaction_store):
            captured["store"] = transaction_store

        def execute(self, period, target_currency):
            captured["period"] = period
            captured["currency"] = target_currency
            return "report"

    monkeypatch.setattr(app, "build_transaction_store", lambda: "store")
    monkeypatch.setattr(app, "GetPeriodSummaryUseCase", _FakeUseCase)
    period = Period(start=date(2025, 3, 1), end=date(2025, 3, 31))

    result = app._fetch_report(period, CurrencyCode.EUR)

    assert result == "report"
    assert captured == {
        "store": "store",
        "period": period,
        "currency": CurrencyCode.EUR,
    }


def test_load_report_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_report."""
    monkeypatch.setattr(
        app,
        "_fetch_report",
        lambda period, currency: "cached",
    )
    period = Period(start=date(1999, 1, 1), end=date(1999, 1, 31))

    assert app._load_report(period, CurrencyCode.GBP) == "cached"


def test_get_period_options():
    """Sidebar selections should map to calendar periods."""
    today = date(2025, 3, 14)

    assert app._get_period("This Month", today) == Period(
        start=date(2025, 3, 1),
        end=date(2025, 3, 31),
    )
    assert app._get_period("Last Month", today) == Period(
        start=date(2025, 2, 1),
        end=date(2025, 2, 28),
    )
    assert app._get_period("YTD", today) == Period(
        start=date(2025, 1, 1),
        end=today,
    )


def test_get_period_last_month_in_january():
    """Last Month should roll back into the previous year."""
    assert app._get_period("Last Month", date(2025, 1, 5)) == Period(
        start=date(2024, 12, 1),
        end=date(2024, 12, 31),
    )


def test_prepare_bar_chart_data_formats_labels():
    """Chart rows should carry numeric values and display labels."""
    rows = app._prepare_bar_chart_data(
        [CategoryAggregate("rent", Decimal("1234.5"), Decimal("75.0"))],
        CurrencyCode.JPY,
    )

    assert rows == [
        {
            "category": "rent",
            "amount": 1234.5,
            "amount_label": "¥1,235",
            "share": 75.0,
            "share_label": "75.0%",
        }
    ]


def test_goal_rows_convert_and_show_progress(monkeypatch):
    """Goal rows should be shown in the display currency."""
    monkeypatch.setattr(app, "get_app_logger", MagicMock)
    goal = FinancialGoal(
        id=1,
        name="Trip",
        target_amount=Decimal("1000"),
        current_amount=Decimal("250"),
    )

    rows = app._goal_rows([goal], CurrencyCode.EUR)

    assert rows == [
        {
            "Goal": "Trip",
            "Saved": "€232.50",
            "Target": "€930.00",
            "Progress": "25.0%",
            "Deadline": "-",
            "Status": "active",
        }
    ]


class _FakeStreamlit:
    def __init__(self) -> None:
        self.subheaders: list[str] = []
        self.infos: list[str] = []
        self.charts: list = []
        self.markdowns: list[str] = []

    def subheader(self, text: str):
        self.subheaders.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def altair_chart(self, chart, **kwargs):
        self.charts.append((chart, kwargs))

    def markdown(self, text: str):
        self.markdowns.append(text)


def test_render_breakdown_without_data(monkeypatch):
    """An empty breakdown should show a notice instead of a chart."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_breakdown("Expense Breakdown", [], CurrencyCode.USD, "#000")

    assert fake_st.subheaders == ["Expense Breakdown"]
    assert fake_st.infos == ["No transactions in this period."]
    assert fake_st.charts == []


def test_render_breakdown_draws_chart(monkeypatch):
    """A non-empty breakdown should render one Altair chart."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_breakdown(
        "Income Breakdown",
        [CategoryAggregate("salary", Decimal("100"), Decimal("100.0"))],
        CurrencyCode.USD,
        app.INCOME_COLOR,
    )

    assert len(fake_st.charts) == 1
    assert fake_st.charts[0][1] == {"width": "stretch"}


def test_record_transaction_invokes_use_case(monkeypatch):
    """_record_transaction should pass the form values to the use case."""
    captured = {}
    stored = Transaction(
        id=3,
        amount=Decimal("12.5"),
        category="food",
        date=date(2025, 3, 2),
        description="Lunch",
        kind=TransactionKind.EXPENSE,
    )

    class _FakeUseCase:
        def __init__(self, transaction_store):
            captured["store"] = transaction_store

        def execute(self, **kwargs):
            captured["kwargs"] = kwargs
            return stored

    monkeypatch.setattr(app, "build_transaction_store", lambda: "store")
    monkeypatch.setattr(app, "RecordTransactionUseCase", _FakeUseCase)

    result = app._record_transaction(
        TransactionKind.EXPENSE,
        Decimal("12.5"),
        "food",
        date(2025, 3, 2),
        "Lunch",
    )

    assert result is stored
    assert captured == {
        "store": "store",
        "kwargs": {
            "kind": TransactionKind.EXPENSE,
            "amount": Decimal("12.5"),
            "category": "food",
            "day": date(2025, 3, 2),
            "description": "Lunch",
        },
    }


def test_render_advice_lists_highlights(monkeypatch):
    """The advisor page should show highlights, suggestions and questions."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_advice(
        FinancialAdvice(
            locale="en",
            summary_text="Financial Summary:\n- Balance: $5.00",
            highlights=["Balance: $5.00"],
            suggestions=["Track spending"],
            questions=["How can I save?"],
        )
    )

    assert fake_st.subheaders == [
        "Financial Summary",
        "Suggestions",
        "Suggested Questions",
    ]
    assert fake_st.markdowns == [
        "- Balance: $5.00",
        "- Track spending",
        "- How can I save?",
    ]
