"""Canned financial advice keyed by locale.

There is no model behind the advisor: suggestions and questions come from
static tables, and the summary text is rendered from the period summary.
"""

from collections.abc import Sequence
from logging import Logger
import re

from fintrack.domain.constants import CurrencyCode
from fintrack.domain.models import CategoryAggregate, PeriodSummary
from fintrack.domain.services.aggregation import top_category
from fintrack.domain.services.currency import format_display_amount
from fintrack.domain.services.normalization import normalize_locale


SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "en": (
        "Creating a detailed budget to track all expenses",
        "Automating transfers to a savings account",
        "Reducing discretionary spending on non-essential items",
        "Looking for opportunities to increase your income",
        "Reviewing and negotiating fixed expenses like insurance and "
        "subscriptions",
        "Building an emergency fund of 3-6 months of expenses",
        "Setting specific financial goals with deadlines",
        "Tracking your net worth monthly",
        "Learning about investment options appropriate for your risk "
        "tolerance",
        "Considering the 50/30/20 rule for budgeting",
    ),
    "zh": (
        "创建详细预算以跟踪所有支出",
        "自动转账到储蓄账户",
        "减少非必要项目的自由支出",
        "寻找增加收入的机会",
        "审查并协商固定支出，如保险和订阅服务",
        "建立3-6个月支出的应急基金",
        "设定有截止日期的具体财务目标",
        "每月跟踪你的净资产",
        "了解适合你风险承受能力的投资选择",
        "考虑50/30/20预算规则",
    ),
    "es": (
        "Crear un presupuesto detallado para seguir todos los gastos",
        "Automatizar transferencias a una cuenta de ahorros",
        "Reducir el gasto discrecional en artículos no esenciales",
        "Buscar oportunidades para aumentar sus ingresos",
        "Revisar y negociar gastos fijos como seguros y suscripciones",
        "Construir un fondo de emergencia de 3-6 meses de gastos",
        "Establecer metas financieras específicas con plazos",
        "Seguir su patrimonio neto mensualmente",
        "Aprender sobre opciones de inversión apropiadas para su "
        "tolerancia al riesgo",
        "Considerar la regla 50/30/20 para presupuestar",
    ),
}

SUGGESTED_QUESTIONS: dict[str, tuple[str, ...]] = {
    "en": (
        "How can I improve my saving rate?",
        "What are some good financial goals to set?",
        "How can I budget better?",
        "What investment strategies do you recommend?",
    ),
    "zh": (
        "如何提高我的储蓄率？",
        "设定什么样的财务目标比较好？",
        "如何更好地规划预算？",
        "推荐哪些投资策略？",
    ),
    "es": (
        "¿Cómo puedo mejorar mi tasa de ahorro?",
        "¿Qué objetivos financieros debería establecer?",
        "¿Cómo puedo presupuestar mejor?",
        "¿Qué estrategias de inversión recomiendas?",
    ),
}

_POINT_MARKER = re.compile(r"^(\d+\.\s*|-\s*)")


def get_suggestions(locale: str | None) -> list[str]:
    """Return the canned savings suggestions for a locale."""
    return list(SUGGESTIONS[normalize_locale(locale)])


def get_suggested_questions(locale: str | None) -> list[str]:
    """Return the canned advisor questions for a locale."""
    return list(SUGGESTED_QUESTIONS[normalize_locale(locale)])


def render_financial_summary(
    summary: PeriodSummary,
    expense_aggregates: Sequence[CategoryAggregate],
    currency: CurrencyCode = CurrencyCode.USD,
    logger: Logger | None = None,
) -> str:
    """Render the plain-text summary shown above the advisor.

    Args:
        summary: Period summary in the canonical currency.
        expense_aggregates: Expense breakdown in the canonical currency.
        currency: Display currency.
        logger: Optional logger used for warnings.

    Returns:
        str: Multi-line summary.
    """
    income = format_display_amount(summary.total_income, currency, logger)
    expense = format_display_amount(summary.total_expense, currency, logger)
    balance = format_display_amount(summary.balance, currency, logger)
    lines = [
        "Financial Summary:",
        f"- Total Income: {income}",
        f"- Total Expenses: {expense}",
        f"- Balance: {balance}",
        f"- Saving Rate: {summary.savings_rate:.1f}%",
    ]
    top = top_category(expense_aggregates)
    if top is not None:
        lines.append(
            f"- Highest expense category: {top.category} "
            f"({format_display_amount(top.total_amount, currency, logger)})"
        )
    return "\n".join(lines)


def extract_points(text: str | None) -> list[str]:
    """Extract numbered or dashed bullet points from advisor text.

    Args:
        text: Multi-line advisor response.

    Returns:
        list[str]: Bullet contents without their markers.
    """
    points: list[str] = []
    for line in (text or "").splitlines():
        stripped = line.strip()
        if not _POINT_MARKER.match(stripped):
            continue
        point = _POINT_MARKER.sub("", stripped, count=1).strip()
        if point:
            points.append(point)
    return points


__all__ = [
    "SUGGESTIONS",
    "SUGGESTED_QUESTIONS",
    "get_suggestions",
    "get_suggested_questions",
    "render_financial_summary",
    "extract_points",
]
