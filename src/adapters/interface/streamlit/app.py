"""Streamlit dashboard entry point."""

from collections.abc import Mapping, Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.errors import DataUnavailableError
from src.application.use_cases import (
    BalanceSheet,
    FinancialSummary,
    GetBalanceSheetUseCase,
    GetFinancialSummaryUseCase,
    GetMonthlyTrendUseCase,
    GetPeriodReportsUseCase,
    MonthlyTrendPoint,
    PeriodReports,
)
from src.domain.models.finance import CategoryAmount, TaxLine
from src.infrastructure.container import (
    build_clock,
    build_ledger_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_usage_logger

_PERIOD_LABELS = {
    "This Month": "this_month",
    "Last Month": "last_month",
    "This Year": "this_year",
    "Custom": "custom",
}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy/pandas are importable for Altair charts.

    Returns:
        Tuple with an ok flag and an error message when a check fails.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Chart dependencies are not installed: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (missing Timestamp)."
    return True, None


def _fetch_summary(tenant_id: str) -> FinancialSummary:
    """Fetch the dashboard summary of a tenant."""
    settings = build_settings()
    use_case = GetFinancialSummaryUseCase(
        ledger_repository=build_ledger_repository(settings=settings),
        clock=build_clock(settings),
        tz=settings.tz,
    )
    return use_case.execute(tenant_id)


@st.cache_data(show_spinner=False, ttl=60)
def _load_summary(tenant_id: str) -> FinancialSummary:
    """Cached wrapper around _fetch_summary for Streamlit sessions."""
    return _fetch_summary(tenant_id)


def _fetch_monthly_trend(tenant_id: str) -> list[MonthlyTrendPoint]:
    """Fetch the per-month income and expense totals."""
    settings = build_settings()
    use_case = GetMonthlyTrendUseCase(
        ledger_repository=build_ledger_repository(settings=settings),
        tz=settings.tz,
    )
    return use_case.execute(tenant_id)


@st.cache_data(show_spinner=False, ttl=60)
def _load_monthly_trend(tenant_id: str) -> list[MonthlyTrendPoint]:
    """Cached wrapper around _fetch_monthly_trend."""
    return _fetch_monthly_trend(tenant_id)


def _fetch_balance_sheet(
    tenant_id: str,
    as_of: date | None,
) -> BalanceSheet:
    """Fetch the balance sheet as of a day (today when None)."""
    settings = build_settings()
    use_case = GetBalanceSheetUseCase(
        ledger_repository=build_ledger_repository(settings=settings),
        clock=build_clock(settings),
        tz=settings.tz,
    )
    return use_case.execute(tenant_id, as_of=as_of)


@st.cache_data(show_spinner=False, ttl=60)
def _load_balance_sheet(
    tenant_id: str,
    as_of: date | None,
) -> BalanceSheet:
    """Cached wrapper around _fetch_balance_sheet."""
    return _fetch_balance_sheet(tenant_id, as_of)


def _fetch_reports(
    tenant_id: str,
    period: str,
    start: date | None,
    end: date | None,
) -> PeriodReports:
    """Fetch the profit and loss, tax, and cash-flow reports of a period."""
    settings = build_settings()
    use_case = GetPeriodReportsUseCase(
        ledger_repository=build_ledger_repository(settings=settings),
        clock=build_clock(settings),
        tz=settings.tz,
    )
    return use_case.execute(tenant_id, period=period, start=start, end=end)


@st.cache_data(show_spinner=False, ttl=60)
def _load_reports(
    tenant_id: str,
    period: str,
    start: date | None,
    end: date | None,
) -> PeriodReports:
    """Cached wrapper around _fetch_reports."""
    return _fetch_reports(tenant_id, period, start, end)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    return f"{currency_code} {value:,.2f}"


def _format_signed(value: Decimal, currency_code: str) -> str:
    """Format a value with an explicit sign."""
    sign = "+" if value >= 0 else "-"
    return f"{sign}{_format_currency(abs(value), currency_code)}"


def _prepare_donut_chart_data(
    breakdown: Mapping[str, Decimal],
    currency_code: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        breakdown: Expense totals keyed by category.
        currency_code: Currency used for labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        breakdown.items(),
        key=lambda item: item[1],
        reverse=True,
    )
    top_items = sorted_items[:max_categories]
    other_amount = sum(
        (amount for _, amount in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items = [*top_items, ("Other", other_amount)]
    total_amount = sum(
        (amount for _, amount in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for category, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "amount_label": _format_currency(amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _prepare_trend_chart_data(
    points: Sequence[MonthlyTrendPoint],
) -> list[dict[str, str | float]]:
    """Flatten trend points into long-form rows for a grouped bar chart."""
    data: list[dict[str, str | float]] = []
    for point in points:
        data.append(
            {
                "month": point.month,
                "series": "Income",
                "amount": float(point.income),
            }
        )
        data.append(
            {
                "month": point.month,
                "series": "Expenses",
                "amount": float(point.expenses),
            }
        )
    return data


def _line_rows(
    items: Sequence[CategoryAmount],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Name": item.name,
            "Amount": _format_currency(item.amount, currency_code),
        }
        for item in items
    ]


def _sheet_rows(
    lines: Sequence[tuple[str, Decimal]],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {"Line": name, "Amount": _format_currency(amount, currency_code)}
        for name, amount in lines
    ]


def _tax_rows(
    items: Sequence[TaxLine],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Name": item.name,
            "Amount": _format_currency(item.amount, currency_code),
            "Tax": _format_currency(item.tax, currency_code),
        }
        for item in items
    ]


def _recurring_caption(summary: FinancialSummary) -> str:
    """Describe the recurring incomes and expenses still running."""
    return (
        f"Active recurring items: {summary.active_recurring_incomes} "
        f"income, {summary.active_recurring_expenses} expense"
    )


def _render_expense_chart(summary: FinancialSummary) -> None:
    """Render a donut chart of expenses by category."""
    st.subheader("Expenses by Category")
    if not summary.expense_breakdown:
        st.info("No expenses recorded yet.")
        return
    data, _ = _prepare_donut_chart_data(
        summary.expense_breakdown,
        summary.currency,
    )
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=120,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.35)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(
        text="amount_label:N"
    )
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=320,
        height=320,
    )
    st.altair_chart(chart, width="stretch")


def _render_trend_chart(points: Sequence[MonthlyTrendPoint]) -> None:
    """Render grouped monthly income and expense bars."""
    st.subheader("Monthly Trend")
    if not points:
        st.info("No dated income or expenses to chart.")
        return
    chart = alt.Chart(
        alt.Data(values=_prepare_trend_chart_data(points))
    ).mark_bar().encode(
        x=alt.X("month:N", title=None),
        xOffset="series:N",
        y=alt.Y("amount:Q", title="Amount"),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Income", "Expenses"],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=["month:N", "series:N", "amount:Q"],
    ).properties(height=320)
    st.altair_chart(chart, width="stretch")


def _render_dashboard(tenant_id: str) -> None:
    """Render the summary metrics and charts."""
    summary = _load_summary(tenant_id)
    currency = summary.currency
    if not summary.has_data:
        st.info("No records yet. Add income or expenses to get started.")

    cash_col, bank_col, pending_col = st.columns(3)
    cash_col.metric(
        "Cash in Hand",
        _format_currency(summary.cash_in_hand, currency),
    )
    bank_col.metric(
        "Bank Balance",
        _format_currency(summary.bank_balance, currency),
    )
    pending_col.metric(
        "Pending Payments",
        _format_currency(summary.pending_payments, currency),
        f"{summary.unpaid_invoices_count} unpaid invoices",
        delta_color="off",
    )
    st.caption(_recurring_caption(summary))

    month_col, year_col, tax_col = st.columns(3)
    month_col.metric(
        "Monthly Profit",
        _format_currency(summary.monthly_profit, currency),
        _format_signed(summary.monthly_income, currency) + " income",
        delta_color="off",
    )
    year_col.metric(
        "Yearly Profit",
        _format_currency(summary.yearly_profit, currency),
        _format_signed(summary.yearly_income, currency) + " income",
        delta_color="off",
    )
    tax_col.metric(
        "Estimated Tax (Year)",
        _format_currency(summary.estimated_tax_yearly, currency),
        _format_currency(summary.estimated_tax_monthly, currency)
        + " this month",
        delta_color="off",
    )

    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_expense_chart(summary)
    with chart_right:
        _render_trend_chart(_load_monthly_trend(tenant_id))


def _render_balance_sheet(tenant_id: str) -> None:
    """Render the balance sheet page."""
    as_of = st.sidebar.date_input("As of", value=None)
    sheet = _load_balance_sheet(tenant_id, as_of)
    currency = sheet.currency
    st.subheader(f"Balance Sheet as of {sheet.as_of.isoformat()}")
    if not sheet.is_balanced:
        st.warning("Assets do not equal liabilities plus equity.")

    assets_col, liabilities_col = st.columns(2)
    with assets_col:
        st.markdown("**Assets**")
        st.dataframe(
            _sheet_rows(
                [
                    ("Opening Cash", sheet.assets.opening_cash),
                    ("Cash & Bank", sheet.assets.cash_and_bank),
                    ("Receivables", sheet.assets.receivables),
                    ("Equipment", sheet.assets.equipment),
                ],
                currency,
            ),
            width="stretch",
            hide_index=True,
        )
        st.metric(
            "Total Assets",
            _format_currency(sheet.assets.total, currency),
        )
    with liabilities_col:
        st.markdown("**Liabilities**")
        st.dataframe(
            _sheet_rows(
                [
                    ("Payables", sheet.liabilities.payables),
                    ("Loans", sheet.liabilities.loans),
                    ("Taxes", sheet.liabilities.taxes),
                ],
                currency,
            ),
            width="stretch",
            hide_index=True,
        )
        st.metric(
            "Total Liabilities",
            _format_currency(sheet.liabilities.total, currency),
        )

    equity_col, capital_col, retained_col = st.columns(3)
    equity_col.metric(
        "Owner's Equity",
        _format_currency(sheet.owners_equity, currency),
    )
    capital_col.metric(
        "Owner Capital",
        _format_currency(sheet.owner_capital, currency),
    )
    retained_col.metric(
        "Retained Profit",
        _format_currency(sheet.retained_profit, currency),
    )


def _render_reports(tenant_id: str) -> None:
    """Render profit and loss, tax, and cash-flow reports."""
    label = st.sidebar.selectbox("Period", list(_PERIOD_LABELS))
    period = _PERIOD_LABELS[label]
    start = end = None
    if period == "custom":
        start = st.sidebar.date_input("Start", value=None)
        end = st.sidebar.date_input("End", value=None)
        if start is None or end is None:
            st.info("Pick a start and an end date.")
            return
    reports = _load_reports(tenant_id, period, start, end)
    profit_and_loss = reports.profit_and_loss
    tax_report = reports.tax_report
    cashflow = reports.cashflow
    currency = profit_and_loss.currency

    st.subheader("Profit & Loss")
    income_col, expense_col = st.columns(2)
    with income_col:
        st.markdown("**Income**")
        st.dataframe(
            _line_rows(profit_and_loss.income_items, currency),
            width="stretch",
            hide_index=True,
        )
    with expense_col:
        st.markdown("**Expenses**")
        st.dataframe(
            _line_rows(profit_and_loss.expense_items, currency),
            width="stretch",
            hide_index=True,
        )
    st.metric(
        "Net Profit",
        _format_currency(profit_and_loss.net_profit, currency),
    )

    st.subheader("Tax")
    if tax_report is None:
        st.caption("Tax is disabled in the business settings.")
    else:
        st.caption(f"Rate: {tax_report.tax_rate}%")
        st.dataframe(
            _tax_rows(
                [*tax_report.income_items, *tax_report.expense_items],
                currency,
            ),
            width="stretch",
            hide_index=True,
        )
        st.metric(
            "Net Tax Payable",
            _format_currency(tax_report.net_tax_payable, currency),
        )

    st.subheader("Cash Flow")
    opening_col, in_col, out_col, closing_col = st.columns(4)
    opening_col.metric(
        "Opening",
        _format_currency(cashflow.opening_balance, currency),
    )
    in_col.metric("Inflows", _format_currency(cashflow.inflows, currency))
    out_col.metric("Outflows", _format_currency(cashflow.outflows, currency))
    closing_col.metric(
        "Closing",
        _format_currency(cashflow.closing_balance, currency),
        _format_signed(cashflow.net_change, currency),
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Dashboard", layout="wide")
    st.title("Ledger Dashboard")

    settings = build_settings()
    tenant_id = st.sidebar.text_input("Tenant", value=settings.tenant_id)
    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Balance Sheet", "Reports"],
    )
    get_usage_logger().info(f"Page {page} opened for tenant {tenant_id}")
    try:
        if page == "Dashboard":
            _render_dashboard(tenant_id)
        elif page == "Balance Sheet":
            _render_balance_sheet(tenant_id)
        else:
            _render_reports(tenant_id)
    except DataUnavailableError as exc:
        st.error(f"Ledger data is unavailable: {exc.reason}")


if __name__ == "__main__":  # pragma: no cover
    main()
