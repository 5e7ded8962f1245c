"""Streamlit dashboard entry point.

Balances and summaries are derived on every read, so each render fetches
them again through the use cases instead of caching them.
"""

from collections.abc import Mapping, Sequence
from datetime import date
from decimal import Decimal
import os

import streamlit as st
import altair as alt

from src.domain.constants import DEFAULT_CATEGORY_COLOR, DEFAULT_CURRENCY_CODE
from src.domain.errors import LedgerError
from src.domain.models import AccountSummary, Currency, LedgerSummary, Owner
from src.domain.services.balance import quantize_for_display
from src.infrastructure.container import build_ledger_services


def _fetch_owner(email: str) -> Owner:
    """Resolve the acting owner from an email."""
    services = build_ledger_services()
    return services.identity.resolve_owner(email)


def _fetch_accounts(owner_id: int) -> Sequence[AccountSummary]:
    """Fetch the owner's accounts with derived balances."""
    services = build_ledger_services()
    return services.list_accounts.execute(owner_id)


def _fetch_summary(
    owner_id: int,
    start_date: date,
    end_date: date,
    top_n: int,
) -> LedgerSummary:
    """Fetch income, expense and top categories for the period."""
    services = build_ledger_services()
    return services.get_summary.execute(
        owner_id,
        start_date,
        end_date,
        top_n=top_n,
    )


def _fetch_category_colors(owner_id: int) -> dict[int, str]:
    """Map the owner's category ids to their display colors."""
    services = build_ledger_services()
    return {
        category.id: category.color_hex
        for category in services.list_categories.execute(owner_id)
    }


def _fetch_currencies() -> dict[str, Currency]:
    services = build_ledger_services()
    return {
        currency.code: currency
        for currency in services.list_currencies.execute()
    }


def _format_currency(
    value: Decimal,
    currency_code: str,
    currencies: Mapping[str, Currency] | None = None,
) -> str:
    """Format an amount with the digits and symbol of its currency.

    Unknown currencies fall back to two digits and the currency code.
    """
    currency = (currencies or {}).get(currency_code)
    amount = quantize_for_display(value, currency)
    digits = currency.decimal_digits if currency is not None else 2
    symbol = currency.symbol if currency is not None else currency_code
    return f"{amount:,.{digits}f} {symbol}"


def _get_period_start(
    period: str,
    today: date,
) -> date:
    """Return the start date for the selected period."""
    if period == "YTD":
        return date(today.year, 1, 1)
    if period == "QTD":
        quarter = (today.month - 1) // 3
        start_month = quarter * 3 + 1
        return date(today.year, start_month, 1)
    return date(today.year, today.month, 1)


def _render_accounts(
    accounts: Sequence[AccountSummary],
    currencies: Mapping[str, Currency] | None = None,
) -> None:
    """Render the accounts table with light filtering."""
    st.subheader("Accounts")
    query = st.text_input("Search by name", placeholder="Type to filter")
    show_inactive = st.checkbox("Show inactive accounts", value=False)

    query_lower = query.strip().lower()
    filtered = [
        item
        for item in accounts
        if (show_inactive or item.account.active)
        and (not query_lower or query_lower in item.name.lower())
    ]
    st.caption(f"{len(filtered)} accounts shown")
    data = [
        {
            "Name": item.name,
            "Type": item.account.account_type.value,
            "Balance": _format_currency(
                item.balance,
                item.currency_code,
                currencies,
            ),
            "Active": "yes" if item.account.active else "no",
        }
        for item in filtered
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=420)


def _prepare_donut_chart_data(
    summary: LedgerSummary,
    currency_code: str,
    colors: dict[int, str] | None = None,
    currencies: Mapping[str, Currency] | None = None,
) -> list[dict[str, str | float]]:
    """Prepare donut chart rows from the top expense categories.

    Shares are relative to total expense, so the slices only add up to
    100% when every expense category made the top list. Each slice keeps
    the color chosen for its category.
    """
    colors = colors or {}
    data: list[dict[str, str | float]] = []
    for item in summary.top_categories:
        share = (
            (item.total / summary.total_expense) * Decimal("100")
            if summary.total_expense
            else Decimal("0")
        )
        data.append(
            {
                "category": item.category_name,
                "color": colors.get(item.category_id, DEFAULT_CATEGORY_COLOR),
                "amount": float(item.total),
                "amount_label": _format_currency(
                    item.total,
                    currency_code,
                    currencies,
                ),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_top_categories_chart(
    summary: LedgerSummary,
    currency_code: str,
    colors: dict[int, str] | None = None,
    currencies: Mapping[str, Currency] | None = None,
    chart_size: int = 320,
) -> None:
    """Render a donut of the top expense categories with the period total."""
    st.subheader("Top expense categories")
    if not summary.top_categories:
        st.info("No confirmed expenses in this period.")
        return
    data = _prepare_donut_chart_data(summary, currency_code, colors, currencies)
    slices = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.38,
        padAngle=0.015,
    ).encode(
        theta=alt.Theta("amount:Q", stack=True),
        color=alt.Color("color:N", scale=None),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N", title="Category"),
            alt.Tooltip("amount_label:N", title="Spent"),
            alt.Tooltip("share_label:N", title="Share"),
        ],
    )
    total = _format_currency(summary.total_expense, currency_code, currencies)
    total_label = alt.Chart(
        alt.Data(values=[{"label": total}])
    ).mark_text(fontSize=18, fontWeight="bold").encode(text="label:N")
    chart = alt.layer(slices, total_label).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="stretch")
    st.caption(
        " · ".join(f"{row['category']} {row['share_label']}" for row in data)
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Personal Ledger", layout="wide")
    st.title("Personal Ledger")

    email = st.sidebar.text_input(
        "Owner email",
        value=os.getenv("LEDGER_OWNER_EMAIL", ""),
    )
    if not email.strip():
        st.info("Enter the owner email to load the ledger.")
        return
    try:
        owner = _fetch_owner(email)
    except LedgerError as exc:
        st.error(str(exc))
        return

    currencies = _fetch_currencies()
    page = st.sidebar.selectbox("Page", ["Dashboard", "Accounts"])
    if page == "Dashboard":
        period = st.sidebar.selectbox("Period", ["MTD", "QTD", "YTD"])
        top_n = int(st.sidebar.number_input("Top categories", 1, 50, 5))
        today = date.today()
        summary = _fetch_summary(
            owner.id,
            _get_period_start(period, today),
            today,
            top_n,
        )
        currency_code = owner.default_currency_code or DEFAULT_CURRENCY_CODE

        for column, (label, value) in zip(
            st.columns(3),
            (
                ("Income", summary.total_income),
                ("Expense", summary.total_expense),
                ("Net", summary.net),
            ),
        ):
            column.metric(
                label,
                _format_currency(value, currency_code, currencies),
            )
        _render_top_categories_chart(
            summary,
            currency_code,
            _fetch_category_colors(owner.id),
            currencies,
        )
        return

    accounts = _fetch_accounts(owner.id)
    if not accounts:
        st.warning("No accounts found for this owner.")
        return
    _render_accounts(accounts, currencies)


if __name__ == "__main__":  # pragma: no cover
    main()
