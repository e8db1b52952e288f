"""Streamlit day book entry point."""

import json
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from src.adapters.interface.streamlit.permission_gate import (
    permission_gate,
    read_only_gate,
)
from src.application.use_cases.close_day import CloseDayUseCase
from src.application.use_cases.export_day_book import export_day_book_csv
from src.application.use_cases.notifications import ManageSubscriptionUseCase
from src.application.use_cases.resolve_capabilities import (
    CapabilitySet,
    ResolveCapabilitiesUseCase,
)
from src.domain.constants import (
    ACTION_READ,
    DAY_BOOK_RESOURCE,
    NOTIFICATION_ROLES,
)
from src.domain.errors import (
    DayAlreadyClosedError,
    DayOutOfOrderError,
    NotificationAccessError,
    SubscriptionNotFoundError,
)
from src.domain.models.day_book import (
    AccountSplit,
    DayBookReport,
    LedgerDay,
    LedgerStatus,
)
from src.infrastructure.container import (
    build_capabilities_use_case,
    build_close_day_use_case,
    build_day_book_use_case,
    build_history_use_case,
    build_subscription_store,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import DayBookSettings


def _fetch_day_book(
    business_date: date,
    settings: DayBookSettings,
) -> DayBookReport:
    """Compute the day book for the selected date."""
    use_case = build_day_book_use_case(settings=settings)
    return use_case.execute(business_date)


def _fetch_history(limit: int = 30) -> Sequence[LedgerDay]:
    """Fetch the most recent closed days."""
    return build_history_use_case().execute(limit=limit)


@st.cache_resource(show_spinner=False)
def _capabilities_resolver() -> ResolveCapabilitiesUseCase:
    """Process-wide resolver so grants are queried once per session user."""
    return build_capabilities_use_case()


def _load_capabilities(user_id: str, role: str) -> CapabilitySet:
    return _capabilities_resolver().execute(user_id, role)


def _format_amount(value: Decimal) -> str:
    """Format amounts for display."""
    return f"{value:,.2f}"


def _split_row(label: str, split: AccountSplit) -> dict[str, str]:
    return {
        "PMT Accounts": label,
        "Bank Account": _format_amount(split.bank),
        "Counter": _format_amount(split.counter),
        "Owner's Account": _format_amount(split.owner),
        "Total": _format_amount(split.total),
        "Credit(Due)": "-",
    }


def _build_table_rows(report: DayBookReport) -> list[dict[str, str]]:
    """Return display rows: buckets, subtotals and balances."""
    rows: list[dict[str, str]] = []
    for entry in report.receipts:
        row = _split_row(entry.category, entry.split)
        row["Credit(Due)"] = _format_amount(entry.credit_due)
        rows.append(row)
    rows.append(_split_row("Total Receipts [A]", report.total_receipts))
    for entry in report.payments:
        row = _split_row(entry.category, entry.split)
        row["Credit(Due)"] = _format_amount(entry.credit_due)
        rows.append(row)
    rows.append(_split_row("Total Payments [B]", report.total_payments))
    rows.append(_split_row("Net Receipt [C = A - B]", report.net_receipt))
    rows.append(_split_row("Opening balance (D)", report.opening_balance))
    rows.append(
        _split_row("Closing Balance [E = C + D]", report.closing_balance)
    )
    return rows


def _prepare_account_chart_data(
    report: DayBookReport,
) -> list[dict[str, str | float]]:
    """Return receipts and payments per account for the bar chart."""
    data: list[dict[str, str | float]] = []
    for flow, split in (
        ("Receipts", report.total_receipts),
        ("Payments", report.total_payments),
    ):
        for account, amount in (
            ("Bank", split.bank),
            ("Counter", split.counter),
            ("Owner", split.owner),
        ):
            data.append(
                {
                    "account": account,
                    "flow": flow,
                    "amount": float(amount),
                    "amount_label": _format_amount(amount),
                }
            )
    return data


def _render_account_chart(report: DayBookReport) -> None:
    """Render receipts vs payments per notional account."""
    if report.total_receipts.total == 0 and report.total_payments.total == 0:
        st.info("No receipts or payments recorded for this day.")
        return
    chart = alt.Chart(
        alt.Data(values=_prepare_account_chart_data(report))
    ).mark_bar(cornerRadius=4).encode(
        x=alt.X("account:N", title=None),
        xOffset="flow:N",
        y=alt.Y("amount:Q", title="Amount"),
        color=alt.Color(
            "flow:N",
            scale=alt.Scale(range=["#2e7d32", "#e76f51"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("flow:N"),
            alt.Tooltip("account:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.subheader("Receipts vs Payments by Account")
    st.altair_chart(chart, width="stretch")


def _render_close_day(
    report: DayBookReport,
    settings: DayBookSettings,
) -> None:
    """Render the close day action for writers."""
    if report.status is LedgerStatus.CLOSED:
        st.button("Close the day", disabled=True)
        return
    if not st.button("Close the day"):
        return
    use_case: CloseDayUseCase = build_close_day_use_case(settings=settings)
    try:
        use_case.execute(report.business_date, closed_by=settings.user_id)
    except (DayAlreadyClosedError, DayOutOfOrderError) as exc:
        st.warning(str(exc))
        return
    st.success(
        "Day book for "
        f"{report.business_date.strftime('%d/%m/%Y')} has been closed."
    )


def _render_summary_cards(report: DayBookReport) -> None:
    receipts_col, payments_col, net_col = st.columns(3)
    receipts_col.metric(
        "Total Receipts",
        _format_amount(report.total_receipts.total),
    )
    payments_col.metric(
        "Total Payments",
        _format_amount(report.total_payments.total),
    )
    net_col.metric(
        "Net Receipt",
        _format_amount(report.net_receipt.total),
    )


def _render_day_book(
    capabilities: CapabilitySet,
    settings: DayBookSettings,
) -> None:
    """Render the day book page for the selected date."""
    selected_date = st.date_input("Select Date", value=date.today())
    report = _fetch_day_book(selected_date, settings)
    st.caption(selected_date.strftime("%d %b %Y"))
    if report.status is LedgerStatus.CLOSED:
        st.info("This day is closed.")
    for warning in report.warnings:
        st.warning(warning)

    st.subheader("Daily Transaction Summary")
    st.dataframe(
        _build_table_rows(report),
        width="stretch",
        hide_index=True,
    )
    _render_summary_cards(report)
    _render_account_chart(report)

    if st.download_button(
        "Export",
        data=export_day_book_csv(report),
        file_name=f"day_book_{selected_date.isoformat()}.csv",
        mime="text/csv",
    ):
        get_usage_logger().info(
            f"Day book exported for {selected_date.isoformat()} "
            f"by {settings.user_id}"
        )
    read_only_gate(
        capabilities,
        DAY_BOOK_RESOURCE,
        lambda: _render_close_day(report, settings),
        lambda: st.caption("Closing the day requires write access."),
    )


def _render_history() -> None:
    """Render the list of closed days."""
    history = _fetch_history()
    if not history:
        st.info("No closed days yet.")
        return
    data = [
        {
            "Date": day.business_date.isoformat(),
            "Opening": _format_amount(day.opening_balance.total),
            "Receipts": _format_amount(day.receipts_total),
            "Payments": _format_amount(day.payments_total),
            "Net Receipt": _format_amount(day.net_receipt_total),
            "Closing": _format_amount(day.closing_balance.total),
            "Closed By": day.closed_by or "—",
            "Closed At": (
                day.closed_at.strftime("%Y-%m-%d %H:%M")
                if day.closed_at
                else "—"
            ),
        }
        for day in history
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_notifications(settings: DayBookSettings) -> None:
    """Render push subscription management."""
    if settings.user_role not in NOTIFICATION_ROLES:
        st.error(
            "Access denied. Admin, Supervisor, or Manager role required."
        )
        return
    use_case = ManageSubscriptionUseCase(build_subscription_store())
    raw_subscription = st.text_area("Subscription (JSON)", value="{}")
    subscribe_col, unsubscribe_col, test_col = st.columns(3)
    try:
        if subscribe_col.button("Subscribe"):
            use_case.subscribe(
                settings.user_id,
                settings.user_role,
                json.loads(raw_subscription),
            )
            st.success("Subscribed to notifications.")
        if unsubscribe_col.button("Unsubscribe"):
            use_case.unsubscribe(settings.user_id, settings.user_role)
            st.success("Unsubscribed from notifications.")
        if test_col.button("Send test notification"):
            use_case.send_test(settings.user_id, settings.user_role)
            st.success("Test notification sent.")
    except json.JSONDecodeError:
        st.error("Subscription must be valid JSON.")
    except (NotificationAccessError, SubscriptionNotFoundError) as exc:
        st.error(str(exc))


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Bakery Day Book", layout="wide")
    st.title("Day Book")

    settings = DayBookSettings.from_env()
    capabilities = _load_capabilities(settings.user_id, settings.user_role)
    page = st.sidebar.selectbox(
        "Page",
        ["Day Book", "Day Book History", "Notifications"],
    )

    if page == "Day Book":
        permission_gate(
            capabilities,
            DAY_BOOK_RESOURCE,
            ACTION_READ,
            lambda: _render_day_book(capabilities, settings),
        )
    elif page == "Day Book History":
        permission_gate(
            capabilities,
            DAY_BOOK_RESOURCE,
            ACTION_READ,
            _render_history,
        )
    else:
        _render_notifications(settings)


if __name__ == "__main__":  # pragma: no cover
    main()
