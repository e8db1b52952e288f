"""Tests for the day book aggregator and summary roll-up."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.constants import (
    DAY_BOOK_CATEGORIES,
    EXPENSES,
    INCOME,
    NET_SALES,
    PAYMENT_IN,
    PAYMENT_OUT,
    PURCHASE,
    PURCHASE_RETURN,
    SALES_RETURN,
)
from src.domain.models import (
    AccountSplit,
    BillRecord,
    BucketingMode,
    ExpenseRecord,
    LedgerStatus,
    OrderRecord,
)
from src.domain.policies import AllocationPolicy, SplitRatio
from src.domain.services.day_book import (
    DOUBLE_COUNT_WARNING,
    aggregate_day_book,
    build_day_book_report,
    sum_entries,
)


DAY = date(2024, 3, 15)


def _order(amount: str, status: str = "completed", **kwargs) -> OrderRecord:
    return OrderRecord(
        id=kwargs.get("id", 1),
        order_number="ORD-1",
        customer_name="Ana",
        status=status,
        total_amount=Decimal(amount),
        order_date=kwargs.get("order_date", "2024-03-15T10:00:00"),
        created_at=kwargs.get("created_at"),
    )


def _expense(amount: str, category: str) -> ExpenseRecord:
    return ExpenseRecord(
        id=1,
        title="Flour",
        category=category,
        amount=Decimal(amount),
        date="2024-03-15T11:00:00",
    )


def _bill(amount: str, status: str = "paid") -> BillRecord:
    return BillRecord(
        id=1,
        bill_number="B-1",
        status=status,
        total_amount=Decimal(amount),
        bill_date="2024-03-15T12:00:00",
    )


def test_empty_inputs_yield_eight_zero_entries_in_order() -> None:
    """Empty inputs should produce the eight buckets, all zero."""
    entries = aggregate_day_book(None, [], None)

    assert [entry.category for entry in entries] == list(DAY_BOOK_CATEGORIES)
    assert all(entry.total == 0 for entry in entries)
    assert all(entry.credit_due == 0 for entry in entries)


def test_completed_order_is_split_into_net_sales() -> None:
    """Completed orders should be split into Net Sales."""
    entries = aggregate_day_book([_order("100")], [], [])
    net_sales = entries[0]

    assert net_sales.category == NET_SALES
    assert net_sales.bank_account == Decimal("70.0")
    assert net_sales.counter == Decimal("30.0")
    assert net_sales.owner_account == 0


def test_non_completed_orders_and_unpaid_bills_are_ignored() -> None:
    """Pending orders and unpaid bills should not count."""
    entries = aggregate_day_book(
        [_order("100", status="pending")],
        [],
        [_bill("40", status="unpaid")],
    )

    assert entries[0].total == 0
    assert entries[2].total == 0


def test_paid_bills_go_to_payment_in_bank_only() -> None:
    """Paid bills should land in Payment In, all on the bank."""
    entries = aggregate_day_book([], [], [_bill("40"), _bill("10")])
    payment_in = entries[2]

    assert payment_in.category == PAYMENT_IN
    assert payment_in.bank_account == Decimal("50")
    assert payment_in.counter == 0
    assert payment_in.owner_account == 0


def test_purchase_expense_is_double_counted_by_default() -> None:
    """Purchases should also count under Expenses by default."""
    entries = aggregate_day_book([], [_expense("50", "purchase")], [])
    by_name = {entry.category: entry for entry in entries}

    purchase = by_name[PURCHASE]
    assert purchase.bank_account == Decimal("40.0")
    assert purchase.counter == 0
    assert purchase.owner_account == Decimal("10.0")
    assert by_name[PAYMENT_OUT].total == 0
    expenses = by_name[EXPENSES]
    assert expenses.bank_account == Decimal("30.0")
    assert expenses.counter == Decimal("20.0")


def test_other_expenses_go_to_payment_out() -> None:
    """Non-purchase expenses should go to Payment Out."""
    entries = aggregate_day_book([], [_expense("25", "utilities")], [])
    by_name = {entry.category: entry for entry in entries}

    assert by_name[PAYMENT_OUT].bank_account == Decimal("25")
    assert by_name[PURCHASE].total == 0
    assert by_name[EXPENSES].total == Decimal("25")


def test_exclusive_mode_leaves_expenses_empty() -> None:
    """Exclusive mode should leave the Expenses bucket at zero."""
    policy = AllocationPolicy(bucketing_mode=BucketingMode.EXCLUSIVE)
    entries = aggregate_day_book(
        [],
        [_expense("50", "purchase"), _expense("25", "rent")],
        [],
        policy,
    )
    by_name = {entry.category: entry for entry in entries}

    assert by_name[EXPENSES].total == 0
    assert by_name[PURCHASE].total == Decimal("50")
    assert by_name[PAYMENT_OUT].total == Decimal("25")


def test_placeholder_buckets_stay_zero() -> None:
    """Buckets without a data source should stay at zero."""
    entries = aggregate_day_book(
        [_order("80")],
        [_expense("20", "purchase")],
        [_bill("5")],
    )
    by_name = {entry.category: entry for entry in entries}

    for name in (PURCHASE_RETURN, INCOME, SALES_RETURN):
        assert by_name[name].total == 0


def test_custom_ratios_are_applied() -> None:
    """Custom split ratios should drive the column amounts."""
    policy = AllocationPolicy(
        net_sales=SplitRatio(
            bank=Decimal("0.5"),
            counter=Decimal("0.25"),
            owner=Decimal("0.25"),
        )
    )

    entries = aggregate_day_book([_order("100")], [], [], policy)

    assert entries[0].split == AccountSplit(
        Decimal("50.0"),
        Decimal("25.00"),
        Decimal("25.00"),
    )


def test_split_ratio_rejects_invalid_values() -> None:
    """Split ratios should refuse negatives and sums other than one."""
    with pytest.raises(ValueError):
        SplitRatio(bank=Decimal("0.5"), counter=Decimal("0.2"))
    with pytest.raises(ValueError):
        SplitRatio(bank=Decimal("1.5"), counter=Decimal("-0.5"))


def test_split_ratio_rejects_non_finite_values() -> None:
    """Split ratios should refuse NaN and infinite shares."""
    with pytest.raises(ValueError):
        SplitRatio(bank=Decimal("NaN"), owner=Decimal("1"))
    with pytest.raises(ValueError):
        SplitRatio(bank=Decimal("Infinity"), counter=Decimal("-Infinity"))


def test_split_ratio_shares_add_back_to_amount() -> None:
    """The three shares should always add back to the amount."""
    ratio = SplitRatio(
        bank=Decimal("0.3333"),
        counter=Decimal("0.3333"),
        owner=Decimal("0.3334"),
    )

    split = ratio.apply(Decimal("10.01"))

    assert split.total == Decimal("10.01")


def test_entry_totals_match_their_columns() -> None:
    """Each entry total should equal the sum of its columns."""
    entries = aggregate_day_book(
        [_order("123.45")],
        [_expense("67.89", "purchase"), _expense("10", "rent")],
        [_bill("15.5")],
    )

    for entry in entries:
        assert entry.total == (
            entry.bank_account + entry.counter + entry.owner_account
        )


def test_sum_entries_adds_columns() -> None:
    """sum_entries should add the entries column by column."""
    entries = aggregate_day_book([_order("100")], [], [_bill("20")])

    total = sum_entries(entries[:4])

    assert total == AccountSplit(
        Decimal("90.0"), Decimal("30.0"), Decimal("0")
    )


def test_report_for_empty_day_carries_opening_balance() -> None:
    """An empty day should close at its opening balance."""
    report = build_day_book_report(DAY, [], [], [])

    assert report.total_receipts.total == 0
    assert report.total_payments.total == 0
    assert report.net_receipt == AccountSplit()
    assert report.opening_balance == AccountSplit(
        Decimal("0"), Decimal("5715"), Decimal("645")
    )
    assert report.closing_balance.total == Decimal("6360")
    assert report.status is LedgerStatus.OPEN
    assert report.warnings == []


def test_report_rolls_up_receipts_payments_and_balances() -> None:
    """The report should roll entries up into totals and balances."""
    orders = [
        _order("100"),
        _order("999", order_date="2024-03-14T10:00:00"),
    ]
    expenses = [_expense("50", "purchase")]
    opening = AccountSplit(Decimal("10"), Decimal("20"), Decimal("30"))

    report = build_day_book_report(
        DAY,
        orders,
        expenses,
        [],
        opening_balance=opening,
    )

    assert report.total_receipts == AccountSplit(
        Decimal("70.0"), Decimal("30.0"), Decimal("0")
    )
    assert report.total_payments == AccountSplit(
        Decimal("70.0"), Decimal("20.0"), Decimal("10.0")
    )
    assert report.net_receipt == (
        report.total_receipts - report.total_payments
    )
    assert report.closing_balance == report.net_receipt + opening
    assert report.entry(NET_SALES).total == Decimal("100")


def test_double_count_warning_is_reported_and_logged() -> None:
    """Double counting should be reported and logged as a warning."""
    logger = MagicMock()

    report = build_day_book_report(
        DAY,
        [],
        [_expense("50", "purchase")],
        [],
        logger=logger,
    )

    assert report.warnings == [DOUBLE_COUNT_WARNING]
    logger.warning.assert_called_once()


def test_exclusive_report_has_no_warning() -> None:
    """Exclusive reports should carry no double-count warning."""
    policy = AllocationPolicy(bucketing_mode=BucketingMode.EXCLUSIVE)

    report = build_day_book_report(
        DAY,
        [],
        [_expense("50", "purchase")],
        [],
        policy=policy,
    )

    assert report.warnings == []
    assert report.bucketing_mode is BucketingMode.EXCLUSIVE
    assert report.total_payments.total == Decimal("50")


def test_report_entry_lookup_rejects_unknown_category() -> None:
    """Looking up an unknown category should raise KeyError."""
    report = build_day_book_report(DAY, None, None, None)

    with pytest.raises(KeyError):
        report.entry("Tips")
