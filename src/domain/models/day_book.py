"""Domain models for the day book report and its ledger state."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class BucketingMode(str, Enum):
    """How the Expenses bucket relates to Purchase and Payment Out.

    ``DOUBLE_COUNT`` sums every expense into Expenses even though each one is
    already counted in Purchase or Payment Out. ``EXCLUSIVE`` keeps buckets
    mutually exclusive, leaving Expenses at zero.
    """

    DOUBLE_COUNT = "double_count"
    EXCLUSIVE = "exclusive"


class LedgerStatus(str, Enum):
    """Lifecycle of a business day."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class AccountSplit:
    """Amounts spread over the three notional accounts.

    Attributes:
        bank: Bank account share.
        counter: Cash counter share.
        owner: Owner's account share.
    """

    bank: Decimal = Decimal("0")
    counter: Decimal = Decimal("0")
    owner: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        """Return bank + counter + owner."""
        return self.bank + self.counter + self.owner

    def __add__(self, other: "AccountSplit") -> "AccountSplit":
        return AccountSplit(
            bank=self.bank + other.bank,
            counter=self.counter + other.counter,
            owner=self.owner + other.owner,
        )

    def __sub__(self, other: "AccountSplit") -> "AccountSplit":
        return AccountSplit(
            bank=self.bank - other.bank,
            counter=self.counter - other.counter,
            owner=self.owner - other.owner,
        )


@dataclass(frozen=True)
class DayBookEntry:
    """One bucket row of the day book."""

    category: str
    bank_account: Decimal
    counter: Decimal
    owner_account: Decimal
    credit_due: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.bank_account + self.counter + self.owner_account

    @property
    def split(self) -> AccountSplit:
        return AccountSplit(
            bank=self.bank_account,
            counter=self.counter,
            owner=self.owner_account,
        )


@dataclass(frozen=True)
class DayBookReport:
    """Day book for one business date, recomputed on every request."""

    business_date: date
    entries: list[DayBookEntry]
    total_receipts: AccountSplit
    total_payments: AccountSplit
    net_receipt: AccountSplit
    opening_balance: AccountSplit
    closing_balance: AccountSplit
    bucketing_mode: BucketingMode = BucketingMode.DOUBLE_COUNT
    status: LedgerStatus = LedgerStatus.OPEN
    warnings: list[str] = field(default_factory=list)

    @property
    def receipts(self) -> list[DayBookEntry]:
        return self.entries[:4]

    @property
    def payments(self) -> list[DayBookEntry]:
        return self.entries[4:8]

    def entry(self, category: str) -> DayBookEntry:
        """Return the entry for a bucket name.

        Raises:
            KeyError: If the category is not one of the eight buckets.
        """
        for item in self.entries:
            if item.category == category:
                return item
        raise KeyError(category)


@dataclass(frozen=True)
class LedgerDay:
    """Stored state of a business day, snapshotted when it is closed."""

    business_date: date
    status: LedgerStatus
    opening_balance: AccountSplit
    closing_balance: AccountSplit
    receipts_total: Decimal
    payments_total: Decimal
    net_receipt_total: Decimal
    closed_at: datetime | None = None
    closed_by: str | None = None


__all__ = [
    "BucketingMode",
    "LedgerStatus",
    "AccountSplit",
    "DayBookEntry",
    "DayBookReport",
    "LedgerDay",
]
