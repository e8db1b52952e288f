"""Allocation ratios splitting bucket totals across notional accounts."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.day_book import AccountSplit, BucketingMode


@dataclass(frozen=True)
class SplitRatio:
    """Share of a bucket total assigned to Bank, Counter and Owner."""

    bank: Decimal = Decimal("1")
    counter: Decimal = Decimal("0")
    owner: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        for name in ("bank", "counter", "owner"):
            if not getattr(self, name).is_finite():
                raise ValueError(f"Split ratio '{name}' must be finite")
            if getattr(self, name) < 0:
                raise ValueError(f"Split ratio '{name}' must not be negative")
        total = self.bank + self.counter + self.owner
        if total != Decimal("1"):
            raise ValueError(f"Split ratios must sum to 1, got {total}")

    def apply(self, amount: Decimal) -> AccountSplit:
        """Split an amount; the three shares always add back to ``amount``."""
        bank = amount * self.bank
        counter = amount * self.counter
        return AccountSplit(
            bank=bank,
            counter=counter,
            owner=amount - bank - counter,
        )


BANK_ONLY = SplitRatio()


@dataclass(frozen=True)
class AllocationPolicy:
    """Business rules applied by the day book aggregator.

    Attributes:
        net_sales: Split for completed order totals.
        purchase: Split for ``purchase`` expenses.
        expenses: Split for the all-expenses bucket.
        payment_in: Split for paid bills.
        payment_out: Split for non-purchase expenses.
        bucketing_mode: Whether Expenses repeats Purchase and Payment Out.
    """

    net_sales: SplitRatio = field(
        default_factory=lambda: SplitRatio(
            bank=Decimal("0.7"),
            counter=Decimal("0.3"),
        )
    )
    purchase: SplitRatio = field(
        default_factory=lambda: SplitRatio(
            bank=Decimal("0.8"),
            owner=Decimal("0.2"),
        )
    )
    expenses: SplitRatio = field(
        default_factory=lambda: SplitRatio(
            bank=Decimal("0.6"),
            counter=Decimal("0.4"),
        )
    )
    payment_in: SplitRatio = BANK_ONLY
    payment_out: SplitRatio = BANK_ONLY
    bucketing_mode: BucketingMode = BucketingMode.DOUBLE_COUNT


DEFAULT_OPENING_BALANCE = AccountSplit(
    bank=Decimal("0"),
    counter=Decimal("5715"),
    owner=Decimal("645"),
)


__all__ = [
    "SplitRatio",
    "BANK_ONLY",
    "AllocationPolicy",
    "DEFAULT_OPENING_BALANCE",
]
