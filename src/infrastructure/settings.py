"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import os

import dotenv

from src.domain.models.day_book import AccountSplit, BucketingMode
from src.domain.policies.allocation import (
    DEFAULT_OPENING_BALANCE,
    AllocationPolicy,
    SplitRatio,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DayBookSettings:
    """Settings driving the day book computation.

    Attributes:
        policy: Allocation ratios and bucketing mode.
        opening_balance: Opening balance used before any day is closed.
        user_id: Identity of the Streamlit session user.
        user_role: Role of the Streamlit session user.
    """

    policy: AllocationPolicy = field(default_factory=AllocationPolicy)
    opening_balance: AccountSplit = DEFAULT_OPENING_BALANCE
    user_id: str = "local"
    user_role: str = "staff"

    @classmethod
    def from_env(cls) -> "DayBookSettings":
        """Build settings from environment variables.

        Returns:
            DayBookSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If a value cannot be parsed or ratios do not sum to 1.
        """
        dotenv.load_dotenv()
        defaults = AllocationPolicy()
        raw_mode = os.getenv("DAYBOOK_BUCKETING_MODE", "double_count")
        mode = cls._parse_mode(raw_mode)
        if mode is BucketingMode.DOUBLE_COUNT:
            get_app_logger().info(
                "Day book Expenses bucket double-counts Purchase and "
                "Payment Out; set DAYBOOK_BUCKETING_MODE=exclusive to "
                "keep buckets mutually exclusive"
            )
        policy = AllocationPolicy(
            net_sales=cls._ratio_from_env(
                "DAYBOOK_NET_SALES_SPLIT",
                defaults.net_sales,
            ),
            purchase=cls._ratio_from_env(
                "DAYBOOK_PURCHASE_SPLIT",
                defaults.purchase,
            ),
            expenses=cls._ratio_from_env(
                "DAYBOOK_EXPENSES_SPLIT",
                defaults.expenses,
            ),
            bucketing_mode=mode,
        )
        raw_opening = os.getenv("DAYBOOK_OPENING_BALANCE")
        opening = (
            AccountSplit(
                *cls._parse_triplet("DAYBOOK_OPENING_BALANCE", raw_opening)
            )
            if raw_opening
            else DEFAULT_OPENING_BALANCE
        )
        return cls(
            policy=policy,
            opening_balance=opening,
            user_id=os.getenv("DAYBOOK_USER_ID", "local").strip(),
            user_role=os.getenv("DAYBOOK_USER_ROLE", "staff").strip().lower(),
        )

    @staticmethod
    def _parse_mode(raw_mode: str) -> BucketingMode:
        try:
            return BucketingMode(raw_mode.strip().lower())
        except ValueError as exc:
            raise ValueError(
                f"Unsupported DAYBOOK_BUCKETING_MODE: {raw_mode}. "
                "Expected double_count or exclusive."
            ) from exc

    @classmethod
    def _ratio_from_env(cls, name: str, default: SplitRatio) -> SplitRatio:
        raw = os.getenv(name)
        if not raw:
            return default
        return SplitRatio(*cls._parse_triplet(name, raw))

    @staticmethod
    def _parse_triplet(
        name: str,
        raw: str,
    ) -> tuple[Decimal, Decimal, Decimal]:
        """Parse ``bank,counter,owner`` into three Decimals.

        Args:
            name: Environment variable name, for error messages.
            raw: Raw comma separated value.

        Returns:
            tuple[Decimal, Decimal, Decimal]: Bank, counter and owner values.
        """
        parts = [part.strip() for part in raw.split(",")]
        if len(parts) != 3:
            raise ValueError(
                f"{name} must hold three comma separated values "
                f"(bank,counter,owner), got '{raw}'"
            )
        try:
            bank, counter, owner = (Decimal(part) for part in parts)
        except InvalidOperation as exc:
            raise ValueError(
                f"{name} holds a non-numeric value: '{raw}'"
            ) from exc
        if not all(value.is_finite() for value in (bank, counter, owner)):
            raise ValueError(f"{name} holds a non-finite value: '{raw}'")
        return bank, counter, owner


__all__ = ["DayBookSettings"]
