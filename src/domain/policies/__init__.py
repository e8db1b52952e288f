"""Domain policies package."""

from .allocation import (
    BANK_ONLY,
    DEFAULT_OPENING_BALANCE,
    AllocationPolicy,
    SplitRatio,
)

__all__ = [
    "AllocationPolicy",
    "SplitRatio",
    "BANK_ONLY",
    "DEFAULT_OPENING_BALANCE",
]
