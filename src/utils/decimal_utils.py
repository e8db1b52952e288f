"""Helpers for Decimal normalization."""

import re
from decimal import Decimal

_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Text is read up to the first character that cannot continue a number,
    so ``"12.5 kg"`` becomes ``12.5``. Missing, empty, non-numeric or
    non-finite values become zero so that aggregations over loosely typed
    records never raise.

    Args:
        value: Raw numeric value from SQL rows, JSON payloads or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    match = _NUMERIC_PREFIX.match(str(value).strip())
    if match is None:
        return Decimal("0")
    return Decimal(match.group(0))


__all__ = ["coerce_decimal"]
