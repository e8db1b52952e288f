"""Filter dated records down to one local calendar day."""

from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any, TypeVar

from src.utils.date_utils import day_bounds, parse_timestamp


T = TypeVar("T")


def read_field(record: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-bearing record."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def record_timestamp(
    record: Any,
    primary_field: str,
    fallback_field: str | None = None,
):
    """Return the record timestamp from the primary field, else the fallback.

    A missing or empty primary value falls back; a malformed primary value
    is not rescued by the fallback.
    """
    raw = read_field(record, primary_field)
    if (raw is None or raw == "") and fallback_field:
        raw = read_field(record, fallback_field)
    return parse_timestamp(raw)


def filter_records_for_day(
    records: Iterable[T] | None,
    day: date,
    primary_field: str,
    fallback_field: str | None = None,
) -> list[T]:
    """Return the records dated within ``day`` (local midnight to midnight).

    Args:
        records: Records to filter; ``None`` is treated as empty.
        day: Target calendar date in the local timezone.
        primary_field: Name of the preferred timestamp field.
        fallback_field: Field read when the primary one is missing.

    Returns:
        list[T]: Matching records in their original order. Records with
        missing or malformed timestamps are excluded.
    """
    if not records:
        return []
    start, end = day_bounds(day)
    selected: list[T] = []
    for record in records:
        timestamp = record_timestamp(record, primary_field, fallback_field)
        if timestamp is None:
            continue
        if start <= timestamp <= end:
            selected.append(record)
    return selected


__all__ = ["filter_records_for_day", "record_timestamp", "read_field"]
