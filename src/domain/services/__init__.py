"""Domain services package."""

from .date_filter import filter_records_for_day, record_timestamp
from .day_book import (
    DOUBLE_COUNT_WARNING,
    aggregate_day_book,
    build_day_book_report,
    sum_entries,
)
from .permissions import has_permission

__all__ = [
    "filter_records_for_day",
    "record_timestamp",
    "aggregate_day_book",
    "build_day_book_report",
    "sum_entries",
    "has_permission",
    "DOUBLE_COUNT_WARNING",
]
