"""Application use cases package."""

from .close_day import CloseDayUseCase, ListClosedDaysUseCase
from .export_day_book import export_day_book_csv
from .get_day_book import DayBookReport, GetDayBookUseCase
from .notifications import ManageSubscriptionUseCase, NotifyNewOrderUseCase
from .resolve_capabilities import CapabilitySet, ResolveCapabilitiesUseCase

__all__ = [
    "GetDayBookUseCase",
    "DayBookReport",
    "CloseDayUseCase",
    "ListClosedDaysUseCase",
    "export_day_book_csv",
    "CapabilitySet",
    "ResolveCapabilitiesUseCase",
    "ManageSubscriptionUseCase",
    "NotifyNewOrderUseCase",
]
