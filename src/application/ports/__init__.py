"""Application ports package."""

from .access_repository import PermissionsRepositoryPort, UsersRepositoryPort
from .database import DatabaseEnginePort
from .day_book_records import DayBookRecordsPort
from .ledger_repository import LedgerRepositoryPort
from .subscription_store import SubscriptionStorePort

__all__ = [
    "DatabaseEnginePort",
    "DayBookRecordsPort",
    "LedgerRepositoryPort",
    "PermissionsRepositoryPort",
    "UsersRepositoryPort",
    "SubscriptionStorePort",
]
