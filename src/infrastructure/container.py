"""Composition root for wiring infrastructure adapters."""

from src.application.ports.access_repository import (
    PermissionsRepositoryPort,
    UsersRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.day_book_records import DayBookRecordsPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.subscription_store import SubscriptionStorePort
from src.application.use_cases.close_day import (
    CloseDayUseCase,
    ListClosedDaysUseCase,
)
from src.application.use_cases.get_day_book import GetDayBookUseCase
from src.application.use_cases.resolve_capabilities import (
    ResolveCapabilitiesUseCase,
)
from src.infrastructure.access_repository import (
    SqlAlchemyPermissionsRepository,
    SqlAlchemyUsersRepository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.records_repository import (
    SqlAlchemyDayBookRecordsRepository,
)
from src.infrastructure.settings import DayBookSettings
from src.infrastructure.subscription_store import SqlAlchemySubscriptionStore


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_records_repository(
    db_port: DatabaseEnginePort | None = None,
) -> DayBookRecordsPort:
    """Return the orders/expenses/bills repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyDayBookRecordsRepository(resolved_db)


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger state repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_permissions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PermissionsRepositoryPort:
    """Return the permission grants repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyPermissionsRepository(resolved_db)


def build_users_repository(
    db_port: DatabaseEnginePort | None = None,
) -> UsersRepositoryPort:
    """Return the users repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyUsersRepository(resolved_db)


def build_subscription_store(
    db_port: DatabaseEnginePort | None = None,
) -> SubscriptionStorePort:
    """Return the persistent push subscription store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySubscriptionStore(resolved_db)


def build_day_book_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: DayBookSettings | None = None,
) -> GetDayBookUseCase:
    """Return the day book use case configured from the environment."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or DayBookSettings.from_env()
    return GetDayBookUseCase(
        records_repository=build_records_repository(resolved_db),
        ledger_repository=build_ledger_repository(resolved_db),
        policy=resolved_settings.policy,
        default_opening_balance=resolved_settings.opening_balance,
        logger=get_app_logger(),
    )


def build_close_day_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: DayBookSettings | None = None,
) -> CloseDayUseCase:
    """Return the close day use case sharing one database adapter."""
    resolved_db = db_port or build_database_adapter()
    return CloseDayUseCase(
        day_book=build_day_book_use_case(resolved_db, settings),
        ledger_repository=build_ledger_repository(resolved_db),
        logger=get_usage_logger(),
    )


def build_history_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ListClosedDaysUseCase:
    """Return the day book history use case."""
    return ListClosedDaysUseCase(build_ledger_repository(db_port))


def build_capabilities_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ResolveCapabilitiesUseCase:
    """Return the capability resolution use case."""
    return ResolveCapabilitiesUseCase(
        build_permissions_repository(db_port),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_records_repository",
    "build_ledger_repository",
    "build_permissions_repository",
    "build_users_repository",
    "build_subscription_store",
    "build_day_book_use_case",
    "build_close_day_use_case",
    "build_history_use_case",
    "build_capabilities_use_case",
]
