"""Use cases closing business days and listing the day book history.

Closing a day moves it from ``open`` to ``closed`` and stores a snapshot of
its balances. The stored closing balance becomes the opening balance of the
following days until another day is closed.
"""

from collections.abc import Callable
from datetime import date, datetime

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_day_book import GetDayBookUseCase
from src.domain.errors import DayAlreadyClosedError, DayOutOfOrderError
from src.domain.models.day_book import LedgerDay, LedgerStatus
from src.infrastructure.logging.logger import get_app_logger


class CloseDayUseCase:
    """Snapshot the day book of a date and mark the day closed."""

    def __init__(
        self,
        day_book: GetDayBookUseCase,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the use case.

        Args:
            day_book: Use case computing the report to snapshot.
            ledger_repository: Port persisting ledger day state.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the closing timestamp.
        """
        self._day_book = day_book
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(
        self,
        business_date: date,
        closed_by: str | None = None,
    ) -> LedgerDay:
        """Close ``business_date``.

        Args:
            business_date: Day to close.
            closed_by: Identifier of the operator closing the day.

        Returns:
            LedgerDay: Stored snapshot.

        Raises:
            DayAlreadyClosedError: If the day was closed before.
            DayOutOfOrderError: If a later day is already closed.
        """
        self._ledger_repository.prepare_storage()
        existing = self._ledger_repository.get_day(business_date)
        if existing is not None and existing.status is LedgerStatus.CLOSED:
            raise DayAlreadyClosedError(business_date)
        later = self._ledger_repository.latest_closed_after(business_date)
        if later is not None:
            raise DayOutOfOrderError(business_date, later.business_date)

        report = self._day_book.execute(business_date)
        snapshot = LedgerDay(
            business_date=business_date,
            status=LedgerStatus.CLOSED,
            opening_balance=report.opening_balance,
            closing_balance=report.closing_balance,
            receipts_total=report.total_receipts.total,
            payments_total=report.total_payments.total,
            net_receipt_total=report.net_receipt.total,
            closed_at=self._clock(),
            closed_by=closed_by,
        )
        self._ledger_repository.save_day(snapshot)
        self._logger.info(
            f"Closed day {business_date.isoformat()} "
            f"by {closed_by or 'unknown'}: "
            f"closing={snapshot.closing_balance.total}"
        )
        return snapshot


class ListClosedDaysUseCase:
    """Return the day book history."""

    def __init__(self, ledger_repository: LedgerRepositoryPort) -> None:
        self._ledger_repository = ledger_repository

    def execute(self, limit: int | None = None) -> list[LedgerDay]:
        """Return closed days, newest first."""
        self._ledger_repository.prepare_storage()
        return self._ledger_repository.list_closed_days(limit)


__all__ = ["CloseDayUseCase", "ListClosedDaysUseCase"]
