"""Use case to compute the day book of a business date."""

from datetime import date, datetime, time, timedelta

from src.application.ports.day_book_records import DayBookRecordsPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.day_book import (
    AccountSplit,
    DayBookReport,
    LedgerStatus,
)
from src.domain.policies.allocation import (
    DEFAULT_OPENING_BALANCE,
    AllocationPolicy,
)
from src.domain.services.day_book import build_day_book_report
from src.infrastructure.logging.logger import get_app_logger


SNAPSHOT_MISMATCH_WARNING = (
    "Closing balance differs from the snapshot taken when the day was closed"
)


class GetDayBookUseCase:
    """Compute buckets, totals and balances for one business date."""

    def __init__(
        self,
        records_repository: DayBookRecordsPort,
        ledger_repository: LedgerRepositoryPort,
        policy: AllocationPolicy | None = None,
        default_opening_balance: AccountSplit | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing orders, expenses and bills.
            ledger_repository: Port providing closed day snapshots.
            policy: Allocation ratios and bucketing mode.
            default_opening_balance: Opening balance used when no earlier
                day has been closed.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records_repository = records_repository
        self._ledger_repository = ledger_repository
        self._policy = policy or AllocationPolicy()
        self._default_opening_balance = (
            default_opening_balance or DEFAULT_OPENING_BALANCE
        )
        self._logger = logger or get_app_logger()

    def execute(self, business_date: date) -> DayBookReport:
        """Return the day book for ``business_date``.

        The opening balance is the closing balance of the latest closed day
        before ``business_date``, else the configured default.

        Args:
            business_date: Calendar day to summarize.

        Returns:
            DayBookReport: Eight buckets with receipts, payments, net
            receipt and balances.
        """
        self._ledger_repository.prepare_storage()
        start, end = self._fetch_window(business_date)
        orders = self._records_repository.fetch_orders(start, end)
        expenses = self._records_repository.fetch_expenses(start, end)
        bills = self._records_repository.fetch_bills(start, end)
        self._logger.info(
            f"Fetched {len(orders or [])} orders, {len(expenses or [])} "
            f"expenses, {len(bills or [])} bills around "
            f"{business_date.isoformat()}"
        )

        stored_day = self._ledger_repository.get_day(business_date)
        if stored_day is not None and stored_day.status is LedgerStatus.CLOSED:
            opening_balance = stored_day.opening_balance
            status = LedgerStatus.CLOSED
        else:
            opening_balance = self.resolve_opening_balance(business_date)
            status = LedgerStatus.OPEN

        report = build_day_book_report(
            business_date,
            orders,
            expenses,
            bills,
            policy=self._policy,
            opening_balance=opening_balance,
            status=status,
            logger=self._logger,
        )
        if (
            status is LedgerStatus.CLOSED
            and report.closing_balance != stored_day.closing_balance
        ):
            report.warnings.append(SNAPSHOT_MISMATCH_WARNING)
            self._logger.warning(
                f"{SNAPSHOT_MISMATCH_WARNING} on {business_date.isoformat()}: "
                f"now={report.closing_balance.total}, "
                f"snapshot={stored_day.closing_balance.total}"
            )
        self._logger.info(
            f"Day book computed for {business_date.isoformat()}: "
            f"receipts={report.total_receipts.total}, "
            f"payments={report.total_payments.total}, "
            f"net={report.net_receipt.total}"
        )
        return report

    def resolve_opening_balance(self, business_date: date) -> AccountSplit:
        """Return the balance carried into ``business_date``."""
        previous = self._ledger_repository.latest_closed_before(business_date)
        if previous is None:
            return self._default_opening_balance
        return previous.closing_balance

    @staticmethod
    def _fetch_window(business_date: date) -> tuple[datetime, datetime]:
        # One day of slack on each side keeps aware timestamps that shift
        # across midnight once converted to local time.
        start = datetime.combine(business_date - timedelta(days=1), time.min)
        end = datetime.combine(business_date + timedelta(days=2), time.min)
        return start, end


__all__ = ["GetDayBookUseCase", "SNAPSHOT_MISMATCH_WARNING"]
