"""SQLAlchemy repository persisting closed day book snapshots."""

from datetime import date, datetime

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import DayAlreadyClosedError
from src.domain.models.day_book import AccountSplit, LedgerDay, LedgerStatus
from src.utils.decimal_utils import coerce_decimal


CREATE_LEDGER_DAYS_SQL = """
CREATE TABLE IF NOT EXISTS ledger_days (
    business_date DATE PRIMARY KEY,
    status TEXT NOT NULL,
    opening_bank NUMERIC NOT NULL,
    opening_counter NUMERIC NOT NULL,
    opening_owner NUMERIC NOT NULL,
    closing_bank NUMERIC NOT NULL,
    closing_counter NUMERIC NOT NULL,
    closing_owner NUMERIC NOT NULL,
    receipts_total NUMERIC NOT NULL,
    payments_total NUMERIC NOT NULL,
    net_receipt_total NUMERIC NOT NULL,
    closed_at TIMESTAMP,
    closed_by TEXT
)
"""

LEDGER_COLUMNS = """
business_date,
status,
opening_bank,
opening_counter,
opening_owner,
closing_bank,
closing_counter,
closing_owner,
receipts_total,
payments_total,
net_receipt_total,
closed_at,
closed_by
"""

SELECT_DAY_SQL = text(
    f"SELECT {LEDGER_COLUMNS} FROM ledger_days "
    "WHERE business_date = :business_date"
)

SELECT_LATEST_CLOSED_BEFORE_SQL = text(
    f"SELECT {LEDGER_COLUMNS} FROM ledger_days "
    "WHERE status = 'closed' AND business_date < :business_date "
    "ORDER BY business_date DESC LIMIT 1"
)

SELECT_LATEST_CLOSED_AFTER_SQL = text(
    f"SELECT {LEDGER_COLUMNS} FROM ledger_days "
    "WHERE status = 'closed' AND business_date > :business_date "
    "ORDER BY business_date DESC LIMIT 1"
)

SELECT_CLOSED_DAYS_SQL = (
    f"SELECT {LEDGER_COLUMNS} FROM ledger_days "
    "WHERE status = 'closed' ORDER BY business_date DESC"
)

INSERT_DAY_SQL = text(
    """
    INSERT INTO ledger_days (
        business_date,
        status,
        opening_bank,
        opening_counter,
        opening_owner,
        closing_bank,
        closing_counter,
        closing_owner,
        receipts_total,
        payments_total,
        net_receipt_total,
        closed_at,
        closed_by
    )
    VALUES (
        :business_date,
        :status,
        :opening_bank,
        :opening_counter,
        :opening_owner,
        :closing_bank,
        :closing_counter,
        :closing_owner,
        :receipts_total,
        :payments_total,
        :net_receipt_total,
        :closed_at,
        :closed_by
    )
    """
)


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _as_datetime(value) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Ledger state repository backed by the bakery database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the bakery engine.
        """
        self._db_port = db_port

    def prepare_storage(self) -> None:
        """Ensure the ledger_days table exists."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_LEDGER_DAYS_SQL)

    def get_day(self, business_date: date) -> LedgerDay | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_DAY_SQL,
                {"business_date": business_date},
            ).first()
        return self._to_ledger_day(row) if row else None

    def latest_closed_before(self, business_date: date) -> LedgerDay | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_LATEST_CLOSED_BEFORE_SQL,
                {"business_date": business_date},
            ).first()
        return self._to_ledger_day(row) if row else None

    def latest_closed_after(self, business_date: date) -> LedgerDay | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_LATEST_CLOSED_AFTER_SQL,
                {"business_date": business_date},
            ).first()
        return self._to_ledger_day(row) if row else None

    def save_day(self, day: LedgerDay) -> None:
        """Insert a closed day snapshot.

        Raises:
            DayAlreadyClosedError: If a row for the date already exists,
                for example when two operators close the same day at once.
        """
        payload = {
            "business_date": day.business_date,
            "status": day.status.value,
            "opening_bank": day.opening_balance.bank,
            "opening_counter": day.opening_balance.counter,
            "opening_owner": day.opening_balance.owner,
            "closing_bank": day.closing_balance.bank,
            "closing_counter": day.closing_balance.counter,
            "closing_owner": day.closing_balance.owner,
            "receipts_total": day.receipts_total,
            "payments_total": day.payments_total,
            "net_receipt_total": day.net_receipt_total,
            "closed_at": day.closed_at,
            "closed_by": day.closed_by,
        }
        engine = self._db_port.get_engine()
        try:
            with engine.begin() as conn:
                conn.execute(INSERT_DAY_SQL, payload)
        except IntegrityError as exc:
            raise DayAlreadyClosedError(day.business_date) from exc

    def list_closed_days(self, limit: int | None = None) -> list[LedgerDay]:
        sql = SELECT_CLOSED_DAYS_SQL
        params: dict[str, int] = {}
        if limit:
            sql += " LIMIT :limit"
            params["limit"] = limit
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
        return [self._to_ledger_day(row) for row in rows]

    @staticmethod
    def _to_ledger_day(row) -> LedgerDay:
        return LedgerDay(
            business_date=_as_date(row.business_date),
            status=LedgerStatus(row.status),
            opening_balance=AccountSplit(
                bank=coerce_decimal(row.opening_bank),
                counter=coerce_decimal(row.opening_counter),
                owner=coerce_decimal(row.opening_owner),
            ),
            closing_balance=AccountSplit(
                bank=coerce_decimal(row.closing_bank),
                counter=coerce_decimal(row.closing_counter),
                owner=coerce_decimal(row.closing_owner),
            ),
            receipts_total=coerce_decimal(row.receipts_total),
            payments_total=coerce_decimal(row.payments_total),
            net_receipt_total=coerce_decimal(row.net_receipt_total),
            closed_at=_as_datetime(row.closed_at),
            closed_by=row.closed_by,
        )


__all__ = [
    "SqlAlchemyLedgerRepository",
    "CREATE_LEDGER_DAYS_SQL",
    "INSERT_DAY_SQL",
]
