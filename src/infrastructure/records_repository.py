"""SQLAlchemy repository reading orders, expenses and bills."""

from datetime import datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.day_book_records import DayBookRecordsPort
from src.domain.models import BillRecord, ExpenseRecord, OrderRecord
from src.utils.decimal_utils import coerce_decimal


SELECT_ORDERS_SQL = """
SELECT id,
       order_number,
       customer_name,
       status,
       total_amount,
       order_date,
       created_at
FROM orders
WHERE 1=1
"""

SELECT_EXPENSES_SQL = """
SELECT id,
       title,
       category,
       amount,
       date,
       created_at
FROM expenses
WHERE 1=1
"""

SELECT_BILLS_SQL = """
SELECT id,
       bill_number,
       status,
       total_amount,
       bill_date,
       created_at
FROM bills
WHERE 1=1
"""


class SqlAlchemyDayBookRecordsRepository(DayBookRecordsPort):
    """Records repository backed by the bakery database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the bakery engine.
        """
        self._db_port = db_port

    def fetch_orders(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[OrderRecord]:
        rows = self._fetch(
            SELECT_ORDERS_SQL,
            "COALESCE(order_date, created_at)",
            start,
            end,
        )
        return [
            OrderRecord(
                id=row.id,
                order_number=row.order_number,
                customer_name=row.customer_name,
                status=row.status,
                total_amount=coerce_decimal(row.total_amount),
                order_date=row.order_date,
                created_at=row.created_at,
            )
            for row in rows
        ]

    def fetch_expenses(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[ExpenseRecord]:
        rows = self._fetch(
            SELECT_EXPENSES_SQL,
            "COALESCE(date, created_at)",
            start,
            end,
        )
        return [
            ExpenseRecord(
                id=row.id,
                title=row.title,
                category=row.category,
                amount=coerce_decimal(row.amount),
                date=row.date,
                created_at=row.created_at,
            )
            for row in rows
        ]

    def fetch_bills(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[BillRecord]:
        rows = self._fetch(
            SELECT_BILLS_SQL,
            "COALESCE(bill_date, created_at)",
            start,
            end,
        )
        return [
            BillRecord(
                id=row.id,
                bill_number=row.bill_number,
                status=row.status,
                total_amount=coerce_decimal(row.total_amount),
                bill_date=row.bill_date,
                created_at=row.created_at,
            )
            for row in rows
        ]

    def _fetch(
        self,
        base_sql: str,
        date_expr: str,
        start: datetime | None,
        end: datetime | None,
    ):
        query, params = self._build_window_query(
            base_sql,
            date_expr,
            start,
            end,
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            return conn.execute(query, params).all()

    @staticmethod
    def _build_window_query(
        base_sql: str,
        date_expr: str,
        start: datetime | None,
        end: datetime | None,
    ):
        params: dict[str, datetime] = {}
        sql = base_sql
        if start:
            sql += f" AND {date_expr} >= :start"
            params["start"] = start
        if end:
            sql += f" AND {date_expr} < :end"
            params["end"] = end
        sql += " ORDER BY id"
        return text(sql), params


__all__ = ["SqlAlchemyDayBookRecordsRepository"]
