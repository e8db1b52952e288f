"""CLI adapter closing a business day from a terminal or a cron job."""

from datetime import date
import os

from src.domain.errors import DayAlreadyClosedError, DayOutOfOrderError
from src.infrastructure.container import build_close_day_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DayBookSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Close DAYBOOK_DATE (today when unset) and print its balances."""
    logger = get_app_logger()
    raw_date = os.getenv("DAYBOOK_DATE")
    business_date = _parse_date(raw_date, logger)
    if raw_date and business_date is None:
        return
    business_date = business_date or date.today()

    settings = DayBookSettings.from_env()
    use_case = build_close_day_use_case(settings=settings)
    try:
        snapshot = use_case.execute(business_date, closed_by=settings.user_id)
    except (DayAlreadyClosedError, DayOutOfOrderError) as exc:
        logger.warning(str(exc))
        return

    print(f"Closed day book for {snapshot.business_date.isoformat()}")
    print(
        f"receipts={snapshot.receipts_total}, "
        f"payments={snapshot.payments_total}, "
        f"net_receipt={snapshot.net_receipt_total}"
    )
    print(
        "closing balance: "
        f"bank={snapshot.closing_balance.bank}, "
        f"counter={snapshot.closing_balance.counter}, "
        f"owner={snapshot.closing_balance.owner}, "
        f"total={snapshot.closing_balance.total}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
