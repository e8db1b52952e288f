"""Port for the persisted open/closed state of business days."""

from datetime import date
from typing import Protocol

from src.domain.models import LedgerDay


class LedgerRepositoryPort(Protocol):
    """Port exposing read/write access to ledger day snapshots."""

    def prepare_storage(self) -> None:
        """Ensure the ledger storage exists."""

    def get_day(self, business_date: date) -> LedgerDay | None:
        """Return the stored state of a day, or None if never closed."""

    def latest_closed_before(self, business_date: date) -> LedgerDay | None:
        """Return the most recent closed day strictly before the date."""

    def latest_closed_after(self, business_date: date) -> LedgerDay | None:
        """Return the most recent closed day strictly after the date."""

    def save_day(self, day: LedgerDay) -> None:
        """Insert the snapshot of a closed day."""

    def list_closed_days(self, limit: int | None = None) -> list[LedgerDay]:
        """Return closed days, newest first."""


__all__ = ["LedgerRepositoryPort"]
