"""Tests for the close_day_cli adapter."""

from datetime import date, datetime
from decimal import Decimal

from src.adapters import close_day_cli
from src.domain.errors import DayAlreadyClosedError, DayOutOfOrderError
from src.domain.models import AccountSplit, LedgerDay, LedgerStatus
from src.infrastructure.settings import DayBookSettings


class _Logger:
    def __init__(self) -> None:
        self.warnings: list[str] = []

    def warning(self, msg: str) -> None:
        self.warnings.append(msg)


class _FakeUseCase:
    def __init__(self, error=None) -> None:
        self.calls = []
        self.error = error

    def execute(self, business_date, closed_by=None):
        self.calls.append((business_date, closed_by))
        if self.error:
            raise self.error
        return LedgerDay(
            business_date=business_date,
            status=LedgerStatus.CLOSED,
            opening_balance=AccountSplit(),
            closing_balance=AccountSplit(
                Decimal("70"), Decimal("30"), Decimal("0")
            ),
            receipts_total=Decimal("100"),
            payments_total=Decimal("0"),
            net_receipt_total=Decimal("100"),
            closed_at=datetime(2024, 3, 15, 22, 0),
            closed_by=closed_by,
        )


def _patch(monkeypatch, use_case, logger):
    monkeypatch.setattr(close_day_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        close_day_cli.DayBookSettings,
        "from_env",
        classmethod(lambda cls: DayBookSettings(user_id="cron")),
    )
    monkeypatch.setattr(
        close_day_cli,
        "build_close_day_use_case",
        lambda settings=None: use_case,
    )


def test_main_closes_requested_date_and_prints(monkeypatch, capsys) -> None:
    """The CLI should close DAYBOOK_DATE and print the snapshot."""
    use_case = _FakeUseCase()
    _patch(monkeypatch, use_case, _Logger())
    monkeypatch.setenv("DAYBOOK_DATE", "2024-03-15")

    close_day_cli.main()

    assert use_case.calls == [(date(2024, 3, 15), "cron")]
    output = capsys.readouterr().out
    assert "Closed day book for 2024-03-15" in output
    assert "total=100" in output


def test_main_defaults_to_today(monkeypatch) -> None:
    """The CLI should close today when DAYBOOK_DATE is unset."""
    use_case = _FakeUseCase()
    _patch(monkeypatch, use_case, _Logger())
    monkeypatch.delenv("DAYBOOK_DATE", raising=False)

    close_day_cli.main()

    assert use_case.calls[0][0] == date.today()


def test_main_warns_on_invalid_date(monkeypatch) -> None:
    """A malformed DAYBOOK_DATE should be logged, not raised."""
    use_case = _FakeUseCase()
    logger = _Logger()
    _patch(monkeypatch, use_case, logger)
    monkeypatch.setenv("DAYBOOK_DATE", "15/03/2024")

    close_day_cli.main()

    assert use_case.calls == []
    assert "Invalid date" in logger.warnings[0]


def test_main_warns_when_day_already_closed(monkeypatch, capsys) -> None:
    """Closing a closed day should log a warning and print nothing."""
    use_case = _FakeUseCase(DayAlreadyClosedError(date(2024, 3, 15)))
    logger = _Logger()
    _patch(monkeypatch, use_case, logger)
    monkeypatch.setenv("DAYBOOK_DATE", "2024-03-15")

    close_day_cli.main()

    assert "already closed" in logger.warnings[0]
    assert capsys.readouterr().out == ""


def test_main_warns_when_a_later_day_is_closed(monkeypatch, capsys) -> None:
    """The CLI should log out-of-order closes without printing a summary."""
    use_case = _FakeUseCase(
        DayOutOfOrderError(date(2024, 3, 15), date(2024, 3, 16))
    )
    logger = _Logger()
    _patch(monkeypatch, use_case, logger)
    monkeypatch.setenv("DAYBOOK_DATE", "2024-03-15")

    close_day_cli.main()

    assert "2024-03-16 is already closed" in logger.warnings[0]
    assert capsys.readouterr().out == ""
