"""Tests for infrastructure settings."""

from decimal import Decimal

import pytest

from src.domain.models import AccountSplit, BucketingMode
from src.domain.policies import DEFAULT_OPENING_BALANCE, AllocationPolicy
from src.infrastructure import settings as settings_module
from src.infrastructure.settings import DayBookSettings


ENV_VARS = (
    "DAYBOOK_BUCKETING_MODE",
    "DAYBOOK_OPENING_BALANCE",
    "DAYBOOK_NET_SALES_SPLIT",
    "DAYBOOK_PURCHASE_SPLIT",
    "DAYBOOK_EXPENSES_SPLIT",
    "DAYBOOK_USER_ID",
    "DAYBOOK_USER_ROLE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    """Settings should fall back to the documented defaults."""
    settings = DayBookSettings.from_env()

    assert settings.policy == AllocationPolicy()
    assert settings.opening_balance == DEFAULT_OPENING_BALANCE
    assert settings.user_id == "local"
    assert settings.user_role == "staff"


def test_from_env_reads_overrides(monkeypatch) -> None:
    """Settings should read overrides from the environment."""
    monkeypatch.setenv("DAYBOOK_BUCKETING_MODE", "Exclusive")
    monkeypatch.setenv("DAYBOOK_OPENING_BALANCE", "100, 200, 0")
    monkeypatch.setenv("DAYBOOK_NET_SALES_SPLIT", "0.5,0.5,0")
    monkeypatch.setenv("DAYBOOK_USER_ID", " u-7 ")
    monkeypatch.setenv("DAYBOOK_USER_ROLE", "Manager")

    settings = DayBookSettings.from_env()

    assert settings.policy.bucketing_mode is BucketingMode.EXCLUSIVE
    assert settings.policy.net_sales.bank == Decimal("0.5")
    assert settings.policy.net_sales.counter == Decimal("0.5")
    assert settings.policy.purchase == AllocationPolicy().purchase
    assert settings.opening_balance == AccountSplit(
        Decimal("100"), Decimal("200"), Decimal("0")
    )
    assert settings.user_id == "u-7"
    assert settings.user_role == "manager"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("DAYBOOK_BUCKETING_MODE", "sometimes"),
        ("DAYBOOK_OPENING_BALANCE", "1,2"),
        ("DAYBOOK_EXPENSES_SPLIT", "a,b,c"),
        ("DAYBOOK_PURCHASE_SPLIT", "0.5,0.1,0.1"),
        ("DAYBOOK_NET_SALES_SPLIT", "nan,0,1"),
        ("DAYBOOK_OPENING_BALANCE", "0,Infinity,645"),
    ],
)
def test_from_env_rejects_invalid_values(monkeypatch, name, value) -> None:
    """Invalid environment values should raise ValueError."""
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        DayBookSettings.from_env()
