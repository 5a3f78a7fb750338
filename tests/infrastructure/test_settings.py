"""Tests for infrastructure settings."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import ReportSettings


@pytest.fixture(autouse=True)
def _quiet_logger(monkeypatch):
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    return logger


def test_from_env_uses_defaults(monkeypatch) -> None:
    """Unset variables fall back to defaults."""
    monkeypatch.delenv("LEDGER_BALANCE_TOLERANCE", raising=False)
    monkeypatch.delenv("LEDGER_VERIFY_FETCH_COUNT", raising=False)

    settings = ReportSettings.from_env()

    assert settings.balance_tolerance == Decimal("0.005")
    assert settings.verify_fetch_count is True


def test_from_env_reads_values(monkeypatch) -> None:
    """Valid values override the defaults."""
    monkeypatch.setenv("LEDGER_BALANCE_TOLERANCE", " 0.01 ")
    monkeypatch.setenv("LEDGER_VERIFY_FETCH_COUNT", "off")

    settings = ReportSettings.from_env()

    assert settings.balance_tolerance == Decimal("0.01")
    assert settings.verify_fetch_count is False


@pytest.mark.parametrize("raw", ["abc", "-1", "NaN"])
def test_invalid_tolerance_falls_back(monkeypatch, _quiet_logger, raw) -> None:
    """Unparseable or negative tolerances are replaced by the default."""
    monkeypatch.setenv("LEDGER_BALANCE_TOLERANCE", raw)
    monkeypatch.delenv("LEDGER_VERIFY_FETCH_COUNT", raising=False)

    settings = ReportSettings.from_env()

    assert settings.balance_tolerance == Decimal("0.005")
    _quiet_logger.warning.assert_called_once()


def test_invalid_flag_falls_back(monkeypatch, _quiet_logger) -> None:
    """Unknown boolean spellings keep the default."""
    monkeypatch.delenv("LEDGER_BALANCE_TOLERANCE", raising=False)
    monkeypatch.setenv("LEDGER_VERIFY_FETCH_COUNT", "maybe")

    settings = ReportSettings.from_env()

    assert settings.verify_fetch_count is True
    _quiet_logger.warning.assert_called_once()
