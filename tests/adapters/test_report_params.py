"""Tests for environment-driven report parameters."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.adapters.report_params import parse_branch, parse_date, read_report_request


@pytest.fixture(autouse=True)
def _clear_report_env(monkeypatch):
    for name in (
        "REPORT_PERIOD",
        "REPORT_START_DATE",
        "REPORT_END_DATE",
        "REPORT_BRANCH_ID",
    ):
        monkeypatch.delenv(name, raising=False)


def test_parse_date_accepts_iso_and_rejects_garbage() -> None:
    """Invalid dates are logged and dropped."""
    logger = MagicMock()

    assert parse_date(" 2023-02-01 ", logger) == date(2023, 2, 1)
    assert parse_date("", logger) is None
    assert parse_date("01/02/2023", logger) is None
    logger.warning.assert_called_once()


def test_parse_branch_treats_all_as_no_filter() -> None:
    """Blank and 'all' select every branch."""
    assert parse_branch(None) is None
    assert parse_branch(" ") is None
    assert parse_branch("ALL") is None
    assert parse_branch(" 3 ") == "3"


def test_read_report_request_from_explicit_dates(monkeypatch) -> None:
    """Explicit dates and branch build the request."""
    monkeypatch.setenv("REPORT_START_DATE", "2023-02-01")
    monkeypatch.setenv("REPORT_END_DATE", "2023-02-28")
    monkeypatch.setenv("REPORT_BRANCH_ID", "3")

    request = read_report_request(MagicMock())

    assert request.start == date(2023, 2, 1)
    assert request.end == date(2023, 2, 28)
    assert request.branch_id == "3"


def test_read_report_request_uses_period_preset(monkeypatch) -> None:
    """A preset takes precedence over explicit dates."""
    monkeypatch.setenv("REPORT_PERIOD", "current_month")
    monkeypatch.setenv("REPORT_START_DATE", "2000-01-01")

    request = read_report_request(MagicMock(), today=date(2023, 2, 14))

    assert (request.start, request.end) == (date(2023, 2, 1), date(2023, 2, 28))
    assert request.branch_id is None


def test_read_report_request_rejects_unknown_preset(monkeypatch) -> None:
    """Unknown presets are reported and abort the request."""
    monkeypatch.setenv("REPORT_PERIOD", "fortnight")
    logger = MagicMock()

    assert read_report_request(logger) is None
    logger.warning.assert_called_once()


def test_read_report_request_requires_dates() -> None:
    """Missing dates abort the request."""
    logger = MagicMock()

    assert read_report_request(logger) is None
    logger.warning.assert_called_once()


def test_read_report_request_rejects_inverted_range(monkeypatch) -> None:
    """A start after the end is rejected at the boundary."""
    monkeypatch.setenv("REPORT_START_DATE", "2023-03-01")
    monkeypatch.setenv("REPORT_END_DATE", "2023-02-01")
    logger = MagicMock()

    assert read_report_request(logger) is None
    assert "after" in logger.warning.call_args.args[0]
