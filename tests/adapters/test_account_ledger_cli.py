"""Tests for the account_ledger_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters import account_ledger_cli
from src.domain.models import Account, AccountLedger, LedgerRow, ReportRequest


REQUEST = ReportRequest(start=date(2023, 2, 1), end=date(2023, 2, 28))
CASH = Account(id="1", code="1101", name="Cash")


def _ledger(rows: list[LedgerRow] | None = None) -> AccountLedger:
    return AccountLedger(
        request=REQUEST,
        account=CASH,
        opening_balance=Decimal("100"),
        rows=rows or [],
    )


def test_render_ledger_lists_rows_with_balances() -> None:
    """Each posting line carries its running balance."""
    ledger = _ledger(
        [
            LedgerRow(
                entry_date=date(2023, 2, 10),
                entry_number="JE-2",
                description="Supplier payment",
                branch_name="-",
                debit=Decimal("0"),
                credit=Decimal("40"),
                running_balance=Decimal("60"),
            )
        ]
    )

    lines = account_ledger_cli.render_ledger(ledger)

    assert lines[0].startswith("Ledger 1101 - Cash 2023-02-01 -> 2023-02-28")
    assert lines[1] == "Opening balance: 100.00"
    assert lines[3] == "2023-02-10 | JE-2 | Supplier payment | - | - | 40.00 | 60.00"
    assert lines[-1] == "Closing balance: 60.00"


def test_render_ledger_without_rows() -> None:
    """An idle account shows its opening balance and a notice."""
    lines = account_ledger_cli.render_ledger(_ledger())

    assert lines[-1] == "No postings for this account"


def test_render_ledger_for_unknown_account() -> None:
    """Unknown accounts render a single notice."""
    ledger = AccountLedger(request=REQUEST, account=None)

    assert account_ledger_cli.render_ledger(ledger) == ["Account not found"]


def test_main_requires_account_code(monkeypatch) -> None:
    """Without an account code nothing is computed."""
    logger = MagicMock()
    builder = MagicMock()
    monkeypatch.delenv("LEDGER_ACCOUNT_CODE", raising=False)
    monkeypatch.setattr(account_ledger_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(account_ledger_cli, "build_account_ledger_use_case", builder)

    account_ledger_cli.main()

    logger.warning.assert_called_once()
    builder.assert_not_called()


def test_main_prints_ledger(monkeypatch, capsys) -> None:
    """The CLI resolves the account code and prints the ledger."""
    use_case = MagicMock()
    use_case.execute_for_code.return_value = _ledger()
    monkeypatch.setenv("LEDGER_ACCOUNT_CODE", "1101")
    monkeypatch.setenv("REPORT_START_DATE", "2023-02-01")
    monkeypatch.setenv("REPORT_END_DATE", "2023-02-28")
    monkeypatch.delenv("REPORT_PERIOD", raising=False)
    monkeypatch.delenv("REPORT_BRANCH_ID", raising=False)
    monkeypatch.setattr(account_ledger_cli, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(account_ledger_cli, "get_usage_logger", lambda: MagicMock())
    monkeypatch.setattr(
        account_ledger_cli,
        "build_account_ledger_use_case",
        lambda: use_case,
    )

    account_ledger_cli.main()

    use_case.execute_for_code.assert_called_once_with("1101", REQUEST)
    assert "Opening balance: 100.00" in capsys.readouterr().out
