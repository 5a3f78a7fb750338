"""Tests for the account balance aggregator."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import Account, Posting, ReportRequest
from src.domain.services.aggregation import (
    BalanceAccumulator,
    aggregate_account_balances,
    compute_totals,
    derive_row,
    is_balanced,
)


REQUEST = ReportRequest(start=date(2023, 2, 1), end=date(2023, 2, 28))


def _posting(account_id: str, day: date, debit="0", credit="0", **kwargs) -> Posting:
    return Posting(
        account_id=account_id,
        debit=Decimal(debit),
        credit=Decimal(credit),
        entry_date=day,
        **kwargs,
    )


def test_opening_sums_stay_gross_and_closing_is_netted() -> None:
    """Opening debit and credit are both kept; closing collapses to one side."""
    account = Account(id="cash", code="1101", name="Cash", level=4)
    postings = [
        _posting("cash", date(2023, 1, 3), debit="500.00"),
        _posting("cash", date(2023, 1, 20), credit="200.00"),
        _posting("cash", date(2023, 2, 5), credit="450.00"),
    ]

    result = aggregate_account_balances([account], postings, REQUEST)

    [row] = result.rows
    assert row.opening_debit == Decimal("500.00")
    assert row.opening_credit == Decimal("200.00")
    assert row.period_debit == Decimal("0")
    assert row.period_credit == Decimal("450.00")
    assert row.closing_debit == Decimal("0")
    assert row.closing_credit == Decimal("150.00")
    assert row.closing_balance == Decimal("-150.00")


def test_postings_after_end_are_ignored() -> None:
    """Postings dated after the range must not touch any bucket."""
    account = Account(id="cash", code="1101", name="Cash")
    postings = [_posting("cash", date(2023, 3, 1), debit="20")]

    result = aggregate_account_balances([account], postings, REQUEST)

    assert result.rows == []
    assert result.balanced is True


def test_unknown_accounts_are_skipped_and_counted() -> None:
    """Postings on accounts outside the requested set are counted, not raised."""
    account = Account(id="cash", code="1101", name="Cash")
    logger = MagicMock()
    postings = [
        _posting("cash", date(2023, 2, 2), debit="10"),
        _posting("deleted", date(2023, 2, 2), credit="10", entry_number="JE-9"),
        _posting("deleted", date(2023, 1, 2), credit="5"),
    ]

    result = aggregate_account_balances(
        [account],
        postings,
        REQUEST,
        logger=logger,
    )

    assert [row.account_id for row in result.rows] == ["cash"]
    assert result.skipped_count == 2
    assert logger.debug.call_count == 2


def test_branch_filter_applies_before_skip_counting() -> None:
    """Postings from other branches are neither aggregated nor counted."""
    account = Account(id="cash", code="1101", name="Cash")
    request = ReportRequest(
        start=REQUEST.start,
        end=REQUEST.end,
        branch_id="riyadh",
    )
    postings = [
        _posting("cash", date(2023, 2, 2), debit="10", branch_id="riyadh"),
        _posting("cash", date(2023, 2, 2), debit="99", branch_id="jeddah"),
        _posting("gone", date(2023, 2, 2), debit="99", branch_id="jeddah"),
    ]

    result = aggregate_account_balances([account], postings, request)

    assert result.rows[0].period_debit == Decimal("10")
    assert result.skipped_count == 0


def test_rows_sort_by_code_as_text() -> None:
    """Codes compare lexicographically, not numerically."""
    accounts = [
        Account(id="a", code="9", name="Nine"),
        Account(id="b", code="10", name="Ten"),
        Account(id="c", code="2", name="Two"),
    ]
    postings = [
        _posting(account.id, date(2023, 2, 10), debit="1") for account in accounts
    ]

    result = aggregate_account_balances(accounts, postings, REQUEST)

    assert [row.account_code for row in result.rows] == ["10", "2", "9"]


def test_totals_and_balanced_flag_follow_rows() -> None:
    """A balanced set of entries yields equal debit and credit totals."""
    accounts = [
        Account(id="cash", code="1101", name="Cash"),
        Account(id="sales", code="4101", name="Sales"),
    ]
    postings = [
        _posting("cash", date(2023, 1, 10), debit="100"),
        _posting("sales", date(2023, 1, 10), credit="100"),
        _posting("cash", date(2023, 2, 10), debit="40"),
        _posting("sales", date(2023, 2, 10), credit="40"),
    ]

    result = aggregate_account_balances(accounts, postings, REQUEST)

    assert result.totals.opening_debit == Decimal("100")
    assert result.totals.opening_credit == Decimal("100")
    assert result.totals.closing_debit == Decimal("140")
    assert result.totals.closing_credit == Decimal("140")
    assert result.balanced is True


def test_unbalanced_result_is_reported_not_rejected() -> None:
    """One-sided postings produce balanced=False without raising."""
    account = Account(id="cash", code="1101", name="Cash")
    postings = [_posting("cash", date(2023, 2, 10), debit="12.34")]

    result = aggregate_account_balances([account], postings, REQUEST)

    assert result.balanced is False
    assert len(result.rows) == 1


def test_is_balanced_respects_tolerance() -> None:
    """Differences strictly below the tolerance are balanced."""
    totals = compute_totals([])
    assert is_balanced(totals) is True

    row = derive_row(
        Account(id="a", code="1", name="A"),
        BalanceAccumulator(period_debit=Decimal("0.004")),
    )
    totals = compute_totals([row])
    assert is_balanced(totals, Decimal("0.005")) is False
    assert is_balanced(totals, Decimal("0.01")) is True


def test_offsetting_opening_and_period_gaps_are_unbalanced() -> None:
    """An opening gap offset by an opposite period gap is still unbalanced."""
    accounts = [
        Account(id="a", code="1101", name="Cash"),
        Account(id="b", code="2101", name="Suppliers"),
    ]
    postings = [
        _posting("a", date(2023, 1, 5), debit="10"),
        _posting("b", date(2023, 2, 5), credit="10"),
    ]

    result = aggregate_account_balances(accounts, postings, REQUEST)

    assert result.totals.opening_debit == Decimal("10")
    assert result.totals.period_credit == Decimal("10")
    assert result.totals.closing_debit == result.totals.closing_credit
    assert result.totals.total_debit == result.totals.total_credit
    assert result.balanced is False


def test_accumulation_is_exact_over_many_small_amounts() -> None:
    """Decimal accumulation must not drift like binary floats do."""
    account = Account(id="cash", code="1101", name="Cash")
    postings = [
        _posting("cash", date(2023, 2, 10), debit="0.10") for _ in range(1000)
    ]

    result = aggregate_account_balances([account], postings, REQUEST)

    assert result.rows[0].period_debit == Decimal("100.00")
