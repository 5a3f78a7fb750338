"""Tests for posting classification."""

from datetime import date, datetime
from decimal import Decimal

from src.domain.models import Posting, ReportRequest
from src.domain.services.classification import (
    BalanceBucket,
    classify_date,
    classify_posting,
    matches_branch,
)


START = date(2023, 2, 1)
END = date(2023, 2, 28)


def test_classify_date_partitions_range_boundaries() -> None:
    """Start and end are inclusive; earlier is opening, later is ignored."""
    assert classify_date(date(2023, 1, 31), START, END) is BalanceBucket.OPENING
    assert classify_date(START, START, END) is BalanceBucket.PERIOD
    assert classify_date(date(2023, 2, 14), START, END) is BalanceBucket.PERIOD
    assert classify_date(END, START, END) is BalanceBucket.PERIOD
    assert classify_date(date(2023, 3, 1), START, END) is BalanceBucket.IGNORED


def test_classify_date_normalizes_strings_and_datetimes() -> None:
    """ISO strings and datetimes should be compared as calendar dates."""
    assert classify_date("2023-01-15", START, END) is BalanceBucket.OPENING
    assert (
        classify_date(datetime(2023, 2, 28, 23, 59), START, END)
        is BalanceBucket.PERIOD
    )


def test_classify_date_treats_malformed_dates_as_ignored() -> None:
    """Missing or unparsable dates should never contribute."""
    assert classify_date(None, START, END) is BalanceBucket.IGNORED
    assert classify_date("not-a-date", START, END) is BalanceBucket.IGNORED
    assert classify_date(20230210, START, END) is BalanceBucket.IGNORED


def test_classify_posting_uses_request_range() -> None:
    """classify_posting should delegate to the request dates."""
    posting = Posting(
        account_id="a",
        debit=Decimal("1"),
        credit=Decimal("0"),
        entry_date=date(2023, 2, 10),
    )

    bucket = classify_posting(posting, ReportRequest(start=START, end=END))

    assert bucket is BalanceBucket.PERIOD


def test_matches_branch_filters_only_when_requested() -> None:
    """A None filter accepts every posting, including untagged ones."""
    tagged = Posting(
        account_id="a",
        debit=Decimal("1"),
        credit=Decimal("0"),
        entry_date=START,
        branch_id="riyadh",
    )
    untagged = Posting(
        account_id="a",
        debit=Decimal("1"),
        credit=Decimal("0"),
        entry_date=START,
    )

    assert matches_branch(tagged, None) is True
    assert matches_branch(untagged, None) is True
    assert matches_branch(tagged, "riyadh") is True
    assert matches_branch(tagged, "jeddah") is False
    assert matches_branch(untagged, "riyadh") is False
