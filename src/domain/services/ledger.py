"""Running-balance ledger construction for a single account."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from src.domain.constants import NO_BRANCH_LABEL
from src.domain.models import LedgerRow, Posting, ReportRequest
from src.domain.services.classification import (
    BalanceBucket,
    classify_posting,
    matches_branch,
)
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal


def _account_postings(
    account_id: str,
    postings: Iterable[Posting],
    request: ReportRequest,
) -> Iterable[Posting]:
    for posting in postings:
        if posting.account_id != account_id:
            continue
        if not matches_branch(posting, request.branch_id):
            continue
        yield posting


def compute_opening_balance(
    account_id: str,
    postings: Iterable[Posting],
    request: ReportRequest,
) -> Decimal:
    """Return the netted balance of an account before the period start.

    Args:
        account_id: Ledger account.
        postings: Candidate postings; other accounts are ignored.
        request: Date range and branch filter.

    Returns:
        Decimal: Sum of debit minus credit over postings dated before start.
    """
    return sum(
        (
            posting.net_amount
            for posting in _account_postings(account_id, postings, request)
            if classify_posting(posting, request) is BalanceBucket.OPENING
        ),
        Decimal("0"),
    )


def select_period_postings(
    account_id: str,
    postings: Iterable[Posting],
    request: ReportRequest,
) -> list[Posting]:
    """Return the account's in-period postings in chronological order.

    Postings sharing an entry date keep their source sequence; the sort is
    stable, so equal sequences keep their input order.
    """
    in_period = [
        posting
        for posting in _account_postings(account_id, postings, request)
        if classify_posting(posting, request) is BalanceBucket.PERIOD
    ]
    return sorted(
        in_period,
        key=lambda posting: (coerce_date(posting.entry_date), posting.sequence),
    )


def build_ledger_rows(
    postings: Iterable[Posting],
    opening_balance: Decimal,
    branch_names: Mapping[str, str] | None = None,
) -> list[LedgerRow]:
    """Replay ordered postings into ledger rows with running balances.

    Args:
        postings: Postings already sorted chronologically.
        opening_balance: Balance seeding the running total.
        branch_names: Branch display names keyed by branch id.

    Returns:
        list[LedgerRow]: One row per posting, carrying the balance after it.
    """
    branch_names = branch_names or {}
    running_balance = opening_balance
    rows = []
    for posting in postings:
        debit = coerce_decimal(posting.debit)
        credit = coerce_decimal(posting.credit)
        running_balance += posting.net_amount
        rows.append(
            LedgerRow(
                entry_date=coerce_date(posting.entry_date),
                entry_number=posting.entry_number,
                description=posting.description or posting.entry_description or "",
                branch_name=branch_names.get(posting.branch_id, NO_BRANCH_LABEL),
                debit=debit,
                credit=credit,
                running_balance=running_balance,
            )
        )
    return rows


__all__ = [
    "compute_opening_balance",
    "select_period_postings",
    "build_ledger_rows",
]
