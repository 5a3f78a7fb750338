"""Folding of postings into per-account trial balance figures."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from logging import Logger

from src.domain.constants import DEFAULT_BALANCE_TOLERANCE
from src.domain.models import (
    Account,
    Posting,
    ReportRequest,
    TrialBalanceRow,
    TrialBalanceTotals,
)
from src.domain.services.classification import (
    BalanceBucket,
    classify_posting,
    matches_branch,
)
from src.utils.decimal_utils import coerce_decimal


ZERO = Decimal("0")


@dataclass
class BalanceAccumulator:
    """Gross opening and period sums for one account."""

    opening_debit: Decimal = ZERO
    opening_credit: Decimal = ZERO
    period_debit: Decimal = ZERO
    period_credit: Decimal = ZERO

    def add(self, bucket: BalanceBucket, posting: Posting) -> None:
        debit = coerce_decimal(posting.debit)
        credit = coerce_decimal(posting.credit)
        if bucket is BalanceBucket.OPENING:
            self.opening_debit += debit
            self.opening_credit += credit
        elif bucket is BalanceBucket.PERIOD:
            self.period_debit += debit
            self.period_credit += credit

    def merge(self, other: "BalanceAccumulator") -> None:
        self.opening_debit += other.opening_debit
        self.opening_credit += other.opening_credit
        self.period_debit += other.period_debit
        self.period_credit += other.period_credit


@dataclass(frozen=True)
class AggregationResult:
    """Rows, totals, and diagnostics of an aggregation run."""

    rows: list[TrialBalanceRow]
    totals: TrialBalanceTotals
    balanced: bool
    skipped_count: int = 0


def accumulate_postings(
    accounts: Iterable[Account],
    postings: Iterable[Posting],
    request: ReportRequest,
    logger: Logger | None = None,
) -> tuple[dict[str, BalanceAccumulator], int]:
    """Sum postings into opening and period buckets per account.

    Every requested account starts at zero. Postings outside the branch
    filter are ignored; postings on accounts outside the requested set are
    skipped and counted.

    Args:
        accounts: Accounts to report on.
        postings: Postings to fold.
        request: Date range and branch filter.
        logger: Optional logger for skipped postings.

    Returns:
        tuple[dict[str, BalanceAccumulator], int]: Accumulators keyed by
        account id, and the number of skipped postings.
    """
    accumulators = {account.id: BalanceAccumulator() for account in accounts}
    skipped = 0
    for posting in postings:
        if not matches_branch(posting, request.branch_id):
            continue
        accumulator = accumulators.get(posting.account_id)
        if accumulator is None:
            skipped += 1
            if logger is not None:
                logger.debug(
                    f"Skipping posting {posting.entry_number} on unknown "
                    f"account {posting.account_id}"
                )
            continue
        accumulator.add(classify_posting(posting, request), posting)
    return accumulators, skipped


def derive_row(account: Account, accumulator: BalanceAccumulator) -> TrialBalanceRow:
    """Build a trial balance row with netted closing figures."""
    opening_balance = accumulator.opening_debit - accumulator.opening_credit
    closing_balance = (
        opening_balance + accumulator.period_debit - accumulator.period_credit
    )
    return TrialBalanceRow(
        account_id=account.id,
        account_code=account.code,
        account_name=account.name,
        level=account.level,
        opening_debit=accumulator.opening_debit,
        opening_credit=accumulator.opening_credit,
        period_debit=accumulator.period_debit,
        period_credit=accumulator.period_credit,
        closing_debit=closing_balance if closing_balance > 0 else ZERO,
        closing_credit=-closing_balance if closing_balance < 0 else ZERO,
    )


def is_dormant(row: TrialBalanceRow) -> bool:
    """Return True when every figure of the row is zero."""
    return not any(
        (
            row.opening_debit,
            row.opening_credit,
            row.period_debit,
            row.period_credit,
            row.closing_debit,
            row.closing_credit,
        )
    )


def compute_totals(rows: Iterable[TrialBalanceRow]) -> TrialBalanceTotals:
    """Return column-wise sums over trial balance rows."""
    opening_debit = opening_credit = ZERO
    period_debit = period_credit = ZERO
    closing_debit = closing_credit = ZERO
    for row in rows:
        opening_debit += row.opening_debit
        opening_credit += row.opening_credit
        period_debit += row.period_debit
        period_credit += row.period_credit
        closing_debit += row.closing_debit
        closing_credit += row.closing_credit
    return TrialBalanceTotals(
        opening_debit=opening_debit,
        opening_credit=opening_credit,
        period_debit=period_debit,
        period_credit=period_credit,
        closing_debit=closing_debit,
        closing_credit=closing_credit,
    )


def is_balanced(
    totals: TrialBalanceTotals,
    tolerance: Decimal = DEFAULT_BALANCE_TOLERANCE,
) -> bool:
    """Return True when debit and credit sides agree within tolerance.

    The opening, period, and closing column pairs must each agree, and so
    must the grand totals.

    Args:
        totals: Column sums of a trial balance.
        tolerance: Largest gap still reported as balanced.

    Returns:
        bool: True when every pair differs by less than ``tolerance``.
    """
    gaps = (
        totals.opening_debit - totals.opening_credit,
        totals.period_debit - totals.period_credit,
        totals.closing_debit - totals.closing_credit,
        totals.total_debit - totals.total_credit,
    )
    return all(abs(gap) < tolerance for gap in gaps)


def summarize_balances(
    balances: Iterable[tuple[Account, BalanceAccumulator]],
    balance_tolerance: Decimal = DEFAULT_BALANCE_TOLERANCE,
    skipped_count: int = 0,
) -> AggregationResult:
    """Turn accumulated balances into sorted rows with totals.

    Args:
        balances: Pairs of account and its accumulated sums.
        balance_tolerance: Maximum debit/credit gap still reported balanced.
        skipped_count: Skipped postings to carry into the result.

    Returns:
        AggregationResult: Non-dormant rows sorted by code, with totals.
    """
    rows = [derive_row(account, accumulator) for account, accumulator in balances]
    rows = [row for row in rows if not is_dormant(row)]
    rows = sorted(rows, key=lambda row: (row.account_code, row.account_id))
    totals = compute_totals(rows)
    return AggregationResult(
        rows=rows,
        totals=totals,
        balanced=is_balanced(totals, balance_tolerance),
        skipped_count=skipped_count,
    )


def aggregate_account_balances(
    accounts: Iterable[Account],
    postings: Iterable[Posting],
    request: ReportRequest,
    *,
    balance_tolerance: Decimal = DEFAULT_BALANCE_TOLERANCE,
    logger: Logger | None = None,
) -> AggregationResult:
    """Aggregate postings into trial balance rows for every account.

    Args:
        accounts: Accounts to report on.
        postings: Postings to fold.
        request: Date range and branch filter.
        balance_tolerance: Maximum debit/credit gap still reported balanced.
        logger: Optional logger for skipped postings.

    Returns:
        AggregationResult: Rows, totals, balanced flag, and skipped count.
    """
    accounts = list(accounts)
    accumulators, skipped = accumulate_postings(
        accounts,
        postings,
        request,
        logger=logger,
    )
    return summarize_balances(
        ((account, accumulators[account.id]) for account in accounts),
        balance_tolerance=balance_tolerance,
        skipped_count=skipped,
    )


__all__ = [
    "BalanceAccumulator",
    "AggregationResult",
    "accumulate_postings",
    "derive_row",
    "is_dormant",
    "compute_totals",
    "is_balanced",
    "summarize_balances",
    "aggregate_account_balances",
]
