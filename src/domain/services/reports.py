"""Report assembly: the public surface consumed by presentation layers."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import DEFAULT_BALANCE_TOLERANCE
from src.domain.models import (
    Account,
    AccountLedger,
    Branch,
    Posting,
    ReportRequest,
    TrialBalanceReport,
)
from src.domain.services.aggregation import (
    accumulate_postings,
    summarize_balances,
)
from src.domain.services.classification import matches_branch
from src.domain.services.hierarchy import (
    resolve_account_levels,
    rollup_balances,
)
from src.domain.services.ledger import (
    build_ledger_rows,
    compute_opening_balance,
    select_period_postings,
)


def build_trial_balance(
    accounts: Iterable[Account],
    postings: Iterable[Posting],
    request: ReportRequest,
    *,
    balance_tolerance: Decimal = DEFAULT_BALANCE_TOLERANCE,
    display_level: int | None = None,
    logger: Logger | None = None,
) -> TrialBalanceReport:
    """Build a trial balance over a date range.

    The request dates are not validated: a start after the end yields
    whatever the classification produces.

    Args:
        accounts: Active accounts to report on.
        postings: Posting snapshot; postings after ``request.end`` are
            ignored.
        request: Date range and optional branch filter.
        balance_tolerance: Maximum debit/credit gap still reported balanced.
        display_level: Report only accounts at this level, consolidating
            descendant balances onto them. None reports every account.
        logger: Optional logger for skipped postings.

    Returns:
        TrialBalanceReport: Sorted rows, totals, balanced flag, and the
        number of postings skipped for unknown accounts.
    """
    resolved = resolve_account_levels(accounts)
    accumulators, skipped = accumulate_postings(
        resolved,
        postings,
        request,
        logger=logger,
    )
    if display_level is None:
        balances = [(account, accumulators[account.id]) for account in resolved]
    else:
        balances = rollup_balances(resolved, accumulators, display_level)
    result = summarize_balances(
        balances,
        balance_tolerance=balance_tolerance,
        skipped_count=skipped,
    )
    return TrialBalanceReport(
        request=request,
        rows=result.rows,
        totals=result.totals,
        balanced=result.balanced,
        skipped_count=result.skipped_count,
    )


def build_ledger(
    account_id: str,
    accounts: Iterable[Account],
    postings: Iterable[Posting],
    request: ReportRequest,
    *,
    branches: Iterable[Branch] = (),
    logger: Logger | None = None,
) -> AccountLedger:
    """Build the running-balance ledger of one account.

    Args:
        account_id: Account to drill into.
        accounts: Known accounts; an unknown id yields an empty ledger.
        postings: Posting snapshot; other accounts are ignored.
        request: Date range and optional branch filter.
        branches: Branches used to resolve display names.
        logger: Optional logger for unknown accounts.

    Returns:
        AccountLedger: Netted opening balance and chronological rows.
    """
    postings = list(postings)
    account = next(
        (
            candidate
            for candidate in resolve_account_levels(accounts)
            if candidate.id == account_id
        ),
        None,
    )
    if account is None:
        skipped = sum(
            1
            for posting in postings
            if posting.account_id == account_id
            and matches_branch(posting, request.branch_id)
        )
        if logger is not None:
            logger.debug(
                f"Ledger requested for unknown account {account_id}; "
                f"{skipped} postings skipped"
            )
        return AccountLedger(
            request=request,
            account=None,
            skipped_count=skipped,
        )

    opening_balance = compute_opening_balance(account_id, postings, request)
    period_postings = select_period_postings(account_id, postings, request)
    branch_names = {branch.id: branch.name for branch in branches}
    return AccountLedger(
        request=request,
        account=account,
        opening_balance=opening_balance,
        rows=build_ledger_rows(period_postings, opening_balance, branch_names),
    )


__all__ = ["build_trial_balance", "build_ledger"]
