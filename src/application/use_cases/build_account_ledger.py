"""Use case to build a running-balance ledger for one account."""

from src.application.ports.posting_source import PostingSourcePort
from src.application.use_cases.posting_fetch import fetch_complete_postings
from src.domain.models import AccountLedger, PostingQuery, ReportRequest
from src.domain.services.reports import build_ledger
from src.infrastructure.logging.logger import get_app_logger


class BuildAccountLedgerUseCase:
    """Replay an account's postings into a running-balance ledger."""

    def __init__(
        self,
        posting_source: PostingSourcePort,
        logger=None,
        verify_fetch_count: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            posting_source: Port providing accounts, branches, and postings.
            logger: Optional logger compatible with logging.Logger-like API.
            verify_fetch_count: Reject posting fetches that look truncated.
        """
        self._posting_source = posting_source
        self._logger = logger or get_app_logger()
        self._verify_fetch_count = verify_fetch_count

    def execute(self, account_id: str, request: ReportRequest) -> AccountLedger:
        """Return the ledger of an account for the requested period.

        Args:
            account_id: Account to drill into.
            request: Date range and optional branch filter.

        Returns:
            AccountLedger: Opening balance and chronological rows; empty when
            the account is unknown.
        """
        accounts = self._posting_source.fetch_accounts()
        if not any(account.id == account_id for account in accounts):
            self._logger.warning(f"Ledger requested for unknown account {account_id}")
            return build_ledger(account_id, accounts, [], request)

        branches = self._posting_source.fetch_branches()
        postings = fetch_complete_postings(
            self._posting_source,
            PostingQuery(
                account_ids=(account_id,),
                end_date=max(request.start, request.end),
                branch_id=request.branch_id,
            ),
            logger=self._logger,
            verify_count=self._verify_fetch_count,
        )
        ledger = build_ledger(
            account_id,
            accounts,
            postings,
            request,
            branches=branches,
            logger=self._logger,
        )
        self._logger.info(
            f"Ledger built for account {ledger.account.code}: "
            f"opening={ledger.opening_balance}, rows={len(ledger.rows)}, "
            f"closing={ledger.closing_balance}"
        )
        return ledger

    def execute_for_code(
        self,
        account_code: str,
        request: ReportRequest,
    ) -> AccountLedger:
        """Return the ledger of the account with the given code.

        Args:
            account_code: Code of the account to drill into.
            request: Date range and optional branch filter.

        Returns:
            AccountLedger: Ledger of the account; empty when no account has
            that code.
        """
        accounts = self._posting_source.fetch_accounts()
        match = next(
            (account for account in accounts if account.code == account_code.strip()),
            None,
        )
        if match is None:
            self._logger.warning(f"No active account with code {account_code}")
            return build_ledger("", [], [], request)
        return self.execute(match.id, request)


__all__ = ["BuildAccountLedgerUseCase", "AccountLedger"]
