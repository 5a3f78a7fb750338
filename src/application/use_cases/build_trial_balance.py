"""Use case to build a trial balance from the record store."""

from decimal import Decimal

from src.application.ports.posting_source import PostingSourcePort
from src.application.use_cases.posting_fetch import fetch_complete_postings
from src.domain.constants import DEFAULT_BALANCE_TOLERANCE
from src.domain.models import PostingQuery, ReportRequest, TrialBalanceReport
from src.domain.services.reports import build_trial_balance
from src.infrastructure.logging.logger import get_app_logger


class BuildTrialBalanceUseCase:
    """Compute opening, period, and closing balances per account."""

    def __init__(
        self,
        posting_source: PostingSourcePort,
        logger=None,
        balance_tolerance: Decimal = DEFAULT_BALANCE_TOLERANCE,
        verify_fetch_count: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            posting_source: Port providing accounts and postings.
            logger: Optional logger compatible with logging.Logger-like API.
            balance_tolerance: Maximum debit/credit gap still balanced.
            verify_fetch_count: Reject posting fetches that look truncated.
        """
        self._posting_source = posting_source
        self._logger = logger or get_app_logger()
        self._balance_tolerance = balance_tolerance
        self._verify_fetch_count = verify_fetch_count

    def execute(
        self,
        request: ReportRequest,
        display_level: int | None = None,
    ) -> TrialBalanceReport:
        """Return the trial balance for the requested period.

        Postings of every account are read so that postings referencing
        inactive or deleted accounts show up in ``skipped_count``. Postings
        are read up to the later of the two request dates, so an inverted
        range sees the same data as the pure report builder.

        Args:
            request: Date range and optional branch filter.
            display_level: Optional account level to consolidate onto.

        Returns:
            TrialBalanceReport: Rows, totals, and diagnostics.
        """
        accounts = self._posting_source.fetch_accounts()
        postings = fetch_complete_postings(
            self._posting_source,
            PostingQuery(
                end_date=max(request.start, request.end),
                branch_id=request.branch_id,
            ),
            logger=self._logger,
            verify_count=self._verify_fetch_count,
        )
        report = build_trial_balance(
            accounts,
            postings,
            request,
            balance_tolerance=self._balance_tolerance,
            display_level=display_level,
            logger=self._logger,
        )
        self._logger.info(
            f"Trial balance computed for {request.start}..{request.end}: "
            f"rows={len(report.rows)}, debit={report.totals.total_debit}, "
            f"credit={report.totals.total_credit}"
        )
        if report.skipped_count:
            self._logger.warning(
                f"{report.skipped_count} postings reference accounts outside "
                "the active chart and were skipped"
            )
        if not report.balanced:
            self._logger.warning(
                f"Trial balance is not balanced: debit={report.totals.total_debit}, "
                f"credit={report.totals.total_credit}"
            )
        return report


__all__ = ["BuildTrialBalanceUseCase", "TrialBalanceReport"]
