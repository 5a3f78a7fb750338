"""Domain models package."""

from .accounts import Account, Branch
from .postings import Posting, PostingQuery
from .reports import (
    AccountLedger,
    LedgerRow,
    ReportRequest,
    TrialBalanceReport,
    TrialBalanceRow,
    TrialBalanceTotals,
)

__all__ = [
    "Account",
    "Branch",
    "Posting",
    "PostingQuery",
    "ReportRequest",
    "TrialBalanceRow",
    "TrialBalanceTotals",
    "TrialBalanceReport",
    "LedgerRow",
    "AccountLedger",
]
