"""Domain package for ledger aggregation rules and report models."""

from .constants import (
    DEFAULT_ACCOUNT_LEVEL,
    DEFAULT_BALANCE_TOLERANCE,
    INDENT_WIDTH,
    NO_BRANCH_LABEL,
)
from .models import (
    Account,
    AccountLedger,
    Branch,
    LedgerRow,
    Posting,
    PostingQuery,
    ReportRequest,
    TrialBalanceReport,
    TrialBalanceRow,
    TrialBalanceTotals,
)
from .services import build_ledger, build_trial_balance, resolve_period

__all__ = [
    "DEFAULT_ACCOUNT_LEVEL",
    "DEFAULT_BALANCE_TOLERANCE",
    "INDENT_WIDTH",
    "NO_BRANCH_LABEL",
    "Account",
    "AccountLedger",
    "Branch",
    "LedgerRow",
    "Posting",
    "PostingQuery",
    "ReportRequest",
    "TrialBalanceReport",
    "TrialBalanceRow",
    "TrialBalanceTotals",
    "build_ledger",
    "build_trial_balance",
    "resolve_period",
]
