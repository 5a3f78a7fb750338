"""Application use cases package."""

from .build_account_ledger import AccountLedger, BuildAccountLedgerUseCase
from .build_trial_balance import BuildTrialBalanceUseCase, TrialBalanceReport
from .posting_fetch import fetch_complete_postings

__all__ = [
    "BuildTrialBalanceUseCase",
    "TrialBalanceReport",
    "BuildAccountLedgerUseCase",
    "AccountLedger",
    "fetch_complete_postings",
]
