"""Domain services package."""

from .aggregation import (
    AggregationResult,
    BalanceAccumulator,
    aggregate_account_balances,
)
from .classification import BalanceBucket, classify_posting, matches_branch
from .hierarchy import resolve_account_levels, rollup_balances
from .ledger import (
    build_ledger_rows,
    compute_opening_balance,
    select_period_postings,
)
from .periods import PERIOD_PRESETS, resolve_period
from .reports import build_ledger, build_trial_balance

__all__ = [
    "AggregationResult",
    "BalanceAccumulator",
    "aggregate_account_balances",
    "BalanceBucket",
    "classify_posting",
    "matches_branch",
    "resolve_account_levels",
    "rollup_balances",
    "build_ledger_rows",
    "compute_opening_balance",
    "select_period_postings",
    "PERIOD_PRESETS",
    "resolve_period",
    "build_ledger",
    "build_trial_balance",
]
