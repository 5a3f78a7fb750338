"""Domain models for trial balance and ledger reports."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.constants import INDENT_WIDTH
from src.domain.models.accounts import Account


ZERO = Decimal("0")


@dataclass(frozen=True)
class ReportRequest:
    """Parameters of a single report request.

    Attributes:
        start: First day of the reporting period (inclusive).
        end: Last day of the reporting period (inclusive).
        branch_id: Optional branch filter; None reports every branch.
    """

    start: date
    end: date
    branch_id: str | None = None


@dataclass(frozen=True)
class TrialBalanceRow:
    """Opening, period, and closing figures for one account.

    Opening figures are gross debit/credit sums, closing figures are netted
    into a single side.
    """

    account_id: str
    account_code: str
    account_name: str
    level: int
    opening_debit: Decimal
    opening_credit: Decimal
    period_debit: Decimal
    period_credit: Decimal
    closing_debit: Decimal
    closing_credit: Decimal

    @property
    def opening_balance(self) -> Decimal:
        """Return opening debit minus opening credit."""
        return self.opening_debit - self.opening_credit

    @property
    def closing_balance(self) -> Decimal:
        """Return closing debit minus closing credit."""
        return self.closing_debit - self.closing_credit

    @property
    def indent(self) -> int:
        """Return the indentation width for the account level."""
        return self.level * INDENT_WIDTH


@dataclass(frozen=True)
class TrialBalanceTotals:
    """Column-wise sums over the emitted trial balance rows."""

    opening_debit: Decimal = ZERO
    opening_credit: Decimal = ZERO
    period_debit: Decimal = ZERO
    period_credit: Decimal = ZERO
    closing_debit: Decimal = ZERO
    closing_credit: Decimal = ZERO

    @property
    def total_debit(self) -> Decimal:
        """Return the sum of every debit column."""
        return self.opening_debit + self.period_debit + self.closing_debit

    @property
    def total_credit(self) -> Decimal:
        """Return the sum of every credit column."""
        return self.opening_credit + self.period_credit + self.closing_credit


@dataclass(frozen=True)
class TrialBalanceReport:
    """Trial balance rows with totals and diagnostics.

    Attributes:
        request: Request the report was built for.
        rows: Non-dormant account rows sorted by account code.
        totals: Column sums over ``rows``.
        balanced: True when total debits match total credits.
        skipped_count: Postings dropped because their account is unknown.
    """

    request: ReportRequest
    rows: list[TrialBalanceRow]
    totals: TrialBalanceTotals
    balanced: bool
    skipped_count: int = 0


@dataclass(frozen=True)
class LedgerRow:
    """A posting in an account ledger with the balance after it."""

    entry_date: date
    entry_number: str
    description: str
    branch_name: str
    debit: Decimal
    credit: Decimal
    running_balance: Decimal


@dataclass(frozen=True)
class AccountLedger:
    """Chronological postings of one account over a period.

    Attributes:
        request: Request the ledger was built for.
        account: Ledger account, or None when the account is unknown.
        opening_balance: Netted balance of postings before the period.
        rows: In-period postings with running balances.
        skipped_count: Postings dropped because their account is unknown.
    """

    request: ReportRequest
    account: Account | None
    opening_balance: Decimal = ZERO
    rows: list[LedgerRow] = field(default_factory=list)
    skipped_count: int = 0

    @property
    def closing_balance(self) -> Decimal:
        """Return the balance after the last row."""
        if not self.rows:
            return self.opening_balance
        return self.rows[-1].running_balance


__all__ = [
    "ReportRequest",
    "TrialBalanceRow",
    "TrialBalanceTotals",
    "TrialBalanceReport",
    "LedgerRow",
    "AccountLedger",
]
