"""Domain models for journal postings."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class Posting:
    """A single debit/credit line of a journal entry.

    Attributes:
        account_id: Account the line is posted to.
        debit: Non-negative debit amount.
        credit: Non-negative credit amount.
        entry_date: Date of the parent journal entry.
        entry_number: Number of the parent journal entry.
        description: Line description.
        branch_id: Optional branch the line is tagged with.
        entry_description: Parent entry description, used as a fallback.
        sequence: Source insertion order, used to break date ties.
    """

    account_id: str
    debit: Decimal
    credit: Decimal
    entry_date: date | None
    entry_number: str = ""
    description: str | None = None
    branch_id: str | None = None
    entry_description: str | None = None
    sequence: int = 0

    @property
    def net_amount(self) -> Decimal:
        """Return the net contribution of the line (debit minus credit)."""
        return coerce_decimal(self.debit) - coerce_decimal(self.credit)


@dataclass(frozen=True)
class PostingQuery:
    """Filter sent to the posting source.

    Attributes:
        account_ids: Accounts to read, or None for every account.
        end_date: Inclusive upper bound on entry dates, or None.
        branch_id: Branch equality filter, or None for all branches.
    """

    account_ids: tuple[str, ...] | None = None
    end_date: date | None = None
    branch_id: str | None = None


__all__ = ["Posting", "PostingQuery"]
