"""Classification of postings into trial balance buckets."""

from datetime import date
from enum import Enum

from src.domain.models import Posting, ReportRequest
from src.utils.date_utils import coerce_date


class BalanceBucket(str, Enum):
    """Bucket a posting contributes to for a given date range."""

    OPENING = "opening"
    PERIOD = "period"
    IGNORED = "ignored"


def classify_date(entry_date, start: date, end: date) -> BalanceBucket:
    """Classify an entry date against an inclusive date range.

    Args:
        entry_date: Date of the journal entry; strings and datetimes are
            normalized first.
        start: First day of the range.
        end: Last day of the range.

    Returns:
        BalanceBucket: OPENING before ``start``, PERIOD within the range,
        IGNORED after ``end`` or when the date is malformed.
    """
    resolved = coerce_date(entry_date)
    if resolved is None:
        return BalanceBucket.IGNORED
    if resolved < start:
        return BalanceBucket.OPENING
    if resolved > end:
        return BalanceBucket.IGNORED
    return BalanceBucket.PERIOD


def classify_posting(posting: Posting, request: ReportRequest) -> BalanceBucket:
    """Classify a posting for a report request."""
    return classify_date(posting.entry_date, request.start, request.end)


def matches_branch(posting: Posting, branch_id: str | None) -> bool:
    """Return True when the posting passes the branch filter.

    Args:
        posting: Posting to check.
        branch_id: Requested branch, or None for every branch.

    Returns:
        bool: True when no filter is set or the branch matches.
    """
    if branch_id is None:
        return True
    return posting.branch_id == branch_id


__all__ = ["BalanceBucket", "classify_date", "classify_posting", "matches_branch"]
