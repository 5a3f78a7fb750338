"""Application port for reading accounts and journal postings."""

from typing import Protocol

from src.domain.models import Account, Branch, Posting, PostingQuery


class PostingSourceError(RuntimeError):
    """Raised when the record store cannot serve a read."""


class IncompletePostingFetchError(PostingSourceError):
    """Raised when fewer or more postings were fetched than expected."""

    def __init__(self, expected: int, fetched: int) -> None:
        super().__init__(
            f"Posting fetch incomplete: expected {expected}, fetched {fetched}"
        )
        self.expected = expected
        self.fetched = fetched


class PostingSourcePort(Protocol):
    """Port exposing read access to the chart of accounts and postings."""

    def fetch_accounts(self) -> list[Account]:
        """Return the active accounts ordered by code."""

    def fetch_branches(self) -> list[Branch]:
        """Return the active branches ordered by code."""

    def fetch_postings(self, query: PostingQuery) -> list[Posting]:
        """Return postings matching the query in entry date order."""

    def count_postings(self, query: PostingQuery) -> int:
        """Return how many postings match the query."""


__all__ = [
    "PostingSourcePort",
    "PostingSourceError",
    "IncompletePostingFetchError",
]
