"""Guarded posting reads shared by report use cases."""

from src.application.ports.posting_source import (
    IncompletePostingFetchError,
    PostingSourcePort,
)
from src.domain.models import Posting, PostingQuery


def fetch_complete_postings(
    posting_source: PostingSourcePort,
    query: PostingQuery,
    logger,
    verify_count: bool = True,
) -> list[Posting]:
    """Fetch postings and check that the whole matching set was returned.

    Aggregating over a truncated set silently under-reports, so the fetched
    length is compared to the count reported by the source.

    Args:
        posting_source: Port providing postings.
        query: Filter sent to the source.
        logger: Logger compatible with logging.Logger-like API.
        verify_count: Compare the fetched length to ``count_postings``.

    Returns:
        list[Posting]: Every posting matching the query.

    Raises:
        IncompletePostingFetchError: If the counts differ.
    """
    expected = posting_source.count_postings(query) if verify_count else None
    postings = posting_source.fetch_postings(query)
    if expected is not None and expected != len(postings):
        logger.error(
            f"Posting fetch returned {len(postings)} rows, expected {expected}"
        )
        raise IncompletePostingFetchError(expected, len(postings))
    logger.info(
        f"Fetched {len(postings)} postings "
        f"(end={query.end_date}, branch={query.branch_id or 'all'})"
    )
    return postings


__all__ = ["fetch_complete_postings"]
