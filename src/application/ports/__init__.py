"""Application ports package."""

from .database import DatabaseEnginePort
from .posting_source import (
    IncompletePostingFetchError,
    PostingSourceError,
    PostingSourcePort,
)

__all__ = [
    "DatabaseEnginePort",
    "PostingSourcePort",
    "PostingSourceError",
    "IncompletePostingFetchError",
]
