"""Domain models for the chart of accounts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Chart-of-accounts entry as read from the record store.

    Attributes:
        id: Account identifier referenced by postings.
        code: Sortable account code, compared as text.
        name: Display name.
        level: Depth in the chart of accounts (1 for roots).
        parent_id: Identifier of the parent account, if any.
    """

    id: str
    code: str
    name: str
    level: int = 1
    parent_id: str | None = None


@dataclass(frozen=True)
class Branch:
    """Organizational branch postings may be tagged with."""

    id: str
    code: str
    name: str


__all__ = ["Account", "Branch"]
