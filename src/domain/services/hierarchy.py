"""Chart-of-accounts helpers used by report assembly."""

from collections.abc import Iterable
from dataclasses import replace

from src.domain.constants import DEFAULT_ACCOUNT_LEVEL
from src.domain.models import Account
from src.domain.services.aggregation import BalanceAccumulator


def _has_valid_level(account: Account) -> bool:
    return isinstance(account.level, int) and account.level >= 1


def derive_level(account: Account, accounts_by_id: dict[str, Account]) -> int:
    """Return the depth of an account by walking its parent chain.

    Roots and accounts whose parent is unknown sit at level 1. A cycle in
    the chain stops the walk at the first repeated account.

    Args:
        account: Account to measure.
        accounts_by_id: Every known account keyed by id.

    Returns:
        int: Depth of the account, starting at 1.
    """
    level = DEFAULT_ACCOUNT_LEVEL
    seen = {account.id}
    parent_id = account.parent_id
    while parent_id is not None and parent_id in accounts_by_id:
        if parent_id in seen:
            break
        seen.add(parent_id)
        level += 1
        parent_id = accounts_by_id[parent_id].parent_id
    return level


def resolve_account_levels(accounts: Iterable[Account]) -> list[Account]:
    """Fill in missing account levels from the parent chain.

    Args:
        accounts: Accounts as read from the record store.

    Returns:
        list[Account]: Accounts with a level of at least 1, in input order.
    """
    accounts = list(accounts)
    accounts_by_id = {account.id: account for account in accounts}
    resolved = []
    for account in accounts:
        if _has_valid_level(account):
            resolved.append(account)
        else:
            resolved.append(
                replace(account, level=derive_level(account, accounts_by_id))
            )
    return resolved


def build_children_map(accounts: Iterable[Account]) -> dict[str, list[str]]:
    """Map each parent id to the ids of its direct children."""
    children: dict[str, list[str]] = {}
    for account in accounts:
        if account.parent_id is None:
            continue
        children.setdefault(account.parent_id, []).append(account.id)
    return children


def collect_descendants(
    account_id: str,
    children: dict[str, list[str]],
) -> list[str]:
    """Return every descendant id of an account, depth first."""
    descendants: list[str] = []
    seen = {account_id}
    stack = list(reversed(children.get(account_id, [])))
    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)
        descendants.append(current)
        stack.extend(reversed(children.get(current, [])))
    return descendants


def rollup_balances(
    accounts: Iterable[Account],
    accumulators: dict[str, BalanceAccumulator],
    display_level: int,
) -> list[tuple[Account, BalanceAccumulator]]:
    """Consolidate balances onto the accounts of one display level.

    An account with descendants reports the sums of all its descendants and
    not its own postings; a leaf account reports its own sums.

    Args:
        accounts: Accounts with resolved levels.
        accumulators: Per-account sums keyed by account id.
        display_level: Level of the accounts to report.

    Returns:
        list[tuple[Account, BalanceAccumulator]]: One pair per account at
        ``display_level``.
    """
    accounts = list(accounts)
    children = build_children_map(accounts)
    consolidated = []
    for account in accounts:
        if account.level != display_level:
            continue
        descendants = collect_descendants(account.id, children)
        sources = descendants or [account.id]
        total = BalanceAccumulator()
        for source_id in sources:
            source = accumulators.get(source_id)
            if source is not None:
                total.merge(source)
        consolidated.append((account, total))
    return consolidated


__all__ = [
    "derive_level",
    "resolve_account_levels",
    "build_children_map",
    "collect_descendants",
    "rollup_balances",
]
