"""Domain constants for ledger reports."""

from decimal import Decimal

DEFAULT_BALANCE_TOLERANCE = Decimal("0.005")

DEFAULT_ACCOUNT_LEVEL = 1

INDENT_WIDTH = 20

NO_BRANCH_LABEL = "-"


__all__ = [
    "DEFAULT_BALANCE_TOLERANCE",
    "DEFAULT_ACCOUNT_LEVEL",
    "INDENT_WIDTH",
    "NO_BRANCH_LABEL",
]
