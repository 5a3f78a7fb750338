"""CLI adapter printing the ledger of one account."""

import os

from src.adapters.report_params import read_report_request
from src.application.ports.posting_source import PostingSourceError
from src.domain.models import AccountLedger
from src.infrastructure.container import build_account_ledger_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.decimal_utils import format_amount


def render_ledger(ledger: AccountLedger) -> list[str]:
    """Render an account ledger as printable lines.

    Args:
        ledger: Ledger to render.

    Returns:
        list[str]: Header, opening balance, one line per posting.
    """
    request = ledger.request
    if ledger.account is None:
        return ["Account not found"]
    lines = [
        f"Ledger {ledger.account.code} - {ledger.account.name} "
        f"{request.start} -> {request.end} "
        f"(branch={request.branch_id or 'all'})",
        f"Opening balance: {format_amount(ledger.opening_balance)}",
    ]
    if not ledger.rows:
        lines.append("No postings for this account")
        return lines
    lines.append("date | entry | description | branch | debit | credit | balance")
    for row in ledger.rows:
        lines.append(
            f"{row.entry_date} | {row.entry_number} | {row.description} | "
            f"{row.branch_name} | {format_amount(row.debit, blank_zero=True)} | "
            f"{format_amount(row.credit, blank_zero=True)} | "
            f"{format_amount(row.running_balance)}"
        )
    lines.append(f"Closing balance: {format_amount(ledger.closing_balance)}")
    return lines


def main() -> None:
    """Compute and print the ledger configured by the environment."""
    logger = get_app_logger()
    account_code = os.getenv("LEDGER_ACCOUNT_CODE")
    if not account_code:
        logger.warning("LEDGER_ACCOUNT_CODE is required.")
        return
    request = read_report_request(logger)
    if request is None:
        return

    use_case = build_account_ledger_use_case()
    try:
        ledger = use_case.execute_for_code(account_code, request)
    except PostingSourceError as exc:
        logger.error(str(exc))
        return

    get_usage_logger().info(
        f"account_ledger account={account_code} start={request.start} "
        f"end={request.end} branch={request.branch_id or 'all'}"
    )
    for line in render_ledger(ledger):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
