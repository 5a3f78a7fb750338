"""CLI adapter printing a trial balance for a period."""

import os

from src.adapters.report_params import read_report_request
from src.application.ports.posting_source import PostingSourceError
from src.domain.models import TrialBalanceReport
from src.infrastructure.container import build_trial_balance_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.decimal_utils import format_amount


_COLUMNS = (
    "opening_debit",
    "opening_credit",
    "period_debit",
    "period_credit",
    "closing_debit",
    "closing_credit",
)
_INDENT_UNITS_PER_SPACE = 10


def _parse_level(value: str | None, logger) -> int | None:
    if not value or value.strip().lower() == "all":
        return None
    try:
        level = int(value)
    except ValueError:
        logger.warning(f"Invalid REPORT_DISPLAY_LEVEL '{value}', showing all")
        return None
    if level < 1:
        logger.warning(f"REPORT_DISPLAY_LEVEL must be >= 1, got {level}")
        return None
    return level


def render_trial_balance(report: TrialBalanceReport) -> list[str]:
    """Render a trial balance as printable lines.

    Args:
        report: Report to render.

    Returns:
        list[str]: Header, one line per account, totals, and status.
    """
    request = report.request
    lines = [
        f"Trial balance {request.start} -> {request.end} "
        f"(branch={request.branch_id or 'all'})",
        "code | account | " + " | ".join(_COLUMNS),
    ]
    for row in report.rows:
        indent = " " * (row.indent // _INDENT_UNITS_PER_SPACE)
        amounts = " | ".join(
            format_amount(getattr(row, column), blank_zero=True)
            for column in _COLUMNS
        )
        lines.append(f"{indent}{row.account_code} | {row.account_name} | {amounts}")
    totals = " | ".join(
        format_amount(getattr(report.totals, column)) for column in _COLUMNS
    )
    lines.append(f"TOTAL | | {totals}")
    status = "BALANCED" if report.balanced else "UNBALANCED"
    lines.append(
        f"{status}: debit={format_amount(report.totals.total_debit)}, "
        f"credit={format_amount(report.totals.total_credit)}"
    )
    if report.skipped_count:
        lines.append(
            f"Skipped postings on unknown accounts: {report.skipped_count}"
        )
    return lines


def main() -> None:
    """Compute and print the trial balance configured by the environment."""
    logger = get_app_logger()
    request = read_report_request(logger)
    if request is None:
        return
    display_level = _parse_level(os.getenv("REPORT_DISPLAY_LEVEL"), logger)

    use_case = build_trial_balance_use_case()
    try:
        report = use_case.execute(request, display_level=display_level)
    except PostingSourceError as exc:
        logger.error(str(exc))
        return

    get_usage_logger().info(
        f"trial_balance start={request.start} end={request.end} "
        f"branch={request.branch_id or 'all'} level={display_level or 'all'}"
    )
    for line in render_trial_balance(report):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
