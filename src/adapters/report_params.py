"""Environment-driven report parameters shared by CLI adapters.

Date bounds are validated here, at the calling boundary, because the report
engine itself accepts any pair of dates.
"""

from datetime import date
import os

from src.domain.models import ReportRequest
from src.domain.services.periods import resolve_period


_ALL_BRANCHES = ("", "all")


def parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def parse_branch(value: str | None) -> str | None:
    """Return the branch filter, or None for every branch."""
    if value is None or value.strip().lower() in _ALL_BRANCHES:
        return None
    return value.strip()


def read_report_request(logger, today: date | None = None) -> ReportRequest | None:
    """Build a report request from environment variables.

    ``REPORT_PERIOD`` selects a preset range; otherwise
    ``REPORT_START_DATE`` and ``REPORT_END_DATE`` are required.
    ``REPORT_BRANCH_ID`` optionally restricts postings to one branch.

    Args:
        logger: Logger used for warnings.
        today: Reference day for presets; defaults to the current date.

    Returns:
        ReportRequest | None: Request, or None when the dates cannot be used.
    """
    preset = os.getenv("REPORT_PERIOD")
    if preset:
        try:
            start, end = resolve_period(preset, today or date.today())
        except ValueError as exc:
            logger.warning(str(exc))
            return None
    else:
        start = parse_date(os.getenv("REPORT_START_DATE"), logger)
        end = parse_date(os.getenv("REPORT_END_DATE"), logger)
    if start is None or end is None:
        logger.warning(
            "REPORT_START_DATE and REPORT_END_DATE (or REPORT_PERIOD) are "
            "required."
        )
        return None
    if start > end:
        logger.warning(f"Start date {start} is after end date {end}.")
        return None
    return ReportRequest(
        start=start,
        end=end,
        branch_id=parse_branch(os.getenv("REPORT_BRANCH_ID")),
    )


__all__ = ["parse_date", "parse_branch", "read_report_request"]
