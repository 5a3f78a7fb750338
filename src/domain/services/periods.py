"""Quick reporting period presets."""

import calendar
from datetime import date


PERIOD_PRESETS = ("current_month", "last_3_months", "current_year")


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def resolve_period(preset: str, today: date) -> tuple[date, date]:
    """Return the date range of a named period preset.

    Args:
        preset: One of ``current_month``, ``last_3_months``, or
            ``current_year``.
        today: Reference day.

    Returns:
        tuple[date, date]: Inclusive start and end dates.

    Raises:
        ValueError: If the preset is unknown.
    """
    key = preset.strip().lower()
    if key == "current_month":
        last_day = calendar.monthrange(today.year, today.month)[1]
        return date(today.year, today.month, 1), date(
            today.year, today.month, last_day
        )
    if key == "last_3_months":
        year, month = _shift_month(today.year, today.month, -3)
        return date(year, month, 1), today
    if key == "current_year":
        return date(today.year, 1, 1), date(today.year, 12, 31)
    raise ValueError(
        f"Unknown period preset '{preset}'. Expected one of {PERIOD_PRESETS}."
    )


__all__ = ["PERIOD_PRESETS", "resolve_period"]
