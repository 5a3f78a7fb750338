"""Helpers for date normalization."""

from datetime import date, datetime


def coerce_date(value) -> date | None:
    """Normalize raw date values to date.

    Args:
        value: date, datetime, or ISO formatted string.

    Returns:
        date | None: Parsed date, or None when the value is malformed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return None
        try:
            return date.fromisoformat(cleaned[:10])
        except ValueError:
            return None
    return None


__all__ = ["coerce_date"]
