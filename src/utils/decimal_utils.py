"""Helpers for Decimal normalization."""

from decimal import Decimal, ROUND_HALF_UP


DISPLAY_QUANTUM = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_display(value) -> Decimal:
    """Round an amount to two digits for presentation.

    Args:
        value: Amount to round.

    Returns:
        Decimal: Amount rounded half-up to cents.
    """
    return coerce_decimal(value).quantize(DISPLAY_QUANTUM, rounding=ROUND_HALF_UP)


def format_amount(value, blank_zero: bool = False) -> str:
    """Format an amount with two digits.

    Args:
        value: Amount to format.
        blank_zero: Render zero amounts as "-" instead of "0.00".

    Returns:
        str: Display string.
    """
    rounded = quantize_display(value)
    if blank_zero and rounded == 0:
        return "-"
    return f"{rounded:,.2f}"


__all__ = ["coerce_decimal", "quantize_display", "format_amount", "DISPLAY_QUANTUM"]
