"""Settings helpers for report computations."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

from src.domain.constants import DEFAULT_BALANCE_TOLERANCE
from src.infrastructure.logging.logger import get_app_logger


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class ReportSettings:
    """Settings tuning trial balance and ledger computations.

    Attributes:
        balance_tolerance: Largest debit/credit gap reported as balanced.
        verify_fetch_count: Compare fetched postings to the source count.
    """

    balance_tolerance: Decimal = DEFAULT_BALANCE_TOLERANCE
    verify_fetch_count: bool = True

    @classmethod
    def from_env(cls) -> "ReportSettings":
        """Build settings from environment variables.

        Returns:
            ReportSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        tolerance = cls._parse_tolerance(
            os.getenv("LEDGER_BALANCE_TOLERANCE"),
            logger=logger,
        )
        verify = cls._parse_bool(
            os.getenv("LEDGER_VERIFY_FETCH_COUNT"),
            default=True,
            logger=logger,
        )
        return cls(balance_tolerance=tolerance, verify_fetch_count=verify)

    @staticmethod
    def _parse_tolerance(raw: str | None, logger) -> Decimal:
        """Parse the balance tolerance, falling back to the default.

        Args:
            raw: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            Decimal: Non-negative tolerance.
        """
        if raw is None or not raw.strip():
            return DEFAULT_BALANCE_TOLERANCE
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(
                f"Invalid LEDGER_BALANCE_TOLERANCE '{raw}', "
                f"using {DEFAULT_BALANCE_TOLERANCE}"
            )
            return DEFAULT_BALANCE_TOLERANCE
        if not value.is_finite() or value < 0:
            logger.warning(
                f"LEDGER_BALANCE_TOLERANCE must be non-negative, got '{raw}'"
            )
            return DEFAULT_BALANCE_TOLERANCE
        return value

    @staticmethod
    def _parse_bool(raw: str | None, default: bool, logger) -> bool:
        if raw is None or not raw.strip():
            return default
        cleaned = raw.strip().lower()
        if cleaned in _TRUE_VALUES:
            return True
        if cleaned in _FALSE_VALUES:
            return False
        logger.warning(
            f"Invalid LEDGER_VERIFY_FETCH_COUNT '{raw}', using {default}"
        )
        return default


__all__ = ["ReportSettings"]
