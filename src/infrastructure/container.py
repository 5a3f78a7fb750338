"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.posting_source import PostingSourcePort
from src.application.use_cases.build_account_ledger import (
    BuildAccountLedgerUseCase,
)
from src.application.use_cases.build_trial_balance import (
    BuildTrialBalanceUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.posting_repository import SqlAlchemyPostingRepository
from src.infrastructure.settings import ReportSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_posting_source(
    db_port: DatabaseEnginePort | None = None,
) -> PostingSourcePort:
    """Return the posting source backed by the ledger database."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyPostingRepository(resolved_db)


def build_trial_balance_use_case(
    posting_source: PostingSourcePort | None = None,
    settings: ReportSettings | None = None,
) -> BuildTrialBalanceUseCase:
    """Return the trial balance use case wired to configured adapters."""
    resolved_settings = settings or ReportSettings.from_env()
    return BuildTrialBalanceUseCase(
        posting_source=posting_source or build_posting_source(),
        logger=get_app_logger(),
        balance_tolerance=resolved_settings.balance_tolerance,
        verify_fetch_count=resolved_settings.verify_fetch_count,
    )


def build_account_ledger_use_case(
    posting_source: PostingSourcePort | None = None,
    settings: ReportSettings | None = None,
) -> BuildAccountLedgerUseCase:
    """Return the account ledger use case wired to configured adapters."""
    resolved_settings = settings or ReportSettings.from_env()
    return BuildAccountLedgerUseCase(
        posting_source=posting_source or build_posting_source(),
        logger=get_app_logger(),
        verify_fetch_count=resolved_settings.verify_fetch_count,
    )


__all__ = [
    "build_database_adapter",
    "build_posting_source",
    "build_trial_balance_use_case",
    "build_account_ledger_use_case",
]
