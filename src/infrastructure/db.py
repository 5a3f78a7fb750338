"""SQLAlchemy engine for the ledger record store.

Journal entries, their lines, branches and the chart of accounts live in a
PostgreSQL database whose URL is read from ``LEDGER_DB_URL`` (a local
``.env`` file is honoured). One pooled engine is shared by every report
run in the process.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


LEDGER_DB_URL_VAR = "LEDGER_DB_URL"
POOL_SIZE = 5
MAX_OVERFLOW = 5


def _get_env_var(name: str) -> str:
    """Return a required setting from the environment or ``.env``.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build a pooled engine for report reads.

    Args:
        db_url: SQLAlchemy URL including driver and credentials.

    Returns:
        Engine: Engine backed by a small ``QueuePool``.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=POOL_SIZE,
        max_overflow=MAX_OVERFLOW,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Return the process-wide ledger engine, creating it on first use."""
    global _ledger_engine
    if _ledger_engine is None:
        _ledger_engine = _create_engine(_get_env_var(LEDGER_DB_URL_VAR))
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Serve the shared ledger engine through ``DatabaseEnginePort``.

    Repositories receive this adapter instead of reading environment
    variables themselves.
    """

    def get_ledger_engine(self) -> Engine:
        return get_ledger_engine()


__all__ = [
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
