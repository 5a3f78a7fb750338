"""SQLAlchemy-backed posting source over the ledger record store."""

from sqlalchemy import bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.posting_source import (
    PostingSourceError,
    PostingSourcePort,
)
from src.domain.models import Account, Branch, Posting, PostingQuery
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal


def _as_id(value) -> str | None:
    if value is None:
        return None
    return str(value)


class SqlAlchemyPostingRepository(PostingSourcePort):
    """Repository reading accounts, branches, and journal lines."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_accounts(self) -> list[Account]:
        query = text(
            """
            SELECT id,
                   code,
                   COALESCE(NULLIF(name_ar, ''), name_en, '') AS name,
                   parent_id,
                   level
            FROM chart_of_accounts
            WHERE is_active = TRUE
            ORDER BY code
            """
        )
        rows = self._execute(query, {}, "accounts")
        return [
            Account(
                id=_as_id(row.id),
                code=row.code,
                name=row.name,
                level=row.level or 0,
                parent_id=_as_id(row.parent_id),
            )
            for row in rows
        ]

    def fetch_branches(self) -> list[Branch]:
        query = text(
            """
            SELECT id,
                   code,
                   COALESCE(NULLIF(name_ar, ''), name_en, '') AS name
            FROM branches
            WHERE is_active = TRUE
            ORDER BY code
            """
        )
        rows = self._execute(query, {}, "branches")
        return [
            Branch(id=_as_id(row.id), code=row.code, name=row.name)
            for row in rows
        ]

    def fetch_postings(self, query: PostingQuery) -> list[Posting]:
        sql = self._build_postings_query(query, count_only=False)
        rows = self._execute(sql, self._build_params(query), "postings")
        return [
            Posting(
                account_id=_as_id(row.account_id),
                debit=coerce_decimal(row.debit),
                credit=coerce_decimal(row.credit),
                entry_date=coerce_date(row.entry_date),
                entry_number=row.entry_number or "",
                description=row.description,
                branch_id=_as_id(row.branch_id),
                entry_description=row.entry_description,
                sequence=index,
            )
            for index, row in enumerate(rows)
        ]

    def count_postings(self, query: PostingQuery) -> int:
        sql = self._build_postings_query(query, count_only=True)
        rows = self._execute(sql, self._build_params(query), "posting count")
        if not rows:
            return 0
        return int(rows[0].posting_count or 0)

    def _execute(self, query, params: dict, label: str) -> list:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise PostingSourceError(f"Failed to read {label}: {exc}") from exc

    @staticmethod
    def _build_params(query: PostingQuery) -> dict:
        params: dict = {}
        if query.end_date:
            params["end_date"] = query.end_date
        if query.branch_id is not None:
            params["branch_id"] = query.branch_id
        if query.account_ids is not None:
            params["account_ids"] = list(query.account_ids)
        return params

    @staticmethod
    def _build_postings_query(query: PostingQuery, count_only: bool):
        if count_only:
            base_sql = """
            SELECT COUNT(*) AS posting_count
            """
        else:
            base_sql = """
            SELECT l.account_id AS account_id,
                   l.debit AS debit,
                   l.credit AS credit,
                   l.description AS description,
                   l.branch_id AS branch_id,
                   e.entry_number AS entry_number,
                   e.date AS entry_date,
                   e.description AS entry_description
            """
        base_sql += """
        FROM journal_entry_lines l
        JOIN journal_entries e ON e.id = l.journal_entry_id
        WHERE 1=1
        """
        if query.end_date:
            base_sql += " AND e.date <= :end_date"
        if query.branch_id is not None:
            base_sql += " AND l.branch_id = :branch_id"
        if query.account_ids is not None:
            base_sql += " AND l.account_id IN :account_ids"
        if not count_only:
            base_sql += " ORDER BY e.date, l.created_at, l.id"
        statement = text(base_sql)
        if query.account_ids is not None:
            statement = statement.bindparams(
                bindparam("account_ids", expanding=True)
            )
        return statement


__all__ = ["SqlAlchemyPostingRepository"]
