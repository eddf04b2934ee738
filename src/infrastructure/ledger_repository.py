"""SQLAlchemy-backed repository for the chart of accounts and postings."""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.ledger import AccountGroup, LedgerAccount, Posting
from src.domain.services.normalization import normalize_account_type
from src.utils.decimal_utils import coerce_decimal


SELECT_GROUPS_SQL = text(
    """
    SELECT id, name, account_type, parent_group_id, is_active, display_order
    FROM account_groups
    ORDER BY display_order, name
    """
)

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, account_code, account_name, account_group_id,
           opening_balance, current_balance, is_active
    FROM chart_of_accounts
    ORDER BY account_code
    """
)

SELECT_POSTINGS_SQL = """
SELECT lt.id, lt.account_id, lt.transaction_date, lt.debit, lt.credit,
       lt.narration, v.voucher_number
FROM ledger_transactions lt
LEFT JOIN vouchers v ON v.id = lt.voucher_id
WHERE 1=1
"""

UPDATE_CURRENT_BALANCE_SQL = text(
    """
    UPDATE chart_of_accounts
    SET current_balance = :current_balance
    WHERE id = :id
    """
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for ledger snapshots."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_groups(self) -> list[AccountGroup]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_GROUPS_SQL).all()
        return [
            AccountGroup(
                id=str(row.id),
                name=row.name,
                account_type=normalize_account_type(row.account_type),
                parent_group_id=(
                    str(row.parent_group_id)
                    if row.parent_group_id is not None
                    else None
                ),
                is_active=bool(row.is_active),
                display_order=row.display_order or 0,
            )
            for row in rows
        ]

    def fetch_accounts(self) -> list[LedgerAccount]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
        return [
            LedgerAccount(
                id=str(row.id),
                code=row.account_code,
                name=row.account_name,
                group_id=str(row.account_group_id),
                opening_balance=coerce_decimal(row.opening_balance),
                is_active=bool(row.is_active),
                current_balance=(
                    coerce_decimal(row.current_balance)
                    if row.current_balance is not None
                    else None
                ),
            )
            for row in rows
        ]

    def fetch_postings(
        self,
        start_date: date | None,
        end_date: date | None,
        account_id: str | None = None,
    ) -> list[Posting]:
        query = self._build_postings_query(start_date, end_date, account_id)
        params = self._build_params(start_date, end_date, account_id)
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            Posting(
                id=str(row.id),
                account_id=str(row.account_id),
                date=self._coerce_date(row.transaction_date),
                debit=coerce_decimal(row.debit),
                credit=coerce_decimal(row.credit),
                reference=row.voucher_number,
                narration=row.narration,
            )
            for row in rows
        ]

    def update_current_balances(self, balances: Mapping[str, Decimal]) -> int:
        payload = [
            {"id": account_id, "current_balance": balance}
            for account_id, balance in balances.items()
        ]
        if not payload:
            return 0
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(UPDATE_CURRENT_BALANCE_SQL, payload)
        return len(payload)

    @staticmethod
    def _build_postings_query(
        start_date: date | None,
        end_date: date | None,
        account_id: str | None,
    ):
        sql = SELECT_POSTINGS_SQL
        if start_date:
            sql += " AND lt.transaction_date >= :start_date"
        if end_date:
            sql += " AND lt.transaction_date <= :end_date"
        if account_id:
            sql += " AND lt.account_id = :account_id"
        sql += " ORDER BY lt.transaction_date, lt.id"
        return text(sql)

    @staticmethod
    def _build_params(
        start_date: date | None,
        end_date: date | None,
        account_id: str | None,
    ) -> dict[str, object]:
        params: dict[str, object] = {}
        if start_date:
            params["start_date"] = start_date
        if end_date:
            params["end_date"] = end_date
        if account_id:
            params["account_id"] = account_id
        return params

    @staticmethod
    def _coerce_date(value) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return date.fromisoformat(str(value)[:10])


__all__ = [
    "SqlAlchemyLedgerRepository",
    "SELECT_GROUPS_SQL",
    "SELECT_ACCOUNTS_SQL",
    "SELECT_POSTINGS_SQL",
    "UPDATE_CURRENT_BALANCE_SQL",
]
