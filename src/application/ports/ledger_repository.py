"""Port for reading ledger snapshots and refreshing the balance cache."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models.ledger import AccountGroup, LedgerAccount, Posting


class LedgerRepositoryPort(Protocol):
    """Port exposing the chart of accounts and its postings."""

    def fetch_groups(self) -> list[AccountGroup]:
        """Return every account group."""

    def fetch_accounts(self) -> list[LedgerAccount]:
        """Return every account, active or not."""

    def fetch_postings(
        self,
        start_date: date | None,
        end_date: date | None,
        account_id: str | None = None,
    ) -> list[Posting]:
        """Return postings dated within the inclusive range."""

    def update_current_balances(self, balances: Mapping[str, Decimal]) -> int:
        """Store derived balances in the cache column; return rows updated."""


__all__ = ["LedgerRepositoryPort"]
