"""Use case refreshing the persisted current_balance cache.

The ``current_balance`` column of the chart of accounts is a cache of the
derived balance. This job recomputes every balance from the opening
balance and the postings, reports how many cached values had drifted, and
writes the fresh values back.
"""

from dataclasses import dataclass
from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.services.balances import compute_account_balances
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RefreshBalancesResult:
    """Result of a refresh run.

    Attributes:
        account_count: Number of accounts recomputed.
        drifted_count: Accounts whose cached value differed from the
            recomputed one.
        updated_count: Rows written by the repository.
    """

    account_count: int
    drifted_count: int
    updated_count: int


class RefreshCurrentBalancesUseCase:
    """Recompute account balances and store them in the cache column."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing and storing ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def run(self, as_of: date | None = None) -> RefreshBalancesResult:
        """Execute the refresh job.

        Args:
            as_of: Optional inclusive cutoff; None uses every posting.

        Returns:
            RefreshBalancesResult: Summary of how many rows were processed.
        """
        accounts = self._ledger_repository.fetch_accounts()
        postings = self._ledger_repository.fetch_postings(None, as_of)
        balances = compute_account_balances(accounts, postings, as_of)

        drifted = [
            account
            for account in accounts
            if account.current_balance != balances[account.id].current_balance
        ]
        for account in drifted:
            self._logger.warning(
                f"Cached balance of {account.code} drifted: "
                f"stored={account.current_balance}, "
                f"derived={balances[account.id].current_balance}"
            )

        updated_count = self._ledger_repository.update_current_balances(
            {
                account_id: balance.current_balance
                for account_id, balance in sorted(balances.items())
            }
        )
        self._logger.info(
            f"Refreshed {updated_count} cached balances "
            f"({len(drifted)} drifted)"
        )
        return RefreshBalancesResult(
            account_count=len(accounts),
            drifted_count=len(drifted),
            updated_count=updated_count,
        )


__all__ = ["RefreshCurrentBalancesUseCase", "RefreshBalancesResult"]
