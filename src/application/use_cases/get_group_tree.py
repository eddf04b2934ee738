"""Use case to read the account group tree with rolled-up balances."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_invariants import warn_type_mismatches
from src.domain.models.reports import GroupNode
from src.domain.services.balances import compute_account_balances
from src.domain.services.tree import build_group_tree
from src.infrastructure.logging.logger import get_app_logger


class GetGroupTreeUseCase:
    """Build the chart of accounts hierarchy for display."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case with its required dependencies."""
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, as_of: date | None = None) -> tuple[GroupNode, ...]:
        """Return root groups with nested children and balances."""
        groups = self._ledger_repository.fetch_groups()
        accounts = self._ledger_repository.fetch_accounts()
        postings = self._ledger_repository.fetch_postings(None, as_of)
        warn_type_mismatches(groups, self._logger)
        balances = compute_account_balances(accounts, postings, as_of)
        tree = build_group_tree(groups, accounts, balances)
        self._logger.info(
            f"Built group tree with {len(tree)} root groups "
            f"from {len(groups)} groups"
        )
        return tree


__all__ = ["GetGroupTreeUseCase"]
