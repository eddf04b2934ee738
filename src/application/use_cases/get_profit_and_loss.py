"""Use case to compute the profit and loss statement for a period."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_invariants import warn_type_mismatches
from src.domain.models.reports import ProfitAndLoss
from src.domain.services.reports import build_profit_and_loss
from src.infrastructure.logging.logger import get_app_logger


class GetProfitAndLossUseCase:
    """Compute income, expense and net profit over a period."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        include_inactive: bool = False,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing the ledger snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
            include_inactive: Whether inactive accounts are listed.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._include_inactive = include_inactive

    def execute(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> ProfitAndLoss:
        """Return the profit and loss statement.

        Args:
            start_date: Optional first day of the period.
            end_date: Optional last day of the period.

        Returns:
            ProfitAndLoss: Income and expense sections with totals.
        """
        groups = self._ledger_repository.fetch_groups()
        accounts = self._ledger_repository.fetch_accounts()
        postings = self._ledger_repository.fetch_postings(start_date, end_date)
        self._logger.info(
            f"Fetched {len(postings)} postings for profit and loss "
            f"from {start_date} to {end_date}"
        )
        warn_type_mismatches(groups, self._logger)

        statement = build_profit_and_loss(
            accounts,
            groups,
            postings,
            start_date,
            end_date,
            include_inactive=self._include_inactive,
        )
        self._logger.info(
            f"Profit and loss computed: income={statement.total_income}, "
            f"expense={statement.total_expense}, "
            f"net_profit={statement.net_profit}"
        )
        return statement


__all__ = ["GetProfitAndLossUseCase", "ProfitAndLoss"]
