"""Use case to compute the trial balance as of a date."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_invariants import warn_type_mismatches
from src.domain.models.reports import TrialBalance
from src.domain.services.balances import compute_account_balances
from src.domain.services.reports import build_trial_balance
from src.infrastructure.logging.logger import get_app_logger


class GetTrialBalanceUseCase:
    """Compute debit and credit totals of every account."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        include_inactive: bool = False,
        skip_zero_rows: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing the ledger snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
            include_inactive: Whether inactive accounts are listed.
            skip_zero_rows: Whether accounts without activity are hidden.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._include_inactive = include_inactive
        self._skip_zero_rows = skip_zero_rows

    def execute(self, end_date: date | None = None) -> TrialBalance:
        """Return the trial balance.

        Args:
            end_date: Optional inclusive cutoff for posting dates.

        Returns:
            TrialBalance: Rows ordered by account code with column totals.
        """
        groups = self._ledger_repository.fetch_groups()
        accounts = self._ledger_repository.fetch_accounts()
        postings = self._ledger_repository.fetch_postings(None, end_date)
        self._logger.info(
            f"Fetched {len(accounts)} accounts and {len(postings)} postings "
            f"for trial balance as of {end_date}"
        )
        warn_type_mismatches(groups, self._logger)

        balances = compute_account_balances(accounts, postings, end_date)
        trial_balance = build_trial_balance(
            accounts,
            groups,
            balances,
            as_of=end_date,
            include_inactive=self._include_inactive,
            skip_zero_rows=self._skip_zero_rows,
        )
        if not trial_balance.is_balanced:
            self._logger.warning(
                f"Trial balance does not agree: debit={trial_balance.total_debit}, "
                f"credit={trial_balance.total_credit}, "
                f"difference={trial_balance.difference}"
            )
        self._logger.info(
            f"Trial balance computed: {len(trial_balance.rows)} rows, "
            f"debit={trial_balance.total_debit}, "
            f"credit={trial_balance.total_credit}"
        )
        return trial_balance


__all__ = ["GetTrialBalanceUseCase", "TrialBalance"]
