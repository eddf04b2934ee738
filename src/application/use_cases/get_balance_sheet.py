"""Use case to compute the balance sheet at the end of a period."""

from datetime import date, timedelta

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_invariants import (
    warn_balance_signs,
    warn_type_mismatches,
)
from src.domain.models.reports import BalanceSheet
from src.domain.services.balances import compute_account_balances
from src.domain.services.reports import (
    build_balance_sheet,
    build_profit_and_loss,
    compute_accumulated_profit,
)
from src.infrastructure.logging.logger import get_app_logger


class GetBalanceSheetUseCase:
    """Compute assets, liabilities and equity, with the period result."""

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
    ) -> BalanceSheet:
        """Return the balance sheet as of ``end_date``.

        Balances include every posting up to ``end_date``. The net profit
        of ``[start_date, end_date]`` is shown as the current year result,
        and the profit accumulated before ``start_date`` (opening balances
        of income and expense accounts included) as retained earnings.

        Args:
            start_date: Optional first day of the profit period.
            end_date: Optional statement date.

        Returns:
            BalanceSheet: Asset, liability and equity sections.
        """
        groups = self._ledger_repository.fetch_groups()
        accounts = self._ledger_repository.fetch_accounts()
        postings = self._ledger_repository.fetch_postings(None, end_date)
        self._logger.info(
            f"Fetched {len(accounts)} accounts and {len(postings)} postings "
            f"for balance sheet as of {end_date}"
        )
        warn_type_mismatches(groups, self._logger)

        balances = compute_account_balances(accounts, postings, end_date)
        warn_balance_signs(
            accounts,
            groups,
            balances,
            self._logger,
            include_inactive=self._include_inactive,
        )
        profit_and_loss = build_profit_and_loss(
            accounts,
            groups,
            postings,
            start_date,
            end_date,
            include_inactive=True,
        )
        if start_date is None:
            opening_balances = compute_account_balances(accounts, [])
        else:
            opening_balances = compute_account_balances(
                accounts,
                postings,
                start_date - timedelta(days=1),
            )
        brought_forward = compute_accumulated_profit(
            accounts,
            groups,
            opening_balances,
        )
        balance_sheet = build_balance_sheet(
            accounts,
            groups,
            balances,
            end_date,
            period_result=profit_and_loss.net_profit,
            profit_brought_forward=brought_forward,
            include_inactive=self._include_inactive,
        )
        self._logger.info(
            f"Balance sheet computed: assets={balance_sheet.total_assets}, "
            f"liabilities={balance_sheet.total_liabilities}, "
            f"equity={balance_sheet.total_equity}, "
            f"brought_forward={brought_forward}, "
            f"period_result={profit_and_loss.net_profit}"
        )
        if not balance_sheet.is_balanced:
            self._logger.warning(
                f"Balance sheet does not balance: "
                f"difference={balance_sheet.difference}"
            )
        return balance_sheet


__all__ = ["GetBalanceSheetUseCase", "BalanceSheet"]
