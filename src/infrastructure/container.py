"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_account_statement import (
    GetAccountStatementUseCase,
)
from src.application.use_cases.get_balance_sheet import GetBalanceSheetUseCase
from src.application.use_cases.get_group_tree import GetGroupTreeUseCase
from src.application.use_cases.get_profit_and_loss import (
    GetProfitAndLossUseCase,
)
from src.application.use_cases.get_trial_balance import GetTrialBalanceUseCase
from src.application.use_cases.refresh_current_balances import (
    RefreshCurrentBalancesUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ReportSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the SQL-backed ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_trial_balance_use_case(
    settings: ReportSettings,
    repository: LedgerRepositoryPort | None = None,
) -> GetTrialBalanceUseCase:
    """Return the trial balance use case configured from settings."""
    return GetTrialBalanceUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
        include_inactive=settings.include_inactive,
        skip_zero_rows=settings.skip_zero_rows,
    )


def build_balance_sheet_use_case(
    settings: ReportSettings,
    repository: LedgerRepositoryPort | None = None,
) -> GetBalanceSheetUseCase:
    """Return the balance sheet use case configured from settings."""
    return GetBalanceSheetUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
        include_inactive=settings.include_inactive,
    )


def build_profit_and_loss_use_case(
    settings: ReportSettings,
    repository: LedgerRepositoryPort | None = None,
) -> GetProfitAndLossUseCase:
    """Return the profit and loss use case configured from settings."""
    return GetProfitAndLossUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
        include_inactive=settings.include_inactive,
    )


def build_account_statement_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetAccountStatementUseCase:
    """Return the account statement use case."""
    return GetAccountStatementUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_group_tree_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetGroupTreeUseCase:
    """Return the chart of accounts tree use case."""
    return GetGroupTreeUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_refresh_balances_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> RefreshCurrentBalancesUseCase:
    """Return the balance cache refresh use case."""
    return RefreshCurrentBalancesUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_trial_balance_use_case",
    "build_balance_sheet_use_case",
    "build_profit_and_loss_use_case",
    "build_account_statement_use_case",
    "build_group_tree_use_case",
    "build_refresh_balances_use_case",
]
