"""Application use cases package."""

from .get_account_statement import GetAccountStatementUseCase
from .get_balance_sheet import GetBalanceSheetUseCase
from .get_group_tree import GetGroupTreeUseCase
from .get_profit_and_loss import GetProfitAndLossUseCase
from .get_trial_balance import GetTrialBalanceUseCase
from .refresh_current_balances import (
    RefreshBalancesResult,
    RefreshCurrentBalancesUseCase,
)

__all__ = [
    "GetAccountStatementUseCase",
    "GetBalanceSheetUseCase",
    "GetGroupTreeUseCase",
    "GetProfitAndLossUseCase",
    "GetTrialBalanceUseCase",
    "RefreshBalancesResult",
    "RefreshCurrentBalancesUseCase",
]
