"""Domain models package."""

from .ledger import (
    AccountBalance,
    AccountGroup,
    AccountType,
    LedgerAccount,
    Posting,
)
from .reports import (
    AccountStatement,
    BalanceSheet,
    BalanceSheetAccount,
    BalanceSheetSection,
    GroupNode,
    ProfitAndLoss,
    ProfitLossAccount,
    ProfitLossSection,
    StatementEntry,
    TrialBalance,
    TrialBalanceRow,
)

__all__ = [
    "AccountBalance",
    "AccountGroup",
    "AccountType",
    "LedgerAccount",
    "Posting",
    "AccountStatement",
    "BalanceSheet",
    "BalanceSheetAccount",
    "BalanceSheetSection",
    "GroupNode",
    "ProfitAndLoss",
    "ProfitLossAccount",
    "ProfitLossSection",
    "StatementEntry",
    "TrialBalance",
    "TrialBalanceRow",
]
