"""Domain package for ledger models, errors and the balance calculator."""

from .constants import BALANCE_SHEET_TYPES, PROFIT_AND_LOSS_TYPES
from .errors import (
    CyclicGroupHierarchy,
    InconsistentPosting,
    InvalidReference,
    LedgerError,
    MissingAccountType,
)
from .models import (
    AccountBalance,
    AccountGroup,
    AccountType,
    LedgerAccount,
    Posting,
)
from .services import (
    build_account_statement,
    build_balance_sheet,
    build_group_tree,
    build_profit_and_loss,
    compute_accumulated_profit,
    build_trial_balance,
    compute_account_balances,
)

__all__ = [
    "BALANCE_SHEET_TYPES",
    "PROFIT_AND_LOSS_TYPES",
    "CyclicGroupHierarchy",
    "InconsistentPosting",
    "InvalidReference",
    "LedgerError",
    "MissingAccountType",
    "AccountBalance",
    "AccountGroup",
    "AccountType",
    "LedgerAccount",
    "Posting",
    "build_account_statement",
    "build_balance_sheet",
    "build_group_tree",
    "build_profit_and_loss",
    "compute_accumulated_profit",
    "build_trial_balance",
    "compute_account_balances",
]
