"""Domain services package."""

from .balances import (
    build_account_index,
    compute_account_balances,
    fold_opening_balance,
)
from .hierarchy import (
    build_group_index,
    find_type_mismatches,
    group_chain,
    group_level,
    resolve_account_type,
)
from .normalization import normalize_account_type, normalize_code
from .reports import (
    build_balance_sheet,
    build_profit_and_loss,
    compute_accumulated_profit,
    build_trial_balance,
)
from .statement import build_account_statement
from .tree import build_group_tree
from .validation import validate_balance_sign, validate_posting

__all__ = [
    "build_account_index",
    "compute_account_balances",
    "fold_opening_balance",
    "build_group_index",
    "find_type_mismatches",
    "group_chain",
    "group_level",
    "resolve_account_type",
    "normalize_account_type",
    "normalize_code",
    "build_balance_sheet",
    "build_profit_and_loss",
    "compute_accumulated_profit",
    "build_trial_balance",
    "build_account_statement",
    "build_group_tree",
    "validate_balance_sign",
    "validate_posting",
]
