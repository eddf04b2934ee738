"""Invariant checks logged by the ledger report use cases."""

from collections.abc import Mapping, Sequence
from logging import Logger

from src.domain.models.ledger import AccountBalance, AccountGroup, LedgerAccount
from src.domain.policies.account_filters import is_reportable
from src.domain.services.hierarchy import (
    build_group_index,
    find_type_mismatches,
    resolve_account_type,
)
from src.domain.services.validation import validate_balance_sign


def warn_type_mismatches(
    groups: Sequence[AccountGroup],
    logger: Logger,
) -> int:
    """Warn about sub-groups whose type differs from their ancestors'.

    Mixed hierarchies are still reported on; each group is classified by
    the type it declares itself.

    Args:
        groups: Groups of the snapshot.
        logger: Logger used for warnings.

    Returns:
        int: Number of mismatching groups.
    """
    mismatches = find_type_mismatches(groups)
    for group, inherited in mismatches:
        logger.warning(
            f"Group {group.name!r} is declared {group.account_type.value} "
            f"under a {inherited.value} parent"
        )
    return len(mismatches)


def warn_balance_signs(
    accounts: Sequence[LedgerAccount],
    groups: Sequence[AccountGroup],
    balances: Mapping[str, AccountBalance],
    logger: Logger,
    include_inactive: bool = True,
) -> None:
    """Warn about balances sitting on the unusual side for their type.

    Args:
        accounts: Accounts of the snapshot.
        groups: Groups of the snapshot.
        balances: Output of compute_account_balances.
        logger: Logger used for warnings.
        include_inactive: Whether inactive accounts are checked.
    """
    index = build_group_index(groups)
    for account in accounts:
        if not is_reportable(account, include_inactive):
            continue
        balance = balances.get(account.id)
        if balance is None:
            continue
        validate_balance_sign(
            resolve_account_type(account.group_id, index),
            balance.current_balance,
            logger,
            account_code=account.code,
        )


__all__ = ["warn_type_mismatches", "warn_balance_signs"]
