"""Policies deciding which accounts appear on a report."""

from decimal import Decimal

from src.domain.models.ledger import LedgerAccount


def is_reportable(account: LedgerAccount, include_inactive: bool) -> bool:
    """Return True when the account should be listed.

    Args:
        account: Account to evaluate.
        include_inactive: Whether inactive accounts are listed.

    Returns:
        bool: True when the account is kept.
    """
    return include_inactive or account.is_active


def has_activity(debit: Decimal, credit: Decimal) -> bool:
    """Return True when either side of a row is non-zero."""
    return debit != 0 or credit != 0


__all__ = ["is_reportable", "has_activity"]
