"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.constants import DEBIT_NATURED_TYPES
from src.domain.errors import InconsistentPosting
from src.domain.models.ledger import AccountType, Posting


def validate_posting(posting: Posting) -> None:
    """Fail when a posting is not exactly one of a debit or a credit.

    Args:
        posting: Posting to check.

    Raises:
        InconsistentPosting: If an amount is negative, or if both or
            neither of debit and credit are non-zero.
    """
    if posting.debit < 0 or posting.credit < 0:
        raise InconsistentPosting(posting.id, "negative amount")
    if posting.debit and posting.credit:
        raise InconsistentPosting(posting.id, "both debit and credit are set")
    if not posting.debit and not posting.credit:
        raise InconsistentPosting(posting.id, "debit and credit are both zero")


def validate_balance_sign(
    account_type: AccountType,
    balance: Decimal,
    logger: Logger,
    account_code: str | None = None,
) -> None:
    """Warn when a balance sits on the unusual side for its account type.

    Args:
        account_type: Resolved account type.
        balance: Debit-positive balance.
        logger: Logger used for warnings.
        account_code: Optional code included in the message.
    """
    label = account_code or account_type.value
    if account_type in DEBIT_NATURED_TYPES and balance < 0:
        logger.warning(
            f"{account_type.value.capitalize()} balance is credit-natured "
            f"for {label}: {balance}"
        )
    if account_type not in DEBIT_NATURED_TYPES and balance > 0:
        logger.warning(
            f"{account_type.value.capitalize()} balance is debit-natured "
            f"for {label}: {balance}"
        )


__all__ = ["validate_posting", "validate_balance_sign"]
