"""Domain services for per-account balances."""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from src.domain.errors import InvalidReference
from src.domain.models.ledger import AccountBalance, LedgerAccount, Posting
from src.domain.services.validation import validate_posting


def build_account_index(
    accounts: Iterable[LedgerAccount],
) -> dict[str, LedgerAccount]:
    """Index accounts by identifier.

    Raises:
        InvalidReference: If two accounts share an identifier or a code.
    """
    index: dict[str, LedgerAccount] = {}
    codes: set[str] = set()
    for account in accounts:
        if account.id in index:
            raise InvalidReference(f"Duplicate account id: {account.id!r}")
        if account.code in codes:
            raise InvalidReference(f"Duplicate account code: {account.code!r}")
        index[account.id] = account
        codes.add(account.code)
    return index


def fold_opening_balance(
    opening_balance: Decimal,
    debit_total: Decimal,
    credit_total: Decimal,
) -> tuple[Decimal, Decimal]:
    """Fold a signed opening balance into debit and credit totals.

    A positive opening balance is debit-natured (assets, expenses) and is
    added to the debit side; a negative one is credit-natured (liabilities,
    income, equity) and its absolute value is added to the credit side.

    Returns:
        tuple[Decimal, Decimal]: Debit and credit totals after folding.
    """
    if opening_balance > 0:
        return debit_total + opening_balance, credit_total
    if opening_balance < 0:
        return debit_total, credit_total + abs(opening_balance)
    return debit_total, credit_total


def compute_account_balances(
    accounts: Sequence[LedgerAccount],
    postings: Iterable[Posting],
    as_of: date | None = None,
) -> dict[str, AccountBalance]:
    """Compute debit, credit and current balance of every account.

    Args:
        accounts: Accounts of the snapshot.
        postings: Postings of the snapshot, in any order.
        as_of: Inclusive cutoff date; None keeps every posting.

    Returns:
        dict[str, AccountBalance]: Balances keyed by account id, one entry
        per account including accounts without postings.

    Raises:
        InvalidReference: If a posting references an unknown account.
        InconsistentPosting: If a posting is malformed.
    """
    index = build_account_index(accounts)
    debits = {account_id: Decimal("0") for account_id in index}
    credits = {account_id: Decimal("0") for account_id in index}

    for posting in postings:
        if posting.account_id not in index:
            raise InvalidReference(
                f"Posting {posting.id!r} references unknown account "
                f"{posting.account_id!r}"
            )
        validate_posting(posting)
        if as_of is not None and posting.date > as_of:
            continue
        debits[posting.account_id] += posting.debit
        credits[posting.account_id] += posting.credit

    balances = {}
    for account_id, account in index.items():
        debit_total, credit_total = fold_opening_balance(
            account.opening_balance,
            debits[account_id],
            credits[account_id],
        )
        balances[account_id] = AccountBalance(
            account_id=account_id,
            debit_total=debit_total,
            credit_total=credit_total,
        )
    return balances


__all__ = [
    "build_account_index",
    "fold_opening_balance",
    "compute_account_balances",
]
