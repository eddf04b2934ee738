"""Domain service building the running-balance ledger of one account."""

from collections.abc import Iterable
from datetime import date

from src.domain.models.ledger import LedgerAccount, Posting
from src.domain.models.reports import AccountStatement, StatementEntry
from src.domain.services.validation import validate_posting


def build_account_statement(
    account: LedgerAccount,
    postings: Iterable[Posting],
    start_date: date | None = None,
    end_date: date | None = None,
) -> AccountStatement:
    """Build the statement of an account over a period.

    The brought-forward balance is the opening balance plus every posting
    dated before ``start_date``. Entries are ordered by date, then posting
    id, and carry the debit-positive balance after each posting.

    Args:
        account: Account to report on.
        postings: Postings of the snapshot; other accounts are ignored.
        start_date: First day of the period, None for no lower bound.
        end_date: Last day of the period, None for no upper bound.

    Returns:
        AccountStatement: Brought-forward balance and period entries.
    """
    own_postings = sorted(
        (posting for posting in postings if posting.account_id == account.id),
        key=lambda posting: (posting.date, posting.id),
    )
    for posting in own_postings:
        validate_posting(posting)

    brought_forward = account.opening_balance
    in_period = []
    for posting in own_postings:
        if start_date is not None and posting.date < start_date:
            brought_forward += posting.debit - posting.credit
        elif end_date is None or posting.date <= end_date:
            in_period.append(posting)

    running = brought_forward
    entries = []
    for posting in in_period:
        running += posting.debit - posting.credit
        entries.append(
            StatementEntry(
                posting_id=posting.id,
                date=posting.date,
                reference=posting.reference,
                narration=posting.narration,
                debit=posting.debit,
                credit=posting.credit,
                balance=running,
            )
        )

    return AccountStatement(
        account_id=account.id,
        account_code=account.code,
        account_name=account.name,
        start_date=start_date,
        end_date=end_date,
        brought_forward=brought_forward,
        entries=tuple(entries),
    )


__all__ = ["build_account_statement"]
