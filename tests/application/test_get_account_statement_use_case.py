"""Tests for the GetAccountStatementUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_account_statement import (
    GetAccountStatementUseCase,
)
from src.domain.errors import InvalidReference
from src.domain.models import LedgerAccount, Posting


ACCOUNTS = [
    LedgerAccount(
        id="acc-1",
        code="cash-01",
        name="Cash",
        group_id="assets",
        opening_balance=Decimal("10"),
    ),
]


def test_execute_matches_code_and_fetches_account_postings() -> None:
    repository = MagicMock()
    repository.fetch_accounts.return_value = ACCOUNTS
    repository.fetch_postings.return_value = [
        Posting(
            id="p1",
            account_id="acc-1",
            date=date(2024, 1, 20),
            debit=Decimal("5"),
        ),
        Posting(
            id="p2",
            account_id="acc-1",
            date=date(2024, 2, 3),
            credit=Decimal("8"),
        ),
    ]

    use_case = GetAccountStatementUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
    )

    statement = use_case.execute(
        " CASH-01",
        date(2024, 2, 1),
        date(2024, 2, 29),
    )

    repository.fetch_postings.assert_called_once_with(
        None,
        date(2024, 2, 29),
        account_id="acc-1",
    )
    assert statement.account_code == "cash-01"
    assert statement.brought_forward == Decimal("15")
    assert statement.closing_balance == Decimal("7")


def test_execute_rejects_unknown_code() -> None:
    repository = MagicMock()
    repository.fetch_accounts.return_value = ACCOUNTS

    use_case = GetAccountStatementUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
    )

    with pytest.raises(InvalidReference, match="9999"):
        use_case.execute("9999")
    repository.fetch_postings.assert_not_called()
