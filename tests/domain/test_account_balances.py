"""Tests for compute_account_balances."""

from copy import deepcopy
from datetime import date
from decimal import Decimal

import pytest

from src.domain.errors import InconsistentPosting, InvalidReference
from src.domain.models import LedgerAccount, Posting
from src.domain.services.balances import (
    compute_account_balances,
    fold_opening_balance,
)


def _account(account_id: str, opening: str = "0") -> LedgerAccount:
    return LedgerAccount(
        id=account_id,
        code=account_id.upper(),
        name=f"Account {account_id}",
        group_id="assets",
        opening_balance=Decimal(opening),
    )


def _posting(
    posting_id: str,
    account_id: str,
    day: date,
    debit: str = "0",
    credit: str = "0",
) -> Posting:
    return Posting(
        id=posting_id,
        account_id=account_id,
        date=day,
        debit=Decimal(debit),
        credit=Decimal(credit),
    )


def test_account_without_postings_yields_zero_balance() -> None:
    """Idle accounts are present with all-zero totals."""
    balances = compute_account_balances([_account("a")], [], date(2024, 1, 31))

    balance = balances["a"]
    assert balance.debit_total == Decimal("0")
    assert balance.credit_total == Decimal("0")
    assert balance.current_balance == Decimal("0")


def test_positive_opening_balance_is_folded_into_debits() -> None:
    balances = compute_account_balances([_account("a", "100")], [])

    assert balances["a"].debit_total == Decimal("100")
    assert balances["a"].credit_total == Decimal("0")
    assert balances["a"].current_balance == Decimal("100")


def test_negative_opening_balance_is_folded_into_credits() -> None:
    balances = compute_account_balances([_account("a", "-50")], [])

    assert balances["a"].debit_total == Decimal("0")
    assert balances["a"].credit_total == Decimal("50")
    assert balances["a"].current_balance == Decimal("-50")


def test_opening_balance_and_postings_up_to_cutoff() -> None:
    """Opening 1000, debit 200 and credit 50 leave a balance of 1150."""
    postings = [
        _posting("p1", "a", date(2024, 1, 5), debit="200"),
        _posting("p2", "a", date(2024, 1, 10), credit="50"),
        _posting("p3", "a", date(2024, 2, 1), debit="999"),
    ]

    balances = compute_account_balances(
        [_account("a", "1000")],
        postings,
        date(2024, 1, 31),
    )

    assert balances["a"].debit_total == Decimal("1200")
    assert balances["a"].credit_total == Decimal("50")
    assert balances["a"].current_balance == Decimal("1150")


def test_cutoff_date_is_inclusive() -> None:
    postings = [_posting("p1", "a", date(2024, 1, 31), debit="10")]

    balances = compute_account_balances([_account("a")], postings, date(2024, 1, 31))

    assert balances["a"].debit_total == Decimal("10")


def test_without_cutoff_every_posting_counts() -> None:
    postings = [_posting("p1", "a", date(2030, 1, 1), credit="5")]

    balances = compute_account_balances([_account("a")], postings, None)

    assert balances["a"].current_balance == Decimal("-5")


def test_repeated_calls_are_identical_and_do_not_mutate_inputs() -> None:
    accounts = [_account("a", "10"), _account("b", "-10")]
    postings = [
        _posting("p1", "a", date(2024, 1, 1), debit="5"),
        _posting("p2", "b", date(2024, 1, 1), credit="5"),
    ]
    accounts_before = deepcopy(accounts)
    postings_before = deepcopy(postings)

    first = compute_account_balances(accounts, postings, date(2024, 12, 31))
    second = compute_account_balances(accounts, postings, date(2024, 12, 31))

    assert first == second
    assert accounts == accounts_before
    assert postings == postings_before


def test_result_does_not_depend_on_posting_order() -> None:
    postings = [
        _posting("p1", "a", date(2024, 1, 3), debit="1.10"),
        _posting("p2", "a", date(2024, 1, 1), credit="0.35"),
        _posting("p3", "a", date(2024, 1, 2), debit="2.25"),
    ]

    forward = compute_account_balances([_account("a")], postings)
    backward = compute_account_balances([_account("a")], list(reversed(postings)))

    assert forward == backward


def test_posting_for_unknown_account_fails() -> None:
    postings = [_posting("p1", "ghost", date(2024, 1, 1), debit="1")]

    with pytest.raises(InvalidReference, match="ghost"):
        compute_account_balances([_account("a")], postings)


@pytest.mark.parametrize(
    ("debit", "credit"),
    [("10", "10"), ("0", "0"), ("-1", "0"), ("0", "-3")],
)
def test_inconsistent_posting_fails(debit: str, credit: str) -> None:
    postings = [_posting("bad", "a", date(2024, 1, 1), debit, credit)]

    with pytest.raises(InconsistentPosting, match="bad"):
        compute_account_balances([_account("a")], postings)


def test_duplicate_account_code_fails() -> None:
    first = _account("a")
    second = LedgerAccount(id="b", code="A", name="Other", group_id="assets")

    with pytest.raises(InvalidReference, match="Duplicate account code"):
        compute_account_balances([first, second], [])


def test_fold_opening_balance_leaves_zero_untouched() -> None:
    assert fold_opening_balance(
        Decimal("0"),
        Decimal("3"),
        Decimal("4"),
    ) == (Decimal("3"), Decimal("4"))
