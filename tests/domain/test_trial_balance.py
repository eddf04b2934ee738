"""Tests for build_trial_balance."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.errors import InvalidReference
from src.domain.models import AccountGroup, AccountType, LedgerAccount, Posting
from src.domain.services.balances import compute_account_balances
from src.domain.services.reports import build_trial_balance


GROUPS = [
    AccountGroup(id="assets", name="Current Assets", account_type=AccountType.ASSET),
    AccountGroup(id="capital", name="Capital", account_type=AccountType.EQUITY),
    AccountGroup(id="sales", name="Sales", account_type=AccountType.INCOME),
    AccountGroup(id="costs", name="Expenses", account_type=AccountType.EXPENSE),
]


def _accounts() -> list[LedgerAccount]:
    return [
        LedgerAccount(
            id="cash",
            code="1000",
            name="Cash",
            group_id="assets",
            opening_balance=Decimal("500"),
        ),
        LedgerAccount(
            id="owner",
            code="3000",
            name="Owner Capital",
            group_id="capital",
            opening_balance=Decimal("-500"),
        ),
        LedgerAccount(id="revenue", code="4000", name="Revenue", group_id="sales"),
        LedgerAccount(id="rent", code="5000", name="Rent", group_id="costs"),
    ]


def _pair(
    posting_id: str,
    debit_account: str,
    credit_account: str,
    amount: str,
    day: date,
) -> list[Posting]:
    return [
        Posting(
            id=f"{posting_id}-dr",
            account_id=debit_account,
            date=day,
            debit=Decimal(amount),
        ),
        Posting(
            id=f"{posting_id}-cr",
            account_id=credit_account,
            date=day,
            credit=Decimal(amount),
        ),
    ]


def test_balanced_pairs_produce_equal_columns() -> None:
    """Postings entered as balanced pairs keep the trial balance equal."""
    postings = (
        _pair("sale", "cash", "revenue", "1200.50", date(2024, 3, 1))
        + _pair("rent", "rent", "cash", "400", date(2024, 3, 2))
        + _pair("refund", "revenue", "cash", "75.25", date(2024, 3, 3))
    )
    accounts = _accounts()
    balances = compute_account_balances(accounts, postings, date(2024, 3, 31))

    report = build_trial_balance(accounts, GROUPS, balances)

    assert report.total_debit == report.total_credit
    assert report.is_balanced
    assert report.difference == Decimal("0")


def test_rows_are_ordered_by_code_and_not_netted() -> None:
    postings = _pair("sale", "cash", "revenue", "100", date(2024, 3, 1)) + _pair(
        "refund", "revenue", "cash", "40", date(2024, 3, 2)
    )
    accounts = list(reversed(_accounts()))
    balances = compute_account_balances(accounts, postings)

    report = build_trial_balance(accounts, GROUPS, balances)

    assert [row.account_code for row in report.rows] == [
        "1000",
        "3000",
        "4000",
        "5000",
    ]
    revenue = report.rows[2]
    assert revenue.group_name == "Sales"
    assert revenue.debit == Decimal("40")
    assert revenue.credit == Decimal("100")


def test_imbalanced_input_is_reported_not_corrected() -> None:
    postings = [
        Posting(
            id="orphan",
            account_id="cash",
            date=date(2024, 3, 1),
            debit=Decimal("10"),
        )
    ]
    accounts = _accounts()
    balances = compute_account_balances(accounts, postings)

    report = build_trial_balance(accounts, GROUPS, balances)

    assert not report.is_balanced
    assert report.difference == Decimal("10")


def test_zero_rows_are_kept_unless_skipped() -> None:
    accounts = _accounts()
    balances = compute_account_balances(accounts, [])

    full = build_trial_balance(accounts, GROUPS, balances)
    trimmed = build_trial_balance(accounts, GROUPS, balances, skip_zero_rows=True)

    assert len(full.rows) == 4
    assert [row.account_id for row in trimmed.rows] == ["cash", "owner"]


def test_inactive_accounts_can_be_hidden() -> None:
    accounts = _accounts()
    accounts[3] = LedgerAccount(
        id="rent",
        code="5000",
        name="Rent",
        group_id="costs",
        is_active=False,
    )
    balances = compute_account_balances(accounts, [])

    report = build_trial_balance(
        accounts,
        GROUPS,
        balances,
        include_inactive=False,
    )

    assert "rent" not in [row.account_id for row in report.rows]


def test_account_with_unknown_group_fails() -> None:
    accounts = [
        LedgerAccount(id="x", code="9", name="Stray", group_id="missing"),
    ]
    balances = compute_account_balances(accounts, [])

    with pytest.raises(InvalidReference, match="missing"):
        build_trial_balance(accounts, GROUPS, balances)
