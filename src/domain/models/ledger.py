"""Domain models for the chart of accounts and its postings."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class AccountType(str, Enum):
    """Nature of an account group."""

    ASSET = "asset"
    LIABILITY = "liability"
    INCOME = "income"
    EXPENSE = "expense"
    EQUITY = "equity"


@dataclass(frozen=True)
class AccountGroup:
    """Node of the account group hierarchy.

    Attributes:
        id: Group identifier.
        name: Display name, e.g. "Current Assets".
        account_type: Declared nature, or None to inherit from the parent.
        parent_group_id: Identifier of the parent group, None for roots.
        is_active: Whether the group is still in use.
        display_order: Sort key among siblings.
    """

    id: str
    name: str
    account_type: AccountType | None = None
    parent_group_id: str | None = None
    is_active: bool = True
    display_order: int = 0


@dataclass(frozen=True)
class LedgerAccount:
    """Ledger account of the chart of accounts.

    Attributes:
        id: Account identifier.
        code: Account code, unique within a ledger.
        name: Display name.
        group_id: Identifier of the owning group.
        opening_balance: Signed balance carried in, debit-positive.
        is_active: Whether the account is still in use.
        current_balance: Persisted cache of the balance. Never used as a
            source of truth by the calculator.
    """

    id: str
    code: str
    name: str
    group_id: str
    opening_balance: Decimal = Decimal("0")
    is_active: bool = True
    current_balance: Decimal | None = None


@dataclass(frozen=True)
class Posting:
    """Dated debit or credit entry against a single account."""

    id: str
    account_id: str
    date: date
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")
    reference: str | None = None
    narration: str | None = None


@dataclass(frozen=True)
class AccountBalance:
    """Debit and credit totals of an account, opening balance folded in."""

    account_id: str
    debit_total: Decimal
    credit_total: Decimal

    @property
    def current_balance(self) -> Decimal:
        """Return debit_total minus credit_total."""
        return self.debit_total - self.credit_total


__all__ = [
    "AccountType",
    "AccountGroup",
    "LedgerAccount",
    "Posting",
    "AccountBalance",
]
