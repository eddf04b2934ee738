"""Domain models for computed ledger reports.

Report models are transient projections of accounts and postings. Amounts
follow the ledger convention (debit-positive) unless a ``display_*``
accessor states otherwise.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .ledger import AccountType


_CREDIT_NATURED = (AccountType.LIABILITY, AccountType.EQUITY)


@dataclass(frozen=True)
class TrialBalanceRow:
    """Debit and credit totals of one account."""

    account_id: str
    account_code: str
    account_name: str
    group_name: str
    debit: Decimal
    credit: Decimal


@dataclass(frozen=True)
class TrialBalance:
    """Trial balance rows and their column totals."""

    rows: tuple[TrialBalanceRow, ...]
    as_of: date | None = None

    @property
    def total_debit(self) -> Decimal:
        """Return the sum of the debit column."""
        return sum((row.debit for row in self.rows), Decimal("0"))

    @property
    def total_credit(self) -> Decimal:
        """Return the sum of the credit column."""
        return sum((row.credit for row in self.rows), Decimal("0"))

    @property
    def difference(self) -> Decimal:
        """Return total_debit minus total_credit."""
        return self.total_debit - self.total_credit

    @property
    def is_balanced(self) -> bool:
        """Return True when both columns agree."""
        return self.difference == 0


@dataclass(frozen=True)
class BalanceSheetAccount:
    """Account line of a balance sheet section."""

    account_id: str
    account_name: str
    amount: Decimal
    account_type: AccountType

    @property
    def display_amount(self) -> Decimal:
        """Return the amount with liabilities and equity read as positive."""
        if self.account_type in _CREDIT_NATURED:
            return -self.amount
        return self.amount


@dataclass(frozen=True)
class BalanceSheetSection:
    """Accounts of one group inside a balance sheet bucket."""

    category: str
    account_type: AccountType
    accounts: tuple[BalanceSheetAccount, ...]

    @property
    def total(self) -> Decimal:
        """Return the raw, debit-positive total of the section."""
        return sum((account.amount for account in self.accounts), Decimal("0"))

    @property
    def display_total(self) -> Decimal:
        """Return the total with liabilities and equity read as positive."""
        if self.account_type in _CREDIT_NATURED:
            return -self.total
        return self.total


@dataclass(frozen=True)
class BalanceSheet:
    """Point-in-time statement of assets, liabilities and equity."""

    as_of: date | None
    assets: tuple[BalanceSheetSection, ...]
    liabilities: tuple[BalanceSheetSection, ...]
    equity: tuple[BalanceSheetSection, ...]

    @property
    def total_assets(self) -> Decimal:
        return _sum_sections(self.assets)

    @property
    def total_liabilities(self) -> Decimal:
        return _sum_sections(self.liabilities)

    @property
    def total_equity(self) -> Decimal:
        return _sum_sections(self.equity)

    @property
    def difference(self) -> Decimal:
        """Return the raw sum of every bucket; zero when the sheet balances."""
        return self.total_assets + self.total_liabilities + self.total_equity

    @property
    def is_balanced(self) -> bool:
        return self.difference == 0

    def sections(self) -> tuple[BalanceSheetSection, ...]:
        """Return assets, liabilities then equity sections."""
        return self.assets + self.liabilities + self.equity


@dataclass(frozen=True)
class ProfitLossAccount:
    """Account line of a profit and loss section."""

    account_id: str
    account_name: str
    amount: Decimal


@dataclass(frozen=True)
class ProfitLossSection:
    """Accounts of one income or expense group."""

    category: str
    account_type: AccountType
    accounts: tuple[ProfitLossAccount, ...]

    @property
    def total(self) -> Decimal:
        return sum((account.amount for account in self.accounts), Decimal("0"))


@dataclass(frozen=True)
class ProfitAndLoss:
    """Period statement of income and expense."""

    start_date: date | None
    end_date: date | None
    income: tuple[ProfitLossSection, ...]
    expenses: tuple[ProfitLossSection, ...]

    @property
    def total_income(self) -> Decimal:
        return sum((section.total for section in self.income), Decimal("0"))

    @property
    def total_expense(self) -> Decimal:
        return sum((section.total for section in self.expenses), Decimal("0"))

    @property
    def net_profit(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class StatementEntry:
    """Posting of an account statement with the balance after it."""

    posting_id: str
    date: date
    reference: str | None
    narration: str | None
    debit: Decimal
    credit: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AccountStatement:
    """Ledger of a single account over a period."""

    account_id: str
    account_code: str
    account_name: str
    start_date: date | None
    end_date: date | None
    brought_forward: Decimal
    entries: tuple[StatementEntry, ...]

    @property
    def total_debit(self) -> Decimal:
        return sum((entry.debit for entry in self.entries), Decimal("0"))

    @property
    def total_credit(self) -> Decimal:
        return sum((entry.credit for entry in self.entries), Decimal("0"))

    @property
    def closing_balance(self) -> Decimal:
        if self.entries:
            return self.entries[-1].balance
        return self.brought_forward


@dataclass(frozen=True)
class GroupNode:
    """Account group with its accounts, sub-groups and rolled-up balance."""

    group_id: str
    name: str
    account_type: AccountType
    level: int
    account_ids: tuple[str, ...]
    children: tuple["GroupNode", ...]
    balance: Decimal


def _sum_sections(sections: tuple[BalanceSheetSection, ...]) -> Decimal:
    return sum((section.total for section in sections), Decimal("0"))


__all__ = [
    "TrialBalanceRow",
    "TrialBalance",
    "BalanceSheetAccount",
    "BalanceSheetSection",
    "BalanceSheet",
    "ProfitLossAccount",
    "ProfitLossSection",
    "ProfitAndLoss",
    "StatementEntry",
    "AccountStatement",
    "GroupNode",
]
