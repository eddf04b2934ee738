"""Domain services for trial balance, balance sheet and profit and loss."""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    BALANCE_SHEET_TYPES,
    CURRENT_YEAR_LOSS,
    CURRENT_YEAR_PROFIT,
    INACTIVE_ACCOUNTS,
    INACTIVE_ACCOUNTS_ID,
    LOSS_BROUGHT_FORWARD,
    NET_LOSS_LABEL,
    NET_PROFIT_ACCOUNT_ID,
    NET_PROFIT_LABEL,
    PROFIT_AND_LOSS_TYPES,
    PROFIT_BROUGHT_FORWARD,
    RETAINED_EARNINGS_ACCOUNT_ID,
    RETAINED_EARNINGS_LABEL,
)
from src.domain.errors import InvalidReference
from src.domain.models.ledger import (
    AccountBalance,
    AccountGroup,
    AccountType,
    LedgerAccount,
    Posting,
)
from src.domain.models.reports import (
    BalanceSheet,
    BalanceSheetAccount,
    BalanceSheetSection,
    ProfitAndLoss,
    ProfitLossAccount,
    ProfitLossSection,
    TrialBalance,
    TrialBalanceRow,
)
from src.domain.policies.account_filters import has_activity, is_reportable
from src.domain.services.balances import build_account_index
from src.domain.services.hierarchy import (
    build_group_index,
    resolve_account_type,
)
from src.domain.services.validation import validate_posting


def build_trial_balance(
    accounts: Sequence[LedgerAccount],
    groups: Sequence[AccountGroup],
    balances: Mapping[str, AccountBalance],
    *,
    as_of: date | None = None,
    include_inactive: bool = True,
    skip_zero_rows: bool = False,
) -> TrialBalance:
    """Build the trial balance from computed account balances.

    Rows carry the debit and credit totals of each account without netting
    them. Column totals only agree when the postings were entered as
    balanced pairs; an imbalance is reported as is.

    Args:
        accounts: Accounts of the snapshot.
        groups: Groups of the snapshot.
        balances: Output of compute_account_balances.
        as_of: Cutoff date the balances were computed for.
        include_inactive: Whether inactive accounts are listed.
        skip_zero_rows: Whether accounts with no debit or credit are hidden.

    Returns:
        TrialBalance: Rows ordered by account code.
    """
    group_index = build_group_index(groups)
    rows = []
    for account in _sorted_accounts(accounts):
        if not is_reportable(account, include_inactive):
            continue
        group = _account_group(account, group_index)
        balance = _account_balance(account, balances)
        if skip_zero_rows and not has_activity(
            balance.debit_total,
            balance.credit_total,
        ):
            continue
        rows.append(
            TrialBalanceRow(
                account_id=account.id,
                account_code=account.code,
                account_name=account.name,
                group_name=group.name,
                debit=balance.debit_total,
                credit=balance.credit_total,
            )
        )
    return TrialBalance(rows=tuple(rows), as_of=as_of)


def build_balance_sheet(
    accounts: Sequence[LedgerAccount],
    groups: Sequence[AccountGroup],
    balances: Mapping[str, AccountBalance],
    as_of: date | None = None,
    *,
    period_result: Decimal | None = None,
    profit_brought_forward: Decimal | None = None,
    include_inactive: bool = True,
) -> BalanceSheet:
    """Build the balance sheet from balances computed as of a date.

    Amounts keep the ledger sign (opening + debits - credits), so liability
    and equity amounts are normally negative; use the ``display_*``
    accessors of the result to read them as positive amounts owed.

    Hidden inactive accounts that still carry a balance are summed into
    one "Inactive Accounts" line per bucket, so filtering them never
    unbalances the sheet.

    Args:
        accounts: Accounts of the snapshot.
        groups: Groups of the snapshot.
        balances: Output of compute_account_balances for ``as_of``.
        as_of: Date of the statement.
        period_result: Optional net profit of the period, shown as a
            current year profit or loss line among liabilities.
        profit_brought_forward: Optional profit accumulated before the
            period, shown as a retained earnings line among liabilities.
        include_inactive: Whether inactive accounts are listed one by one.

    Returns:
        BalanceSheet: Sections per bucket, grouped by group name.
    """
    group_index = build_group_index(groups)
    buckets: dict[AccountType, dict[str, list[BalanceSheetAccount]]] = {
        account_type: {} for account_type in BALANCE_SHEET_TYPES
    }
    hidden = {account_type: Decimal("0") for account_type in BALANCE_SHEET_TYPES}
    for account in _sorted_accounts(accounts):
        group = _account_group(account, group_index)
        account_type = resolve_account_type(group.id, group_index)
        if account_type in PROFIT_AND_LOSS_TYPES:
            continue
        balance = _account_balance(account, balances)
        if not is_reportable(account, include_inactive):
            hidden[account_type] += balance.current_balance
            continue
        buckets[account_type].setdefault(group.name, []).append(
            BalanceSheetAccount(
                account_id=account.id,
                account_name=account.name,
                amount=balance.current_balance,
                account_type=account_type,
            )
        )

    sections = {
        account_type: [
            BalanceSheetSection(
                category=category,
                account_type=account_type,
                accounts=tuple(lines),
            )
            for category, lines in grouped.items()
        ]
        for account_type, grouped in buckets.items()
    }
    for account_type, amount in hidden.items():
        if amount:
            sections[account_type].append(
                _inactive_section(account_type, amount)
            )
    if profit_brought_forward:
        sections[AccountType.LIABILITY].append(
            _result_section(
                profit_brought_forward,
                PROFIT_BROUGHT_FORWARD,
                LOSS_BROUGHT_FORWARD,
                RETAINED_EARNINGS_ACCOUNT_ID,
                RETAINED_EARNINGS_LABEL,
                RETAINED_EARNINGS_LABEL,
            )
        )
    if period_result:
        sections[AccountType.LIABILITY].append(
            _result_section(
                period_result,
                CURRENT_YEAR_PROFIT,
                CURRENT_YEAR_LOSS,
                NET_PROFIT_ACCOUNT_ID,
                NET_PROFIT_LABEL,
                NET_LOSS_LABEL,
            )
        )

    return BalanceSheet(
        as_of=as_of,
        assets=tuple(sections[AccountType.ASSET]),
        liabilities=tuple(sections[AccountType.LIABILITY]),
        equity=tuple(sections[AccountType.EQUITY]),
    )


def compute_accumulated_profit(
    accounts: Sequence[LedgerAccount],
    groups: Sequence[AccountGroup],
    balances: Mapping[str, AccountBalance],
) -> Decimal:
    """Return the net profit held in income and expense balances.

    Inactive accounts count too; the result is what those accounts would
    close into retained earnings.

    Args:
        accounts: Accounts of the snapshot.
        groups: Groups of the snapshot.
        balances: Output of compute_account_balances.

    Returns:
        Decimal: Profit as a positive amount, loss as a negative one.
    """
    group_index = build_group_index(groups)
    total = Decimal("0")
    for account in accounts:
        group = _account_group(account, group_index)
        if resolve_account_type(group.id, group_index) in PROFIT_AND_LOSS_TYPES:
            total -= _account_balance(account, balances).current_balance
    return total


def build_profit_and_loss(
    accounts: Sequence[LedgerAccount],
    groups: Sequence[AccountGroup],
    postings: Iterable[Posting],
    start_date: date | None = None,
    end_date: date | None = None,
    *,
    include_inactive: bool = True,
) -> ProfitAndLoss:
    """Build the profit and loss statement for a period.

    Only postings dated within ``[start_date, end_date]`` (both inclusive)
    count. Each income or expense account reports ``abs(credit - debit)``
    over the period; the section type tells income from expense.

    Args:
        accounts: Accounts of the snapshot.
        groups: Groups of the snapshot.
        postings: Postings of the snapshot, in any order.
        start_date: First day of the period, None for no lower bound.
        end_date: Last day of the period, None for no upper bound.
        include_inactive: Whether inactive accounts are listed.

    Returns:
        ProfitAndLoss: Income and expense sections grouped by group name.
    """
    account_index = build_account_index(accounts)
    group_index = build_group_index(groups)
    period_balances = {account_id: Decimal("0") for account_id in account_index}
    for posting in postings:
        if posting.account_id not in account_index:
            raise InvalidReference(
                f"Posting {posting.id!r} references unknown account "
                f"{posting.account_id!r}"
            )
        validate_posting(posting)
        if not _within(posting.date, start_date, end_date):
            continue
        period_balances[posting.account_id] += posting.credit - posting.debit

    buckets: dict[AccountType, dict[str, list[ProfitLossAccount]]] = {
        account_type: {} for account_type in PROFIT_AND_LOSS_TYPES
    }
    for account in _sorted_accounts(account_index.values()):
        if not is_reportable(account, include_inactive):
            continue
        group = _account_group(account, group_index)
        account_type = resolve_account_type(group.id, group_index)
        if account_type not in PROFIT_AND_LOSS_TYPES:
            continue
        amount = abs(period_balances[account.id])
        if amount == 0:
            continue
        buckets[account_type].setdefault(group.name, []).append(
            ProfitLossAccount(
                account_id=account.id,
                account_name=account.name,
                amount=amount,
            )
        )

    income, expenses = (
        tuple(
            ProfitLossSection(
                category=category,
                account_type=account_type,
                accounts=tuple(lines),
            )
            for category, lines in buckets[account_type].items()
        )
        for account_type in (AccountType.INCOME, AccountType.EXPENSE)
    )
    return ProfitAndLoss(
        start_date=start_date,
        end_date=end_date,
        income=income,
        expenses=expenses,
    )


def _result_section(
    result: Decimal,
    profit_category: str,
    loss_category: str,
    account_id: str,
    profit_label: str,
    loss_label: str,
) -> BalanceSheetSection:
    is_profit = result > 0
    return BalanceSheetSection(
        category=profit_category if is_profit else loss_category,
        account_type=AccountType.LIABILITY,
        accounts=(
            BalanceSheetAccount(
                account_id=account_id,
                account_name=profit_label if is_profit else loss_label,
                # Profit is credit-natured.
                amount=-result,
                account_type=AccountType.LIABILITY,
            ),
        ),
    )


def _inactive_section(
    account_type: AccountType,
    amount: Decimal,
) -> BalanceSheetSection:
    return BalanceSheetSection(
        category=INACTIVE_ACCOUNTS,
        account_type=account_type,
        accounts=(
            BalanceSheetAccount(
                account_id=INACTIVE_ACCOUNTS_ID,
                account_name=INACTIVE_ACCOUNTS,
                amount=amount,
                account_type=account_type,
            ),
        ),
    )


def _sorted_accounts(
    accounts: Iterable[LedgerAccount],
) -> list[LedgerAccount]:
    return sorted(accounts, key=lambda account: (account.code, account.id))


def _account_group(
    account: LedgerAccount,
    group_index: Mapping[str, AccountGroup],
) -> AccountGroup:
    group = group_index.get(account.group_id)
    if group is None:
        raise InvalidReference(
            f"Account {account.code!r} references unknown group "
            f"{account.group_id!r}"
        )
    return group


def _account_balance(
    account: LedgerAccount,
    balances: Mapping[str, AccountBalance],
) -> AccountBalance:
    balance = balances.get(account.id)
    if balance is None:
        raise InvalidReference(f"No balance computed for account {account.code!r}")
    return balance


def _within(
    value: date,
    start_date: date | None,
    end_date: date | None,
) -> bool:
    if start_date is not None and value < start_date:
        return False
    if end_date is not None and value > end_date:
        return False
    return True


__all__ = [
    "build_trial_balance",
    "build_balance_sheet",
    "build_profit_and_loss",
    "compute_accumulated_profit",
]
