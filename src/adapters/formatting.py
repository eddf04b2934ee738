"""Plain-text rendering of ledger reports for the CLI adapters."""

from decimal import Decimal

from src.domain.models.reports import (
    AccountStatement,
    BalanceSheet,
    GroupNode,
    ProfitAndLoss,
    TrialBalance,
)

_WIDTH = 14


def format_amount(value: Decimal) -> str:
    """Return an amount with thousands separators and two decimals."""
    return f"{value:,.2f}"


def _column(value: Decimal) -> str:
    if value == 0:
        return "-".rjust(_WIDTH)
    return format_amount(value).rjust(_WIDTH)


def render_trial_balance(report: TrialBalance) -> list[str]:
    """Render trial balance rows and totals.

    Args:
        report: Computed trial balance.

    Returns:
        list[str]: Output lines.
    """
    lines = [f"Trial balance as of {report.as_of or 'today'}"]
    for row in report.rows:
        lines.append(
            f"{row.account_code:<10} {row.account_name:<30} "
            f"{row.group_name:<20} {_column(row.debit)} {_column(row.credit)}"
        )
    lines.append(
        f"{'Total':<62} {_column(report.total_debit)} "
        f"{_column(report.total_credit)}"
    )
    if not report.is_balanced:
        lines.append(f"Difference: {format_amount(report.difference)}")
    return lines


def render_balance_sheet(report: BalanceSheet) -> list[str]:
    """Render balance sheet sections with amounts as displayed to users."""
    lines = [f"Balance sheet as of {report.as_of or 'today'}"]
    for title, sections in (
        ("Assets", report.assets),
        ("Liabilities", report.liabilities),
        ("Equity", report.equity),
    ):
        lines.append(title)
        for section in sections:
            lines.append(
                f"  {section.category:<40} "
                f"{format_amount(section.display_total).rjust(_WIDTH)}"
            )
            for account in section.accounts:
                lines.append(
                    f"    {account.account_name:<38} "
                    f"{format_amount(account.display_amount).rjust(_WIDTH)}"
                )
    if not report.is_balanced:
        lines.append(f"Difference: {format_amount(report.difference)}")
    return lines


def render_profit_and_loss(report: ProfitAndLoss) -> list[str]:
    """Render income and expense sections and the net result."""
    lines = [
        f"Profit and loss from {report.start_date or 'start'} "
        f"to {report.end_date or 'today'}"
    ]
    for title, sections, total in (
        ("Income", report.income, report.total_income),
        ("Expenses", report.expenses, report.total_expense),
    ):
        lines.append(title)
        for section in sections:
            lines.append(
                f"  {section.category:<40} "
                f"{format_amount(section.total).rjust(_WIDTH)}"
            )
        label = f"Total {title.lower()}"
        lines.append(f"  {label:<40} {format_amount(total).rjust(_WIDTH)}")
    label = "Net profit" if report.net_profit >= 0 else "Net loss"
    lines.append(f"{label}: {format_amount(abs(report.net_profit))}")
    return lines


def render_account_statement(statement: AccountStatement) -> list[str]:
    """Render the entries of an account statement."""
    lines = [
        f"Ledger {statement.account_code} {statement.account_name}",
        f"Brought forward: {format_amount(statement.brought_forward)}",
    ]
    for entry in statement.entries:
        lines.append(
            f"{entry.date.isoformat()} {(entry.reference or 'N/A'):<12} "
            f"{(entry.narration or '-'):<30} {_column(entry.debit)} "
            f"{_column(entry.credit)} {format_amount(entry.balance).rjust(_WIDTH)}"
        )
    lines.append(
        f"Totals: debit={format_amount(statement.total_debit)}, "
        f"credit={format_amount(statement.total_credit)}, "
        f"closing={format_amount(statement.closing_balance)}"
    )
    return lines


def render_group_tree(nodes: tuple[GroupNode, ...]) -> list[str]:
    """Render the group hierarchy indented by level."""
    lines: list[str] = []
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        indent = "  " * node.level
        lines.append(
            f"{indent}{node.name} [{node.account_type.value}] "
            f"{format_amount(node.balance)}"
        )
        stack.extend(reversed(node.children))
    return lines


__all__ = [
    "format_amount",
    "render_trial_balance",
    "render_balance_sheet",
    "render_profit_and_loss",
    "render_account_statement",
    "render_group_tree",
]
