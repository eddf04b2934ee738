"""Domain constants for ledger reports."""

from .models.ledger import AccountType

BALANCE_SHEET_TYPES = (
    AccountType.ASSET,
    AccountType.LIABILITY,
    AccountType.EQUITY,
)

PROFIT_AND_LOSS_TYPES = (
    AccountType.INCOME,
    AccountType.EXPENSE,
)

# Account types whose normal balance sits on the debit side.
DEBIT_NATURED_TYPES = (
    AccountType.ASSET,
    AccountType.EXPENSE,
)

CURRENT_YEAR_PROFIT = "Current Year Profit"
CURRENT_YEAR_LOSS = "Current Year Loss"
NET_PROFIT_ACCOUNT_ID = "net_profit"
NET_PROFIT_LABEL = "Net Profit for the Period"
NET_LOSS_LABEL = "Net Loss for the Period"
PROFIT_BROUGHT_FORWARD = "Profit Brought Forward"
LOSS_BROUGHT_FORWARD = "Loss Brought Forward"
RETAINED_EARNINGS_ACCOUNT_ID = "retained_earnings"
RETAINED_EARNINGS_LABEL = "Retained Earnings"
INACTIVE_ACCOUNTS = "Inactive Accounts"
INACTIVE_ACCOUNTS_ID = "inactive_accounts"


__all__ = [
    "BALANCE_SHEET_TYPES",
    "PROFIT_AND_LOSS_TYPES",
    "DEBIT_NATURED_TYPES",
    "CURRENT_YEAR_PROFIT",
    "CURRENT_YEAR_LOSS",
    "NET_PROFIT_ACCOUNT_ID",
    "NET_PROFIT_LABEL",
    "NET_LOSS_LABEL",
    "PROFIT_BROUGHT_FORWARD",
    "LOSS_BROUGHT_FORWARD",
    "RETAINED_EARNINGS_ACCOUNT_ID",
    "RETAINED_EARNINGS_LABEL",
    "INACTIVE_ACCOUNTS",
    "INACTIVE_ACCOUNTS_ID",
]
