"""CLI adapter printing the trial balance, balance sheet and P&L.

The reporting period comes from ``REPORT_START_DATE`` and
``REPORT_END_DATE``; see ReportSettings for the other options.
"""

import sys

from src.adapters.formatting import (
    render_balance_sheet,
    render_profit_and_loss,
    render_trial_balance,
)
from src.domain.errors import LedgerError
from src.infrastructure.container import (
    build_balance_sheet_use_case,
    build_ledger_repository,
    build_profit_and_loss_use_case,
    build_trial_balance_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import ReportSettings


def main() -> int:
    """Compute and print the three period reports."""
    logger = get_app_logger()
    settings = ReportSettings.from_env()
    repository = build_ledger_repository()

    try:
        trial_balance = build_trial_balance_use_case(
            settings,
            repository,
        ).execute(end_date=settings.end_date)
        balance_sheet = build_balance_sheet_use_case(
            settings,
            repository,
        ).execute(start_date=settings.start_date, end_date=settings.end_date)
        profit_and_loss = build_profit_and_loss_use_case(
            settings,
            repository,
        ).execute(start_date=settings.start_date, end_date=settings.end_date)
    except LedgerError as exc:
        logger.error(f"Ledger data is inconsistent: {exc}")
        return 1

    for lines in (
        render_trial_balance(trial_balance),
        render_balance_sheet(balance_sheet),
        render_profit_and_loss(profit_and_loss),
    ):
        print("\n".join(lines))
        print()

    get_usage_logger().info(
        f"ledger_reports start={settings.start_date} end={settings.end_date}"
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
