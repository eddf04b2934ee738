"""CLI adapter refreshing the cached current_balance column.

This module wires the RefreshCurrentBalancesUseCase to the concrete
repository and provides a command-line entry point for the job.
"""

import sys

from src.domain.errors import LedgerError
from src.infrastructure.container import build_refresh_balances_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ReportSettings


def main() -> int:
    """Run the balance cache refresh."""
    logger = get_app_logger()
    settings = ReportSettings.from_env()
    use_case = build_refresh_balances_use_case()
    try:
        result = use_case.run(as_of=settings.end_date)
    except LedgerError as exc:
        logger.error(f"Balances not refreshed: {exc}")
        return 1

    print(
        f"Refreshed {result.updated_count} of {result.account_count} "
        f"account balances ({result.drifted_count} had drifted)."
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
