"""CLI adapter printing the ledger of a single account."""

import sys

from src.adapters.formatting import render_account_statement
from src.domain.errors import LedgerError
from src.infrastructure.container import build_account_statement_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import ReportSettings


def main() -> int:
    """Print the statement of ``REPORT_ACCOUNT_CODE``."""
    logger = get_app_logger()
    settings = ReportSettings.from_env()
    if settings.account_code is None:
        logger.warning("REPORT_ACCOUNT_CODE is required to print a statement.")
        return 1

    use_case = build_account_statement_use_case()
    try:
        statement = use_case.execute(
            settings.account_code,
            start_date=settings.start_date,
            end_date=settings.end_date,
        )
    except LedgerError as exc:
        logger.error(str(exc))
        return 1

    print("\n".join(render_account_statement(statement)))
    get_usage_logger().info(f"account_statement code={statement.account_code}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
