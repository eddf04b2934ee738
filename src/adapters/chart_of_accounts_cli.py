"""CLI adapter printing the account group tree with balances."""

import sys

from src.adapters.formatting import render_group_tree
from src.domain.errors import LedgerError
from src.infrastructure.container import build_group_tree_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ReportSettings


def main() -> int:
    """Print the chart of accounts as of ``REPORT_END_DATE``."""
    logger = get_app_logger()
    settings = ReportSettings.from_env()
    try:
        tree = build_group_tree_use_case().execute(as_of=settings.end_date)
    except LedgerError as exc:
        logger.error(str(exc))
        return 1
    print("\n".join(render_group_tree(tree)))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
