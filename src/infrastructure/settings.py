"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import date
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class ReportSettings:
    """Settings for producing ledger reports.

    Attributes:
        include_inactive: Whether reports list inactive accounts.
        skip_zero_rows: Whether the trial balance hides idle accounts.
        start_date: Optional first day of the reporting period.
        end_date: Optional last day of the reporting period.
        account_code: Optional account code for statements.
    """

    include_inactive: bool = False
    skip_zero_rows: bool = True
    start_date: date | None = None
    end_date: date | None = None
    account_code: str | None = None

    @classmethod
    def from_env(cls) -> "ReportSettings":
        """Build settings from environment variables.

        Returns:
            ReportSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        start_date = cls._parse_date(os.getenv("REPORT_START_DATE"), logger)
        end_date = cls._parse_date(os.getenv("REPORT_END_DATE"), logger)
        if start_date and end_date and start_date > end_date:
            logger.warning(
                f"REPORT_START_DATE {start_date} is after REPORT_END_DATE "
                f"{end_date}; ignoring the start date"
            )
            start_date = None
        account_code = (os.getenv("REPORT_ACCOUNT_CODE") or "").strip()
        return cls(
            include_inactive=cls._parse_flag(
                "REPORT_INCLUDE_INACTIVE",
                default=False,
                logger=logger,
            ),
            skip_zero_rows=cls._parse_flag(
                "REPORT_SKIP_ZERO_ROWS",
                default=True,
                logger=logger,
            ),
            start_date=start_date,
            end_date=end_date,
            account_code=account_code or None,
        )

    @staticmethod
    def _parse_flag(name: str, default: bool, logger) -> bool:
        """Parse a boolean environment variable.

        Args:
            name: Environment variable name.
            default: Value used when unset or unreadable.
            logger: Logger used for warnings.

        Returns:
            bool: Parsed flag.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        cleaned = raw.strip().lower()
        if cleaned in _TRUE_VALUES:
            return True
        if cleaned in _FALSE_VALUES:
            return False
        logger.warning(f"Invalid boolean '{raw}' for {name}; using {default}")
        return default

    @staticmethod
    def _parse_date(value: str | None, logger) -> date | None:
        """Parse an ISO date string into a date.

        Args:
            value: Date string in YYYY-MM-DD format.
            logger: Logger used for warnings.

        Returns:
            date | None: Parsed date or None when missing or invalid.
        """
        if not value:
            return None
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            logger.warning(
                f"Invalid date '{value}'. Expected format YYYY-MM-DD."
            )
            return None


__all__ = ["ReportSettings"]
