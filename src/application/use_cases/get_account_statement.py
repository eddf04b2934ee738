"""Use case to build the running-balance statement of one account."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import InvalidReference
from src.domain.models.reports import AccountStatement
from src.domain.services.normalization import normalize_code
from src.domain.services.statement import build_account_statement
from src.infrastructure.logging.logger import get_app_logger


class GetAccountStatementUseCase:
    """List the postings of an account with a running balance."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing the ledger snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_code: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> AccountStatement:
        """Return the statement of the account with the given code.

        Args:
            account_code: Code of the account, matched case-insensitively.
            start_date: Optional first day of the period.
            end_date: Optional last day of the period.

        Returns:
            AccountStatement: Brought-forward balance and period entries.

        Raises:
            InvalidReference: If no account has the given code.
        """
        wanted = normalize_code(account_code)
        accounts = self._ledger_repository.fetch_accounts()
        account = next(
            (item for item in accounts if normalize_code(item.code) == wanted),
            None,
        )
        if account is None:
            raise InvalidReference(f"Unknown account code: {account_code!r}")

        # Earlier postings feed the brought-forward balance.
        postings = self._ledger_repository.fetch_postings(
            None,
            end_date,
            account_id=account.id,
        )
        statement = build_account_statement(
            account,
            postings,
            start_date,
            end_date,
        )
        self._logger.info(
            f"Statement for {account.code}: {len(statement.entries)} entries, "
            f"brought_forward={statement.brought_forward}, "
            f"closing={statement.closing_balance}"
        )
        return statement


__all__ = ["GetAccountStatementUseCase", "AccountStatement"]
