"""Domain normalization helpers."""

from src.domain.errors import MissingAccountType
from src.domain.models.ledger import AccountType


def normalize_account_type(value: str | AccountType | None) -> AccountType | None:
    """Normalize a raw account type value.

    Args:
        value: Raw account type from a repository row.

    Returns:
        AccountType | None: Parsed account type, None when blank.

    Raises:
        MissingAccountType: If the value is not a known account type.
    """
    if value is None or isinstance(value, AccountType):
        return value
    cleaned = value.strip().lower()
    if not cleaned:
        return None
    try:
        return AccountType(cleaned)
    except ValueError as exc:
        raise MissingAccountType(f"Unknown account type: {value!r}") from exc


def normalize_code(code: str | None) -> str:
    """Normalize an account code for lookups.

    Args:
        code: Raw account code.

    Returns:
        str: Stripped, upper-cased code; empty when missing.
    """
    if not code:
        return ""
    return code.strip().upper()


__all__ = ["normalize_account_type", "normalize_code"]
