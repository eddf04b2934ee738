"""Domain errors raised on malformed ledger data.

These are data errors: a report computed from such input would be wrong,
so the computation stops and the caller is told why.
"""


class LedgerError(Exception):
    """Base class for ledger data errors."""


class InvalidReference(LedgerError):
    """An identifier points to a record that is not in the snapshot."""


class CyclicGroupHierarchy(LedgerError):
    """A group parent chain does not terminate."""

    def __init__(self, group_id: str, limit: int) -> None:
        super().__init__(
            f"Group chain starting at {group_id!r} exceeds {limit} groups; "
            "the parent hierarchy contains a cycle"
        )
        self.group_id = group_id
        self.limit = limit


class InconsistentPosting(LedgerError):
    """A posting is not exactly one of a debit or a credit."""

    def __init__(self, posting_id: str, reason: str) -> None:
        super().__init__(f"Posting {posting_id!r} is inconsistent: {reason}")
        self.posting_id = posting_id
        self.reason = reason


class MissingAccountType(LedgerError):
    """No group in a chain declares a known account type."""


__all__ = [
    "LedgerError",
    "InvalidReference",
    "CyclicGroupHierarchy",
    "InconsistentPosting",
    "MissingAccountType",
]
