"""Domain services for walking the account group hierarchy.

Every walk is bounded by the number of groups in the snapshot, so a
malformed parent chain raises instead of looping.
"""

from collections.abc import Iterable, Mapping

from src.domain.errors import (
    CyclicGroupHierarchy,
    InvalidReference,
    MissingAccountType,
)
from src.domain.models.ledger import AccountGroup, AccountType


def build_group_index(groups: Iterable[AccountGroup]) -> dict[str, AccountGroup]:
    """Index groups by identifier.

    Args:
        groups: Groups of the snapshot.

    Returns:
        dict[str, AccountGroup]: Groups keyed by id.

    Raises:
        InvalidReference: If two groups share an identifier.
    """
    index: dict[str, AccountGroup] = {}
    for group in groups:
        if group.id in index:
            raise InvalidReference(f"Duplicate group id: {group.id!r}")
        index[group.id] = group
    return index


def group_chain(
    group_id: str,
    index: Mapping[str, AccountGroup],
) -> list[AccountGroup]:
    """Return a group followed by its ancestors, nearest first.

    Args:
        group_id: Starting group.
        index: Groups keyed by id.

    Returns:
        list[AccountGroup]: The chain up to the root group.

    Raises:
        InvalidReference: If a group or parent is not in the index.
        CyclicGroupHierarchy: If the chain is longer than the index.
    """
    chain: list[AccountGroup] = []
    limit = len(index)
    current_id: str | None = group_id
    while current_id is not None:
        group = index.get(current_id)
        if group is None:
            if not chain:
                raise InvalidReference(f"Unknown group id: {current_id!r}")
            raise InvalidReference(
                f"Group {chain[-1].id!r} has unknown parent {current_id!r}"
            )
        if len(chain) >= limit:
            raise CyclicGroupHierarchy(group_id, limit)
        chain.append(group)
        current_id = group.parent_group_id
    return chain


def resolve_account_type(
    group_id: str,
    index: Mapping[str, AccountGroup],
) -> AccountType:
    """Return the account type declared nearest to a group.

    Raises:
        MissingAccountType: If no group in the chain declares a type.
    """
    for group in group_chain(group_id, index):
        if group.account_type is not None:
            return group.account_type
    raise MissingAccountType(
        f"No account type declared for group {group_id!r} or its ancestors"
    )


def group_level(group_id: str, index: Mapping[str, AccountGroup]) -> int:
    """Return the depth of a group, zero for root groups."""
    return len(group_chain(group_id, index)) - 1


def find_type_mismatches(
    groups: Iterable[AccountGroup],
) -> list[tuple[AccountGroup, AccountType]]:
    """Find groups whose declared type differs from their ancestors'.

    Args:
        groups: Groups of the snapshot.

    Returns:
        list[tuple[AccountGroup, AccountType]]: Each mismatching group with
        the type declared by its nearest typed ancestor, ordered by id.
    """
    index = build_group_index(groups)
    mismatches = []
    for group_id in sorted(index):
        group = index[group_id]
        if group.account_type is None or group.parent_group_id is None:
            continue
        ancestors = group_chain(group_id, index)[1:]
        inherited = next(
            (
                ancestor.account_type
                for ancestor in ancestors
                if ancestor.account_type is not None
            ),
            None,
        )
        if inherited is not None and inherited != group.account_type:
            mismatches.append((group, inherited))
    return mismatches


__all__ = [
    "build_group_index",
    "group_chain",
    "resolve_account_type",
    "group_level",
    "find_type_mismatches",
]
