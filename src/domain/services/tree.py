"""Domain service building the account group tree with balances."""

from collections.abc import Mapping, Sequence
from decimal import Decimal

from src.domain.errors import InvalidReference
from src.domain.models.ledger import AccountBalance, AccountGroup, LedgerAccount
from src.domain.models.reports import GroupNode
from src.domain.services.hierarchy import (
    build_group_index,
    group_level,
    resolve_account_type,
)


def build_group_tree(
    groups: Sequence[AccountGroup],
    accounts: Sequence[LedgerAccount],
    balances: Mapping[str, AccountBalance],
) -> tuple[GroupNode, ...]:
    """Build the group hierarchy with rolled-up balances.

    Args:
        groups: Groups of the snapshot.
        accounts: Accounts of the snapshot.
        balances: Output of compute_account_balances.

    Returns:
        tuple[GroupNode, ...]: Root groups ordered by display order then
        name; each node's balance includes its sub-groups.

    Raises:
        InvalidReference: On unknown parent, group or balance references.
        CyclicGroupHierarchy: If a parent chain does not terminate.
    """
    index = build_group_index(groups)
    levels = {group_id: group_level(group_id, index) for group_id in index}

    children: dict[str | None, list[AccountGroup]] = {}
    for group in index.values():
        children.setdefault(group.parent_group_id, []).append(group)

    accounts_by_group: dict[str, list[LedgerAccount]] = {}
    for account in sorted(accounts, key=lambda item: (item.code, item.id)):
        if account.group_id not in index:
            raise InvalidReference(
                f"Account {account.code!r} references unknown group "
                f"{account.group_id!r}"
            )
        if account.id not in balances:
            raise InvalidReference(
                f"No balance computed for account {account.code!r}"
            )
        accounts_by_group.setdefault(account.group_id, []).append(account)

    # Deepest groups first, so every child node exists before its parent.
    nodes: dict[str, GroupNode] = {}
    for group in sorted(index.values(), key=lambda item: -levels[item.id]):
        child_nodes = tuple(
            nodes[child.id] for child in _ordered(children.get(group.id, []))
        )
        direct = accounts_by_group.get(group.id, [])
        balance = sum(
            (balances[account.id].current_balance for account in direct),
            Decimal("0"),
        )
        balance += sum((node.balance for node in child_nodes), Decimal("0"))
        nodes[group.id] = GroupNode(
            group_id=group.id,
            name=group.name,
            account_type=resolve_account_type(group.id, index),
            level=levels[group.id],
            account_ids=tuple(account.id for account in direct),
            children=child_nodes,
            balance=balance,
        )

    return tuple(nodes[root.id] for root in _ordered(children.get(None, [])))


def _ordered(groups: list[AccountGroup]) -> list[AccountGroup]:
    return sorted(
        groups,
        key=lambda group: (group.display_order, group.name, group.id),
    )


__all__ = ["build_group_tree"]
