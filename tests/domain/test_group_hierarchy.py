"""Tests for group hierarchy walks and the group tree."""

from decimal import Decimal

import pytest

from src.domain.errors import (
    CyclicGroupHierarchy,
    InvalidReference,
    MissingAccountType,
)
from src.domain.models import AccountGroup, AccountType, LedgerAccount
from src.domain.services.balances import compute_account_balances
from src.domain.services.hierarchy import (
    build_group_index,
    find_type_mismatches,
    group_chain,
    group_level,
    resolve_account_type,
)
from src.domain.services.tree import build_group_tree


GROUPS = [
    AccountGroup(
        id="assets",
        name="Assets",
        account_type=AccountType.ASSET,
        display_order=1,
    ),
    AccountGroup(
        id="current",
        name="Current Assets",
        parent_group_id="assets",
        display_order=2,
    ),
    AccountGroup(
        id="fixed",
        name="Fixed Assets",
        parent_group_id="assets",
        display_order=1,
    ),
    AccountGroup(id="cash", name="Cash in Hand", parent_group_id="current"),
    AccountGroup(
        id="liabilities",
        name="Liabilities",
        account_type=AccountType.LIABILITY,
        display_order=2,
    ),
]


def test_group_chain_lists_ancestors_nearest_first() -> None:
    index = build_group_index(GROUPS)

    chain = group_chain("cash", index)

    assert [group.id for group in chain] == ["cash", "current", "assets"]
    assert group_level("cash", index) == 2
    assert group_level("assets", index) == 0


def test_account_type_is_inherited_from_nearest_declaring_ancestor() -> None:
    index = build_group_index(GROUPS)

    assert resolve_account_type("cash", index) is AccountType.ASSET


def test_two_group_cycle_is_detected() -> None:
    index = build_group_index(
        [
            AccountGroup(id="a", name="A", parent_group_id="b"),
            AccountGroup(id="b", name="B", parent_group_id="a"),
        ]
    )

    with pytest.raises(CyclicGroupHierarchy, match="cycle"):
        group_chain("a", index)


def test_self_parent_is_detected() -> None:
    index = build_group_index(
        [AccountGroup(id="a", name="A", parent_group_id="a")]
    )

    with pytest.raises(CyclicGroupHierarchy):
        resolve_account_type("a", index)


def test_unknown_parent_fails() -> None:
    index = build_group_index(
        [AccountGroup(id="a", name="A", parent_group_id="missing")]
    )

    with pytest.raises(InvalidReference, match="missing"):
        group_chain("a", index)


def test_duplicate_group_ids_fail() -> None:
    with pytest.raises(InvalidReference):
        build_group_index(
            [AccountGroup(id="a", name="A"), AccountGroup(id="a", name="B")]
        )


def test_untyped_chain_fails() -> None:
    index = build_group_index([AccountGroup(id="a", name="A")])

    with pytest.raises(MissingAccountType):
        resolve_account_type("a", index)


def test_type_mismatches_are_reported() -> None:
    groups = GROUPS + [
        AccountGroup(
            id="odd",
            name="Odd Loans",
            account_type=AccountType.LIABILITY,
            parent_group_id="current",
        )
    ]

    mismatches = find_type_mismatches(groups)

    assert [(group.id, inherited) for group, inherited in mismatches] == [
        ("odd", AccountType.ASSET)
    ]


def test_group_tree_rolls_balances_up_and_orders_children() -> None:
    accounts = [
        LedgerAccount(
            id="petty",
            code="1010",
            name="Petty Cash",
            group_id="cash",
            opening_balance=Decimal("40"),
        ),
        LedgerAccount(
            id="van",
            code="1500",
            name="Van",
            group_id="fixed",
            opening_balance=Decimal("2000"),
        ),
        LedgerAccount(
            id="loan",
            code="2000",
            name="Loan",
            group_id="liabilities",
            opening_balance=Decimal("-1500"),
        ),
    ]
    balances = compute_account_balances(accounts, [])

    tree = build_group_tree(GROUPS, accounts, balances)

    assert [node.group_id for node in tree] == ["assets", "liabilities"]
    assets = tree[0]
    assert assets.balance == Decimal("2040")
    assert [child.group_id for child in assets.children] == ["fixed", "current"]
    cash = assets.children[1].children[0]
    assert cash.level == 2
    assert cash.account_ids == ("petty",)
    assert cash.account_type is AccountType.ASSET
    assert tree[1].balance == Decimal("-1500")


def test_group_tree_rejects_cycles_outside_roots() -> None:
    groups = GROUPS + [
        AccountGroup(id="x", name="X", parent_group_id="y"),
        AccountGroup(id="y", name="Y", parent_group_id="x"),
    ]

    with pytest.raises(CyclicGroupHierarchy):
        build_group_tree(groups, [], {})


def _deep_chain(depth: int) -> list[AccountGroup]:
    groups = [AccountGroup(id="g0", name="Root", account_type=AccountType.ASSET)]
    for level in range(1, depth):
        groups.append(
            AccountGroup(
                id=f"g{level}",
                name=f"Level {level}",
                parent_group_id=f"g{level - 1}",
            )
        )
    return groups


def test_group_tree_handles_chains_deeper_than_recursion_limit() -> None:
    """Deep but acyclic hierarchies build without exhausting the stack."""
    depth = 1200
    groups = _deep_chain(depth)
    accounts = [
        LedgerAccount(
            id="leaf",
            code="1000",
            name="Leaf",
            group_id=f"g{depth - 1}",
            opening_balance=Decimal("7"),
        )
    ]
    balances = compute_account_balances(accounts, [])

    tree = build_group_tree(groups, accounts, balances)

    node = tree[0]
    assert node.balance == Decimal("7")
    while node.children:
        node = node.children[0]
    assert node.group_id == f"g{depth - 1}"
    assert node.level == depth - 1
    assert node.account_ids == ("leaf",)
