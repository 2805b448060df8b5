import pytest

from edaulas.avl import (
    balance_factor,
    height,
    insert_avl,
    insert_left,
    rebalance,
    rotate_left,
    rotate_left_right,
    rotate_right,
    rotate_right_left,
)
from edaulas.bst import Node, in_order, insert, pre_order


def build_bst(values):
    root = None
    for value in values:
        root = insert(root, value)
    return root


def build_avl(values):
    root = None
    for value in values:
        root = insert_avl(root, value)
    return root


def build_left_chain(values):
    root = None
    for value in values:
        root = insert_left(root, value)
    return root


def test_height_of_empty_and_single_node():
    assert height(None) == 0
    assert height(Node(1)) == 1


def test_height_of_chain_equals_length():
    values = [9, 8, 7, 6, 5]
    assert height(build_left_chain(values)) == len(values)


def test_balance_factor_of_empty_and_leaf_is_zero():
    assert balance_factor(None) == 0
    assert balance_factor(Node(4)) == 0


def test_balance_factor_sign_follows_heavy_side():
    assert balance_factor(build_bst([3, 2, 1])) > 1
    assert balance_factor(build_bst([1, 2, 3])) < -1


def test_insert_left_keeps_insertion_order_in_pre_order():
    values = [10, 20, 5, 30]
    root = build_left_chain(values)
    assert list(pre_order(root)) == values
    assert list(in_order(root)) == list(reversed(values))


def test_rotate_right_on_left_chain():
    root = rotate_right(build_bst([3, 2, 1]))
    assert root.value == 2
    assert root.left.value == 1
    assert root.right.value == 3
    assert height(root) == 2


def test_rotate_left_on_right_chain():
    root = rotate_left(build_bst([1, 2, 3]))
    assert root.value == 2
    assert root.left.value == 1
    assert root.right.value == 3


def test_rotations_without_child_return_node_unchanged():
    leaf = Node(5)
    assert rotate_right(leaf) is leaf
    assert rotate_left(leaf) is leaf
    assert rotate_left_right(leaf) is leaf
    assert rotate_right_left(leaf) is leaf
    assert rotate_right(None) is None
    assert rotate_left(None) is None


@pytest.mark.parametrize(
    "rotation, values",
    [
        (rotate_right, [50, 30, 70, 20, 40]),
        (rotate_left, [50, 30, 70, 60, 80]),
        (rotate_left_right, [50, 30, 70, 20, 40, 35]),
        (rotate_right_left, [50, 30, 70, 60, 80, 65]),
    ],
)
def test_rotations_preserve_in_order(rotation, values):
    root = rotation(build_bst(values))
    assert list(in_order(root)) == sorted(values)


def test_rotate_left_right_fixes_zig_zag():
    root = rotate_left_right(build_bst([3, 1, 2]))
    assert root.value == 2
    assert [root.left.value, root.right.value] == [1, 3]


def test_rotate_right_left_fixes_zig_zag():
    root = rotate_right_left(build_bst([1, 3, 2]))
    assert root.value == 2
    assert [root.left.value, root.right.value] == [1, 3]


def test_rebalance_empty_tree():
    assert rebalance(None) is None


def test_rebalance_keeps_balanced_tree():
    root = build_bst([2, 1, 3])
    assert rebalance(root) is root


@pytest.mark.parametrize("values", [[3, 1, 2], [1, 3, 2], [1, 2, 3], [3, 2, 1]])
def test_insert_avl_three_values_center_becomes_root(values):
    root = build_avl(values)
    assert root.value == 2
    assert height(root) == 2


@pytest.mark.parametrize(
    "values",
    [[1, 2, 3, 4, 5], [5, 4, 3, 2, 1], [50, 30, 70, 20, 40, 60, 80]],
)
def test_insert_avl_keeps_root_balanced_and_sorted(values):
    root = build_avl(values)
    assert abs(balance_factor(root)) <= 1
    assert list(in_order(root)) == sorted(values)


def test_insert_avl_into_empty_tree():
    root = insert_avl(None, 42)
    assert root.value == 42
    assert height(root) == 1


def test_left_chain_rotated_right_lowers_height():
    values = [3, 2, 1]
    chain = build_left_chain(values)
    before = height(chain)
    rotated = rotate_right(chain)
    assert height(rotated) == before - 1
    assert sorted(pre_order(rotated)) == sorted(values)