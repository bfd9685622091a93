import pytest

from pushswap.stack import Stack
from pushswap.targets import (
    actualize,
    assign_smaller_targets,
    compute_costs,
    cost_not_same_side,
)


def _nodes(stack):
    return list(stack)


def test_smaller_target_is_largest_value_below():
    a = Stack([5])
    b = Stack([1, 3, 7])
    assign_smaller_targets(a, b)
    assert a.top().target.value == 3


def test_smaller_target_falls_back_to_highest():
    a = Stack([0])
    b = Stack([1, 3, 7])
    assign_smaller_targets(a, b)
    assert a.top().target.value == 7


def test_smaller_targets_for_several_nodes():
    a = Stack([4, 10, 2])
    b = Stack([3, 9, 1])
    assign_smaller_targets(a, b)
    assert [node.target.value for node in a] == [3, 9, 1]


def test_actualize_refreshes_indices_and_targets():
    a = Stack([8, 2, 6, 4, 9])
    b = Stack([5, 1, 7])
    actualize(a, b)
    assert [node.index for node in a] == list(range(len(a)))
    assert [node.index for node in b] == list(range(len(b)))
    b_nodes = _nodes(b)
    assert all(any(node.target is other for other in b_nodes) for node in a)


def test_actualize_with_empty_b_leaves_targets_unset():
    a = Stack([3, 1, 2])
    b = Stack()
    actualize(a, b)
    assert [node.index for node in a] == [0, 1, 2]
    assert all(node.target is None for node in a)


def test_cost_both_above_median_is_larger_distance():
    a = Stack([1, 2, 3, 4])
    b = Stack([10, 20, 30, 40])
    a.refresh_positions()
    b.refresh_positions()
    a_nodes, b_nodes = _nodes(a), _nodes(b)
    for node in a_nodes:
        node.target = b_nodes[2]
    compute_costs(a)
    assert a_nodes[1].price == b_nodes[2].distance
    assert a_nodes[0].price == b_nodes[2].distance


def test_cost_both_below_median_is_left_unchanged():
    a = Stack([1, 2, 3, 4, 5])
    b = Stack([10, 20, 30, 40, 50])
    a.refresh_positions()
    b.refresh_positions()
    node = _nodes(a)[4]
    node.target = _nodes(b)[4]
    node.price = 99
    for other in _nodes(a)[:4]:
        other.target = _nodes(b)[0]
    compute_costs(a)
    assert node.price == 99


def test_cost_above_node_far_from_top():
    a = Stack([1, 2, 3, 4, 5])
    b = Stack([10, 20, 30, 40, 50])
    a.refresh_positions()
    b.refresh_positions()
    node = _nodes(a)[2]
    node.target = _nodes(b)[3]
    assert node.above_median and not node.target.above_median
    cost_not_same_side(node)
    assert node.price == node.target.index


def test_cost_above_node_near_top():
    a = Stack([1, 2, 3, 4, 5])
    b = Stack([10, 20, 30, 40, 50])
    a.refresh_positions()
    b.refresh_positions()
    node = _nodes(a)[0]
    node.target = _nodes(b)[4]
    cost_not_same_side(node)
    assert node.price == node.distance + node.target.distance


def test_cost_below_node_with_distant_target():
    a = Stack([1, 2, 3, 4, 5])
    b = Stack([10, 20, 30, 40, 50])
    a.refresh_positions()
    b.refresh_positions()
    node = _nodes(a)[4]
    node.target = _nodes(b)[1]
    cost_not_same_side(node)
    assert node.price == node.index


def test_cost_below_node_with_target_on_top():
    a = Stack([1, 2, 3, 4, 5])
    b = Stack([10, 20, 30, 40, 50])
    a.refresh_positions()
    b.refresh_positions()
    node = _nodes(a)[3]
    node.target = _nodes(b)[0]
    cost_not_same_side(node)
    assert node.price == node.distance + node.target.distance


def test_compute_costs_requires_targets():
    a = Stack([1, 2])
    a.refresh_positions()
    with pytest.raises(ValueError):
        compute_costs(a)