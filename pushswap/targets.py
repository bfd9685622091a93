"""Target selection and move pricing for elements of stack A."""

from __future__ import annotations

from .stack import Node, Stack

_INT_MIN = -2147483648


def actualize(a: Stack, b: Stack) -> None:
    """Refresh positions of both stacks, then A's targets in B and its prices."""
    a.refresh_positions()
    b.refresh_positions()
    if len(b) == 0:
        return
    assign_smaller_targets(a, b)
    compute_costs(a)


def compute_costs(a: Stack) -> None:
    """Price each node of A by the rotations needed to bring it and its target up.

    When a node and its target both sit below the median the price is left
    as it was.
    """
    for node in a:
        target = node.target
        if target is None:
            raise ValueError(f"node {node.value} has no target")
        if node.above_median == target.above_median:
            if node.above_median:
                node.price = max(node.distance, target.distance)
        else:
            cost_not_same_side(node)


def cost_not_same_side(node: Node) -> None:
    """Price a node whose target lies on the other side of its stack's median."""
    target = node.target
    if target is None:
        raise ValueError(f"node {node.value} has no target")
    if node.above_median:
        if node.index > target.index // 2:
            node.price = target.index
        else:
            node.price = node.distance + target.distance
    elif node.distance // 2 < target.distance:
        node.price = node.index
    else:
        node.price = node.distance + target.distance


def assign_smaller_targets(a: Stack, b: Stack) -> None:
    """Point each node of A at the largest smaller value in B.

    A node with no smaller value in B is pointed at B's highest node.
    """
    for node in a:
        best = _INT_MIN
        for candidate in b:
            if node.value > candidate.value > best:
                best = candidate.value
                node.target = candidate
        if best == _INT_MIN:
            node.target = b.highest()