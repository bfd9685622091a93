"""The sorting strategy: push cheapest elements to B, then back in order."""

from __future__ import annotations

from typing import Iterable

from .operations import Machine, Operation
from .stack import Node, Stack
from .targets import actualize

_INT_MAX = 2147483647


def assign_bigger_targets(a: Stack, b: Stack) -> None:
    """Point each node of B at the smallest larger value in A.

    A node with no larger value in A is pointed at A's smallest node.
    """
    for node in b:
        best = _INT_MAX
        for candidate in a:
            if node.value < candidate.value < best:
                best = candidate.value
                node.target = candidate
        if best == _INT_MAX:
            node.target = a.smallest()


def sort_three(machine: Machine) -> None:
    """Sort a stack A of at most three elements."""
    a = machine.a
    if a.is_sorted():
        return
    highest = a.highest()
    if a.top() is highest:
        machine.ra()
    elif a.top().next is highest:
        machine.rra()
    if a.top().value > a.top().next.value:
        machine.sa()


def bring_to_top_a(machine: Machine, node: Node) -> None:
    """Rotate A until ``node`` is on top, in the direction its side gives."""
    while node.prev is not None:
        if node.above_median:
            machine.ra()
        else:
            machine.rra()


def bring_to_top_b(machine: Machine, node: Node) -> None:
    """Rotate B until ``node`` is on top, in the direction its side gives."""
    while node.prev is not None:
        if node.above_median:
            machine.rb()
        else:
            machine.rrb()


def bring_both_to_top(machine: Machine, node: Node, target: Node) -> None:
    """Bring ``node`` to the top of A and ``target`` to the top of B."""
    while node.index != 0 and target.index != 0:
        if node.above_median == target.above_median:
            if node.above_median:
                machine.rr()
            else:
                machine.rrr()
        else:
            _bring_both_mixed(machine, node, target)
        machine.a.refresh_positions()
        machine.b.refresh_positions()
    if target.index != 0:
        bring_to_top_b(machine, target)
    if node.index != 0:
        bring_to_top_a(machine, node)


def _bring_both_mixed(machine: Machine, node: Node, target: Node) -> None:
    if node.above_median and node.index > target.index // 2:
        machine.rrr()
    elif target.above_median and target.distance > node.distance // 2:
        machine.rrr()
    else:
        if target.index != 0:
            bring_to_top_b(machine, target)
        if node.index != 0:
            bring_to_top_a(machine, node)


def push_swap(machine: Machine) -> bool:
    """Sort A using B; return whether A ended up sorted."""
    a, b = machine.a, machine.b
    machine.pb()
    machine.pb()
    while len(a) > 3:
        cheapest = a.cheapest()
        bring_both_to_top(machine, cheapest, cheapest.target)
        machine.pb()
    sort_three(machine)
    bring_to_top_b(machine, b.highest())
    while len(b) != 0:
        actualize(a, b)
        assign_bigger_targets(a, b)
        bring_to_top_a(machine, b.top().target)
        machine.pa()
    a.refresh_positions()
    bring_to_top_a(machine, a.smallest())
    return a.is_sorted()


def sort_numbers(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` into ascending order."""
    machine = Machine(Stack(values), Stack())
    if len(machine.a) <= 3:
        sort_three(machine)
    elif not machine.a.is_sorted():
        push_swap(machine)
    return machine.operations