"""The eleven stack operations and a machine that records them."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Union

from .stack import Stack
from .targets import actualize


class Operation(str, Enum):
    """An instruction of the push_swap language."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Machine:
    """Two stacks A and B plus the list of operations applied to them."""

    def __init__(self, a: Optional[Stack] = None, b: Optional[Stack] = None) -> None:
        self.a = a if a is not None else Stack()
        self.b = b if b is not None else Stack()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Machine(a={self.a!r}, b={self.b!r})"

    def _record(self, operation: Operation) -> None:
        self.operations.append(operation)

    def sa(self) -> None:
        """Swap the two top elements of A."""
        self.a.swap()
        self._record(Operation.SA)

    def sb(self) -> None:
        """Swap the two top elements of B."""
        self.b.swap()
        self._record(Operation.SB)

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self.a.swap()
        self.b.swap()
        self._record(Operation.SS)

    def pa(self) -> None:
        """Move the top of B onto A."""
        self.a.push_from(self.b)
        self._record(Operation.PA)

    def pb(self) -> None:
        """Move the top of A onto B, then refresh targets and prices."""
        self.b.push_from(self.a)
        self._record(Operation.PB)
        actualize(self.a, self.b)

    def ra(self) -> None:
        """Rotate A upwards."""
        self.a.rotate()
        self._record(Operation.RA)

    def rb(self) -> None:
        """Rotate B upwards."""
        self.b.rotate()
        self._record(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.a.rotate()
        self.b.rotate()
        self._record(Operation.RR)

    def rra(self) -> None:
        """Rotate A downwards."""
        self.a.reverse_rotate()
        self._record(Operation.RRA)

    def rrb(self) -> None:
        """Rotate B downwards."""
        self.b.reverse_rotate()
        self._record(Operation.RRB)

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._record(Operation.RRR)


def apply_operations(
    values: Iterable[int], operations: Iterable[Union[Operation, str]]
) -> tuple[list[int], list[int]]:
    """Run operations on a stack A holding ``values`` and an empty B.

    Returns the final contents of A and B, top first. Raises ValueError on
    an unknown operation name.
    """
    machine = Machine(Stack(values), Stack())
    for operation in operations:
        getattr(machine, Operation(operation).value)()
    return machine.a.values(), machine.b.values()