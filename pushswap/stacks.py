"""The two stacks and the operations that move values between them."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterable, TextIO

from pushswap.control import Control


@dataclass(eq=False)
class Node:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = -1


def index_values(values: Iterable[int]) -> list[int]:
    """Rank of each value: how many values are strictly smaller than it."""
    items = list(values)
    return [sum(1 for other in items if other < value) for value in items]


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is its leftmost element.

    Every operation that changes a stack writes its name to ``out`` and is
    counted in ``control``. An operation that cannot apply does nothing.
    """

    def __init__(
        self,
        values: Iterable[int] = (),
        control: Control | None = None,
        out: TextIO | None = None,
    ) -> None:
        items = list(values)
        self.a: deque[Node] = deque(
            Node(value, index) for value, index in zip(items, index_values(items))
        )
        self.b: deque[Node] = deque()
        self.control = control if control is not None else Control()
        self.out = out if out is not None else sys.stdout

    def __repr__(self) -> str:
        return f"Stacks(a={self.values_a()!r}, b={[n.value for n in self.b]!r})"

    def _emit(self, op: str) -> None:
        self.out.write(op + "\n")
        self.control.record(op)

    @staticmethod
    def _swap(stack: deque[Node]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _push(source: deque[Node], target: deque[Node]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    @staticmethod
    def _rotate(stack: deque[Node], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if self._swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        if self._swap(self.b):
            self._emit("sb")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self._push(self.b, self.a):
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self._push(self.a, self.b):
            self._emit("pb")

    def ra(self) -> None:
        """Rotate ``a`` upwards: the top element becomes the bottom one."""
        if self._rotate(self.a, -1):
            self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b`` upwards: the top element becomes the bottom one."""
        if self._rotate(self.b, -1):
            self._emit("rb")

    def rra(self) -> None:
        """Rotate ``a`` downwards: the bottom element becomes the top one."""
        if self._rotate(self.a, 1):
            self._emit("rra")

    def rrb(self) -> None:
        """Rotate ``b`` downwards: the bottom element becomes the top one."""
        if self._rotate(self.b, 1):
            self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks, then report ``rrr`` as well."""
        self.rra()
        self.rrb()
        self._emit("rrr")

    def is_sorted(self) -> bool:
        """Whether the values of ``a`` are in non-decreasing order from the top."""
        values = self.values_a()
        return all(left <= right for left, right in zip(values, values[1:]))

    def values_a(self) -> list[int]:
        """Values of ``a`` from top to bottom."""
        return [node.value for node in self.a]

    def indices_a(self) -> list[int]:
        """Ranks of ``a`` from top to bottom."""
        return [node.index for node in self.a]

    def move_min_to_top(self) -> None:
        """Rotate ``a`` the shorter way until its lowest rank is on top."""
        if not self.a:
            return
        indices = self.indices_a()
        pos = indices.index(min(indices))
        size = len(self.a)
        if pos <= size // 2:
            for _ in range(pos):
                self.ra()
        else:
            for _ in range(size - pos):
                self.rra()