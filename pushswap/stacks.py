"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _swap_top(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


def _push(dest: deque[int], src: deque[int]) -> bool:
    if not src:
        return False
    dest.appendleft(src.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a record of the operations done.

    An operation that cannot change its stack (fewer than two elements to
    swap or rotate, nothing to push) does nothing and is not recorded.
    The combined operations perform both single operations, recording each
    of them, and then record their own name as well.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, name: str, applied: bool = True) -> bool:
        if applied:
            self.operations.append(name)
        return applied

    def sa(self) -> bool:
        """Swap the two top elements of ``a``."""
        return self._record("sa", _swap_top(self.a))

    def sb(self) -> bool:
        """Swap the two top elements of ``b``."""
        return self._record("sb", _swap_top(self.b))

    def ss(self) -> None:
        """Run ``sa`` and ``sb``."""
        self.sa()
        self.sb()
        self._record("ss")

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        return self._record("pa", _push(self.a, self.b))

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        return self._record("pb", _push(self.b, self.a))

    def ra(self) -> bool:
        """Move the top of ``a`` to its bottom."""
        return self._record("ra", _rotate(self.a))

    def rb(self) -> bool:
        """Move the top of ``b`` to its bottom."""
        return self._record("rb", _rotate(self.b))

    def rr(self) -> None:
        """Run ``ra`` and ``rb``."""
        self.ra()
        self.rb()
        self._record("rr")

    def rra(self) -> bool:
        """Move the bottom of ``a`` to its top."""
        return self._record("rra", _reverse_rotate(self.a))

    def rrb(self) -> bool:
        """Move the bottom of ``b`` to its top."""
        return self._record("rrb", _reverse_rotate(self.b))

    def rrr(self) -> None:
        """Run ``rra`` and ``rrb``."""
        self.rra()
        self.rrb()
        self._record("rrr")