"""Sorting stack ``a`` with the puzzle's operations.

Small stacks are handled directly. Larger ones are pushed to ``b`` down to
three elements, and then each element of ``b`` is brought back by the
cheapest move: the one needing the fewest rotations to bring it to the top
of ``b`` and its target to the top of ``a``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import pairwise

from pushswap.stacks import Stacks


@dataclass(frozen=True)
class Move:
    """How one element of ``b`` is brought back onto ``a``.

    ``index`` is its position in ``b``; ``target_value`` and
    ``target_index`` name the element of ``a`` it must land on; ``price``
    counts the rotations needed.
    """

    value: int
    index: int
    target_value: int
    target_index: int
    price: int


def is_sorted(values: Iterable[int]) -> bool:
    """Tell whether the values are in ascending order, top first."""
    return all(first <= second for first, second in pairwise(values))


def two_sort(stacks: Stacks) -> None:
    """Swap the two top elements of ``a`` if they are out of order."""
    if len(stacks.a) < 2:
        raise ValueError("two_sort needs at least two elements in a")
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def three_sort(stacks: Stacks) -> None:
    """Order the three top elements of ``a``."""
    if len(stacks.a) < 3:
        raise ValueError("three_sort needs at least three elements in a")
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second and first > third:
        stacks.ra()
    if second > third and second > first:
        stacks.rra()
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def _rotation_cost(index: int, size: int) -> int:
    return index if index <= size // 2 else size - index


def plan_moves(a: Sequence[int], b: Sequence[int]) -> list[Move]:
    """Work out a Move for every element of ``b``, in the order of ``b``.

    The target of an element is the smallest value of ``a`` larger than it,
    or the smallest value of ``a`` when there is none.
    """
    if not b:
        return []
    if not a:
        raise ValueError("stack a must not be empty")
    a_list = list(a)
    size_a = len(a_list)
    size_b = len(b)
    minimum_index = a_list.index(min(a_list))
    moves = []
    for index, value in enumerate(b):
        larger = [(candidate, pos) for pos, candidate in enumerate(a_list) if candidate > value]
        if larger:
            target_value, target_index = min(larger)
        else:
            target_value, target_index = a_list[minimum_index], minimum_index
        price = _rotation_cost(index, size_b) + _rotation_cost(target_index, size_a)
        moves.append(Move(value, index, target_value, target_index, price))
    return moves


def cheapest_move(moves: Iterable[Move]) -> Move:
    """Return the move with the lowest price, the first one on a tie."""
    best: Move | None = None
    for move in moves:
        if best is None or move.price < best.price:
            best = move
    if best is None:
        raise ValueError("no moves to choose from")
    return best


def move_back(stacks: Stacks) -> Move:
    """Bring the cheapest element of ``b`` back onto ``a`` and return its move."""
    move = cheapest_move(plan_moves(stacks.a, stacks.b))
    forward_b = move.index <= len(stacks.b) // 2
    while stacks.b[0] != move.value:
        if forward_b:
            stacks.rb()
        else:
            stacks.rrb()
    forward_a = move.target_index <= len(stacks.a) // 2
    while stacks.a[0] != move.target_value:
        if forward_a:
            stacks.ra()
        else:
            stacks.rra()
    stacks.pa()
    return move


def _rotate_to_minimum(stacks: Stacks, index: int) -> None:
    smallest = min(stacks.a)
    forward = index <= len(stacks.a) // 2
    while stacks.a[0] != smallest:
        if forward:
            stacks.ra()
        else:
            stacks.rra()


def final_sort(stacks: Stacks) -> None:
    """Rotate ``a`` until its smallest value is on top."""
    if not stacks.a:
        return
    _rotate_to_minimum(stacks, stacks.a.index(min(stacks.a)))


def sort_stack(stacks: Stacks) -> None:
    """Sort ``a`` in place, recording the operations used."""
    if not stacks.a:
        return
    if not is_sorted(stacks.a):
        two_sort(stacks)
    while len(stacks.a) > 3:
        stacks.pb()
    if not is_sorted(stacks.a):
        three_sort(stacks)
    # The final rotation direction follows the positions seen when the last
    # move was planned, not the positions after it.
    positions: dict[int, int] = {}
    while stacks.b:
        positions = {value: index for index, value in enumerate(stacks.a)}
        positions.update((value, index) for index, value in enumerate(stacks.b))
        move_back(stacks)
    _rotate_to_minimum(stacks, positions.get(min(stacks.a), -1))


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values``; none if already sorted."""
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        sort_stack(stacks)
    return stacks.operations