import random
from itertools import permutations

import pytest

from pushswap.sorting import (
    Move,
    cheapest_move,
    final_sort,
    is_sorted,
    move_back,
    plan_moves,
    solve,
    sort_stack,
    three_sort,
    two_sort,
)
from pushswap.stacks import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for name in operations:
        getattr(stacks, name)()
    return stacks


def test_is_sorted():
    assert is_sorted([]) is True
    assert is_sorted([5]) is True
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([1, 3, 2]) is False


def test_two_sort_swaps_when_needed():
    stacks = Stacks([2, 1])
    two_sort(stacks)
    assert list(stacks.a) == [1, 2]
    assert stacks.operations == ["sa"]


def test_two_sort_leaves_ordered_pair():
    stacks = Stacks([1, 2])
    two_sort(stacks)
    assert stacks.operations == []


def test_two_sort_needs_two():
    with pytest.raises(ValueError):
        two_sort(Stacks([1]))


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_three_sort_all_orders(values):
    stacks = Stacks(values)
    three_sort(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(stacks.operations) <= 2


def test_three_sort_needs_three():
    with pytest.raises(ValueError):
        three_sort(Stacks([2, 1]))


def test_plan_moves_target_and_price():
    moves = plan_moves([1, 5, 9], [6])
    assert moves == [Move(value=6, index=0, target_value=9, target_index=2, price=1)]


def test_plan_moves_target_wraps_to_minimum():
    moves = plan_moves([4, 1, 9], [10])
    assert moves[0].target_value == 1
    assert moves[0].target_index == 1


def test_plan_moves_empty_b():
    assert plan_moves([1, 2], []) == []


def test_plan_moves_empty_a():
    with pytest.raises(ValueError):
        plan_moves([], [1])


def test_cheapest_move_first_on_tie():
    first = Move(1, 0, 2, 0, 3)
    second = Move(5, 1, 6, 0, 3)
    third = Move(7, 2, 8, 0, 4)
    assert cheapest_move([third, first, second]) is first


def test_cheapest_move_empty():
    with pytest.raises(ValueError):
        cheapest_move([])


def test_move_back_pushes_chosen_value():
    stacks = Stacks([1, 5, 9])
    stacks.b.extend([6, 0])
    move = move_back(stacks)
    assert stacks.a[0] == move.value
    assert move.value not in stacks.b
    assert stacks.operations[-1] == "pa"


def test_final_sort_brings_minimum_to_top():
    stacks = Stacks([3, 4, 5, 1, 2])
    final_sort(stacks)
    assert list(stacks.a) == [1, 2, 3, 4, 5]


def test_sort_stack_empty():
    stacks = Stacks([])
    sort_stack(stacks)
    assert stacks.operations == []


def test_solve_pair():
    assert solve([2, 1]) == ["sa"]


def test_solve_three_reversed():
    assert solve([3, 2, 1]) == ["sa", "rra"]


def test_solve_sorted_needs_nothing():
    assert solve([1, 2, 3, 4, 5, 6]) == []


@pytest.mark.parametrize("size", [4, 5])
def test_solve_all_permutations(size):
    for values in permutations(range(size)):
        result = _replay(values, solve(values))
        assert list(result.a) == sorted(values)
        assert not result.b


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_solve_larger_random(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-1000, 1000), 100)
    operations = solve(values)
    result = _replay(values, operations)
    assert list(result.a) == sorted(values)
    assert not result.b
    assert set(operations) <= {"sa", "pa", "pb", "ra", "rb", "rra", "rrb"}