import random
from collections import Counter

from daily_plan.services import pick_random


def test_pick_returns_requested_count_without_duplicates():
    rng = random.Random(1)
    picks = pick_random(list(range(10)), 4, rng)
    assert len(picks) == 4
    assert len(set(picks)) == 4
    assert set(picks) <= set(range(10))


def test_pick_more_than_pool_returns_whole_pool():
    rng = random.Random(2)
    picks = pick_random(["a", "b"], 5, rng)
    assert sorted(picks) == ["a", "b"]


def test_pick_from_empty_pool():
    assert pick_random([], 2) == []


def test_pick_zero_or_negative():
    assert pick_random([1, 2, 3], 0) == []
    assert pick_random([1, 2, 3], -1) == []


def test_pick_does_not_mutate_input():
    items = [1, 2, 3, 4]
    pick_random(items, 2, random.Random(3))
    assert items == [1, 2, 3, 4]


def test_pick_uses_global_random_when_no_rng():
    random.seed(7)
    first = pick_random(list(range(20)), 5)
    random.seed(7)
    second = pick_random(list(range(20)), 5)
    assert first == second


def test_pick_is_uniform_over_subsets():
    rng = random.Random(1234)
    counts = Counter(
        frozenset(pick_random(["q1", "q2", "q3"], 2, rng)) for _ in range(3000)
    )
    assert len(counts) == 3
    for subset_count in counts.values():
        assert 850 <= subset_count <= 1150
