import random

import pytest

from algorack.segment_trees import (
    BracketTree,
    MaxSubarrayTree,
    MinSegmentTree,
    SumRangeTree,
)


def _ranges(size):
    return [(lo, hi) for lo in range(size) for hi in range(lo, size)]


def _best_run(values):
    return max(
        sum(values[i:j + 1]) for i in range(len(values)) for j in range(i, len(values))
    )


def _matched(text):
    opened = matched = 0
    for ch in text:
        if ch == "(":
            opened += 1
        elif ch == ")" and opened:
            opened -= 1
            matched += 2
    return matched


def test_max_subarray_matches_all_slices():
    rng = random.Random(7)
    values = [rng.randint(-10, 10) for _ in range(13)]
    tree = MaxSubarrayTree(values)
    for lo, hi in _ranges(len(values)):
        assert tree.query(lo, hi) == _best_run(values[lo:hi + 1])


def test_max_subarray_all_negative_picks_largest_single():
    values = [-5, -2, -8, -3]
    tree = MaxSubarrayTree(values)
    assert tree.query(0, 3) == max(values)


def test_max_subarray_rejects_bad_range():
    tree = MaxSubarrayTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.query(2, 1)
    with pytest.raises(IndexError):
        tree.query(0, 3)


def test_min_tree_query_and_update():
    rng = random.Random(3)
    values = [rng.randint(0, 100) for _ in range(17)]
    tree = MinSegmentTree(values)
    for _ in range(40):
        index = rng.randrange(len(values))
        values[index] = rng.randint(0, 100)
        tree.update(index, values[index])
        lo = rng.randrange(len(values))
        hi = rng.randrange(lo, len(values))
        assert tree.query(lo, hi) == min(values[lo:hi + 1])


def test_min_tree_update_out_of_range():
    tree = MinSegmentTree([4, 5])
    with pytest.raises(IndexError):
        tree.update(2, 1)


def test_empty_min_tree_has_no_ranges():
    tree = MinSegmentTree([])
    assert len(tree) == 0
    with pytest.raises(IndexError):
        tree.query(0, 0)


def test_sum_tree_range_additions():
    rng = random.Random(11)
    values = [rng.randint(-20, 20) for _ in range(19)]
    tree = SumRangeTree(values)
    for _ in range(60):
        lo = rng.randrange(len(values))
        hi = rng.randrange(lo, len(values))
        if rng.random() < 0.5:
            delta = rng.randint(-5, 5)
            tree.add(lo, hi, delta)
            for i in range(lo, hi + 1):
                values[i] += delta
        else:
            assert tree.query(lo, hi) == sum(values[lo:hi + 1])
    assert tree.query(0, len(values) - 1) == sum(values)


def test_sum_tree_rejects_bad_range():
    tree = SumRangeTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.add(-1, 1, 5)


def test_bracket_tree_matches_greedy():
    text = "())(())(())("
    tree = BracketTree(text)
    for lo, hi in _ranges(len(text)):
        assert tree.query(lo, hi) == _matched(text[lo:hi + 1])


def test_bracket_tree_whole_sample():
    tree = BracketTree("())(())(())(")
    assert tree.query(0, 11) == 10


def test_bracket_tree_random_strings():
    rng = random.Random(5)
    text = "".join(rng.choice("()") for _ in range(30))
    tree = BracketTree(text)
    for _ in range(50):
        lo = rng.randrange(len(text))
        hi = rng.randrange(lo, len(text))
        result = tree.query(lo, hi)
        assert result == _matched(text[lo:hi + 1])
        assert result % 2 == 0