from collections import Counter

import pytest

from algorack.merge_sort_tree import (
    FrequencyTree,
    MergeSortTree,
    online_count_greater,
)

VALUES = [5, 1, 2, 6, 3, 7, 4, 2, 9, 2]

RANGES = [
    (left, right)
    for left in range(len(VALUES))
    for right in range(left, len(VALUES))
]


def test_count_greater_and_at_most_partition_the_range():
    tree = MergeSortTree(VALUES)
    for left, right in RANGES:
        for k in (0, 2, 4, 10):
            above = tree.count_greater(left, right, k)
            below = tree.count_at_most(left, right, k)
            assert above + below == right - left + 1
            assert above == sum(1 for v in VALUES[left:right + 1] if v > k)


def test_kth_smallest_matches_sorted_slice():
    tree = MergeSortTree(VALUES)
    for left, right in RANGES:
        ordered = sorted(VALUES[left:right + 1])
        for k in range(1, len(ordered) + 1):
            assert tree.kth_smallest(left, right, k) == ordered[k - 1]


def test_kth_smallest_rejects_bad_k():
    tree = MergeSortTree(VALUES)
    with pytest.raises(ValueError):
        tree.kth_smallest(0, 2, 4)
    with pytest.raises(ValueError):
        tree.kth_smallest(0, 2, 0)


def test_range_bounds_are_checked():
    tree = MergeSortTree(VALUES)
    with pytest.raises(IndexError):
        tree.count_at_most(0, len(VALUES), 3)


def test_online_queries_decode_with_last_answer():
    values = [2, 1, 3]
    tree = MergeSortTree(values)
    first = tree.count_greater(0, 2, 1)
    second = tree.count_greater(0, 1, 0)
    encoded = [(1, 3, 5), (1, 3, 1), (1 ^ first, 2 ^ first, 0 ^ first)]
    assert online_count_greater(values, encoded) == [0, first, second]


def test_online_queries_clamp_the_range():
    values = [4, 8, 1]
    tree = MergeSortTree(values)
    assert online_count_greater(values, [(0, 10, 2)]) == [tree.count_greater(0, 2, 2)]


def test_frequency_sample():
    values = [-1, -1, 1, 1, 1, 1, 3, 10, 10, 10]
    tree = FrequencyTree(values)
    assert tree.most_frequent(1, 2) == 1
    assert tree.most_frequent(0, 9) == 4
    assert tree.most_frequent(4, 9) == 3


def test_frequency_matches_counter():
    values = sorted(VALUES)
    tree = FrequencyTree(values)
    for left, right in RANGES:
        expected = max(Counter(values[left:right + 1]).values())
        assert tree.most_frequent(left, right) == expected


def test_frequency_requires_sorted_values():
    with pytest.raises(ValueError):
        FrequencyTree([3, 1, 2])