import pytest

from algorack.fenwick import FenwickTree, count_greater_offline

VALUES = [3, -1, 4, 1, 5, 9, 2, 6]


def test_prefix_sums_match_slices():
    tree = FenwickTree(VALUES)
    for index in range(len(VALUES) + 1):
        assert tree.prefix_sum(index) == sum(VALUES[:index])


def test_range_sums_match_slices():
    tree = FenwickTree(VALUES)
    for left in range(len(VALUES)):
        for right in range(left, len(VALUES)):
            assert tree.range_sum(left, right) == sum(VALUES[left:right + 1])


def test_add_changes_only_ranges_holding_the_index():
    tree = FenwickTree(VALUES)
    tree.add(3, 10)
    assert tree.range_sum(3, 3) == VALUES[3] + 10
    assert tree.range_sum(0, 2) == sum(VALUES[:3])
    assert tree.range_sum(4, 7) == sum(VALUES[4:])
    assert tree.prefix_sum(len(VALUES)) == sum(VALUES) + 10


def test_empty_prefix_is_zero():
    assert FenwickTree(VALUES).prefix_sum(0) == 0


def test_bounds_are_checked():
    tree = FenwickTree(VALUES)
    with pytest.raises(IndexError):
        tree.add(len(VALUES), 1)
    with pytest.raises(IndexError):
        tree.range_sum(2, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(len(VALUES) + 1)


def test_count_greater_matches_slices():
    queries = [(0, 7, 3), (2, 5, 4), (1, 1, -2), (0, 0, 3), (4, 7, 100)]
    answers = count_greater_offline(VALUES, queries)
    expected = [
        sum(1 for v in VALUES[left:right + 1] if v > k) for left, right, k in queries
    ]
    assert answers == expected


def test_count_greater_sample():
    values = [5, 1, 2, 3, 4]
    assert count_greater_offline(values, [(1, 3, 1), (0, 0, 5)]) == [2, 0]


def test_count_greater_rejects_bad_range():
    with pytest.raises(IndexError):
        count_greater_offline(VALUES, [(0, 8, 1)])