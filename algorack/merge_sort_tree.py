"""Merge sort trees for order statistics, and a most-frequent-value tree.

All indices are zero-based and ranges include both ends.
"""

from bisect import bisect_right
from heapq import merge

from .segment_trees import _MergeTree, _check_range


class MergeSortTree:
    """Segment tree whose nodes hold the sorted values of their ranges."""

    def __init__(self, values):
        self._values = list(values)
        self._size = len(self._values)
        self._tree = [[] for _ in range(4 * max(self._size, 1))]
        self._distinct = sorted(set(self._values))
        if self._size:
            self._build(1, 0, self._size - 1)

    def __len__(self):
        return self._size

    def _build(self, node, lo, hi):
        if lo == hi:
            self._tree[node] = [self._values[lo]]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid)
        self._build(2 * node + 1, mid + 1, hi)
        self._tree[node] = list(merge(self._tree[2 * node], self._tree[2 * node + 1]))

    def _at_most(self, node, lo, hi, left, right, k):
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return bisect_right(self._tree[node], k)
        mid = (lo + hi) // 2
        return self._at_most(2 * node, lo, mid, left, right, k) + self._at_most(
            2 * node + 1, mid + 1, hi, left, right, k
        )

    def count_at_most(self, left, right, k):
        """How many of ``values[left .. right]`` are at most ``k``."""
        _check_range(left, right, self._size)
        return self._at_most(1, 0, self._size - 1, left, right, k)

    def count_greater(self, left, right, k):
        """How many of ``values[left .. right]`` exceed ``k``."""
        return (right - left + 1) - self.count_at_most(left, right, k)

    def kth_smallest(self, left, right, k):
        """The ``k``-th smallest (1-based) of ``values[left .. right]``."""
        _check_range(left, right, self._size)
        if not 1 <= k <= right - left + 1:
            raise ValueError(f"k must be between 1 and {right - left + 1}")
        lo, hi = 0, len(self._distinct) - 1
        while lo < hi:
            mid = (lo + hi) // 2
            if self.count_at_most(left, right, self._distinct[mid]) >= k:
                hi = mid
            else:
                lo = mid + 1
        return self._distinct[lo]


def online_count_greater(values, queries):
    """Answer encoded ``(a, b, k)`` queries, each decoded with the previous answer.

    Each field is XOR-ed with the last answer (0 at first); ``a`` and ``b``
    are then 1-based ends, clamped to the sequence, and the answer is how many
    values in that range exceed the decoded ``k``. An empty range answers 0.
    """
    tree = MergeSortTree(values)
    size = len(tree)
    answers = []
    last = 0
    for a, b, k in queries:
        left = max(a ^ last, 1) - 1
        right = min(b ^ last, size) - 1
        if left > right:
            last = 0
        else:
            last = tree.count_greater(left, right, k ^ last)
        answers.append(last)
    return answers


class FrequencyTree(_MergeTree):
    """Highest frequency of one value inside a range of a sorted sequence."""

    def __init__(self, values):
        values = list(values)
        if any(b < a for a, b in zip(values, values[1:])):
            raise ValueError("values must be sorted in non-decreasing order")
        super().__init__(((v, 1), (v, 1), (v, 1)) for v in values)

    @staticmethod
    def _merge(left, right):
        l_prefix, l_best, l_suffix = left
        r_prefix, r_best, r_suffix = right
        if l_prefix[0] == r_prefix[0]:
            prefix = (l_prefix[0], l_prefix[1] + r_prefix[1])
        else:
            prefix = l_prefix
        if l_suffix[0] == r_suffix[0]:
            suffix = (r_suffix[0], l_suffix[1] + r_suffix[1])
        else:
            suffix = r_suffix
        best = l_best if l_best[1] > r_best[1] else r_best
        if l_suffix[0] == r_prefix[0]:
            joined = l_suffix[1] + r_prefix[1]
            if joined > best[1]:
                best = (l_suffix[0], joined)
        return prefix, best, suffix

    def most_frequent(self, left, right):
        """Occurrences of the most frequent value in ``values[left .. right]``."""
        return self._range(left, right)[1][1]