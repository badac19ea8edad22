"""Segment trees for range queries over a fixed-length sequence.

All indices are zero-based and ranges include both ends.
"""


def _check_range(left, right, size):
    if not 0 <= left <= right < size:
        raise IndexError(f"range [{left}, {right}] out of bounds for length {size}")


class _MergeTree:
    """Recursive segment tree whose nodes are merged by ``_merge``."""

    def __init__(self, leaves):
        leaves = list(leaves)
        self._size = len(leaves)
        self._tree = [None] * (4 * max(self._size, 1))
        if self._size:
            self._build(1, 0, self._size - 1, leaves)

    def __len__(self):
        return self._size

    @staticmethod
    def _merge(left, right):
        raise NotImplementedError

    def _build(self, node, lo, hi, leaves):
        if lo == hi:
            self._tree[node] = leaves[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, leaves)
        self._build(2 * node + 1, mid + 1, hi, leaves)
        self._tree[node] = self._merge(self._tree[2 * node], self._tree[2 * node + 1])

    def _query(self, node, lo, hi, left, right):
        if left <= lo and hi <= right:
            return self._tree[node]
        mid = (lo + hi) // 2
        if right <= mid:
            return self._query(2 * node, lo, mid, left, right)
        if left > mid:
            return self._query(2 * node + 1, mid + 1, hi, left, right)
        return self._merge(
            self._query(2 * node, lo, mid, left, right),
            self._query(2 * node + 1, mid + 1, hi, left, right),
        )

    def _set(self, node, lo, hi, index, leaf):
        if lo == hi:
            self._tree[node] = leaf
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._set(2 * node, lo, mid, index, leaf)
        else:
            self._set(2 * node + 1, mid + 1, hi, index, leaf)
        self._tree[node] = self._merge(self._tree[2 * node], self._tree[2 * node + 1])

    def _range(self, left, right):
        _check_range(left, right, self._size)
        return self._query(1, 0, self._size - 1, left, right)


class MaxSubarrayTree(_MergeTree):
    """Largest sum of a non-empty contiguous run inside a range."""

    def __init__(self, values):
        super().__init__((v, v, v, v) for v in values)

    @staticmethod
    def _merge(left, right):
        l_total, l_pre, l_post, l_best = left
        r_total, r_pre, r_post, r_best = right
        return (
            l_total + r_total,
            max(l_pre, l_total + r_pre),
            max(r_post, r_total + l_post),
            max(l_best, r_best, l_post + r_pre),
        )

    def query(self, left, right):
        """Best contiguous sum among ``values[left .. right]``."""
        return self._range(left, right)[3]


class MinSegmentTree(_MergeTree):
    """Range minimum with point assignment."""

    def __init__(self, values):
        super().__init__(values)

    @staticmethod
    def _merge(left, right):
        return min(left, right)

    def query(self, left, right):
        """Smallest value among ``values[left .. right]``."""
        return self._range(left, right)

    def update(self, index, value):
        """Set ``values[index]`` to ``value``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        self._set(1, 0, self._size - 1, index, value)


class SumRangeTree:
    """Range sums with lazy range additions."""

    def __init__(self, values):
        values = list(values)
        self._size = len(values)
        self._sum = [0] * (4 * max(self._size, 1))
        self._lazy = [0] * (4 * max(self._size, 1))
        if self._size:
            self._build(1, 0, self._size - 1, values)

    def __len__(self):
        return self._size

    def _build(self, node, lo, hi, values):
        if lo == hi:
            self._sum[node] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _apply(self, node, lo, hi, value):
        self._sum[node] += value * (hi - lo + 1)
        self._lazy[node] += value

    def _push(self, node, lo, mid, hi):
        pending = self._lazy[node]
        if pending:
            self._apply(2 * node, lo, mid, pending)
            self._apply(2 * node + 1, mid + 1, hi, pending)
            self._lazy[node] = 0

    def _add(self, node, lo, hi, left, right, value):
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._apply(node, lo, hi, value)
            return
        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        self._add(2 * node, lo, mid, left, right, value)
        self._add(2 * node + 1, mid + 1, hi, left, right, value)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _query(self, node, lo, hi, left, right):
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        return self._query(2 * node, lo, mid, left, right) + self._query(
            2 * node + 1, mid + 1, hi, left, right
        )

    def add(self, left, right, value):
        """Add ``value`` to every element of ``values[left .. right]``."""
        _check_range(left, right, self._size)
        self._add(1, 0, self._size - 1, left, right, value)

    def query(self, left, right):
        """Sum of ``values[left .. right]``."""
        _check_range(left, right, self._size)
        return self._query(1, 0, self._size - 1, left, right)


class BracketTree(_MergeTree):
    """Longest correct bracket subsequence inside a range of a bracket string."""

    def __init__(self, text):
        super().__init__((int(ch == "("), int(ch == ")"), 0) for ch in text)

    @staticmethod
    def _merge(left, right):
        l_open, l_close, l_matched = left
        r_open, r_close, r_matched = right
        pairs = min(l_open, r_close)
        return (
            l_open - pairs + r_open,
            l_close + r_close - pairs,
            l_matched + r_matched + 2 * pairs,
        )

    def query(self, left, right):
        """Length of the longest correct bracket subsequence of ``text[left .. right]``."""
        return self._range(left, right)[2]