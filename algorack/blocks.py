"""Square-root decomposition: block sums and offline distinct counts.

All indices are zero-based and ranges include both ends.
"""

import math


def _check_range(left, right, size):
    if not 0 <= left <= right < size:
        raise IndexError(f"range [{left}, {right}] out of bounds for length {size}")


def _block_size(size):
    return max(1, math.ceil(math.sqrt(size)))


class BlockSums:
    """Point assignment and range sums over blocks of about sqrt(n) values."""

    def __init__(self, values):
        self._values = list(values)
        self._block = _block_size(len(self._values))
        self._sums = [
            sum(self._values[start:start + self._block])
            for start in range(0, len(self._values), self._block)
        ]

    def __len__(self):
        return len(self._values)

    def set(self, index, value):
        """Set ``values[index]`` to ``value``."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range")
        self._sums[index // self._block] += value - self._values[index]
        self._values[index] = value

    def range_sum(self, left, right):
        """Sum of ``values[left .. right]``."""
        _check_range(left, right, len(self._values))
        first = left // self._block
        last = right // self._block
        if first == last:
            return sum(self._values[left:right + 1])
        head = sum(self._values[left:(first + 1) * self._block])
        middle = sum(self._sums[first + 1:last])
        tail = sum(self._values[last * self._block:right + 1])
        return head + middle + tail


def distinct_counts(values, queries):
    """Number of distinct values in each ``(left, right)`` range (Mo's algorithm).

    Answers come back in the order of the queries.
    """
    values = list(values)
    queries = list(queries)
    for left, right in queries:
        _check_range(left, right, len(values))
    block = _block_size(len(values))
    order = sorted(
        range(len(queries)),
        key=lambda q: (queries[q][0] // block, queries[q][1]),
    )
    counts = {}
    distinct = 0

    def add(index):
        nonlocal distinct
        value = values[index]
        counts[value] = counts.get(value, 0) + 1
        if counts[value] == 1:
            distinct += 1

    def remove(index):
        nonlocal distinct
        value = values[index]
        counts[value] -= 1
        if counts[value] == 0:
            distinct -= 1

    answers = [0] * len(queries)
    cur_left, cur_right = 0, -1
    for query_index in order:
        left, right = queries[query_index]
        while cur_left > left:
            cur_left -= 1
            add(cur_left)
        while cur_right < right:
            cur_right += 1
            add(cur_right)
        while cur_left < left:
            remove(cur_left)
            cur_left += 1
        while cur_right > right:
            remove(cur_right)
            cur_right -= 1
        answers[query_index] = distinct
    return answers