"""Binary indexed tree for prefix sums, and offline range counting with it.

All indices are zero-based and ranges include both ends.
"""


def _check_range(left, right, size):
    if not 0 <= left <= right < size:
        raise IndexError(f"range [{left}, {right}] out of bounds for length {size}")


class FenwickTree:
    """Prefix sums over a sequence with point additions."""

    def __init__(self, values):
        values = list(values)
        self._size = len(values)
        self._tree = [0] * (self._size + 1)
        for index, value in enumerate(values):
            if value:
                self._add(index + 1, value)

    def __len__(self):
        return self._size

    def _add(self, position, delta):
        while position <= self._size:
            self._tree[position] += delta
            position += position & -position

    def add(self, index, delta):
        """Add ``delta`` to ``values[index]``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        self._add(index + 1, delta)

    def prefix_sum(self, index):
        """Sum of the first ``index`` values, that is ``values[:index]``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"prefix length {index} out of range")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, left, right):
        """Sum of ``values[left .. right]``."""
        _check_range(left, right, self._size)
        return self.prefix_sum(right + 1) - self.prefix_sum(left)


def count_greater_offline(values, queries):
    """For each ``(left, right, k)`` query, how many of ``values[left .. right]`` exceed ``k``.

    Answers come back in the order of the queries.
    """
    values = list(values)
    queries = list(queries)
    size = len(values)
    for left, right, _ in queries:
        _check_range(left, right, size)
    items = sorted(((value, index) for index, value in enumerate(values)), reverse=True)
    order = sorted(range(len(queries)), key=lambda q: queries[q][2], reverse=True)
    tree = FenwickTree([0] * size)
    answers = [0] * len(queries)
    pos = 0
    for query_index in order:
        left, right, k = queries[query_index]
        while pos < size and items[pos][0] > k:
            tree.add(items[pos][1], 1)
            pos += 1
        answers[query_index] = tree.range_sum(left, right)
    return answers