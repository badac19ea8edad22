"""Disjoint-set forest with path halving and union by size."""


class UnionFind:
    """A disjoint-set structure over the integers ``0 .. size - 1``."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._size = [1] * size

    def __len__(self):
        return len(self._parent)

    def _check(self, x):
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def root(self, x):
        """Return the representative of the set holding ``x``."""
        self._check(x)
        parent = self._parent
        while x != parent[x]:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def same_set(self, x, y):
        """Tell whether ``x`` and ``y`` belong to the same set."""
        return self.root(x) == self.root(y)

    def union(self, x, y):
        """Merge the sets of ``x`` and ``y`` and return the new root."""
        root_x = self.root(x)
        root_y = self.root(y)
        if root_x == root_y:
            return root_x
        if self._size[root_x] > self._size[root_y]:
            self._size[root_x] += self._size[root_y]
            self._parent[root_y] = root_x
            return root_x
        self._size[root_y] += self._size[root_x]
        self._parent[root_x] = root_y
        return root_y