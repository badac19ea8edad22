"""Dynamic programming and greedy answers to optimisation puzzles."""

from functools import lru_cache
from itertools import accumulate

WATER_MOD = 1_000_000_007


def _knapsack_table(values, weights, capacity):
    values = list(values)
    weights = list(weights)
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must be non-negative")
    table = [[0] * (capacity + 1)]
    for value, weight in zip(values, weights):
        above = table[-1]
        table.append(
            [
                max(above[cap], value + above[cap - weight]) if weight <= cap else above[cap]
                for cap in range(capacity + 1)
            ]
        )
    return table, weights


def knapsack(values, weights, capacity):
    """Largest total value of items whose total weight fits ``capacity``."""
    table, _ = _knapsack_table(values, weights, capacity)
    return table[-1][capacity]


def knapsack_items(values, weights, capacity):
    """Indices, ascending, of one best choice of items for the knapsack."""
    table, weights = _knapsack_table(values, weights, capacity)
    chosen = []
    cap = capacity
    for item in range(len(weights), 0, -1):
        if table[item][cap] != table[item - 1][cap]:
            chosen.append(item - 1)
            cap -= weights[item - 1]
    chosen.reverse()
    return chosen


def triangle_max_path(rows):
    """Largest sum on a path from the apex down to the base of a triangle."""
    rows = [list(row) for row in rows]
    if not rows:
        raise ValueError("triangle must have at least one row")
    for number, row in enumerate(rows, 1):
        if len(row) != number:
            raise ValueError(f"row {number} must have {number} entries")
    best = rows[-1]
    for row in reversed(rows[:-1]):
        best = [value + max(best[j], best[j + 1]) for j, value in enumerate(row)]
    return best[0]


def treats_max_revenue(values):
    """Best revenue selling treats from either end; the one sold on day a earns a * v."""
    values = list(values)
    size = len(values)
    if size == 0:
        return 0
    prefix = [0, *accumulate(values)]
    best = list(values)
    for span in range(1, size):
        best = [
            max(best[lo], best[lo + 1]) + prefix[lo + span + 1] - prefix[lo]
            for lo in range(size - span)
        ]
    return best[0]


def _orient(grid, flip_rows, flip_cols):
    rows = grid[::-1] if flip_rows else grid
    return [row[::-1] if flip_cols else list(row) for row in rows]


def _best_paths(grid, flip_rows, flip_cols):
    cells = _orient(grid, flip_rows, flip_cols)
    best = []
    for i, row in enumerate(cells):
        line = []
        for j, value in enumerate(row):
            candidates = []
            if i:
                candidates.append(best[i - 1][j])
            if j:
                candidates.append(line[j - 1])
            line.append(value + (max(candidates) if candidates else 0))
        best.append(line)
    return _orient(best, flip_rows, flip_cols)


def max_calories(grid):
    """Most calories two walkers collect when their paths meet at exactly one cell.

    One walks from the top-left to the bottom-right moving down or right, the
    other from the bottom-left to the top-right moving up or right; the cell
    where they meet counts for neither.
    """
    grid = [list(row) for row in grid]
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("grid rows must have equal length")
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    if rows < 3 or cols < 3:
        return 0
    first_from = _best_paths(grid, False, False)
    first_to = _best_paths(grid, True, True)
    second_from = _best_paths(grid, True, False)
    second_to = _best_paths(grid, False, True)
    best = 0
    for i in range(1, rows - 1):
        for j in range(1, cols - 1):
            vertical_first = (
                first_from[i - 1][j] + first_to[i + 1][j]
                + second_from[i][j - 1] + second_to[i][j + 1]
            )
            vertical_second = (
                second_from[i + 1][j] + second_to[i - 1][j]
                + first_from[i][j - 1] + first_to[i][j + 1]
            )
            best = max(best, vertical_first, vertical_second)
    return best


def kth_neighbourhood_max(k, grid):
    """For every cell, the largest value within Manhattan distance ``k``."""
    if k < 0:
        raise ValueError("k must be non-negative")
    current = [list(row) for row in grid]
    if any(len(row) != len(current[0]) for row in current):
        raise ValueError("grid rows must have equal length")
    rows = len(current)
    cols = len(current[0]) if current else 0
    for _ in range(k):
        current = [
            [
                max(
                    current[r][c]
                    for r, c in ((i, j), (i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1))
                    if 0 <= r < rows and 0 <= c < cols
                )
                for j in range(cols)
            ]
            for i in range(rows)
        ]
    return current


@lru_cache(maxsize=None)
def _exchange(n):
    if n < 12:
        return n
    return _exchange(n // 2) + _exchange(n // 3) + _exchange(n // 4)


def bytelandian_exchange(n):
    """Most money from a coin ``n`` that may be split into n/2, n/3 and n/4."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return _exchange(n)


def coin_game_winner(k, l, n):
    """Winner, ``"A"`` (first player) or ``"B"``, of the take-1, k or l coins game.

    The player who takes the last coin wins.
    """
    if k < 1 or l < 1:
        raise ValueError("moves must be positive")
    if n < 0:
        raise ValueError("n must be non-negative")
    moves = (1, k, l)
    wins = [False]
    for coins in range(1, n + 1):
        wins.append(any(m <= coins and not wins[coins - m] for m in moves))
    return "A" if wins[n] else "B"


def trapped_water(heights):
    """Water held between bars of the given heights, modulo 1 000 000 007."""
    heights = list(heights)
    left = accumulate(heights, max)
    right = list(accumulate(reversed(heights), max))[::-1]
    total = sum(min(lo, hi) - h for lo, hi, h in zip(left, right, heights))
    return total % WATER_MOD


def max_container_area(heights):
    """Largest ``(j - i) * min(h[i], h[j])`` over pairs of bars."""
    heights = list(heights)
    lo, hi = 0, len(heights) - 1
    best = 0
    while lo < hi:
        width = hi - lo
        if heights[lo] <= heights[hi]:
            best = max(best, width * heights[lo])
            lo += 1
        else:
            best = max(best, width * heights[hi])
            hi -= 1
    return best