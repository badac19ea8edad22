"""Eight queens solutions with one queen fixed in place."""

from functools import lru_cache

_BOARD = 8


def _search(placed):
    if len(placed) == _BOARD:
        yield placed
        return
    col = len(placed)
    for row in range(_BOARD):
        if all(
            prev_row != row and abs(prev_row - row) != col - prev_col
            for prev_col, prev_row in enumerate(placed)
        ):
            yield from _search(placed + (row,))


@lru_cache(maxsize=None)
def _all_solutions():
    return tuple(_search(()))


def eight_queens(row, col):
    """All solutions, as 1-based row per column, with a queen at ``(row, col)``."""
    if not (1 <= row <= _BOARD and 1 <= col <= _BOARD):
        raise ValueError("row and column must be between 1 and 8")
    return [
        tuple(r + 1 for r in solution)
        for solution in _all_solutions()
        if solution[col - 1] == row - 1
    ]


def format_queens(row, col):
    """Render the numbered solution table for a queen fixed at ``(row, col)``."""
    lines = ["SOLN COLUMN", " # 1 2 3 4 5 6 7 8", ""]
    for number, solution in enumerate(eight_queens(row, col), start=1):
        lines.append(f"{number:2d} " + "".join(str(r) for r in solution))
    return "\n".join(lines) + "\n"