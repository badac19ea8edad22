import pytest

from algorack.queens import eight_queens, format_queens


def _valid(solution):
    return all(
        a != b and abs(a - b) != j - i
        for i, a in enumerate(solution)
        for j, b in enumerate(solution)
        if i < j
    )


def test_first_solution_for_corner():
    assert eight_queens(1, 1)[0] == (1, 5, 8, 6, 3, 7, 2, 4)


def test_total_over_one_column():
    assert sum(len(eight_queens(row, 1)) for row in range(1, 9)) == 92


@pytest.mark.parametrize("row,col", [(1, 1), (3, 5), (8, 8), (4, 2)])
def test_solutions_are_valid_and_fixed(row, col):
    solutions = eight_queens(row, col)
    assert solutions
    assert all(_valid(s) and s[col - 1] == row for s in solutions)
    assert solutions == sorted(solutions)


def test_format_layout():
    text = format_queens(1, 1)
    lines = text.splitlines()
    assert lines[:3] == ["SOLN COLUMN", " # 1 2 3 4 5 6 7 8", ""]
    assert lines[3] == " 1 15863724"
    assert len(lines) == 3 + len(eight_queens(1, 1))


def test_bad_position():
    with pytest.raises(ValueError):
        eight_queens(0, 3)
    with pytest.raises(ValueError):
        format_queens(2, 9)