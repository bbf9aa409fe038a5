import pytest

from numethods.linear import (
    EliminationResult,
    ZeroPivotError,
    back_substitute,
    format_matrix,
    forward_eliminate,
    main,
    naive_gauss,
)

SYSTEM = [[2.0, 1.0, -1.0, 8.0], [-3.0, -1.0, 2.0, -11.0], [-2.0, 1.0, 2.0, -3.0]]


def _residuals(matrix, solution):
    n = len(matrix)
    return [sum(row[j] * solution[j] for j in range(n)) - row[n] for row in matrix]


def test_naive_gauss_solves_system():
    result = naive_gauss(SYSTEM)
    assert isinstance(result, EliminationResult)
    assert all(abs(r) < 1e-9 for r in _residuals(SYSTEM, result.solution))


def test_forward_eliminate_upper_triangular():
    reduced, _ = forward_eliminate(SYSTEM)
    for i, row in enumerate(reduced):
        assert all(value == pytest.approx(0.0, abs=1e-12) for value in row[:i])


def test_forward_eliminate_step_order():
    _, steps = forward_eliminate(SYSTEM)
    assert [(row, pivot) for row, pivot, _ in steps] == [(1, 0), (2, 0), (2, 1)]
    reduced, _ = forward_eliminate(SYSTEM)
    assert steps[-1][2] == reduced


def test_input_is_not_mutated():
    original = [row.copy() for row in SYSTEM]
    naive_gauss(SYSTEM)
    assert SYSTEM == original


def test_back_substitute_consistent_with_reduced():
    reduced, _ = forward_eliminate(SYSTEM)
    solution = back_substitute(reduced)
    assert all(abs(r) < 1e-9 for r in _residuals(reduced, solution))


def test_single_variable():
    assert naive_gauss([[4, 8]]).solution == [2.0]


def test_zero_pivot_in_elimination():
    with pytest.raises(ZeroPivotError):
        naive_gauss([[0, 1, 1], [1, 1, 2]])


def test_zero_pivot_in_back_substitution():
    with pytest.raises(ZeroPivotError):
        naive_gauss([[1, 1, 2], [2, 2, 4]])


@pytest.mark.parametrize("matrix", [[], [[1, 2, 3]], [[1, 2, 3], [4, 5]]])
def test_bad_shape(matrix):
    with pytest.raises(ValueError):
        naive_gauss(matrix)


def test_format_matrix():
    assert format_matrix([[1, -2.5]], 10) == "    1.0000    -2.5000 "


def test_format_matrix_rows():
    text = format_matrix(SYSTEM, 12)
    lines = text.split("\n")
    assert len(lines) == len(SYSTEM)
    assert all(len(line) == 13 * 4 for line in lines)


def test_main_prints_solution(capsys):
    assert main(["2", "2", "1", "5", "1", "3", "10"]) == 0
    out = capsys.readouterr().out
    assert "Initial Augmented Matrix:" in out
    assert "After eliminating row 2 using row 1:" in out
    values = [float(line.split("=")[1]) for line in out.splitlines() if line.startswith("x")]
    matrix = [[2.0, 1.0, 5.0], [1.0, 3.0, 10.0]]
    assert all(abs(r) < 1e-5 for r in _residuals(matrix, values))


def test_main_zero_pivot(capsys):
    assert main(["2", "0", "1", "1", "1", "1", "2"]) == 1
    assert "Zero pivot found. Naive Gaussian elimination fails." in capsys.readouterr().out


def test_main_missing_input(capsys):
    assert main(["2", "1"]) == 1