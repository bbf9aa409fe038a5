import pytest

from numethods.interpolation import (
    InterpolationResult,
    direct_interpolation,
    evaluate_polynomial,
    main,
    select_points,
)
from numethods.linear import ZeroPivotError

XS = [0.0, 1.0, 2.0, 3.0, 4.0]
YS = [x * x for x in XS]


def test_select_points_near_end_shifts_window():
    points = select_points(XS, YS, 2, 3.9)
    assert [p[0] for p in points] == [2.0, 3.0, 4.0]


def test_select_points_near_start():
    points = select_points(XS, YS, 2, 0.1)
    assert [p[0] for p in points] == [0.0, 1.0, 2.0]


def test_select_points_centred():
    points = select_points(XS, YS, 2, 2.2)
    assert [p[0] for p in points] == [1.0, 2.0, 3.0]
    assert [p[1] for p in points] == [1.0, 4.0, 9.0]


def test_select_points_tie_prefers_first():
    points = select_points(XS, YS, 0, 1.5)
    assert points == [(1.0, 1.0)]


def test_degree_too_high():
    with pytest.raises(ValueError, match="Polynomial degree must be less"):
        select_points(XS, YS, 5, 1.0)


def test_length_mismatch():
    with pytest.raises(ValueError):
        direct_interpolation(XS, YS[:-1], 1, 1.0)


def test_evaluate_polynomial():
    assert evaluate_polynomial([1, 2, 3], 2) == 17.0


def test_exact_quadratic_reproduced():
    result = direct_interpolation(XS, YS, 2, 2.5)
    assert isinstance(result, InterpolationResult)
    assert result.value == pytest.approx(2.5**2)
    assert result.degree == 2


def test_polynomial_passes_through_points():
    ys = [1.0, 3.0, 2.0, 5.0, 4.0]
    result = direct_interpolation(XS, ys, 3, 1.7)
    for xi, yi in result.points:
        assert evaluate_polynomial(result.coefficients, xi) == pytest.approx(yi)


def test_matrix_and_steps_shape():
    result = direct_interpolation(XS, YS, 3, 2.0)
    assert len(result.column_steps) == 3
    assert all(row[0] == 1.0 for row in result.initial_matrix)
    assert all(len(row) == 5 for row in result.initial_matrix)


def test_duplicate_x_gives_zero_pivot():
    with pytest.raises(ZeroPivotError):
        direct_interpolation([1.0, 1.0, 2.0], [1.0, 2.0, 3.0], 1, 1.0)


def test_main_output(capsys):
    assert main(["3", "0", "1", "2", "0", "1", "4", "2", "1.5"]) == 0
    out = capsys.readouterr().out
    assert "Using point (0, 0)" in out
    assert "After eliminating column 2:" in out
    assert f"Interpolated value at x = 1.500000 is: {1.5**2:.6f}" in out


def test_main_degree_error(capsys):
    assert main(["2", "0", "1", "0", "1", "2"]) == 1
    assert "Polynomial degree must be less than number of data points." in capsys.readouterr().out


def test_main_zero_pivot(capsys):
    assert main(["2", "1", "1", "1", "2", "1", "1"]) == 1
    assert "Zero pivot found. Gaussian elimination fails." in capsys.readouterr().out