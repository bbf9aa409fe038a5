"""Direct-method polynomial interpolation through the data points nearest to x."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Sequence

from numethods.linear import ZeroPivotError, back_substitute, format_matrix, forward_eliminate

Matrix = list[list[float]]


@dataclass
class InterpolationResult:
    """Chosen points, the linear system and its elimination, coefficients and value."""

    points: list[tuple[float, float]]
    initial_matrix: Matrix
    column_steps: list[Matrix]
    coefficients: list[float]
    value: float

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1


def select_points(
    xs: Sequence[float], ys: Sequence[float], degree: int, x: float
) -> list[tuple[float, float]]:
    """Choose degree + 1 consecutive points centred on the one closest to x."""
    xs, ys = list(xs), list(ys)
    if len(xs) != len(ys):
        raise ValueError("x and y values must have the same length")
    if degree < 0:
        raise ValueError("polynomial degree must not be negative")
    total = len(xs)
    if degree >= total:
        raise ValueError("Polynomial degree must be less than number of data points.")
    closest = min(range(total), key=lambda i: abs(x - xs[i]))
    start = max(0, closest - degree // 2)
    if start + degree >= total:
        start = total - degree - 1
    end = start + degree + 1
    return list(zip(xs[start:end], ys[start:end]))


def evaluate_polynomial(coefficients: Sequence[float], x: float) -> float:
    """Evaluate a0 + a1*x + a2*x**2 + ..."""
    return sum(c * x**power for power, c in enumerate(coefficients))


def direct_interpolation(
    xs: Sequence[float], ys: Sequence[float], degree: int, x: float
) -> InterpolationResult:
    """Interpolate at x with a polynomial of the given degree solved by Gaussian elimination."""
    points = select_points(xs, ys, degree, x)
    matrix = [[float(xi) ** j for j in range(degree + 1)] + [float(yi)] for xi, yi in points]
    reduced, steps = forward_eliminate(matrix)
    column_steps = [snapshot for row, _, snapshot in steps if row == degree]
    coefficients = back_substitute(reduced)
    return InterpolationResult(
        points=points,
        initial_matrix=matrix,
        column_steps=column_steps,
        coefficients=coefficients,
        value=evaluate_polynomial(coefficients, x),
    )


def _tokens(argv: Iterable[str] | None) -> Iterator[str]:
    if argv is not None:
        yield from argv
        return
    for line in sys.stdin:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str, convert: Callable[[str], float | int]):
    print(prompt, end="", flush=True)
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    return convert(token)


def main(argv: Iterable[str] | None = None) -> int:
    """Read data points and interpolate interactively."""
    tokens = _tokens(argv)
    try:
        total = _ask(tokens, "Enter total number of data points: ", int)
        print("Enter x values:")
        xs = [_ask(tokens, "", float) for _ in range(total)]
        print("Enter corresponding y values:")
        ys = [_ask(tokens, "", float) for _ in range(total)]
        degree = _ask(tokens, "Enter degree of interpolating polynomial: ", int)
        if degree >= total:
            print("Polynomial degree must be less than number of data points.")
            return 1
        x = _ask(tokens, "Enter value of x to interpolate: ", float)
        result = direct_interpolation(xs, ys, degree, x)
    except (EOFError, ValueError):
        print("\nInvalid or missing input.")
        return 1
    except ZeroPivotError:
        print("Zero pivot found. Gaussian elimination fails.")
        return 1

    print("\nBuilding the augmented matrix using selected points:")
    for xi, yi in result.points:
        print(f"Using point ({xi:g}, {yi:g})")
    print("\nInitial Augmented Matrix:")
    print(format_matrix(result.initial_matrix, 12))
    for column, snapshot in enumerate(result.column_steps, start=1):
        print(f"\nAfter eliminating column {column}:")
        print(format_matrix(snapshot, 12))
    print("\nCoefficients of interpolating polynomial:")
    for power, c in enumerate(result.coefficients):
        print(f"a{power} = {c:.6f}")
    print(f"\nInterpolated value at x = {x:.6f} is: {result.value:.6f}")
    return 0