"""Naive Gaussian elimination for square linear systems given as augmented matrices."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Sequence

Matrix = list[list[float]]
Step = tuple[int, int, Matrix]


class ZeroPivotError(ArithmeticError):
    """Raised when a pivot is zero and naive elimination cannot go on."""

    def __init__(self, column: int) -> None:
        super().__init__("Zero pivot found. Naive Gaussian elimination fails.")
        self.column = column


@dataclass
class EliminationResult:
    """The initial and reduced matrices, every elimination step and the solution.

    Each step is (row, pivot_row, snapshot) with zero-based row numbers.
    """

    initial: Matrix
    reduced: Matrix
    solution: list[float]
    steps: list[Step] = field(default_factory=list)


def _augmented(matrix: Sequence[Sequence[float]]) -> Matrix:
    rows = [[float(value) for value in row] for row in matrix]
    n = len(rows)
    if n == 0:
        raise ValueError("the system needs at least one equation")
    if any(len(row) != n + 1 for row in rows):
        raise ValueError("an augmented matrix of n equations needs n + 1 columns in every row")
    return rows


def forward_eliminate(matrix: Sequence[Sequence[float]]) -> tuple[Matrix, list[Step]]:
    """Reduce a copy of the augmented matrix to upper triangular form.

    Returns the reduced matrix and a snapshot after each row operation.
    """
    rows = _augmented(matrix)
    n = len(rows)
    steps: list[Step] = []
    for k in range(n - 1):
        pivot_row = rows[k]
        if pivot_row[k] == 0.0:
            raise ZeroPivotError(k)
        for i in range(k + 1, n):
            factor = rows[i][k] / pivot_row[k]
            rows[i][k:] = [value - factor * p for value, p in zip(rows[i][k:], pivot_row[k:])]
            steps.append((i, k, [row.copy() for row in rows]))
    return rows, steps


def back_substitute(matrix: Sequence[Sequence[float]]) -> list[float]:
    """Solve an upper triangular augmented system."""
    rows = _augmented(matrix)
    n = len(rows)
    solution = [0.0] * n
    for i in reversed(range(n)):
        pivot = rows[i][i]
        if pivot == 0.0:
            raise ZeroPivotError(i)
        total = sum(c * x for c, x in zip(rows[i][i + 1 : n], solution[i + 1 :]))
        solution[i] = (rows[i][n] - total) / pivot
    return solution


def naive_gauss(matrix: Sequence[Sequence[float]]) -> EliminationResult:
    """Solve a linear system by naive Gaussian elimination."""
    initial = _augmented(matrix)
    reduced, steps = forward_eliminate(initial)
    return EliminationResult(
        initial=initial, reduced=reduced, solution=back_substitute(reduced), steps=steps
    )


def format_matrix(matrix: Sequence[Sequence[float]], width: int = 10) -> str:
    """Render a matrix with four decimals, each cell right-aligned and followed by a space."""
    return "\n".join("".join(f"{value:>{width}.4f} " for value in row) for row in matrix)


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
    """Read an augmented matrix and print the elimination and the solution."""
    tokens = _tokens(argv)
    try:
        n = _ask(tokens, "Enter number of variables: ", int)
        print("Enter the coefficients of the augmented matrix (row by row):")
        matrix = [[_ask(tokens, "", float) for _ in range(n + 1)] for _ in range(n)]
        initial = _augmented(matrix)
    except (EOFError, ValueError):
        print("\nInvalid or missing input.")
        return 1

    print("\nInitial Augmented Matrix:")
    print(format_matrix(initial))
    print()
    try:
        result = naive_gauss(initial)
    except ZeroPivotError as exc:
        print(exc)
        return 1

    for row, pivot_row, snapshot in result.steps:
        print(f"After eliminating row {row + 1} using row {pivot_row + 1}:")
        print(format_matrix(snapshot))
        print()
    print("Solution:")
    for number, value in enumerate(result.solution, start=1):
        print(f"x{number}={value:.6f}")
    return 0