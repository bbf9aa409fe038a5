"""Root finding for equations of one variable: bisection, false position and Newton-Raphson."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator

Function = Callable[[float], float]

MAX_ERROR_ITERATIONS = 1000


class InvalidBracketError(ValueError):
    """Raised when f(a) and f(b) do not have opposite signs."""

    def __init__(self, a: float, b: float) -> None:
        super().__init__("Invalid interval! f(a) and f(b) must have opposite signs.")
        self.a = a
        self.b = b


class ZeroDerivativeError(ArithmeticError):
    """Raised when Newton-Raphson meets a zero derivative."""

    def __init__(self, x: float) -> None:
        super().__init__("Derivative zero! Cannot continue.")
        self.x = x


@dataclass(frozen=True)
class Iteration:
    """One step of an iterative method; a and b are set for bracketing methods."""

    index: int
    x: float
    fx: float
    error: float | None = None
    a: float | None = None
    b: float | None = None


@dataclass
class RootResult:
    """The approximate root and the iterations that led to it."""

    root: float
    iterations: list[Iteration] = field(default_factory=list)


def f(x: float) -> float:
    """The sample equation f(x) = 3x - cos(x) - 1."""
    return 3 * x - math.cos(x) - 1


def df(x: float) -> float:
    """Derivative of the sample equation: f'(x) = 3 + sin(x)."""
    return 3 + math.sin(x)


def is_bracket(func: Function, a: float, b: float) -> bool:
    """Return True if func changes sign between a and b."""
    return func(a) * func(b) < 0


def _relative_error(new: float, old: float) -> float:
    if new == 0:
        return math.nan if new == old else math.inf
    return abs((new - old) / new) * 100


def _bracketing(
    func: Function,
    a: float,
    b: float,
    max_iterations: int,
    stop_error: float | None,
    next_point: Callable[[float, float], float],
) -> RootResult:
    if not is_bracket(func, a, b):
        raise InvalidBracketError(a, b)
    result = RootResult(root=0.0)
    x_old = 0.0
    for index in range(1, max_iterations + 1):
        x_new = next_point(a, b)
        fx = func(x_new)
        error = None if index == 1 else _relative_error(x_new, x_old)
        result.iterations.append(Iteration(index, x_new, fx, error, a, b))
        result.root = x_new
        if error is not None and stop_error is not None and error < stop_error:
            break
        if fx == 0:
            break
        if func(a) * fx < 0:
            b = x_new
        else:
            a = x_new
        x_old = x_new
    return result


def bisection(
    func: Function,
    a: float,
    b: float,
    max_iterations: int = MAX_ERROR_ITERATIONS,
    stop_error: float | None = None,
) -> RootResult:
    """Find a root in [a, b] by halving the interval.

    Without stop_error exactly max_iterations steps run (unless the root is hit);
    with it, iteration stops once the approximate relative error in percent falls below it.
    """
    return _bracketing(func, a, b, max_iterations, stop_error, lambda lo, hi: (lo + hi) / 2.0)


def false_position(
    func: Function,
    a: float,
    b: float,
    max_iterations: int = MAX_ERROR_ITERATIONS,
    stop_error: float | None = None,
) -> RootResult:
    """Find a root in [a, b] by the method of false position."""

    def secant_point(lo: float, hi: float) -> float:
        f_lo, f_hi = func(lo), func(hi)
        return (lo * f_hi - hi * f_lo) / (f_hi - f_lo)

    return _bracketing(func, a, b, max_iterations, stop_error, secant_point)


def newton_raphson(
    func: Function,
    dfunc: Function,
    x0: float,
    max_iterations: int = MAX_ERROR_ITERATIONS,
    stop_error: float | None = None,
) -> RootResult:
    """Find a root starting from x0 with Newton-Raphson steps."""
    result = RootResult(root=x0)
    x_new = x0
    for index in range(1, max_iterations + 1):
        x_old = x_new
        slope = dfunc(x_old)
        if slope == 0:
            raise ZeroDerivativeError(x_old)
        x_new = x_old - func(x_old) / slope
        error = None if index == 1 else _relative_error(x_new, x_old)
        result.iterations.append(Iteration(index, x_new, func(x_new), error))
        result.root = x_new
        if error is not None and stop_error is not None and error < stop_error:
            break
    return result


def _error_cell(error: float | None) -> str:
    return f"{'-':>15}" if error is None else f"{error:>15.6f}"


def format_bracket_table(result: RootResult) -> str:
    """Render the iterations of a bracketing method and the root as a table."""
    lines = [f"{'Iter':>10}{'a':>12}{'b':>12}{'x':>12}{'Error(%)':>15}"]
    lines.extend(
        f"{it.index:>10}{it.a:>12.6f}{it.b:>12.6f}{it.x:>12.6f}{_error_cell(it.error)}"
        for it in result.iterations
    )
    lines.extend(["", f"Approximate root: {result.root:.6f}"])
    return "\n".join(lines)


def format_newton_table(result: RootResult) -> str:
    """Render Newton-Raphson iterations and the root as a table."""
    lines = [f"{'Iter':>10}{'x':>15}{'f(x)':>20}{'Error(%)':>15}"]
    lines.extend(
        f"{it.index:>10}{it.x:>15.6f}{it.fx:>20.6f}{_error_cell(it.error)}"
        for it in result.iterations
    )
    lines.extend(["", f"Approximate root: {result.root:.6f}"])
    return "\n".join(lines)


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


def _read_mode(tokens: Iterator[str]) -> tuple[int, float | None] | None:
    print("\nChoose an option:")
    print("1. Fixed number of iterations")
    print("2. Stop when Approximate Error is small enough")
    choice = _ask(tokens, "Enter your choice (1 or 2): ", int)
    if choice == 1:
        return _ask(tokens, "Enter number of iterations: ", int), None
    if choice == 2:
        error = _ask(tokens, "Enter maximum approximate error (e.g., 0.01): ", float)
        return MAX_ERROR_ITERATIONS, error
    print("Invalid choice! Please enter 1 or 2.")
    return None


def _main_bracketing(argv, method) -> int:
    tokens = _tokens(argv)
    try:
        while True:
            a = _ask(tokens, "Enter lower bound (a): ", float)
            b = _ask(tokens, "Enter upper bound (b): ", float)
            if is_bracket(f, a, b):
                break
            print("Invalid interval! f(a) and f(b) must have opposite signs.\n")
        mode = _read_mode(tokens)
    except (EOFError, ValueError):
        print("\nInvalid or missing input.")
        return 1
    if mode is None:
        return 0
    print(format_bracket_table(method(f, a, b, *mode)))
    return 0


def main_bisection(argv: Iterable[str] | None = None) -> int:
    """Interactive bisection on the sample equation."""
    return _main_bracketing(argv, bisection)


def main_false_position(argv: Iterable[str] | None = None) -> int:
    """Interactive false position on the sample equation."""
    return _main_bracketing(argv, false_position)


def main_newton(argv: Iterable[str] | None = None) -> int:
    """Interactive Newton-Raphson on the sample equation."""
    tokens = _tokens(argv)
    try:
        x0 = _ask(tokens, "Enter initial guess x0: ", float)
        mode = _read_mode(tokens)
    except (EOFError, ValueError):
        print("\nInvalid or missing input.")
        return 1
    if mode is None:
        return 0
    try:
        result = newton_raphson(f, df, x0, *mode)
    except ZeroDerivativeError as exc:
        print(exc)
        return 0
    print(format_newton_table(result))
    return 0