# numethods

Small, readable implementations of classic numerical methods. You can use
them as a library or through interactive commands.

## What is included

### Root finding: `numethods.rootfinding`

- `f(x)` is the sample equation `3x - cos(x) - 1`, and `df(x)` is its
  derivative `3 + sin(x)`.
- `is_bracket(func, a, b)` returns `True` when `func(a) * func(b) < 0`.
- `bisection(func, a, b, max_iterations=1000, stop_error=None)`
- `false_position(func, a, b, max_iterations=1000, stop_error=None)`
- `newton_raphson(func, dfunc, x0, max_iterations=1000, stop_error=None)`

Each method returns a `RootResult`. Its `root` holds the approximate root and
its `iterations` hold a list of `Iteration` records. Each record has `index`,
`x`, `fx` and `error`. The bracketing methods also fill in `a` and `b`.
`error` is the approximate relative error in percent. It is `None` on the
first step.

When `stop_error` is `None`, the method runs for `max_iterations` steps. A
bracketing method also stops early if it lands exactly on a root. When
`stop_error` is a percentage, iteration stops as soon as the error falls
below it.

- `bisection` and `false_position` raise `InvalidBracketError`, a subclass of
  `ValueError`, when `func(a)` and `func(b)` do not have opposite signs.
- `newton_raphson` raises `ZeroDerivativeError`, a subclass of
  `ArithmeticError`, when the derivative is zero.

Two functions render a result as a text table that ends with the
approximate root:

- `format_bracket_table(result)`
- `format_newton_table(result)`

### Linear systems: `numethods.linear`

- `naive_gauss(matrix)` solves an `n x (n+1)` augmented matrix. It uses
  forward elimination without pivoting, then back substitution. It returns
  an `EliminationResult` with these fields:
  - `initial`
  - `reduced`
  - `solution`
  - `steps`: a list of `(row, pivot_row, snapshot)` tuples, with zero-based
    row numbers.
- The two stages are also available on their own:
  - `forward_eliminate(matrix)` returns the reduced matrix and the steps.
  - `back_substitute(matrix)` returns the solution.
- A zero pivot raises `ZeroPivotError`. A matrix of the wrong shape raises
  `ValueError`.
- `format_matrix(matrix, width=10)` prints each value with four decimals,
  right-aligned in a cell of the given width.

### Interpolation: `numethods.interpolation`

- `select_points(xs, ys, degree, x)` chooses `degree + 1` consecutive points
  centred on the data point closest to `x`.
- `direct_interpolation(xs, ys, degree, x)` builds the Vandermonde system for
  those points and solves it by naive Gaussian elimination. It returns an
  `InterpolationResult` with these fields:
  - `points`
  - `initial_matrix`
  - `column_steps`: a snapshot after each column is eliminated.
  - `coefficients`: `a0, a1, ...`
  - `degree`
  - `value`: the polynomial evaluated at `x`.
- `evaluate_polynomial(coefficients, x)` evaluates `a0 + a1*x + a2*x**2 + ...`.
- A degree that is not less than the number of points raises `ValueError`.
  So does a negative degree, or x and y lists of different lengths.

## Installation

```
pip install .
```

## Library use

```python
from numethods.rootfinding import f, df, bisection, newton_raphson, format_bracket_table

result = bisection(f, 0.0, 1.0, stop_error=0.01)
print(result.root)
print(format_bracket_table(result))

result = newton_raphson(f, df, 0.0, max_iterations=10)
print(result.root)

from numethods.linear import naive_gauss

system = naive_gauss([[2.0, 1.0, 5.0], [1.0, 3.0, 10.0]])
print(system.solution)

from numethods.interpolation import direct_interpolation

result = direct_interpolation([1, 2, 3, 4], [1, 4, 9, 16], 2, 2.5)
print(result.coefficients, result.value)
```

## Commands

Each command reads whitespace-separated values from standard input. It
prompts for them one by one and prints the tables and results:

```
numethods-bisection
numethods-false-position
numethods-newton
numethods-gauss
numethods-interpolate
```

- The bisection and false-position commands ask for the bounds again until
  they bracket a root.
- On missing or malformed input, a command prints a message and exits with
  status 1.

Each command's function can also be called with a list of input tokens, for
example `main_bisection(["0", "1", "2", "0.01"])`.

## Limitations

- The root-finding commands always solve the built-in equation
  `3x - cos(x) - 1`. To use another function, call the library functions.
- Gaussian elimination does no pivoting, so a zero pivot stops it even when
  the system has a solution.

## Running the tests

```
pip install .[test]
pytest
```