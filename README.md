# taylordual

Generalized dual numbers for Python: truncated multivariate Taylor
polynomials that carry every derivative of a computation up to a chosen
order. Build your expression with ordinary arithmetic (`+ - * /`) on
`GDual` values and plain numbers, then read off any (mixed) derivative
from the resulting polynomial.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Getting started

```python
from taylordual.gdual import GDual

# Expand around x = 2, y = 3, keeping terms up to total degree 3.
x = GDual(2.0, "x", 3)
y = GDual(3.0, "y", 3)

f = x * y + x / y

print(f)                                     # the Taylor polynomial in dx, dy
print(f.constant_cf())                       # value at the expansion point
print(f.get_derivative([1, 0]))              # d/dx
print(f.get_derivative([1, 2]))              # d^3 / dx dy^2
print(f.get_derivative({"dx": 1, "dy": 2}))  # same, by differential name
```

Variables are named without a leading `d`; their differentials (`dx`,
`dy`, ...) are the symbols of the polynomial. Exponent lists follow the
alphabetical order of the symbol set. A differential that is not in the
symbol set gives a zero derivative.

## Modules

- `taylordual.gdual` – `GDual`, the generalized dual number. Besides the
  arithmetic operators and comparisons (`==` on all coefficients, `<` and
  `>` on the constant term), it offers `order`, `degree`, `symbol_set`,
  `symbol_set_size`, `extend_symbol_set`, `partial`, `integrate`, `subs`
  (with a number or with another `GDual`), `trim`, `extract_terms`,
  `evaluate`, `find_cf`, `get_derivative`, `constant_cf`, `is_zero` and
  `info`. Division uses the truncated reciprocal series of the divisor.
- `taylordual.polynomial` – `Polynomial`, the immutable sparse
  multivariate polynomial underneath, with truncated multiplication,
  differentiation, integration, substitution, trimming of unused symbols
  and evaluation.
- `taylordual.vectorized` – `Vectorized`, a coefficient holding several
  floats at once with element-wise, broadcasting arithmetic, and `fma3`
  for an in-place `acc += x * y`. Passing a list as the value of a
  `GDual` makes its coefficients vectorized, so one computation expands
  around many points:

  ```python
  x = GDual([1.0, 2.0, 3.0], "x", 2)
  print((x * x).constant_cf())   # [1, 4, 9]
  ```

- `taylordual.scalar_math` – elementary functions (`exp`, `log`, `sin`,
  `cos`, `tan`, `sinh`, `cosh`, `tanh`, `asin`, `acos`, `atan`, `asinh`,
  `acosh`, `atanh`, `sqrt`, `cbrt`, `erf`, `lgamma`, `absolute`, `power`)
  on plain, complex and `Vectorized` numbers. Real arguments outside a
  function's domain give `nan` or `inf` rather than an exception. These
  act on coefficients, not on `GDual` values.
- `taylordual.io` – `to_string`, `stream` and `echo` for compact text
  output (at most five elements of a sequence or mapping are shown), and
  `Table` for simple left-aligned ASCII tables.

## What this package does not do

- There are no elementary functions of a `GDual` (exponential, logarithm,
  powers, roots, trigonometric and hyperbolic functions and their
  inverses, error function). Only the arithmetic operators produce Taylor
  expansions; `scalar_math` works on single coefficients only.
- There is no inversion or composition of Taylor maps beyond substituting
  one `GDual` into another with `GDual.subs`.
- There is no command-line program; the package is used as a library.