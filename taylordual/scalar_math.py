"""Elementary functions on plain numbers, complex numbers and vectorized values.

Real arguments follow IEEE-754 semantics: a result outside the domain is
``nan`` or ``inf`` rather than an exception.
"""

from __future__ import annotations

import math
import numbers
from typing import Callable, Optional

import numpy as np

from taylordual.vectorized import Vectorized


def is_arithmetic(value: object) -> bool:
    """True for integers and real floating-point numbers."""
    return isinstance(value, numbers.Real)


def is_arithmetic_or_complex(value: object) -> bool:
    """True for integers, real floats and complex numbers."""
    return isinstance(value, numbers.Complex)


def _apply(
    value,
    np_func: Callable,
    complex_func: Optional[Callable] = None,
):
    if isinstance(value, Vectorized):
        return value.map(lambda v: _apply(v, np_func, complex_func))
    if isinstance(value, numbers.Real):
        with np.errstate(all="ignore"):
            return float(np_func(np.float64(value)))
    if isinstance(value, numbers.Complex):
        with np.errstate(all="ignore"):
            if complex_func is not None:
                return complex(complex_func(np.complex128(value)))
            return complex(np_func(np.complex128(value)))
    raise TypeError(f"unsupported argument type: {type(value).__name__}")


def _real_only(value, func: Callable[[float], float], name: str):
    if isinstance(value, Vectorized):
        return value.map(lambda v: _real_only(v, func, name))
    if isinstance(value, numbers.Real):
        return func(float(value))
    raise TypeError(f"{name} is defined for real arguments only")


def _lgamma(x: float) -> float:
    try:
        return math.lgamma(x)
    except (ValueError, OverflowError):
        return math.nan if math.isnan(x) else math.inf


def exp(x):
    return _apply(x, np.exp)


def erf(x):
    return _real_only(x, math.erf, "erf")


def lgamma(x):
    return _real_only(x, _lgamma, "lgamma")


def log(x):
    return _apply(x, np.log)


def sin(x):
    return _apply(x, np.sin)


def cos(x):
    return _apply(x, np.cos)


def tan(x):
    return _apply(x, np.tan)


def sinh(x):
    return _apply(x, np.sinh)


def cosh(x):
    return _apply(x, np.cosh)


def tanh(x):
    return _apply(x, np.tanh)


def asin(x):
    return _apply(x, np.arcsin)


def acos(x):
    return _apply(x, np.arccos)


def atan(x):
    return _apply(x, np.arctan)


def asinh(x):
    return _apply(x, np.arcsinh)


def acosh(x):
    return _apply(x, np.arccosh)


def atanh(x):
    return _apply(x, np.arctanh)


def sqrt(x):
    return _apply(x, np.sqrt)


def absolute(x):
    """Absolute value; the modulus for complex numbers."""
    if isinstance(x, Vectorized):
        return x.map(abs)
    if isinstance(x, numbers.Complex):
        return float(abs(x))
    raise TypeError(f"unsupported argument type: {type(x).__name__}")


def cbrt(x):
    """Real cube root; the principal cube root for complex numbers."""
    return _apply(x, np.cbrt, lambda z: np.power(z, 1.0 / 3.0))


def _scalar_power(base, exponent):
    if isinstance(base, numbers.Real) and isinstance(exponent, numbers.Real):
        with np.errstate(all="ignore"):
            return float(np.power(np.float64(base), np.float64(exponent)))
    if isinstance(base, numbers.Complex) and isinstance(exponent, numbers.Complex):
        with np.errstate(all="ignore"):
            return complex(np.power(np.complex128(base), np.complex128(exponent)))
    raise TypeError(
        f"unsupported operand types for power: {type(base).__name__}, {type(exponent).__name__}"
    )


def power(base, exponent):
    """``base`` raised to ``exponent``, element-wise for vectorized operands."""
    base_vec = isinstance(base, Vectorized)
    exp_vec = isinstance(exponent, Vectorized)
    if base_vec and exp_vec:
        a, b = base.values, exponent.values
        if len(a) == len(b):
            pairs = zip(a, b)
        elif len(b) == 1:
            pairs = ((x, b[0]) for x in a)
        elif len(a) == 1:
            pairs = ((a[0], y) for y in b)
        else:
            raise ValueError("Coefficients of different sizes in pow")
        return Vectorized([_scalar_power(x, y) for x, y in pairs])
    if base_vec:
        if not isinstance(exponent, numbers.Real):
            raise TypeError("a vectorized base needs a real exponent")
        return base.map(lambda v: _scalar_power(v, exponent))
    if exp_vec:
        if not isinstance(base, numbers.Real):
            raise TypeError("a vectorized exponent needs a real base")
        return exponent.map(lambda v: _scalar_power(base, v))
    return _scalar_power(base, exponent)