"""Generalized dual numbers: truncated multivariate Taylor polynomials.

A :class:`GDual` built as ``GDual(x0, "x", m)`` stands for ``x0 + dx``
in the algebra of polynomials truncated at total degree ``m``. Arithmetic
on gduals yields the Taylor expansion of the computed expression, from
which every derivative up to order ``m`` can be read.

Coefficients may be floats, complex numbers or
:class:`~taylordual.vectorized.Vectorized` values (pass a list as the
value to get the latter).
"""

from __future__ import annotations

import math
import numbers
from typing import Callable, Iterable, List, Mapping, Optional

import numpy as np

from taylordual.polynomial import Polynomial
from taylordual.scalar_math import absolute
from taylordual.vectorized import Vectorized

_MAX_ORDER = 2**32 - 1 - 10


def _to_cf(value):
    """Convert a user value to a coefficient."""
    if isinstance(value, Vectorized):
        return Vectorized(value.values)
    if isinstance(value, (list, tuple)):
        return Vectorized(value)
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, numbers.Complex):
        return complex(value)
    raise TypeError(f"cannot build a gdual coefficient from {type(value).__name__}")


def _is_operand(value: object) -> bool:
    return isinstance(value, (numbers.Number, Vectorized))


def _reciprocal(value):
    """``1 / value`` with IEEE-754 semantics for a zero divisor."""
    if isinstance(value, Vectorized):
        return 1.0 / value
    with np.errstate(all="ignore"):
        if isinstance(value, numbers.Real):
            return float(np.float64(1.0) / np.float64(value))
        return complex(np.complex128(1.0) / np.complex128(value))


def _check_order(order) -> int:
    if isinstance(order, bool) or not isinstance(order, numbers.Integral) or order < 0:
        raise ValueError("the truncation order must be a non-negative integer")
    if order >= _MAX_ORDER:
        raise ValueError("polynomial truncation order is too large")
    return int(order)


def _check_var_name(name: str) -> None:
    if not name:
        raise ValueError("symbol names cannot be empty")
    if name[0] == "d":
        raise ValueError("symbol names cannot start with the letter d")


def _check_var_name_has_d(name: str) -> None:
    if not name or name[0] != "d":
        raise ValueError("symbol variations must start with the letter d")


class GDual:
    """A truncated multivariate Taylor polynomial with a truncation order."""

    __slots__ = ("_p", "_order")

    def __init__(self, value=0.0, symbol: Optional[str] = None, order: int = 0) -> None:
        if isinstance(value, GDual):
            if symbol is not None:
                raise TypeError("a gdual cannot be built from another gdual and a symbol")
            self._p = value._p
            self._order = value._order
            return
        cf = _to_cf(value)
        self._order = _check_order(order)
        if symbol is None:
            self._p = Polynomial.constant(cf)
            return
        _check_var_name(symbol)
        differential = "d" + symbol
        if self._order == 0:
            base = Polynomial({}, [differential])
        else:
            base = Polynomial.variable(differential)
        self._p = base + cf

    @classmethod
    def _from_poly(cls, poly: Polynomial, order: int) -> "GDual":
        obj = cls.__new__(cls)
        obj._p = poly
        obj._order = order
        return obj

    # -- introspection ---------------------------------------------------------

    @property
    def order(self) -> int:
        """The truncation order."""
        return self._order

    @property
    def symbol_set(self) -> List[str]:
        """The symbols (without the leading ``d`` of their differentials)."""
        return [s[1:] for s in self._p.symbols]

    @property
    def symbol_set_size(self) -> int:
        return len(self._p.symbols)

    @property
    def degree(self) -> int:
        """The actual degree of the polynomial, never above the order."""
        return self._p.degree()

    @property
    def poly(self) -> Polynomial:
        """The underlying polynomial in the differentials."""
        return self._p

    def _zero(self):
        if any(isinstance(cf, Vectorized) for _key, cf in self._p):
            return Vectorized(0.0)
        return 0.0

    # -- structural operations -------------------------------------------------

    def extend_symbol_set(self, sym_vars: Iterable[str]) -> None:
        """Add the differentials ``sym_vars`` (each starting with ``d``) in place."""
        names = list(sym_vars)
        for name in names:
            _check_var_name_has_d(name)
        self._p = self._p.add_symbols(names)

    def integrate(self, var_name: str) -> "GDual":
        """Integrate with respect to ``d<var_name>``, keeping the truncation order."""
        _check_var_name(var_name)
        new_p = self._p.integrate("d" + var_name).truncate_degree(self._order)
        return GDual._from_poly(new_p, self._order)

    def partial(self, var_name: str) -> "GDual":
        """Partial derivative with respect to ``d<var_name>``."""
        _check_var_name(var_name)
        return GDual._from_poly(self._p.diff("d" + var_name), self._order)

    def subs(self, sym: str, val) -> "GDual":
        """Substitute the differential ``sym`` with a value or with a gdual.

        With a gdual, the result is truncated to this order and the symbols
        that no longer appear are dropped.
        """
        if isinstance(val, GDual):
            new_p = self._p.subs(sym, val._p).truncate_degree(self._order).trim()
            return GDual._from_poly(new_p, self._order)
        return GDual._from_poly(self._p.subs(sym, _to_cf(val)), self._order)

    def trim(self, epsilon: float) -> "GDual":
        """A copy with the coefficients smaller than ``epsilon`` in magnitude removed."""
        if epsilon < 0:
            raise ValueError(
                "When trimming a gdual the trim tolerance must be positive, "
                f"you seem to have used a negative value: {epsilon:f}"
            )
        new_p = self._p.filter(lambda _key, cf: not (absolute(cf) < epsilon))
        return GDual._from_poly(new_p, self._order)

    def extract_terms(self, order: int) -> "GDual":
        """The terms of total degree ``order``, as a gdual of that order."""
        if order > self._order:
            raise ValueError("requested order is beyond the truncation order.")
        new_p = self._p.filter(lambda key, _cf: sum(key) == order)
        return GDual._from_poly(new_p, order)

    def evaluate(self, values: Mapping[str, object]):
        """Evaluate the polynomial at the given differentials, e.g. ``{"dx": 0.1}``."""
        return self._p.evaluate(values)

    # -- coefficients and derivatives -----------------------------------------

    def find_cf(self, exponents: Iterable[int]):
        """The coefficient of the monomial with the given exponents.

        Exponents follow the alphabetical order of the symbol set.
        """
        exps = [int(e) for e in exponents]
        if sum(exps) > self._order:
            raise ValueError("requested coefficient is beyond the truncation order.")
        if len(exps) != self.symbol_set_size:
            raise ValueError(
                "requested monomial does not exist, check the length of the input "
                "with respect to the symbol set size"
            )
        cf = self._p.find(exps)
        return self._zero() if cf is None else cf

    def get_derivative(self, orders):
        """The value of a (mixed) derivative.

        ``orders`` is either a sequence of derivative orders, one per symbol,
        or a mapping from differentials to orders, e.g. ``{"dx": 1, "dy": 3}``.
        A differential absent from the symbol set yields zero.
        """
        if isinstance(orders, Mapping):
            symbols = self._p.symbols
            coeff = [0] * len(symbols)
            for name, n in orders.items():
                if name not in symbols:
                    return self._zero()
                coeff[symbols.index(name)] = n
            orders = coeff
        exps = [int(n) for n in orders]
        cumfact = math.prod((float(math.factorial(n)) for n in exps), start=1.0)
        return self.find_cf(exps) * cumfact

    def constant_cf(self):
        """The constant term ``f0`` of ``f0 + fhat``."""
        return self.find_cf([0] * self.symbol_set_size)

    def is_zero(self, tol: float) -> bool:
        """True if every coefficient is within ``tol`` of zero."""
        return not any(absolute(cf) > tol for _key, cf in self._p)

    # -- text ------------------------------------------------------------------

    def info(self) -> str:
        symbols = ", ".join(self._p.symbols)
        return (
            f"Symbol set: {{{symbols}}}\n"
            f"Number of terms: {len(self._p)}\n"
            f"{self._p}\n"
            f"Order: {self._order}\n"
            f"Degree: {self.degree}\n"
        )

    def __str__(self) -> str:
        return str(self._p)

    def __repr__(self) -> str:
        return f"GDual({self._p}, order={self._order})"

    # -- comparisons -----------------------------------------------------------

    def __eq__(self, other):
        if isinstance(other, GDual):
            return self._p == other._p
        if _is_operand(other):
            return self._p == other
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def _constant_of(self, other):
        if isinstance(other, GDual):
            return other.constant_cf()
        if _is_operand(other):
            return other
        return None

    def __lt__(self, other):
        rhs = self._constant_of(other)
        if rhs is None:
            return NotImplemented
        return self.constant_cf() < rhs

    def __gt__(self, other):
        rhs = self._constant_of(other)
        if rhs is None:
            return NotImplemented
        return self.constant_cf() > rhs

    # -- arithmetic ------------------------------------------------------------

    def __neg__(self) -> "GDual":
        return GDual._from_poly(-self._p, self._order)

    def __pos__(self) -> "GDual":
        return self

    def _binary(self, other, on_gdual: Callable, on_scalar: Callable):
        if isinstance(other, GDual):
            return on_gdual(other)
        if _is_operand(other):
            return on_scalar(other)
        return NotImplemented

    def __add__(self, other):
        return self._binary(
            other,
            lambda o: GDual._from_poly(self._p + o._p, max(self._order, o._order)),
            lambda o: GDual._from_poly(self._p + o, self._order),
        )

    def __radd__(self, other):
        if _is_operand(other):
            return GDual._from_poly(other + self._p, self._order)
        return NotImplemented

    def __sub__(self, other):
        return self._binary(
            other,
            lambda o: GDual._from_poly(self._p - o._p, max(self._order, o._order)),
            lambda o: GDual._from_poly(self._p - o, self._order),
        )

    def __rsub__(self, other):
        if _is_operand(other):
            return GDual._from_poly(other - self._p, self._order)
        return NotImplemented

    def _mul_gdual(self, other: "GDual") -> "GDual":
        order = max(self._order, other._order)
        return GDual._from_poly(self._p.truncated_mul(other._p, order), order)

    def __mul__(self, other):
        return self._binary(
            other,
            self._mul_gdual,
            lambda o: GDual._from_poly(self._p * o, self._order),
        )

    def __rmul__(self, other):
        if _is_operand(other):
            return GDual._from_poly(other * self._p, self._order)
        return NotImplemented

    def _reciprocal_series(self):
        """The series ``1 - u + u**2 - ...`` with ``u = fhat / f0``, and ``1 / f0``."""
        inv_p0 = _reciprocal(self.constant_cf())
        phat = (self - self.constant_cf()) * inv_p0
        tmp = phat
        retval = 1.0 - phat
        sign = -1.0
        for _ in range(2, self._order + 1):
            sign = -sign
            phat = phat * tmp
            retval = retval + sign * phat
        return retval, inv_p0

    def __truediv__(self, other):
        if isinstance(other, GDual):
            series, inv_p0 = other._reciprocal_series()
            return (self * series) * inv_p0
        if _is_operand(other):
            return self * _reciprocal(_to_cf(other))
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_operand(other):
            series, inv_p0 = self._reciprocal_series()
            return (other * series) * inv_p0
        return NotImplemented