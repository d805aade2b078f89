"""Vectorized coefficients: vectors of floats with element-wise arithmetic.

A single-element vector broadcasts against vectors of any length, so
``[b] op [a1, ..., an]`` is ``[b op a1, ..., b op an]``.
"""

from __future__ import annotations

import math
import numbers
import operator
from typing import Callable, Iterable, Iterator, List, Union

_MAX_STREAMED_COMPONENTS = 5

Scalar = Union[int, float]


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor yields inf or nan instead of raising."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real)


class Vectorized:
    """A non-empty vector of floats on which every operation acts element-wise."""

    __slots__ = ("_c",)

    def __init__(self, values: Union[Scalar, Iterable[Scalar]] = 0.0) -> None:
        if _is_scalar(values):
            self._c: List[float] = [float(values)]
        else:
            self._c = [float(v) for v in values]
            if not self._c:
                raise ValueError("Cannot build an empty vectorized coefficient")

    @classmethod
    def _coerce(cls, other: object) -> "Vectorized | None":
        if isinstance(other, Vectorized):
            return other
        if _is_scalar(other):
            return cls(other)
        return None

    def __len__(self) -> int:
        return len(self._c)

    def __iter__(self) -> Iterator[float]:
        return iter(self._c)

    def __getitem__(self, idx: int) -> float:
        if len(self._c) == 1:
            return self._c[0]
        return self._c[idx]

    def __setitem__(self, idx: int, value: Scalar) -> None:
        self._c[idx] = float(value)

    @property
    def values(self) -> List[float]:
        """A copy of the components."""
        return list(self._c)

    def resize(self, new_size: int, value: Scalar = 0.0) -> None:
        """Truncate or extend in place, padding with ``value``."""
        if new_size < 1:
            raise ValueError("Cannot resize to an empty vectorized coefficient")
        if new_size <= len(self._c):
            del self._c[new_size:]
        else:
            self._c.extend([float(value)] * (new_size - len(self._c)))

    def is_zero(self) -> bool:
        return all(x == 0.0 for x in self._c)

    def _broadcast(
        self, other: "Vectorized", op: Callable[[float, float], float], symbol: str
    ) -> "Vectorized":
        a, b = self._c, other._c
        if len(a) == len(b):
            out = [op(x, y) for x, y in zip(a, b)]
        elif len(b) == 1:
            out = [op(x, b[0]) for x in a]
        elif len(a) == 1:
            out = [op(a[0], y) for y in b]
        else:
            raise ValueError(f"Coefficients of different sizes in {symbol}")
        return Vectorized(out)

    def _binary(self, other: object, op, symbol: str, reflected: bool = False):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if reflected:
            return rhs._broadcast(self, op, symbol)
        return self._broadcast(rhs, op, symbol)

    def __add__(self, other):
        return self._binary(other, operator.add, "+")

    def __radd__(self, other):
        return self._binary(other, operator.add, "+", reflected=True)

    def __sub__(self, other):
        return self._binary(other, operator.sub, "-")

    def __rsub__(self, other):
        return self._binary(other, operator.sub, "-", reflected=True)

    def __mul__(self, other):
        return self._binary(other, operator.mul, "*")

    def __rmul__(self, other):
        return self._binary(other, operator.mul, "*", reflected=True)

    def __truediv__(self, other):
        return self._binary(other, _divide, "/")

    def __rtruediv__(self, other):
        return self._binary(other, _divide, "/", reflected=True)

    def __neg__(self) -> "Vectorized":
        return Vectorized([-x for x in self._c])

    def _compare(self, other: object, op) -> "bool | type(NotImplemented)":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        a, b = self._c, rhs._c
        if len(a) == len(b):
            return op(a, b)
        if len(a) == 1:
            return all(op(a[0], y) for y in b)
        if len(b) == 1:
            return all(op(x, b[0]) for x in a)
        return False

    def __eq__(self, other):
        return self._compare(other, operator.eq)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    __hash__ = None  # mutable

    def __str__(self) -> str:
        if len(self._c) <= _MAX_STREAMED_COMPONENTS:
            return "[" + ", ".join(f"{x:g}" for x in self._c) + "]"
        head = "".join(f"{x:g}, " for x in self._c[:_MAX_STREAMED_COMPONENTS])
        return "[" + head + "... ]"

    def __repr__(self) -> str:
        return f"Vectorized({self._c!r})"

    def map(self, func: Callable[[float], float]) -> "Vectorized":
        """Apply ``func`` to every component, returning a new vector."""
        return Vectorized([func(x) for x in self._c])


def fma3(acc: Vectorized, x: Vectorized, y: Vectorized) -> None:
    """Fused multiply-add in place: ``acc += x * y`` with broadcasting.

    A single-element ``acc`` grows to the length of the product.
    """
    n_acc, n_x, n_y = len(acc), len(x), len(y)
    if n_x == n_y or n_x == 1 or n_y == 1:
        n_prod = max(n_x, n_y)
    else:
        raise ValueError("Coefficients of different sizes in fma3")
    if n_acc == 1 and n_prod > 1:
        acc.resize(n_prod, acc[0])
    elif n_prod != 1 and n_prod != n_acc:
        raise ValueError("Coefficients of different sizes in fma3")
    for i in range(len(acc)):
        acc[i] = acc[i] + x[i] * y[i]