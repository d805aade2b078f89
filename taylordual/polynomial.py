"""Sparse multivariate polynomials with an ordered symbol set.

A polynomial maps exponent tuples (one exponent per symbol, symbols kept in
sorted order) to coefficients. Coefficients may be ints, floats, complex
numbers or :class:`~taylordual.vectorized.Vectorized` values. Terms whose
coefficient is zero are never stored.
"""

from __future__ import annotations

import functools
import itertools
import math
import numbers
import operator
from typing import Callable, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from taylordual.vectorized import Vectorized

Key = Tuple[int, ...]


def _is_zero(cf) -> bool:
    if isinstance(cf, Vectorized):
        return cf.is_zero()
    return cf == 0


def _is_coefficient(value: object) -> bool:
    return isinstance(value, (numbers.Number, Vectorized))


def _accumulate(table: Dict[Key, object], key: Key, cf) -> None:
    if key in table:
        cf = table[key] + cf
    if _is_zero(cf):
        table.pop(key, None)
    else:
        table[key] = cf


def _format_coefficient(cf) -> str:
    if isinstance(cf, numbers.Real):
        return f"{float(cf):g}"
    if isinstance(cf, numbers.Complex):
        return f"({cf.real:g},{cf.imag:g})"
    return str(cf)


class Polynomial:
    """An immutable sparse polynomial."""

    __slots__ = ("_symbols", "_terms")

    def __init__(
        self,
        terms: Optional[Mapping[Iterable[int], object]] = None,
        symbols: Iterable[str] = (),
    ) -> None:
        syms = tuple(symbols)
        if len(set(syms)) != len(syms):
            raise ValueError("duplicate symbols in the symbol set")
        order = sorted(range(len(syms)), key=syms.__getitem__)
        self._symbols: Tuple[str, ...] = tuple(syms[i] for i in order)
        self._terms: Dict[Key, object] = {}
        for raw_key, cf in (terms or {}).items():
            key = tuple(int(e) for e in raw_key)
            if len(key) != len(syms):
                raise ValueError(
                    "the number of exponents does not match the size of the symbol set"
                )
            if any(e < 0 for e in key):
                raise ValueError("exponents must be non-negative")
            _accumulate(self._terms, tuple(key[i] for i in order), cf)

    @classmethod
    def _raw(cls, symbols: Tuple[str, ...], terms: Dict[Key, object]) -> "Polynomial":
        poly = cls.__new__(cls)
        poly._symbols = symbols
        poly._terms = terms
        return poly

    @classmethod
    def constant(cls, value) -> "Polynomial":
        """A polynomial with no symbols holding the single value ``value``."""
        return cls._raw((), {} if _is_zero(value) else {(): value})

    @classmethod
    def variable(cls, symbol: str) -> "Polynomial":
        """The polynomial made of the single symbol ``symbol``."""
        return cls._raw((symbol,), {(1,): 1.0})

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    @property
    def terms(self) -> Dict[Key, object]:
        """A copy of the mapping from exponent tuples to coefficients."""
        return dict(self._terms)

    # -- symbol set handling -------------------------------------------------

    def _union(self, other: "Polynomial") -> Tuple[str, ...]:
        if other._symbols == self._symbols:
            return self._symbols
        return tuple(sorted(set(self._symbols) | set(other._symbols)))

    def _expand(self, symbols: Tuple[str, ...]) -> Dict[Key, object]:
        if symbols == self._symbols:
            return self._terms
        positions = [symbols.index(s) for s in self._symbols]
        out: Dict[Key, object] = {}
        for key, cf in self._terms.items():
            new = [0] * len(symbols)
            for pos, e in zip(positions, key):
                new[pos] = e
            out[tuple(new)] = cf
        return out

    def add_symbols(self, symbols: Iterable[str]) -> "Polynomial":
        """A copy whose symbol set is extended with ``symbols``."""
        merged = tuple(sorted(set(self._symbols) | set(symbols)))
        return Polynomial._raw(merged, dict(self._expand(merged)))

    def trim(self) -> "Polynomial":
        """A copy without the symbols whose exponent is zero in every term."""
        keep = [
            i
            for i in range(len(self._symbols))
            if any(key[i] for key in self._terms)
        ]
        symbols = tuple(self._symbols[i] for i in keep)
        terms = {tuple(key[i] for i in keep): cf for key, cf in self._terms.items()}
        return Polynomial._raw(symbols, terms)

    # -- queries ---------------------------------------------------------------

    def degree(self) -> int:
        """The largest total degree of the terms (0 for the zero polynomial)."""
        return max((sum(key) for key in self._terms), default=0)

    def find(self, exponents: Iterable[int]):
        """The coefficient of the monomial ``exponents``, or None if absent."""
        key = tuple(int(e) for e in exponents)
        if len(key) != len(self._symbols):
            raise ValueError(
                "the number of exponents does not match the size of the symbol set"
            )
        return self._terms.get(key)

    def evaluate(self, values: Mapping[str, object]):
        """The value of the polynomial with each symbol replaced by ``values[symbol]``."""
        missing = [s for s in self._symbols if s not in values]
        if missing:
            raise ValueError(f"no value given for the symbols {missing}")
        point = [values[s] for s in self._symbols]
        return sum(
            (
                cf * math.prod((v**e for v, e in zip(point, key) if e), start=1)
                for key, cf in self._terms.items()
            ),
            start=0.0,
        )

    # -- algebra ---------------------------------------------------------------

    def _product(self, other: "Polynomial", order: Optional[int] = None) -> "Polynomial":
        symbols = self._union(other)
        left = self._expand(symbols)
        right = [(key, sum(key), cf) for key, cf in other._expand(symbols).items()]
        out: Dict[Key, object] = {}
        for ka, ca in left.items():
            da = sum(ka)
            if order is not None and da > order:
                continue
            for kb, db, cb in right:
                if order is not None and da + db > order:
                    continue
                _accumulate(out, tuple(map(operator.add, ka, kb)), ca * cb)
        return Polynomial._raw(symbols, out)

    def truncated_mul(self, other: "Polynomial", order: int) -> "Polynomial":
        """The product, keeping only terms of total degree up to ``order``."""
        return self._product(other, order)

    def truncate_degree(self, order: int) -> "Polynomial":
        """A copy without the terms of total degree above ``order``."""
        return self.filter(lambda key, _cf: sum(key) <= order)

    def filter(self, predicate: Callable[[Key, object], bool]) -> "Polynomial":
        """A copy holding the terms for which ``predicate(exponents, cf)`` is true."""
        return Polynomial._raw(
            self._symbols,
            {key: cf for key, cf in self._terms.items() if predicate(key, cf)},
        )

    def diff(self, symbol: str) -> "Polynomial":
        """Partial derivative; ``symbol`` is added to the symbol set if absent."""
        poly = self if symbol in self._symbols else self.add_symbols([symbol])
        idx = poly._symbols.index(symbol)
        out: Dict[Key, object] = {}
        for key, cf in poly._terms.items():
            e = key[idx]
            if e:
                new = key[:idx] + (e - 1,) + key[idx + 1:]
                _accumulate(out, new, cf * e)
        return Polynomial._raw(poly._symbols, out)

    def integrate(self, symbol: str) -> "Polynomial":
        """Antiderivative; ``symbol`` is added to the symbol set if absent."""
        poly = self if symbol in self._symbols else self.add_symbols([symbol])
        idx = poly._symbols.index(symbol)
        out: Dict[Key, object] = {}
        for key, cf in poly._terms.items():
            e = key[idx] + 1
            _accumulate(out, key[:idx] + (e,) + key[idx + 1:], cf / e)
        return Polynomial._raw(poly._symbols, out)

    def subs(self, symbol: str, value) -> "Polynomial":
        """Substitute ``symbol`` with a coefficient or a polynomial.

        The substituted symbol stays in the symbol set with exponent zero.
        """
        if isinstance(value, Polynomial):
            return self._subs_polynomial(symbol, value)
        if symbol not in self._symbols:
            return self
        idx = self._symbols.index(symbol)
        out: Dict[Key, object] = {}
        for key, cf in self._terms.items():
            e = key[idx]
            if e:
                cf = cf * functools.reduce(operator.mul, itertools.repeat(value, e))
            _accumulate(out, key[:idx] + (0,) + key[idx + 1:], cf)
        return Polynomial._raw(self._symbols, out)

    def _subs_polynomial(self, symbol: str, value: "Polynomial") -> "Polynomial":
        symbols = self._union(value)
        if symbol not in self._symbols:
            return Polynomial._raw(symbols, dict(self._expand(symbols)))
        idx = symbols.index(symbol)
        base = Polynomial._raw(symbols, value._expand(symbols))
        powers = [base]
        out: Dict[Key, object] = {}
        for key, cf in self._expand(symbols).items():
            e = key[idx]
            term = Polynomial._raw(symbols, {key[:idx] + (0,) + key[idx + 1:]: cf})
            if e:
                while len(powers) < e:
                    powers.append(powers[-1]._product(base))
                term = term._product(powers[e - 1])
            for k, c in term._terms.items():
                _accumulate(out, k, c)
        return Polynomial._raw(symbols, out)

    # -- operators ---------------------------------------------------------------

    def _coerce(self, other: object) -> Optional["Polynomial"]:
        if isinstance(other, Polynomial):
            return other
        if _is_coefficient(other):
            return Polynomial.constant(other)
        return None

    def __iter__(self) -> Iterator[Tuple[Key, object]]:
        return iter(list(self._terms.items()))

    def __len__(self) -> int:
        return len(self._terms)

    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        symbols = self._union(rhs)
        out = dict(self._expand(symbols))
        for key, cf in rhs._expand(symbols).items():
            _accumulate(out, key, cf)
        return Polynomial._raw(symbols, out)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return rhs + (-self)

    def _scale(self, factor, factor_first: bool) -> "Polynomial":
        out: Dict[Key, object] = {}
        for key, cf in self._terms.items():
            _accumulate(out, key, factor * cf if factor_first else cf * factor)
        return Polynomial._raw(self._symbols, out)

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return self._product(other)
        if _is_coefficient(other):
            return self._scale(other, factor_first=False)
        return NotImplemented

    def __rmul__(self, other):
        if _is_coefficient(other):
            return self._scale(other, factor_first=True)
        return NotImplemented

    def __neg__(self) -> "Polynomial":
        return Polynomial._raw(self._symbols, {k: -cf for k, cf in self._terms.items()})

    def __eq__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        symbols = self._union(rhs)
        left, right = self._expand(symbols), rhs._expand(symbols)
        if left.keys() != right.keys():
            return False
        return all(bool(left[k] == right[k]) for k in left)

    __hash__ = None

    def _format_term(self, key: Key, cf) -> str:
        key_str = "*".join(
            f"{s}**{e}" if e > 1 else s for s, e in zip(self._symbols, key) if e
        )
        cf_str = _format_coefficient(cf)
        if key_str:
            if cf_str == "1":
                cf_str = ""
            elif cf_str == "-1":
                cf_str = "-"
        sep = "*" if cf_str and cf_str != "-" and key_str else ""
        return cf_str + sep + key_str

    def __str__(self) -> str:
        if not self._terms:
            return "0"
        ordered = sorted(self._terms.items(), key=lambda kv: (sum(kv[0]), kv[0]))
        parts = [self._format_term(key, cf) for key, cf in ordered]
        text = parts[0]
        for part in parts[1:]:
            text += part if part.startswith("-") else "+" + part
        return text

    def __repr__(self) -> str:
        return f"Polynomial({self._terms!r}, {self._symbols!r})"