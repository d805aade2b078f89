"""Generalized dual numbers: truncated multivariate Taylor polynomials with arithmetic, coefficients and text helpers."""

__version__ = "0.1.0"

__all__ = [
    "vectorized",
    "scalar_math",
    "polynomial",
    "gdual",
    "io",
]