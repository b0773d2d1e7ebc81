"""Lagrange package: polynomial arithmetic, Lagrange interpolation and rational display."""

from .interpolation import interpolate, lagrange_basis
from .polynomial import Polynomial, canonicalize
from .rational import approximate, rationalise
from .types import (
    DivisionByZeroError,
    DuplicateAbscissaError,
    InsufficientPointsError,
    InterpolationResult,
    LagrangeError,
)

__all__ = [
    "Polynomial",
    "canonicalize",
    "interpolate",
    "lagrange_basis",
    "approximate",
    "rationalise",
    "LagrangeError",
    "InsufficientPointsError",
    "DuplicateAbscissaError",
    "DivisionByZeroError",
    "InterpolationResult",
]
