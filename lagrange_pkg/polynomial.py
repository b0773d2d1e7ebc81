"""Dense-coefficient polynomials in one variable.

A polynomial such as ``12.8x^5 - 1.62x^2 + 33x - 7.31`` is stored as the
coefficient tuple ``(-7.31, 33, -1.62, 0, 0, 12.8)``: the index of each
coefficient is the power of the variable it multiplies, so the constant
term comes first.

Every constructor and operator returns a new polynomial in canonical form:
coefficients whose magnitude does not exceed ``config.ZERO_TOLERANCE`` are
replaced with zero and trailing zeros are removed. The empty tuple is the
zero polynomial, whose degree is -1.

The tolerance is absolute, so polynomials whose coefficients legitimately
span a large dynamic range may lose tiny but meaningful terms.
"""

from __future__ import annotations

import numbers
from collections.abc import Callable, Iterable, Iterator

import sympy as sp

from . import config
from .rational import approximate
from .types import DivisionByZeroError


def canonicalize(coefficients: Iterable[float], tolerance: float | None = None) -> tuple[float, ...]:
    """Return the canonical form of a coefficient sequence.

    Args:
        coefficients: Coefficients in increasing order of power
        tolerance: Absolute magnitude at or below which a coefficient is zero
            (default: config.ZERO_TOLERANCE)

    Returns:
        Tuple of floats with near-zero values flattened and trailing zeros removed

    Example:
        >>> canonicalize([3.3, 1.97, 8, 0, 4.2, 0, 1e-17, 0])
        (3.3, 1.97, 8.0, 0.0, 4.2)
    """
    if tolerance is None:
        tolerance = config.ZERO_TOLERANCE
    flattened = [0.0 if abs(c) <= tolerance else float(c) for c in coefficients]
    while flattened and flattened[-1] == 0:
        flattened.pop()
    return tuple(flattened)


def _label(value: float) -> str:
    return f"{value:f}"


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real)


def _check_operand(value: object, operation: str) -> None:
    if not (_is_scalar(value) or isinstance(value, Polynomial)):
        raise TypeError(f"Cannot {operation} polynomial and {type(value).__name__}")


class Polynomial:
    """Immutable polynomial with real coefficients and a cosmetic display name.

    The name never takes part in arithmetic or equality; operators combine the
    names of their operands (``"(p + q)"``) purely for human-readable output.
    """

    __slots__ = ("_coefficients", "_name")

    def __init__(self, coefficients: Iterable[float] = (), name: str | None = None):
        self._coefficients = canonicalize(coefficients)
        self._name = config.DEFAULT_NAME if name is None else name

    @property
    def coefficients(self) -> tuple[float, ...]:
        return self._coefficients

    @property
    def name(self) -> str:
        return self._name

    def with_name(self, name: str) -> Polynomial:
        """Return a copy of this polynomial carrying a different name."""
        return Polynomial(self._coefficients, name)

    def canonicalize(self) -> Polynomial:
        """Return this polynomial re-canonicalized against the current tolerance."""
        return Polynomial(self._coefficients, self._name)

    def degree(self) -> int:
        """Degree of the polynomial; -1 for the zero polynomial."""
        return len(self._coefficients) - 1

    def is_zero(self) -> bool:
        return not self._coefficients

    def evaluate(self, x: float) -> float:
        """Evaluate the polynomial at ``x`` using Horner's method.

        ``((((12.8x + 0)x + 0)x - 1.62)x + 33)x - 7.31`` is how the example in
        the module docstring is computed.
        """
        result = 0.0
        for coefficient in reversed(self._coefficients):
            result = result * x + coefficient
        return result

    __call__ = evaluate

    def format_coefficients(self, formatter: Callable[[float], str]) -> list[str]:
        """Apply a coefficient -> string formatter once per coefficient."""
        return [formatter(coefficient) for coefficient in self._coefficients]

    def to_expression(self, variable: str = config.DEFAULT_VARIABLE, rational: bool = False,
                      max_denominator: int | None = None) -> sp.Expr:
        """Build a SymPy expression equal to this polynomial, for display only.

        Args:
            variable: Name of the symbol to use
            rational: Replace each coefficient by its rational approximation
            max_denominator: Bound passed to the rational approximation

        Returns:
            SymPy expression (``0`` for the zero polynomial)
        """
        symbol = sp.Symbol(variable)
        terms = []
        for power, coefficient in enumerate(self._coefficients):
            if coefficient == 0:
                continue
            if rational:
                numerator, denominator = approximate(coefficient, max_denominator)
                value = sp.Rational(numerator, denominator)
            elif float(coefficient).is_integer():
                value = sp.Integer(int(coefficient))
            else:
                value = sp.Float(coefficient)
            terms.append(value * symbol**power)
        return sp.Add(*terms)

    # Arithmetic

    def add(self, other: Polynomial | float) -> Polynomial:
        """Sum of this polynomial and another polynomial or a scalar."""
        if _is_scalar(other):
            coefficients = list(self._coefficients) or [0.0]
            coefficients[0] += other
            return Polynomial(coefficients, f"({self._name} + {_label(other)})")
        _check_operand(other, "add")
        p, q = self._coefficients, other._coefficients
        common = min(len(p), len(q))
        coefficients = [p[i] + q[i] for i in range(common)]
        coefficients.extend(p[common:])
        coefficients.extend(q[common:])
        return Polynomial(coefficients, f"({self._name} + {other._name})")

    def subtract(self, other: Polynomial | float) -> Polynomial:
        """Difference of this polynomial and another polynomial or a scalar."""
        if _is_scalar(other):
            coefficients = list(self._coefficients) or [0.0]
            coefficients[0] -= other
            return Polynomial(coefficients, f"({self._name} - {_label(other)})")
        _check_operand(other, "subtract")
        p, q = self._coefficients, other._coefficients
        common = min(len(p), len(q))
        coefficients = [p[i] - q[i] for i in range(common)]
        coefficients.extend(p[common:])
        coefficients.extend(-c for c in q[common:])
        return Polynomial(coefficients, f"({self._name} - {other._name})")

    def subtract_from(self, value: float) -> Polynomial:
        """Compute ``value - self``: negate every coefficient, then add ``value``."""
        coefficients = [-c for c in self._coefficients] or [0.0]
        coefficients[0] += value
        return Polynomial(coefficients, f"({_label(value)} - {self._name})")

    def scale(self, factor: float) -> Polynomial:
        """Multiply every coefficient by a scalar."""
        return Polynomial(
            [c * factor for c in self._coefficients], f"({self._name} * {_label(factor)})"
        )

    def multiply(self, other: Polynomial | float) -> Polynomial:
        """Product of this polynomial and another polynomial or a scalar.

        Polynomial products are the linear convolution of the two coefficient
        sequences; the product with the zero polynomial is the zero polynomial.
        """
        if _is_scalar(other):
            return self.scale(other)
        _check_operand(other, "multiply")
        name = f"({self._name} * {other._name})"
        p, q = self._coefficients, other._coefficients
        if not p or not q:
            return Polynomial((), name)
        coefficients = [0.0] * (len(p) + len(q) - 1)
        for n in range(len(coefficients)):
            for k in range(max(0, n - len(q) + 1), min(n, len(p) - 1) + 1):
                coefficients[n] += p[k] * q[n - k]
        return Polynomial(coefficients, name)

    def divide_by_scalar(self, divisor: float) -> Polynomial:
        """Divide every coefficient by a non-zero scalar.

        Raises:
            DivisionByZeroError: If divisor is zero
            TypeError: If divisor is not a real scalar
        """
        if not _is_scalar(divisor):
            raise TypeError(
                f"Polynomials can only be divided by scalars, not {type(divisor).__name__}"
            )
        if divisor == 0:
            raise DivisionByZeroError(f"Cannot divide polynomial {self._name} by zero.")
        return Polynomial(
            [c / divisor for c in self._coefficients], f"({self._name} / {_label(divisor)})"
        )

    def __add__(self, other):
        if not (_is_scalar(other) or isinstance(other, Polynomial)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if _is_scalar(other):
            coefficients = list(self._coefficients) or [0.0]
            coefficients[0] += other
            return Polynomial(coefficients, f"({_label(other)} + {self._name})")
        return NotImplemented

    def __sub__(self, other):
        if not (_is_scalar(other) or isinstance(other, Polynomial)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if _is_scalar(other):
            return self.subtract_from(other)
        return NotImplemented

    def __mul__(self, other):
        if not (_is_scalar(other) or isinstance(other, Polynomial)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if _is_scalar(other):
            return Polynomial(
                [other * c for c in self._coefficients], f"({_label(other)} * {self._name})"
            )
        return NotImplemented

    def __truediv__(self, other):
        return self.divide_by_scalar(other)

    def __neg__(self) -> Polynomial:
        return Polynomial([-c for c in self._coefficients], f"-{self._name}")

    # Container protocol (read-only)

    def __len__(self) -> int:
        return len(self._coefficients)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coefficients)

    def __getitem__(self, index):
        return self._coefficients[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coefficients)!r}, name={self._name!r})"

    def __str__(self) -> str:
        return f"{self._name} ≡ {list(self._coefficients)}"
