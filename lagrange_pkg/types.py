"""Type definitions: error taxonomy and result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class LagrangeError(Exception):
    """Base class for every error raised by the package."""

    default_code = "LAGRANGE_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InsufficientPointsError(LagrangeError, ValueError):
    """Raised when fewer than two usable points are supplied."""

    default_code = "INSUFFICIENT_POINTS"


class DuplicateAbscissaError(LagrangeError, ValueError):
    """Raised when two interpolation points share an x-coordinate."""

    default_code = "DUPLICATE_ABSCISSA"

    def __init__(self, value: float, code: str | None = None):
        self.value = value
        super().__init__(
            f"Expected distinct x-coordinates, but {value!r} occurs multiple times.",
            code,
        )


class DivisionByZeroError(LagrangeError, ZeroDivisionError):
    """Raised when a polynomial is divided by the scalar zero."""

    default_code = "DIVISION_BY_ZERO"


class ParseError(LagrangeError):
    """Raised when point input cannot be parsed."""

    default_code = "PARSE_ERROR"


class ValidationError(LagrangeError):
    """Raised when parsed input is structurally unusable."""

    default_code = "VALIDATION_ERROR"


@dataclass
class InterpolationResult:
    """Result of interpolating a point set and evaluating the polynomial."""

    ok: bool
    name: str | None = None
    coefficients: list[float] | None = None
    degree: int | None = None
    expression: str | None = None
    target: float | None = None
    value: float | None = None
    rational: list[str] | None = None
    elapsed_us: int | None = None
    error: str | None = None
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        if not self.ok:
            return {"ok": False, "error": self.error, "code": self.code}
        result_dict: dict[str, Any] = {
            "ok": True,
            "name": self.name,
            "coefficients": self.coefficients,
            "degree": self.degree,
        }
        if self.expression is not None:
            result_dict["expression"] = self.expression
        if self.target is not None:
            result_dict["target"] = self.target
            result_dict["value"] = self.value
        if self.rational is not None:
            result_dict["rational"] = self.rational
        if self.elapsed_us is not None:
            result_dict["elapsed_us"] = self.elapsed_us
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"InterpolationResult(ok=False, code={self.code!r}, error={self.error!r})"
        parts = [f"ok={self.ok}", f"name={self.name!r}", f"degree={self.degree!r}"]
        parts.append(f"coefficients={self.coefficients!r}")
        if self.target is not None:
            parts.append(f"target={self.target!r}")
            parts.append(f"value={self.value!r}")
        if self.rational is not None:
            parts.append(f"rational={self.rational!r}")
        return f"InterpolationResult({', '.join(parts)})"
