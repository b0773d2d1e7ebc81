"""Best rational approximation of a real number under a denominator bound.

The approach follows ``fractions.Fraction.limit_denominator``: take a
fine-grained initial fraction, then walk its continued-fraction convergents
until the next one would exceed the bound, and finally choose between the
last convergent and the best semiconvergent.
"""

from __future__ import annotations

import math

from . import config
from .logging_config import get_logger

logger = get_logger("rational")


def _resolve_bound(max_denominator: int | None) -> int:
    if max_denominator is None:
        max_denominator = config.MAX_DENOMINATOR
    if max_denominator < 1:
        raise ValueError(f"max_denominator must be at least 1, got {max_denominator}")
    return int(max_denominator)


def approximate(value: float, max_denominator: int | None = None) -> tuple[int, int]:
    """Approximate a real number by a reduced fraction with a small denominator.

    Args:
        value: Finite real number to approximate
        max_denominator: Largest denominator allowed (default: config.MAX_DENOMINATOR)

    Returns:
        Tuple (numerator, denominator) with denominator >= 1; the sign is
        carried by the numerator

    Raises:
        ValueError: If value is not finite or max_denominator < 1
    """
    bound = _resolve_bound(max_denominator)
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot approximate non-finite value {value!r}")

    # Integral values (including zero) are their own approximation.
    truncated = int(value)
    if truncated == value:
        return truncated, 1

    sign = -1 if value < 0 else 1
    value = abs(value)

    # Initial approximation with a large denominator.
    d = config.INITIAL_DENOMINATOR
    n = round(value * d)
    g = math.gcd(n, d)
    n //= g
    d //= g
    if d <= bound:
        return sign * n, d

    p0, q0, p1, q1 = 0, 1, 1, 0
    while True:
        a = n // d
        q2 = q0 + a * q1
        if q2 > bound:
            break
        p0, q0, p1, q1 = p1, q1, p0 + a * p1, q2
        n, d = d, n - a * d

    # The first pass always succeeds (q2 == 1 <= bound), so q1 >= 1 here.
    k = (bound - q0) // q1
    semi_n, semi_d = p0 + k * p1, q0 + k * q1
    convergent_error = abs(p1 / q1 - value)
    semi_error = abs(semi_n / semi_d - value)
    if convergent_error < semi_error or (
        convergent_error == semi_error and q1 <= semi_d
    ):
        n, d = p1, q1
    else:
        n, d = semi_n, semi_d
    logger.debug("Approximated %r as %d/%d (bound %d)", sign * value, sign * n, d, bound)
    return sign * n, d


def rationalise(value: float, max_denominator: int | None = None) -> str:
    """Render a real number as its best rational approximation.

    Integers render without a slash, e.g. ``rationalise(3.0) == "3"`` and
    ``rationalise(0.5) == "1/2"``.
    """
    numerator, denominator = approximate(value, max_denominator)
    if denominator == 1:
        return str(numerator)
    return f"{numerator}/{denominator}"
