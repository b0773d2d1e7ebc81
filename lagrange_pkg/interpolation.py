"""Lagrange interpolation over a finite point set.

The interpolating polynomial is built straight from the Lagrange formula

    ip(x) = sum_i y_i * prod_{j != i} (x - x_j) / (x_i - x_j)

which costs O(n^2) polynomial multiplications, O(n^3) arithmetic overall.
"""

from __future__ import annotations

from collections.abc import Sequence

from . import config
from .logging_config import get_logger
from .polynomial import Polynomial
from .types import DuplicateAbscissaError, InsufficientPointsError

logger = get_logger("interpolation")


def _usable_points(
    xs: Sequence[float], ys: Sequence[float]
) -> tuple[list[float], list[float]]:
    """Validate the point set and return the coordinates that take part.

    Every x-coordinate must be distinct once converted to float, including
    those past the end of a shorter ys. If the sequences differ in length, the
    extra coordinates at the end of the longer one are then ignored.
    """
    count = min(len(xs), len(ys))
    if count < 2:
        raise InsufficientPointsError(
            f"At least two points are required for interpolation, got {count}."
        )
    xs = [float(x) for x in xs]
    seen = set()
    for x in xs:
        if x in seen:
            raise DuplicateAbscissaError(x)
        seen.add(x)
    return xs[:count], [float(y) for y in ys[:count]]


def lagrange_basis(xs: Sequence[float], i: int, scale: float = 1.0) -> Polynomial:
    """Build ``scale * L_i``, the Lagrange basis polynomial for point ``i``.

    L_i is 1 at ``xs[i]`` and 0 at every other abscissa. The x-coordinates
    must already be known to be distinct.
    """
    local = Polynomial([scale])
    for j, x_j in enumerate(xs):
        if j == i:
            continue
        local = local.multiply(Polynomial([-x_j, 1])).divide_by_scalar(xs[i] - x_j)
    return local


def interpolate(xs: Sequence[float], ys: Sequence[float]) -> Polynomial:
    """Find the polynomial of minimal degree passing through every point.

    Args:
        xs: x-coordinates, pairwise distinct
        ys: y-coordinates

    Returns:
        Canonical Polynomial named ``config.INTERPOLATION_NAME`` of degree at
        most n - 1 for n points

    Raises:
        InsufficientPointsError: If fewer than two points are usable
        DuplicateAbscissaError: If an x-coordinate occurs more than once
    """
    xs, ys = _usable_points(xs, ys)
    count = len(xs)
    logger.debug("Interpolating", extra={"context": {"points": count}})

    result = Polynomial()
    for i in range(count):
        result = result.add(lagrange_basis(xs, i, ys[i]))

    result = result.with_name(config.INTERPOLATION_NAME)
    logger.debug(
        "Interpolated", extra={"context": {"points": count, "degree": result.degree()}}
    )
    return result
