"""Governing equations of the hanging chain and their analytic Jacobian."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from .model import Jacobian, ResidualVector

# Values at or below this scale make every argument blow up.
DEGENERATE_SCALE = 1e-12
# cosh/sinh overflow a double just past 710.
OVERFLOW_ARGUMENT = 700.0
SENTINEL_RESIDUAL = 1e10

_SENTINEL = ResidualVector(SENTINEL_RESIDUAL, SENTINEL_RESIDUAL)


def _arguments(a: float, x0: float, d: float) -> Optional[Tuple[float, float]]:
    if not a > DEGENERATE_SCALE:
        return None
    arg1 = (d - x0) / a
    arg2 = x0 / a
    if not (abs(arg1) <= OVERFLOW_ARGUMENT and abs(arg2) <= OVERFLOW_ARGUMENT):
        return None
    return arg1, arg2


def evaluate(a: float, x0: float, d: float, h: float, length: float) -> ResidualVector:
    """Return the height and length mismatch of the catenary ``(a, x0)``.

    Degenerate scales, overflowing arguments and non-finite results all map
    to a large sentinel vector so that descent methods are pushed away from
    those regions instead of failing.
    """

    args = _arguments(a, x0, d)
    if args is None:
        return _SENTINEL
    arg1, arg2 = args

    eq1 = a * (math.cosh(arg1) - math.cosh(arg2)) - h
    eq2 = a * (math.sinh(arg1) + math.sinh(arg2)) - length
    if not (math.isfinite(eq1) and math.isfinite(eq2)):
        return _SENTINEL
    return ResidualVector(eq1, eq2)


def jacobian(a: float, x0: float, d: float, h: float, length: float) -> Jacobian:
    """Return the partial derivatives of :func:`evaluate` with respect to ``(a, x0)``.

    Falls back to the identity under the same guards as :func:`evaluate`.
    ``h`` and ``length`` only shift the residuals and do not enter the matrix.
    """

    args = _arguments(a, x0, d)
    if args is None:
        return Jacobian.identity()
    arg1, arg2 = args

    cosh1 = math.cosh(arg1)
    cosh2 = math.cosh(arg2)
    sinh1 = math.sinh(arg1)
    sinh2 = math.sinh(arg2)

    matrix = Jacobian(
        d_eq1_da=cosh1 - cosh2 - arg1 * sinh1 + arg2 * sinh2,
        d_eq1_dx0=-sinh1 - sinh2,
        d_eq2_da=sinh1 + sinh2 - arg1 * cosh1 - arg2 * cosh2,
        d_eq2_dx0=-cosh1 + cosh2,
    )
    if not all(math.isfinite(value) for value in matrix):
        return Jacobian.identity()
    return matrix


def residual_norm(a: float, x0: float, d: float, h: float, length: float) -> float:
    return evaluate(a, x0, d, h, length).norm()


__all__ = [
    "DEGENERATE_SCALE",
    "OVERFLOW_ARGUMENT",
    "SENTINEL_RESIDUAL",
    "evaluate",
    "jacobian",
    "residual_norm",
]
