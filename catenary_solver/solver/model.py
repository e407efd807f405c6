"""Core data structures for the catenary solver."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, NamedTuple

import numpy as np

from ..geometry import CatenaryShape


class TrialPoint(NamedTuple):
    """Candidate catenary scale ``a`` and lowest-point offset ``x0``."""

    a: float
    x0: float

    def is_finite(self) -> bool:
        return math.isfinite(self.a) and math.isfinite(self.x0)


class ResidualVector(NamedTuple):
    eq1: float
    eq2: float

    def norm(self) -> float:
        return math.hypot(self.eq1, self.eq2)


class Jacobian(NamedTuple):
    """Row-major 2x2 matrix of partial derivatives with respect to ``(a, x0)``."""

    d_eq1_da: float
    d_eq1_dx0: float
    d_eq2_da: float
    d_eq2_dx0: float

    @classmethod
    def identity(cls) -> "Jacobian":
        return cls(1.0, 0.0, 0.0, 1.0)

    def determinant(self) -> float:
        return self.d_eq1_da * self.d_eq2_dx0 - self.d_eq1_dx0 * self.d_eq2_da

    def as_array(self) -> np.ndarray:
        return np.array(
            [[self.d_eq1_da, self.d_eq1_dx0], [self.d_eq2_da, self.d_eq2_dx0]],
            dtype=float,
        )


@dataclass
class SolveResult:
    a: float
    x0: float
    residual: float
    converged: bool
    method: str = ""
    iterations: int = 0

    @property
    def point(self) -> TrialPoint:
        return TrialPoint(self.a, self.x0)

    def shape(self) -> CatenaryShape:
        """Return the curve described by this result (requires ``a > 0``)."""

        return CatenaryShape(a=self.a, x0=self.x0)

    def as_dict(self) -> Dict[str, object]:
        return {
            "a": self.a,
            "x0": self.x0,
            "residual": self.residual,
            "converged": self.converged,
        }


__all__ = [
    "Jacobian",
    "ResidualVector",
    "SolveResult",
    "TrialPoint",
]
