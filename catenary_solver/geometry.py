"""Support geometry and the closed-form catenary curve."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

ArrayLike = Union[float, np.ndarray]


class InvalidGeometryError(ValueError):
    """Raised when supports and chain length admit no hanging chain."""


@dataclass(frozen=True)
class BoundaryConditions:
    """Horizontal span ``d``, vertical offset ``h`` and chain ``length``."""

    d: float
    h: float
    length: float

    @property
    def chord(self) -> float:
        """Straight-line distance between the two supports."""

        return math.sqrt(self.d * self.d + self.h * self.h)

    @property
    def slack(self) -> float:
        return self.length - self.chord

    def validate(self) -> None:
        values = (self.d, self.h, self.length)
        if not all(math.isfinite(value) for value in values):
            raise InvalidGeometryError(f"non-finite boundary conditions {values!r}")
        if self.d <= 0:
            raise InvalidGeometryError(f"span must be positive, got d={self.d!r}")
        if self.length <= 0:
            raise InvalidGeometryError(f"chain length must be positive, got L={self.length!r}")
        if self.length <= self.chord:
            raise InvalidGeometryError(
                f"chain length {self.length:.6g} must exceed the support distance {self.chord:.6g}"
            )

    @classmethod
    def from_polar(cls, angle_deg: float, radius: float, length: float) -> "BoundaryConditions":
        """Place the second support at ``radius`` and ``angle_deg`` from the first.

        The angle is measured from the horizontal; positive angles lift the
        second support above the first.
        """

        theta = math.radians(angle_deg)
        return cls(d=radius * math.cos(theta), h=radius * math.sin(theta), length=length)


@dataclass(frozen=True)
class CatenaryShape:
    """Curve ``y(x) = a*cosh((x - x0)/a) - lambda`` through the origin support."""

    a: float
    x0: float

    def __post_init__(self) -> None:
        if not self.a > 0:
            raise ValueError(f"catenary scale must be positive, got a={self.a!r}")

    @property
    def vertex_shift(self) -> float:
        """Vertical shift ``lambda = a*cosh(x0/a)`` placing the first support at the origin."""

        return self.a * math.cosh(self.x0 / self.a)

    @property
    def lowest_height(self) -> float:
        return self.a - self.vertex_shift

    def height(self, x: ArrayLike) -> ArrayLike:
        values = self.a * np.cosh((np.asarray(x, dtype=float) - self.x0) / self.a) - self.vertex_shift
        if np.ndim(values) == 0:
            return float(values)
        return values

    def arc_length(self, x_start: float, x_end: float) -> float:
        return self.a * (math.sinh((x_end - self.x0) / self.a) - math.sinh((x_start - self.x0) / self.a))

    def sample(self, d: float, count: int = 101) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``count`` evenly spaced abscissae over ``[0, d]`` and their heights."""

        if count < 2:
            raise ValueError("sample requires at least two points")
        xs = np.linspace(0.0, d, count)
        return xs, self.a * np.cosh((xs - self.x0) / self.a) - self.vertex_shift


__all__ = [
    "BoundaryConditions",
    "CatenaryShape",
    "InvalidGeometryError",
]
