"""Least-squares polishing stage for accepted catenary solutions."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
from scipy.optimize import least_squares

from ..geometry import BoundaryConditions
from ..solver.equations import DEGENERATE_SCALE, evaluate, jacobian, residual_norm
from ..solver.model import SolveResult

logger = logging.getLogger(__name__)


@dataclass
class PolishOptions:
    """Configuration knobs for the polishing optimizer."""

    enable: bool = True
    xtol: float = 1e-14
    ftol: float = 1e-14
    gtol: float = 1e-14
    max_nfev: Optional[int] = 200


@dataclass
class PolishResult:
    result: SolveResult
    improved: bool
    evaluations: int
    initial_residual: float
    notes: List[str] = field(default_factory=list)


def polish_solution(
    conditions: BoundaryConditions,
    result: SolveResult,
    options: Optional[PolishOptions] = None,
) -> PolishResult:
    """Refine ``result`` with Levenberg-Marquardt least squares.

    The refined point is only kept when its scale stays non-degenerate and
    its recomputed residual is strictly smaller than the input residual.
    """

    options = options or PolishOptions()
    d, h, length = conditions.d, conditions.h, conditions.length
    initial_residual = residual_norm(result.a, result.x0, d, h, length)

    if not options.enable:
        return PolishResult(result=result, improved=False, evaluations=0, initial_residual=initial_residual)

    def residuals(params: np.ndarray) -> np.ndarray:
        return np.array(evaluate(float(params[0]), float(params[1]), d, h, length), dtype=float)

    def derivatives(params: np.ndarray) -> np.ndarray:
        return jacobian(float(params[0]), float(params[1]), d, h, length).as_array()

    start = np.array([result.a, result.x0], dtype=float)
    fit = least_squares(
        residuals,
        start,
        jac=derivatives,
        method="lm",
        xtol=options.xtol,
        ftol=options.ftol,
        gtol=options.gtol,
        max_nfev=options.max_nfev,
    )

    a, x0 = float(fit.x[0]), float(fit.x[1])
    notes: List[str] = [] if fit.success else [f"least_squares did not converge: {fit.message}"]
    polished_residual = residual_norm(a, x0, d, h, length) if a > DEGENERATE_SCALE else math.inf

    if polished_residual < initial_residual:
        logger.debug("polish_solution: residual %.3e -> %.3e", initial_residual, polished_residual)
        polished = SolveResult(
            a=a,
            x0=x0,
            residual=polished_residual,
            converged=True,
            method=f"{result.method}+polish" if result.method else "polish",
            iterations=result.iterations,
        )
        return PolishResult(
            result=polished,
            improved=True,
            evaluations=int(fit.nfev),
            initial_residual=initial_residual,
            notes=notes,
        )

    notes.append("polishing did not lower the residual")
    return PolishResult(
        result=result,
        improved=False,
        evaluations=int(fit.nfev),
        initial_residual=initial_residual,
        notes=notes,
    )


__all__ = [
    "PolishOptions",
    "PolishResult",
    "polish_solution",
]
