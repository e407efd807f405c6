"""Solver façade for the hanging-chain equations."""

from __future__ import annotations

import logging
from typing import Optional

from ..geometry import BoundaryConditions
from .config import DEFAULT_SOLVER_CONFIG, SolverConfig, solver_config_with
from .equations import evaluate, jacobian, residual_norm
from .initial_guess import initial_guesses
from .model import Jacobian, ResidualVector, SolveResult, TrialPoint
from .solver_core import SolvePhase, run_phase, solve_boundary, solve_phases
from .steppers import GradientDescentStepper, LevenbergMarquardtStepper, NewtonStepper, iterate

logger = logging.getLogger(__name__)

if not logging.getLogger().handlers:  # pragma: no cover - depends on host application
    logging.basicConfig(level=logging.INFO)


def solve(d: float, h: float, length: float, config: SolverConfig = DEFAULT_SOLVER_CONFIG) -> Optional[SolveResult]:
    """Solve for the catenary spanning ``d`` and ``h`` with chain ``length``.

    Returns ``None`` when the geometry is impossible or no solver phase
    produced a verified solution; never raises for bad geometry.
    """

    logger.info("Solving catenary for d=%.6g h=%.6g L=%.6g", d, h, length)
    return solve_boundary(BoundaryConditions(float(d), float(h), float(length)), config)


def solve_supports(
    conditions: BoundaryConditions, config: SolverConfig = DEFAULT_SOLVER_CONFIG
) -> Optional[SolveResult]:
    logger.info(
        "Solving catenary for d=%.6g h=%.6g L=%.6g", conditions.d, conditions.h, conditions.length
    )
    return solve_boundary(conditions, config)


def solve_polar(
    angle_deg: float, radius: float, length: float, config: SolverConfig = DEFAULT_SOLVER_CONFIG
) -> Optional[SolveResult]:
    """Solve with the second support at ``radius`` and ``angle_deg`` from the first."""

    conditions = BoundaryConditions.from_polar(angle_deg, radius, length)
    logger.info("Polar supports angle=%.6g deg radius=%.6g -> d=%.6g h=%.6g", angle_deg, radius, conditions.d, conditions.h)
    return solve_supports(conditions, config)


__all__ = [
    "DEFAULT_SOLVER_CONFIG",
    "GradientDescentStepper",
    "Jacobian",
    "LevenbergMarquardtStepper",
    "NewtonStepper",
    "ResidualVector",
    "SolvePhase",
    "SolveResult",
    "SolverConfig",
    "TrialPoint",
    "evaluate",
    "initial_guesses",
    "iterate",
    "jacobian",
    "residual_norm",
    "run_phase",
    "solve",
    "solve_boundary",
    "solve_phases",
    "solve_polar",
    "solve_supports",
    "solver_config_with",
]
