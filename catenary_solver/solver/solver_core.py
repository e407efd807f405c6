from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..geometry import BoundaryConditions, InvalidGeometryError
from ..logging_utils import apply_debug_logging
from .config import DEFAULT_SOLVER_CONFIG, SolverConfig
from .equations import residual_norm
from .initial_guess import initial_guesses
from .model import SolveResult, TrialPoint
from .steppers import (
    BaseStepper,
    GradientDescentStepper,
    LevenbergMarquardtStepper,
    NewtonStepper,
    iterate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolvePhase:
    """One solver pass over the starting points with its acceptance threshold."""

    stepper: BaseStepper
    threshold: float
    guess_limit: Optional[int] = None


def solve_phases(config: SolverConfig = DEFAULT_SOLVER_CONFIG) -> List[SolvePhase]:
    return [
        SolvePhase(NewtonStepper(), config.verify_threshold),
        SolvePhase(LevenbergMarquardtStepper(), config.verify_threshold),
        SolvePhase(
            GradientDescentStepper(),
            config.relaxed_verify_threshold,
            guess_limit=config.gradient_guess_limit,
        ),
    ]


def run_phase(
    phase: SolvePhase,
    conditions: BoundaryConditions,
    guesses: Sequence[TrialPoint],
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
) -> Optional[SolveResult]:
    """Return the best independently verified result of ``phase``.

    Only strictly lower verified residuals replace the incumbent, so the
    first of several equally good results wins.
    """

    candidates = guesses if phase.guess_limit is None else guesses[: phase.guess_limit]
    best: Optional[SolveResult] = None
    best_residual = math.inf

    for index, guess in enumerate(candidates):
        result = iterate(phase.stepper, conditions, guess, config)
        logger.debug(
            "run_phase: %s guess=%d start=%s converged=%s residual=%.3e iterations=%d",
            phase.stepper.name,
            index,
            guess,
            result.converged,
            result.residual,
            result.iterations,
        )
        if not (result.converged and result.a > 0 and result.residual < best_residual):
            continue

        verified = residual_norm(result.a, result.x0, conditions.d, conditions.h, conditions.length)
        if verified < phase.threshold:
            best = dataclasses.replace(result)
            best_residual = verified
        else:
            logger.debug(
                "run_phase: %s guess=%d failed verification residual=%.3e threshold=%.1e",
                phase.stepper.name,
                index,
                verified,
                phase.threshold,
            )

    return best


def solve_boundary(
    conditions: BoundaryConditions, config: SolverConfig = DEFAULT_SOLVER_CONFIG
) -> Optional[SolveResult]:
    """Return the best verified catenary for ``conditions`` or ``None``."""

    try:
        conditions.validate()
    except InvalidGeometryError as exc:
        logger.info("No catenary exists: %s", exc)
        return None

    guesses = initial_guesses(conditions.d, conditions.slack)
    logger.debug("solve_boundary: slack=%.6g with %d starting point(s)", conditions.slack, len(guesses))

    for phase in solve_phases(config):
        best = run_phase(phase, conditions, guesses, config)
        if best is not None:
            logger.info(
                "Solved with %s: a=%.9g x0=%.9g residual=%.3e",
                best.method,
                best.a,
                best.x0,
                best.residual,
            )
            return best
        logger.info("%s phase produced no verified solution", phase.stepper.name)

    logger.warning(
        "No verified catenary for d=%.6g h=%.6g L=%.6g after all solver phases",
        conditions.d,
        conditions.h,
        conditions.length,
    )
    return None


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "SolvePhase",
    "run_phase",
    "solve_boundary",
    "solve_phases",
]
