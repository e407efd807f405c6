"""Iterative root finders for the catenary equations.

Every solver is expressed as a *stepper*: given the current point, its
residual vector and residual norm, it proposes what the shared driver
:func:`iterate` should do next.  The driver owns the iteration cap, the
convergence test and the construction of :class:`SolveResult`, so the three
methods only differ in how they pick the next point.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Literal, Protocol, Sequence

from ..geometry import BoundaryConditions
from .config import DEFAULT_SOLVER_CONFIG, SolverConfig
from .equations import DEGENERATE_SCALE, evaluate, jacobian
from .model import Jacobian, ResidualVector, SolveResult, TrialPoint

logger = logging.getLogger(__name__)

StepAction = Literal["continue", "settle", "stop", "abort"]


@dataclass
class Step:
    """Stepper proposal.

    ``continue`` moves to ``point`` and keeps iterating, ``settle`` ends the
    run at the current point with best-effort acceptance, ``stop`` leaves the
    loop and re-evaluates the current point, ``abort`` ends the run as not
    converged.
    """

    action: StepAction
    point: TrialPoint


class BaseStepper(Protocol):
    """Protocol implemented by the iterative solvers."""

    name: str

    def max_iterations(self, config: SolverConfig) -> int:
        """Return the iteration cap for one run."""

    def start(self, config: SolverConfig) -> Any:
        """Return fresh per-run state (or ``None``)."""

    def propose(
        self,
        conditions: BoundaryConditions,
        point: TrialPoint,
        residuals: ResidualVector,
        residual: float,
        config: SolverConfig,
        state: Any,
    ) -> Step:
        """Return the next action for the driver."""


def _residuals(conditions: BoundaryConditions, point: TrialPoint) -> ResidualVector:
    return evaluate(point.a, point.x0, conditions.d, conditions.h, conditions.length)


def _jacobian(conditions: BoundaryConditions, point: TrialPoint) -> Jacobian:
    return jacobian(point.a, point.x0, conditions.d, conditions.h, conditions.length)


class NewtonStepper:
    """Newton-Raphson with backtracking line search."""

    name = "newton"

    def max_iterations(self, config: SolverConfig) -> int:
        return config.max_iterations

    def start(self, config: SolverConfig) -> None:
        return None

    def propose(
        self,
        conditions: BoundaryConditions,
        point: TrialPoint,
        residuals: ResidualVector,
        residual: float,
        config: SolverConfig,
        state: Any,
    ) -> Step:
        jac = _jacobian(conditions, point)
        det = jac.determinant()
        if abs(det) < config.singular_determinant:
            factor = config.singular_perturbation
            return Step("continue", TrialPoint(point.a * factor, point.x0 * factor))

        # Cramer's rule for J * (da, dx0) = -f
        f1, f2 = residuals
        da = (-f1 * jac.d_eq2_dx0 + f2 * jac.d_eq1_dx0) / det
        dx0 = (f1 * jac.d_eq2_da - f2 * jac.d_eq1_da) / det
        if not (math.isfinite(da) and math.isfinite(dx0)):
            return Step("abort", point)

        alpha = 1.0
        trial = point
        for _ in range(config.line_search_trials):
            trial = TrialPoint(point.a + alpha * da, point.x0 + alpha * dx0)
            if trial.a > DEGENERATE_SCALE:
                trial_residual = _residuals(conditions, trial).norm()
                if math.isfinite(trial_residual) and trial_residual < residual:
                    return Step("continue", trial)
            alpha *= 0.5
            if alpha < config.line_search_min_step:
                return Step("settle", point)

        # No trial improved: take the shortest step unless it is degenerate.
        if trial.a <= DEGENERATE_SCALE:
            return Step("settle", point)
        return Step("continue", trial)


@dataclass
class _DampingState:
    damping: float


class LevenbergMarquardtStepper:
    """Damped Gauss-Newton steps on the normal equations."""

    name = "levenberg-marquardt"

    def max_iterations(self, config: SolverConfig) -> int:
        return config.max_iterations

    def start(self, config: SolverConfig) -> _DampingState:
        return _DampingState(damping=config.lm_initial_damping)

    def propose(
        self,
        conditions: BoundaryConditions,
        point: TrialPoint,
        residuals: ResidualVector,
        residual: float,
        config: SolverConfig,
        state: _DampingState,
    ) -> Step:
        jac = _jacobian(conditions, point)
        f1, f2 = residuals
        lam = state.damping

        # (J^T J + lambda I) * delta = -J^T f
        m00 = jac.d_eq1_da * jac.d_eq1_da + jac.d_eq2_da * jac.d_eq2_da + lam
        m01 = jac.d_eq1_da * jac.d_eq1_dx0 + jac.d_eq2_da * jac.d_eq2_dx0
        m10 = jac.d_eq1_dx0 * jac.d_eq1_da + jac.d_eq2_dx0 * jac.d_eq2_da
        m11 = jac.d_eq1_dx0 * jac.d_eq1_dx0 + jac.d_eq2_dx0 * jac.d_eq2_dx0 + lam
        g0 = jac.d_eq1_da * f1 + jac.d_eq2_da * f2
        g1 = jac.d_eq1_dx0 * f1 + jac.d_eq2_dx0 * f2

        det = m00 * m11 - m01 * m10
        if abs(det) < config.singular_determinant:
            state.damping = lam * 10.0
            return Step("continue", point)

        da = (-g0 * m11 + g1 * m01) / det
        dx0 = (-g1 * m00 + g0 * m10) / det
        trial = TrialPoint(point.a + da, point.x0 + dx0)

        if trial.a > config.min_step_scale:
            trial_residual = _residuals(conditions, trial).norm()
            if math.isfinite(trial_residual) and trial_residual < residual:
                state.damping = max(lam / 2.0, config.lm_min_damping)
                return Step("continue", trial)

        state.damping = lam * 2.0
        if state.damping > config.lm_max_damping:
            return Step("stop", point)
        return Step("continue", point)


class GradientDescentStepper:
    """Steepest descent on the squared residual norm."""

    name = "gradient-descent"

    def max_iterations(self, config: SolverConfig) -> int:
        return config.gradient_max_iterations

    def start(self, config: SolverConfig) -> None:
        return None

    def propose(
        self,
        conditions: BoundaryConditions,
        point: TrialPoint,
        residuals: ResidualVector,
        residual: float,
        config: SolverConfig,
        state: Any,
    ) -> Step:
        jac = _jacobian(conditions, point)
        f1, f2 = residuals

        # grad ||f||^2 = 2 J^T f
        grad_a = 2.0 * (jac.d_eq1_da * f1 + jac.d_eq2_da * f2)
        grad_x0 = 2.0 * (jac.d_eq1_dx0 * f1 + jac.d_eq2_dx0 * f2)
        grad_norm = math.hypot(grad_a, grad_x0)
        if grad_norm < config.gradient_stationary_norm:
            return Step("stop", point)

        rate = min(config.gradient_learning_rate, config.gradient_step_cap / grad_norm)
        trial = TrialPoint(point.a - rate * grad_a, point.x0 - rate * grad_x0)
        if trial.a > config.min_step_scale:
            return Step("continue", trial)
        return Step("stop", point)


def iterate(
    stepper: BaseStepper,
    conditions: BoundaryConditions,
    guess: Sequence[float],
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
) -> SolveResult:
    """Run ``stepper`` from ``guess`` until convergence, a stepper exit or the cap."""

    point = TrialPoint(float(guess[0]), float(guess[1]))
    if not point.is_finite() or point.a <= 0:
        logger.debug("iterate: %s rejected starting point %s", stepper.name, point)
        return SolveResult(point.a, point.x0, math.inf, False, stepper.name, 0)

    state = stepper.start(config)
    iterations = 0
    for iterations in range(1, stepper.max_iterations(config) + 1):
        residuals = _residuals(conditions, point)
        residual = residuals.norm()
        if not math.isfinite(residual):
            return SolveResult(point.a, point.x0, math.inf, False, stepper.name, iterations)
        if residual < config.tolerance:
            return SolveResult(point.a, point.x0, residual, True, stepper.name, iterations)

        step = stepper.propose(conditions, point, residuals, residual, config, state)
        if step.action == "continue":
            point = step.point
        elif step.action == "settle":
            converged = residual < config.stall_tolerance
            return SolveResult(point.a, point.x0, residual, converged, stepper.name, iterations)
        elif step.action == "abort":
            return SolveResult(point.a, point.x0, residual, False, stepper.name, iterations)
        else:
            break

    residual = _residuals(conditions, point).norm()
    return SolveResult(
        point.a,
        point.x0,
        residual,
        residual < config.stall_tolerance,
        stepper.name,
        iterations,
    )


__all__ = [
    "BaseStepper",
    "GradientDescentStepper",
    "LevenbergMarquardtStepper",
    "NewtonStepper",
    "Step",
    "StepAction",
    "iterate",
]
