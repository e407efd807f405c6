"""Configuration helpers for solver components."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """Thresholds and iteration budgets shared by every solve request."""

    tolerance: float = 1e-8
    max_iterations: int = 200
    # Best-effort acceptance when a run stalls or exhausts its budget.
    stall_tolerance: float = 1e-6
    verify_threshold: float = 1e-5
    relaxed_verify_threshold: float = 1e-4
    gradient_max_iterations: int = 5000
    gradient_guess_limit: int = 5
    singular_determinant: float = 1e-14
    singular_perturbation: float = 1.01
    line_search_trials: int = 20
    line_search_min_step: float = 1e-10
    min_step_scale: float = 1e-10
    lm_initial_damping: float = 1e-3
    lm_min_damping: float = 1e-10
    lm_max_damping: float = 1e10
    gradient_learning_rate: float = 0.01
    gradient_step_cap: float = 0.1
    gradient_stationary_norm: float = 1e-12


DEFAULT_SOLVER_CONFIG = SolverConfig()

_INTEGER_FIELDS = {"max_iterations", "gradient_max_iterations", "gradient_guess_limit", "line_search_trials"}


def solver_config_with(base: SolverConfig = DEFAULT_SOLVER_CONFIG, **overrides: float) -> SolverConfig:
    """Return a copy of ``base`` with ``overrides`` applied and checked."""

    known = {field.name for field in dataclasses.fields(SolverConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"unknown solver setting(s): {', '.join(unknown)}")

    cleaned = {}
    for name, value in overrides.items():
        if value is None:
            continue
        if name in _INTEGER_FIELDS:
            if int(value) != value or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
            cleaned[name] = int(value)
        else:
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
            cleaned[name] = float(value)
    return dataclasses.replace(base, **cleaned)


__all__ = [
    "DEFAULT_SOLVER_CONFIG",
    "SolverConfig",
    "solver_config_with",
]
