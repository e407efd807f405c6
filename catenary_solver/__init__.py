from .geometry import BoundaryConditions, CatenaryShape, InvalidGeometryError
from .polish import PolishOptions, PolishResult, polish_solution
from .solver import (
    DEFAULT_SOLVER_CONFIG,
    Jacobian,
    ResidualVector,
    SolveResult,
    SolverConfig,
    TrialPoint,
    evaluate,
    initial_guesses,
    jacobian,
    residual_norm,
    solve,
    solve_polar,
    solve_supports,
    solver_config_with,
)

__all__ = [
    'BoundaryConditions',
    'CatenaryShape',
    'InvalidGeometryError',
    'PolishOptions',
    'PolishResult',
    'polish_solution',
    'DEFAULT_SOLVER_CONFIG',
    'Jacobian',
    'ResidualVector',
    'SolveResult',
    'SolverConfig',
    'TrialPoint',
    'evaluate',
    'initial_guesses',
    'jacobian',
    'residual_norm',
    'solve',
    'solve_polar',
    'solve_supports',
    'solver_config_with',
]
