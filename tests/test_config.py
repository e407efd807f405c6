import dataclasses

import pytest

from catenary_solver.solver import DEFAULT_SOLVER_CONFIG, SolverConfig, solver_config_with


def test_default_thresholds_stay_distinct():
    config = DEFAULT_SOLVER_CONFIG

    assert config.tolerance == 1e-8
    assert config.stall_tolerance == 1e-6
    assert config.verify_threshold == 1e-5
    assert config.relaxed_verify_threshold == 1e-4
    assert config.max_iterations == 200
    assert config.gradient_max_iterations == 5000
    assert config.gradient_guess_limit == 5


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SOLVER_CONFIG.tolerance = 1e-3  # type: ignore[misc]


def test_overrides_return_new_config():
    config = solver_config_with(tolerance=1e-10, max_iterations=50)

    assert config.tolerance == 1e-10
    assert config.max_iterations == 50
    assert isinstance(config.max_iterations, int)
    assert DEFAULT_SOLVER_CONFIG.tolerance == 1e-8
    assert config.verify_threshold == DEFAULT_SOLVER_CONFIG.verify_threshold


def test_none_overrides_are_ignored():
    assert solver_config_with(tolerance=None, max_iterations=None) == SolverConfig()


def test_overrides_build_on_given_base():
    base = solver_config_with(stall_tolerance=1e-7)

    config = solver_config_with(base, tolerance=1e-9)

    assert config.stall_tolerance == 1e-7
    assert config.tolerance == 1e-9


@pytest.mark.parametrize(
    "overrides",
    [
        {"tolerance": 0.0},
        {"tolerance": -1e-8},
        {"max_iterations": 0},
        {"max_iterations": 2.5},
        {"line_search_trials": -3},
    ],
)
def test_invalid_overrides_are_rejected(overrides):
    with pytest.raises(ValueError):
        solver_config_with(**overrides)


def test_unknown_setting_is_rejected():
    with pytest.raises(ValueError) as excinfo:
        solver_config_with(max_iter=10)
    assert "max_iter" in str(excinfo.value)
