import pytest

from catenary_solver.solver import TrialPoint, initial_guesses
from catenary_solver.solver.initial_guess import DEFAULT_INITIAL_GUESS


def _base_guesses(d: float):
    half = d / 2
    return [
        (0.1, 0.1),
        (0.1, half),
        (0.2, half),
        (0.5, half),
        (1.0, half),
        (2.0, half),
        (5.0, half),
        (10.0, half),
        (d / 3, half),
        (0.05, d * 0.3),
        (0.05, d * 0.7),
        (0.01, half),
        (0.5, d * 0.25),
        (0.5, d * 0.75),
        (1.0, d * 0.3),
        (1.0, d * 0.7),
        (0.1, 0.1),
        (0.2, 0.2),
        (0.3, d / 3),
        (half, half),
    ]


@pytest.mark.parametrize(
    "slack, expected_count",
    [
        (0.0, 20),
        (0.0005, 24),
        (0.001, 24),
        (0.05, 30),
        (0.1, 26),
        (0.5, 26),
        (-0.2, 20),
    ],
)
def test_guess_count_depends_on_slack(slack, expected_count):
    assert len(initial_guesses(1.0, slack)) == expected_count


def test_base_guesses_are_relative_to_span():
    d = 2.4
    guesses = initial_guesses(d, 0.0)

    assert guesses == [TrialPoint(a, x0) for a, x0 in _base_guesses(d)]
    assert guesses[0] == DEFAULT_INITIAL_GUESS


def test_moderate_slack_appends_inverse_slack_scales():
    d, slack = 1.0, 0.5
    guesses = initial_guesses(d, slack)

    assert guesses[:20] == [TrialPoint(a, x0) for a, x0 in _base_guesses(d)]
    assert guesses[20:] == [
        TrialPoint(2.0, 0.5),
        TrialPoint(1.0, 0.5),
        TrialPoint(0.2, 0.5),
        TrialPoint(4.0, 0.5),
        TrialPoint(2.0, 0.3),
        TrialPoint(2.0, 0.7),
    ]


def test_small_slack_appends_taut_scales_last():
    d, slack = 2.0, 0.05
    guesses = initial_guesses(d, slack)

    assert guesses[20] == TrialPoint(pytest.approx(20.0), 1.0)
    assert guesses[-4:] == [
        TrialPoint(5.0, 1.0),
        TrialPoint(10.0, 1.0),
        TrialPoint(20.0, 1.0),
        TrialPoint(50.0, 1.0),
    ]


def test_very_small_slack_skips_inverse_scales():
    guesses = initial_guesses(1.0, 0.0001)

    assert [g.a for g in guesses[20:]] == [5.0, 10.0, 20.0, 50.0]


def test_guesses_are_deterministic():
    first = initial_guesses(0.9584, 0.0101)
    second = initial_guesses(0.9584, 0.0101)

    assert first == second
    assert first is not second


def test_initial_guess_can_be_overridden():
    guesses = initial_guesses(1.0, 0.5, initial=(3.0, 0.4))

    assert guesses[0] == TrialPoint(3.0, 0.4)
    assert guesses[1:] == initial_guesses(1.0, 0.5)[1:]
