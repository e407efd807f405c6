"""Deterministic multi-scale starting points for the catenary solver."""

from __future__ import annotations

from typing import List, Optional

from .model import TrialPoint

DEFAULT_INITIAL_GUESS = TrialPoint(0.1, 0.1)

# Above this slack the inverse-slack scales are meaningful.
INVERSE_SLACK_THRESHOLD = 0.001
# Below this slack the chain is nearly taut and needs large scales.
TAUT_SLACK_THRESHOLD = 0.1

_TAUT_SCALES = (5.0, 10.0, 20.0, 50.0)


def initial_guesses(d: float, slack: float, *, initial: Optional[TrialPoint] = None) -> List[TrialPoint]:
    """Return the ordered list of starting points for span ``d`` and ``slack``.

    The list always opens with ``initial`` (``(0.1, 0.1)`` unless given) and
    then covers several orders of magnitude of ``a`` around the midspan.
    Moderate slack adds guesses scaled by ``1/slack``; small slack adds the
    large scales of a nearly straight chain.
    """

    first = DEFAULT_INITIAL_GUESS if initial is None else TrialPoint(*initial)
    half = d / 2

    guesses = [
        first,
        TrialPoint(0.1, half),
        TrialPoint(0.2, half),
        TrialPoint(0.5, half),
        TrialPoint(1.0, half),
        TrialPoint(2.0, half),
        TrialPoint(5.0, half),
        TrialPoint(10.0, half),
        TrialPoint(d / 3, half),
        TrialPoint(0.05, d * 0.3),
        TrialPoint(0.05, d * 0.7),
        TrialPoint(0.01, half),
        TrialPoint(0.5, d * 0.25),
        TrialPoint(0.5, d * 0.75),
        TrialPoint(1.0, d * 0.3),
        TrialPoint(1.0, d * 0.7),
        TrialPoint(0.1, 0.1),
        TrialPoint(0.2, 0.2),
        TrialPoint(0.3, d / 3),
        TrialPoint(half, half),
    ]

    if slack > INVERSE_SLACK_THRESHOLD:
        guesses.extend(
            [
                TrialPoint(1.0 / slack, half),
                TrialPoint(0.5 / slack, half),
                TrialPoint(0.1 / slack, half),
                TrialPoint(2.0 / slack, half),
                TrialPoint(1.0 / slack, d * 0.3),
                TrialPoint(1.0 / slack, d * 0.7),
            ]
        )

    if 0 < slack < TAUT_SLACK_THRESHOLD:
        guesses.extend(TrialPoint(scale, half) for scale in _TAUT_SCALES)

    return guesses


__all__ = [
    "DEFAULT_INITIAL_GUESS",
    "initial_guesses",
]
