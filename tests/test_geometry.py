import math

import numpy as np
import pytest

from catenary_solver import BoundaryConditions, CatenaryShape, InvalidGeometryError


def test_chord_and_slack():
    conditions = BoundaryConditions(d=3.0, h=4.0, length=6.5)

    assert conditions.chord == pytest.approx(5.0)
    assert conditions.slack == pytest.approx(1.5)


@pytest.mark.parametrize(
    "d, h, length, message",
    [
        (0.0, 0.0, 1.0, "span must be positive"),
        (-2.0, 0.0, 1.0, "span must be positive"),
        (1.0, 0.0, 0.0, "chain length must be positive"),
        (1.0, 0.0, 1.0, "must exceed the support distance"),
        (3.0, 4.0, 4.0, "must exceed the support distance"),
        (1.0, float("nan"), 2.0, "non-finite"),
    ],
)
def test_validate_rejects_impossible_chains(d, h, length, message):
    with pytest.raises(InvalidGeometryError) as excinfo:
        BoundaryConditions(d, h, length).validate()
    assert message in str(excinfo.value)


def test_invalid_geometry_is_a_value_error():
    with pytest.raises(ValueError):
        BoundaryConditions(1.0, 0.0, 0.5).validate()


def test_validate_accepts_slack_chain():
    BoundaryConditions(1.0, -0.5, 1.2).validate()


def test_from_polar_places_second_support():
    conditions = BoundaryConditions.from_polar(-14.5, 0.99, 1.0)

    assert conditions.d == pytest.approx(0.958466, abs=1e-6)
    assert conditions.h == pytest.approx(-0.247876, abs=1e-6)
    assert conditions.chord == pytest.approx(0.99)
    assert conditions.length == 1.0


def test_from_polar_positive_angle_lifts_second_support():
    conditions = BoundaryConditions.from_polar(30.0, 2.0, 3.0)

    assert conditions.d == pytest.approx(math.sqrt(3.0))
    assert conditions.h == pytest.approx(1.0)


def _shape_through(d: float = 1.0) -> CatenaryShape:
    return CatenaryShape(a=0.4, x0=0.35 * d)


def test_shape_passes_through_both_supports():
    shape = _shape_through()
    h = 0.4 * (math.cosh((1.0 - 0.35) / 0.4) - math.cosh(0.35 / 0.4))

    assert shape.height(0.0) == pytest.approx(0.0, abs=1e-12)
    assert shape.height(1.0) == pytest.approx(h)
    assert isinstance(shape.height(0.5), float)


def test_shape_lowest_point_is_at_x0():
    shape = _shape_through()

    assert shape.height(shape.x0) == pytest.approx(shape.lowest_height)
    assert shape.lowest_height < 0.0
    assert shape.vertex_shift == pytest.approx(0.4 * math.cosh(0.35 / 0.4))


def test_shape_arc_length_matches_length_equation():
    shape = _shape_through()
    length = 0.4 * (math.sinh((1.0 - 0.35) / 0.4) + math.sinh(0.35 / 0.4))

    assert shape.arc_length(0.0, 1.0) == pytest.approx(length)
    assert shape.arc_length(0.35, 0.35) == 0.0


def test_shape_height_is_vectorised():
    shape = _shape_through()
    xs = np.array([0.0, 0.35, 1.0])

    heights = shape.height(xs)

    assert isinstance(heights, np.ndarray)
    assert heights.shape == (3,)
    assert heights[1] == pytest.approx(shape.lowest_height)


def test_sample_spans_the_supports():
    shape = _shape_through()

    xs, ys = shape.sample(1.0, count=11)

    assert xs.shape == ys.shape == (11,)
    assert xs[0] == 0.0 and xs[-1] == 1.0
    assert ys[0] == pytest.approx(0.0, abs=1e-12)
    assert np.allclose(ys, shape.height(xs))


def test_sample_requires_two_points():
    with pytest.raises(ValueError):
        _shape_through().sample(1.0, count=1)


@pytest.mark.parametrize("a", [0.0, -1.0, float("nan")])
def test_shape_requires_positive_scale(a):
    with pytest.raises(ValueError):
        CatenaryShape(a=a, x0=0.5)
