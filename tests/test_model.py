import math

import numpy as np
import pytest

from trend.linear import Line, Point, line, predict_x, predict_y, quick, robust

IDENTITY = Line(slope=1.0, intercept=0.0)


def test_predict_identity_round_trip():
    assert predict_y(IDENTITY, 5) == 5
    assert predict_x(IDENTITY, 5) == 5


def test_predict_y_and_x_general_line():
    fitted = Line(slope=2.0, intercept=-3.0)
    assert predict_y(fitted, 4.0) == 5.0
    assert predict_x(fitted, 5.0) == 4.0
    assert isinstance(predict_y(fitted, 4.0), float)


def test_predict_x_zero_slope_is_infinite():
    flat = Line(slope=0.0, intercept=1.0)
    assert predict_x(flat, 3.0) == math.inf
    assert predict_x(flat, -3.0) == -math.inf
    assert math.isnan(predict_x(flat, 1.0))


def test_predict_non_finite_input():
    assert math.isnan(predict_y(IDENTITY, float("nan")))
    assert predict_y(IDENTITY, math.inf) == math.inf


def test_predict_accepts_arrays():
    xs = np.array([0.0, 1.0, 2.0])
    np.testing.assert_allclose(predict_y(Line(2.0, 1.0), xs), [1.0, 3.0, 5.0])
    np.testing.assert_allclose(predict_x(Line(2.0, 1.0), [1.0, 3.0, 5.0]), xs)


def test_line_accessor_for_both_kinds():
    points = [(1, 1), (2, 2), (3, 3), (4, 4)]
    assert line(quick(points)).slope == pytest.approx(1.0)
    assert line(robust(points)) == IDENTITY


def test_point_is_a_pair():
    p = Point(1.5, -2.0)
    x, y = p
    assert (x, y) == (1.5, -2.0)
    assert p.x == 1.5 and p.y == -2.0
    assert p == (1.5, -2.0)
