import dataclasses
import math

import numpy as np
import pytest

from trend.errors import AllZeros, NeedMoreValues
from trend.linear import (
    ROBUST_QUANTILES,
    Line,
    RobustTrend,
    confidence_interval,
    line,
    quick,
    robust,
)
from trend.linear.robust import pairwise_slopes

OUTLIER_POINTS = [(1, 1), (2, 2), (3, 3), (4, 4), (5, -5)]


def test_robust_ignores_outlier():
    trend = robust(OUTLIER_POINTS)
    assert line(trend) == Line(slope=1.0, intercept=0.0)


def test_robust_confidence_interval_bounds():
    lower, upper = confidence_interval(robust(OUTLIER_POINTS))
    # Slopes: 12 x 1.0 and pairs with the outlier at -9, -4, -7/3, -1.5 (each twice).
    assert lower == Line(slope=-9.0, intercept=15.0)
    assert upper == Line(slope=1.0, intercept=0.0)


def test_robust_beats_quick_on_outlier():
    robust_slope = robust(OUTLIER_POINTS).line.slope
    quick_slope = quick(OUTLIER_POINTS).line.slope
    assert abs(robust_slope - 1.0) < abs(quick_slope - 1.0)


def test_robust_two_points():
    trend = robust([(0.0, 0.0), (2.0, 4.0)])
    expected = Line(slope=2.0, intercept=0.0)
    assert trend.line == expected
    assert trend.confidence_interval() == (expected, expected)


@pytest.mark.parametrize("points", [[], [(1.0, 1.0)]])
def test_robust_needs_two_points(points):
    with pytest.raises(NeedMoreValues) as excinfo:
        robust(points)
    assert excinfo.value.minimum == 2


def test_robust_shared_x_is_all_zeros():
    with pytest.raises(AllZeros):
        robust([(1, 1), (1, 2), (1, 3)])


def test_robust_skips_vertical_pairs():
    trend = robust([(1, 1), (1, 50), (2, 2), (3, 3), (4, 4)])
    assert trend.line.slope == pytest.approx(1.0)


def test_robust_drops_non_finite_points():
    trend = robust([(1, 1), (2, 2), (3, 3), (float("nan"), 5.0)])
    assert trend.line == Line(slope=1.0, intercept=0.0)


def test_pairwise_slopes_are_sorted_and_doubled():
    xs = np.array([1.0, 2.0, 4.0])
    ys = np.array([1.0, 3.0, 4.0])
    slopes = pairwise_slopes(xs, ys)
    assert slopes.tolist() == [0.5, 0.5, 1.0, 1.0, 2.0, 2.0]


def test_pairwise_slopes_exclude_shared_x():
    xs = np.array([1.0, 1.0, 2.0])
    ys = np.array([0.0, 1.0, 2.0])
    slopes = pairwise_slopes(xs, ys)
    assert slopes.size == 4
    assert np.all(np.isfinite(slopes))


def test_robust_median_slope_matches_scipy():
    stats = pytest.importorskip("scipy.stats")
    xs = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    ys = np.array([1.0, 2.0, 3.0, 4.0, -5.0])
    res = stats.theilslopes(ys, xs)
    assert math.isclose(robust(zip(xs, ys)).line.slope, float(res[0]))


def test_robust_quantiles():
    assert ROBUST_QUANTILES == (0.025, 0.5, 0.975)


def test_robust_is_repeatable():
    rng = np.random.default_rng(5)
    points = list(zip(rng.normal(size=25), rng.normal(size=25)))
    assert robust(points) == robust(points)


def test_robust_trend_has_no_goodness_of_fit():
    trend = robust(OUTLIER_POINTS)
    assert isinstance(trend, RobustTrend)
    assert not hasattr(trend, "goodness_of_fit")
    assert not hasattr(trend, "points")
    with pytest.raises(dataclasses.FrozenInstanceError):
        trend.lower = Line(0.0, 0.0)
