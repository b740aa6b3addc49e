"""Ordinary least-squares ("quick") trend fitting.

The slope is derived from descriptive statistics rather than a matrix solve:

    slope = correlation(points) * stddev(y) / stddev(x)
    intercept = mean(y) - slope * mean(x)

The fitted trend keeps the original points so the coefficient of
determination can be computed later without asking for them again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np

from trend.errors import NeedMoreValues
from trend.stats.descriptive import correlation, mean, split_points, stddev

from .model import Line, Point, as_points, predict_y


@dataclass(frozen=True)
class QuickTrend:
    """A least-squares trend and the points it was fitted to."""

    points: Tuple[Point, ...]
    line: Line

    def goodness_of_fit(self) -> float:
        """Return the coefficient of determination (R^2) of the fit.

        ``R^2 = 1 - SS_res / SS_tot`` where ``SS_res`` is the sum of squared
        residuals against the fitted line and ``SS_tot`` the sum of squared
        deviations of y about its mean. 1 is a perfect fit; 0 is no better
        than predicting the mean.

        Note:
            The points must have some variance in y. A trend returned by
            :func:`quick` always does, since a flat y axis fails the fit
            with ``AllZeros``.
        """
        xs, ys = split_points(self.points)
        predicted = predict_y(self.line, xs)
        ss_res = np.sum((ys - predicted) ** 2)
        ss_tot = np.sum((ys - mean(ys)) ** 2)
        return float(1.0 - ss_res / ss_tot)


def quick(points: Iterable[Sequence[float]]) -> QuickTrend:
    """Fit an ordinary least-squares line through ``points``.

    Args:
        points: Series of ``(x, y)`` pairs.

    Returns:
        QuickTrend: The fitted line together with the input points.

    Raises:
        NeedMoreValues: If fewer than two points are given (minimum 2).
        AllZeros: If x or y has zero variance.

    Note:
        Runs in linear time. Prefer :func:`~trend.linear.robust.robust` when
        the data may contain outliers and the input is small enough for its
        quadratic cost.
    """
    pts = as_points(points)
    if len(pts) < 2:
        raise NeedMoreValues(2)

    xs, ys = split_points(pts)
    slope = correlation(pts) * stddev(ys) / stddev(xs)
    intercept = mean(ys) - slope * mean(xs)

    return QuickTrend(points=pts, line=Line(slope=float(slope), intercept=float(intercept)))


def goodness_of_fit(trend: QuickTrend) -> float:
    """Return R^2 for a quick trend. See :meth:`QuickTrend.goodness_of_fit`."""
    return trend.goodness_of_fit()
