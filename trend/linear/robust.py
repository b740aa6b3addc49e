"""Theil-Sen ("robust") trend fitting with a 95% confidence interval.

The slope estimate is the median of the slopes between every ordered pair of
points with distinct x. Up to roughly 29.3% of the points can be arbitrarily
corrupted before the estimate breaks down, which makes this the right choice
for noisy data. The price is quadratic time and memory in the number of
points; use :func:`~trend.linear.quick.quick` for large inputs.

For each quantile in :data:`ROBUST_QUANTILES` the slope is read from the
sorted pairwise slopes, then the intercept is read at the same quantile from
the sorted per-point intercepts ``y - slope * x``, so each bound is one
coherent line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from trend.errors import AllZeros, NeedMoreValues
from trend.stats.descriptive import split_points
from trend.stats.percentile import percentile

from .model import Line

logger = logging.getLogger(__name__)

# lower bound, median, upper bound
ROBUST_QUANTILES: Tuple[float, float, float] = (0.025, 0.5, 0.975)


@dataclass(frozen=True)
class RobustTrend:
    """A Theil-Sen trend: the median line and its 95% bounding lines."""

    line: Line
    lower: Line
    upper: Line

    def confidence_interval(self) -> Tuple[Line, Line]:
        """Return ``(lower, upper)`` lines of the 95% confidence interval."""
        return self.lower, self.upper


def pairwise_slopes(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """Return the sorted finite slopes between all ordered pairs of points.

    Pairs that share an x value, including each point paired with itself,
    are left out. Each remaining unordered pair contributes its slope twice.
    """
    dx = xs[np.newaxis, :] - xs[:, np.newaxis]
    dy = ys[np.newaxis, :] - ys[:, np.newaxis]
    usable = dx != 0
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        slopes = dy[usable] / dx[usable]
    return np.sort(slopes[np.isfinite(slopes)])


def _line_at(
    quantile: float, slopes: np.ndarray, xs: np.ndarray, ys: np.ndarray
) -> Optional[Line]:
    slope = percentile(slopes, quantile)
    if slope is None:
        return None

    with np.errstate(invalid="ignore", over="ignore"):
        intercepts = ys - slope * xs
    intercepts = np.sort(intercepts[np.isfinite(intercepts)])
    intercept = percentile(intercepts, quantile)
    if intercept is None:
        return None
    return Line(slope=slope, intercept=intercept)


def robust(points: Iterable[Sequence[float]]) -> RobustTrend:
    """Fit a Theil-Sen line through ``points``.

    Args:
        points: Series of ``(x, y)`` pairs.

    Returns:
        RobustTrend: The median line with lower (2.5%) and upper (97.5%)
        bounding lines.

    Raises:
        NeedMoreValues: If fewer than two points are given (minimum 2).
        AllZeros: If there are not enough usable slopes to place all three
            lines, for example when every point shares the same x.
    """
    xs, ys = split_points(points)
    if xs.size < 2:
        raise NeedMoreValues(2)

    slopes = pairwise_slopes(xs, ys)
    logger.debug("Robust fit over %d points: %d usable slopes", xs.size, slopes.size)

    lower_q, median_q, upper_q = ROBUST_QUANTILES
    median = _line_at(median_q, slopes, xs, ys)
    upper = _line_at(upper_q, slopes, xs, ys)
    lower = _line_at(lower_q, slopes, xs, ys)

    # TODO: report an empty slope set as its own error kind once callers can
    # tell it apart from a zero-variance correlation.
    if median is None or upper is None or lower is None:
        raise AllZeros()

    return RobustTrend(line=median, lower=lower, upper=upper)


def confidence_interval(trend: RobustTrend) -> Tuple[Line, Line]:
    """Return ``(lower, upper)`` for a robust trend."""
    return trend.confidence_interval()
