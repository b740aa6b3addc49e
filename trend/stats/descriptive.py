"""Descriptive statistics over one- and two-dimensional float series.

``mean`` and ``stddev`` work on a flat series of numbers; ``correlation``
works on a series of ``(x, y)`` pairs. None of these functions return NaN:
a result that would be NaN, including a correlation over a constant axis,
is reported as :class:`~trend.errors.AllZeros` instead.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

import numpy as np

from trend.errors import AllZeros, NeedMoreValues


def split_points(points: Iterable[Sequence[float]]) -> Tuple[np.ndarray, np.ndarray]:
    """Split a series of ``(x, y)`` pairs into separate x and y arrays.

    Args:
        points: Any iterable of two-element pairs, including
            :class:`~trend.linear.model.Point` values or an ``(n, 2)`` array.

    Returns:
        tuple[numpy.ndarray, numpy.ndarray]: ``float64`` arrays of x and y
        values in input order.

    Raises:
        ValueError: If the items are not pairs.
    """
    arr = np.asarray(list(points), dtype=float)
    if arr.size == 0:
        return np.empty(0, dtype=float), np.empty(0, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError("Points must be (x, y) pairs.")
    return arr[:, 0].copy(), arr[:, 1].copy()


def mean(values: Iterable[float]) -> float:
    """Return the arithmetic mean of ``values``.

    Raises:
        NeedMoreValues: If ``values`` is empty (minimum 1).
        AllZeros: If the mean is NaN, for example when a value is NaN or the
            series holds both ``inf`` and ``-inf``.
    """
    arr = np.asarray(list(values), dtype=float)
    if arr.size == 0:
        raise NeedMoreValues(1)
    with np.errstate(invalid="ignore"):
        result = float(np.sum(arr) / arr.size)
    if math.isnan(result):
        raise AllZeros()
    return result


def stddev(values: Iterable[float]) -> float:
    """Return the population standard deviation of ``values``.

    This is the square root of the mean squared deviation from the mean, so a
    single value has a standard deviation of 0.

    Raises:
        NeedMoreValues: If ``values`` is empty (minimum 1).
        AllZeros: If the result is NaN, for example when a value is NaN or
            infinite.
    """
    arr = np.asarray(list(values), dtype=float)
    center = mean(arr)
    with np.errstate(invalid="ignore"):
        if np.ptp(arr) == 0:
            return 0.0
        deviations = (arr - center) ** 2
    return float(np.sqrt(mean(deviations)))


def _standardize(values: np.ndarray) -> np.ndarray:
    # a constant axis can leave rounding noise in (value - mean); treat it as flat
    if np.ptp(values) == 0:
        raise AllZeros()
    return (values - mean(values)) / stddev(values)


def correlation(points: Iterable[Sequence[float]]) -> float:
    """Return the Pearson correlation coefficient of a series of points.

    Each axis is standardized as ``(value - mean) / stddev``; the coefficient
    is the sum of the elementwise product of the standardized series divided
    by the number of points.

    Args:
        points: Series of ``(x, y)`` pairs.

    Returns:
        float: Correlation in ``[-1, 1]`` (up to rounding).

    Raises:
        NeedMoreValues: If fewer than two points are given (minimum 2).
        AllZeros: If either axis has zero variance, which would make the
            coefficient NaN.
    """
    xs, ys = split_points(points)
    if xs.size < 2:
        raise NeedMoreValues(2)

    with np.errstate(divide="ignore", invalid="ignore"):
        products = _standardize(xs) * _standardize(ys)
        result = float(np.sum(products) / xs.size)

    if math.isnan(result):
        raise AllZeros()
    return result
