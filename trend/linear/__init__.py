"""
Linear trend fitting.

Modules:
    model:
        ``Point`` and ``Line`` value types, ``predict_y``/``predict_x``, and
        the ``line`` accessor shared by both trend kinds.

    quick:
        Ordinary least-squares fit (``quick``) and its coefficient of
        determination (``goodness_of_fit``). Linear time.

    robust:
        Theil-Sen fit (``robust``) and its 95% ``confidence_interval``.
        Quadratic time and memory; tolerant of outliers.

Only ``QuickTrend`` carries the original points, so ``goodness_of_fit`` is
defined for quick trends only. Only ``RobustTrend`` carries bounding lines.
"""

from typing import Union

from .model import Line, Point, line, predict_x, predict_y
from .quick import QuickTrend, goodness_of_fit, quick
from .robust import ROBUST_QUANTILES, RobustTrend, confidence_interval, robust

Trend = Union[QuickTrend, RobustTrend]

__all__ = [
    "Line",
    "Point",
    "QuickTrend",
    "ROBUST_QUANTILES",
    "RobustTrend",
    "Trend",
    "confidence_interval",
    "goodness_of_fit",
    "line",
    "predict_x",
    "predict_y",
    "quick",
    "robust",
]
