"""
Numeric primitives for trend fitting.

Modules:
    descriptive:
        Mean, population standard deviation, and Pearson correlation over
        float series. Degenerate inputs raise typed errors instead of
        returning NaN.

    percentile:
        The percentile rule used to choose the robust fit's median line and
        its confidence bounds.

Design Principle:
    This subpackage has no dependencies on linear/ or plotting code.
    It provides pure numerical utilities that can be independently tested.
"""

from .descriptive import correlation, mean, split_points, stddev
from .percentile import percentile

__all__ = ["correlation", "mean", "percentile", "split_points", "stddev"]
