"""
Loads point series from CSV files and pandas DataFrames.
"""

# Columns are coerced to numbers with pandas; anything that does not parse
# becomes NaN. By default rows with a non-finite coordinate are dropped with a
# warning, since a single NaN would otherwise poison every statistic.

import logging
import warnings

import numpy as np
import pandas as pd

from .linear.model import Point

logger = logging.getLogger(__name__)


def points_from_frame(df, x_col="x", y_col="y", dropna=True):
    """Convert two DataFrame columns into a list of points.

    Args:
        df: Source :class:`pandas.DataFrame`.
        x_col: Column holding the independent variable.
        y_col: Column holding the dependent variable.
        dropna: Drop rows where either coordinate is missing, non-numeric or
            infinite. When ``False`` such rows are kept as NaN/inf points and
            surface later as fitting errors.

    Returns:
        list[Point]: Points in row order.

    Raises:
        KeyError: If either column is missing.
    """
    missing = [col for col in (x_col, y_col) if col not in df.columns]
    if missing:
        raise KeyError(f"Missing column(s) for point data: {', '.join(missing)}")

    xs = pd.to_numeric(df[x_col], errors="coerce").to_numpy(dtype=float)
    ys = pd.to_numeric(df[y_col], errors="coerce").to_numpy(dtype=float)

    if dropna:
        finite = np.isfinite(xs) & np.isfinite(ys)
        dropped = int(np.sum(~finite))
        if dropped:
            warnings.warn(
                f"Dropped {dropped} row(s) without finite '{x_col}'/'{y_col}' values.",
                UserWarning,
                stacklevel=2,
            )
        xs = xs[finite]
        ys = ys[finite]

    logger.debug("Loaded %d points from columns %s/%s", len(xs), x_col, y_col)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def points_to_frame(points):
    """
    Build a DataFrame with ``x`` and ``y`` columns from a series of points.

    Args:
        points: Iterable of ``(x, y)`` pairs.

    Returns:
        pd.DataFrame: One row per point.
    """
    rows = [(float(x), float(y)) for x, y in points]
    return pd.DataFrame(rows, columns=["x", "y"])


def load_points_csv(filepath, x_col="x", y_col="y", dropna=True):
    """
    Load a point series from a CSV file.

    Args:
        filepath (str): Path to the CSV file.
        x_col (str): Column holding x values.
        y_col (str): Column holding y values.
        dropna (bool): See :func:`points_from_frame`.

    Returns:
        list[Point]: Loaded points.
    """
    return points_from_frame(pd.read_csv(filepath), x_col=x_col, y_col=y_col, dropna=dropna)
