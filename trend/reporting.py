"""Tabular summaries of fitted trends for logging and CSV export.

This module is the reporting boundary between in-memory trend objects and
submission-ready tables. It performs no fitting of its own.
"""

from __future__ import annotations

import os
from typing import Dict, Mapping

import numpy as np
import pandas as pd

from .linear import QuickTrend, RobustTrend, Trend, predict_y

SUMMARY_COLUMNS = [
    "Trend",
    "kind",
    "slope",
    "intercept",
    "r2",
    "n",
    "lower_slope",
    "lower_intercept",
    "upper_slope",
    "upper_intercept",
]


def summarize_trend(trend: Trend) -> Dict[str, object]:
    """Flatten a trend into a dictionary of plain values.

    Args:
        trend (QuickTrend | RobustTrend): A fitted trend.

    Returns:
        dict[str, object]: ``kind``, ``slope`` and ``intercept`` for every
        trend; ``r2`` and ``n`` for quick trends; ``lower_*``/``upper_*`` line
        parameters for robust trends.

    Raises:
        TypeError: If ``trend`` is not a known trend kind.
    """
    if not isinstance(trend, (QuickTrend, RobustTrend)):
        raise TypeError(f"Unsupported trend type: {type(trend).__name__}")

    summary: Dict[str, object] = {
        "slope": trend.line.slope,
        "intercept": trend.line.intercept,
    }
    if isinstance(trend, QuickTrend):
        summary["kind"] = "quick"
        summary["r2"] = trend.goodness_of_fit()
        summary["n"] = len(trend.points)
    else:
        lower, upper = trend.confidence_interval()
        summary["kind"] = "robust"
        summary["lower_slope"] = lower.slope
        summary["lower_intercept"] = lower.intercept
        summary["upper_slope"] = upper.slope
        summary["upper_intercept"] = upper.intercept
    return summary


def create_trend_dataframe(trends: Mapping[str, Trend]) -> pd.DataFrame:
    """Build one summary row per named trend.

    Args:
        trends (Mapping[str, Trend]): Trends keyed by a display name.

    Returns:
        pandas.DataFrame: Columns from :data:`SUMMARY_COLUMNS`; fields that
        do not apply to a trend kind are NaN.
    """
    rows = []
    for name, trend in trends.items():
        row = {"Trend": name}
        row.update(summarize_trend(trend))
        rows.append(row)
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def add_predictions(
    df: pd.DataFrame, trend: Trend, x_col: str = "x", y_col: str = "y"
) -> pd.DataFrame:
    """Return a copy of ``df`` with ``y_pred`` and ``residual`` columns.

    Args:
        df (pandas.DataFrame): Point table with ``x_col`` and ``y_col``.
        trend (Trend): Trend whose primary line is used for prediction.
        x_col (str): Column holding x values.
        y_col (str): Column holding observed y values.

    Returns:
        pandas.DataFrame: Copy of the input with the two added columns.
    """
    out = df.copy()
    xs = pd.to_numeric(out[x_col], errors="coerce").to_numpy(dtype=float)
    ys = pd.to_numeric(out[y_col], errors="coerce").to_numpy(dtype=float)
    y_pred = np.asarray(predict_y(trend.line, xs), dtype=float)
    out["y_pred"] = y_pred
    out["residual"] = ys - y_pred
    return out


def save_trends_to_csv(trends_df: pd.DataFrame, output_dir: str = "output") -> str:
    """Write the trend summary table to ``trend_summary.csv``.

    Args:
        trends_df (pandas.DataFrame): Output from ``create_trend_dataframe``.
        output_dir (str): Directory for the CSV; created if needed.

    Returns:
        str: Path of the written file.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "trend_summary.csv")
    trends_df.to_csv(path, index=False)
    return path
