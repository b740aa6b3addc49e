"""
A Python package for fitting trend lines to two-dimensional point data.

Fits straight lines with ordinary least squares ("quick") or the Theil-Sen
estimator ("robust") and reports how trustworthy each fit is.

Modules:
    - errors: NeedMoreValues and AllZeros failure kinds.
    - stats: Mean, standard deviation, correlation and percentile helpers.
    - linear: Point/Line types, quick and robust fits, predictions.
    - data_processing: Loads point series from CSV files and DataFrames.
    - reporting: Summarizes trends as tables and writes CSV output.
    - plotting: Renders points with fitted lines and confidence bands.
"""

__version__ = "1.0.0"

from .data_processing import load_points_csv, points_from_frame, points_to_frame
from .errors import AllZeros, NeedMoreValues, TrendError
from .linear import (
    Line,
    Point,
    QuickTrend,
    RobustTrend,
    Trend,
    confidence_interval,
    goodness_of_fit,
    line,
    predict_x,
    predict_y,
    quick,
    robust,
)
from .plotting import plot_trends, setup_plot_style
from .reporting import (
    add_predictions,
    create_trend_dataframe,
    save_trends_to_csv,
    summarize_trend,
)
from .stats import correlation, mean, percentile, stddev

__all__ = [
    # Errors
    "AllZeros",
    "NeedMoreValues",
    "TrendError",
    # Statistics
    "correlation",
    "mean",
    "percentile",
    "stddev",
    # Fitting
    "Line",
    "Point",
    "QuickTrend",
    "RobustTrend",
    "Trend",
    "confidence_interval",
    "goodness_of_fit",
    "line",
    "predict_x",
    "predict_y",
    "quick",
    "robust",
    # Data processing
    "load_points_csv",
    "points_from_frame",
    "points_to_frame",
    # Reporting
    "add_predictions",
    "create_trend_dataframe",
    "save_trends_to_csv",
    "summarize_trend",
    # Plotting
    "setup_plot_style",
    "plot_trends",
]
