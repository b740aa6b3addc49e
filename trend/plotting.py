"""
Renders point series with their fitted trend lines.

All plotting functions accept precomputed trends and do not fit anything
themselves. The robust confidence interval is drawn as a shaded band between
its lower and upper lines.
"""

from __future__ import annotations

import os
from typing import Iterable, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .linear import QuickTrend, RobustTrend, predict_y
from .stats.descriptive import split_points

FIGURE_DPI = 300
FIGSIZE_SINGLE = (7.0, 4.2)
_STYLE_STATE = {"initialized": False}

COLORS = {
    "points": "#2C4B7D",
    "quick": "#C13B2A",
    "robust": "#197A40",
}


def setup_plot_style() -> None:
    """Apply global Matplotlib style once per process."""
    if _STYLE_STATE["initialized"]:
        return
    plt.rcParams.update(
        {
            "font.family": "STIXGeneral",
            "font.size": 12.0,
            "axes.labelsize": 12.0,
            "xtick.labelsize": 11.0,
            "ytick.labelsize": 11.0,
            "legend.fontsize": 11.0,
            "mathtext.fontset": "stix",
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": 0.20,
            "grid.linestyle": ":",
            "legend.frameon": False,
            "lines.linewidth": 2.0,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
        }
    )
    _STYLE_STATE["initialized"] = True


def plot_trends(
    points: Iterable[Sequence[float]],
    quick_trend: Optional[QuickTrend] = None,
    robust_trend: Optional[RobustTrend] = None,
    output_dir: str = "output",
    filename: str = "trend_fit",
    xlabel: str = "x",
    ylabel: str = "y",
) -> str:
    """Plot points with the quick line, robust line and robust 95% band.

    Args:
        points: Series of ``(x, y)`` pairs to scatter.
        quick_trend: Optional least-squares trend to draw.
        robust_trend: Optional Theil-Sen trend; its confidence interval is
            shaded.
        output_dir: Directory for the PNG; created if needed.
        filename: File name without extension.
        xlabel: X axis label.
        ylabel: Y axis label.

    Returns:
        str: Path of the saved PNG.

    Raises:
        ValueError: If ``points`` is empty.
    """
    xs, ys = split_points(points)
    if xs.size == 0:
        raise ValueError("Cannot plot an empty point series.")

    setup_plot_style()
    finite_x = xs[np.isfinite(xs)]
    if finite_x.size:
        x_grid = np.linspace(float(np.min(finite_x)), float(np.max(finite_x)), 200)
    else:
        x_grid = np.linspace(0.0, 1.0, 2)

    fig, ax = plt.subplots(figsize=FIGSIZE_SINGLE)
    ax.scatter(xs, ys, s=26, color=COLORS["points"], alpha=0.8, label="Points", zorder=3)

    if robust_trend is not None:
        lower, upper = robust_trend.confidence_interval()
        y_lower = predict_y(lower, x_grid)
        y_upper = predict_y(upper, x_grid)
        ax.fill_between(
            x_grid,
            np.minimum(y_lower, y_upper),
            np.maximum(y_lower, y_upper),
            color=COLORS["robust"],
            alpha=0.12,
            linewidth=0.0,
            label="Robust 95% interval",
        )
        ax.plot(
            x_grid,
            predict_y(robust_trend.line, x_grid),
            color=COLORS["robust"],
            linestyle="--",
            label="Robust (Theil-Sen)",
            zorder=2,
        )

    if quick_trend is not None:
        r2 = quick_trend.goodness_of_fit()
        ax.plot(
            x_grid,
            predict_y(quick_trend.line, x_grid),
            color=COLORS["quick"],
            label=rf"Quick (OLS), $R^2$ = {r2:.3f}",
            zorder=2,
        )

    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.grid(True)
    ax.legend(loc="best")

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"{filename}.png")
    fig.savefig(path, dpi=FIGURE_DPI, bbox_inches="tight")
    plt.close(fig)
    return path
