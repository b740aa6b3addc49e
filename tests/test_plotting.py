import os

import pytest

from trend.linear import quick, robust
from trend.plotting import plot_trends

POINTS = [(1, 1), (2, 2), (3, 3), (4, 4), (5, -5)]


def test_plot_trends_writes_png(tmp_path):
    path = plot_trends(
        POINTS,
        quick_trend=quick(POINTS),
        robust_trend=robust(POINTS),
        output_dir=str(tmp_path),
    )
    assert path.endswith("trend_fit.png")
    assert os.path.exists(path)


def test_plot_points_only(tmp_path):
    path = plot_trends(POINTS, output_dir=str(tmp_path), filename="points")
    assert os.path.exists(path)


def test_plot_empty_points_raises(tmp_path):
    with pytest.raises(ValueError):
        plot_trends([], output_dir=str(tmp_path))
