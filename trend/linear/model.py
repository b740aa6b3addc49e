"""Value types shared by both fit strategies and line predictions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, NamedTuple, Sequence, Tuple, Union

import numpy as np

if TYPE_CHECKING:
    from .quick import QuickTrend
    from .robust import RobustTrend


class Point(NamedTuple):
    """An ``(x, y)`` pair. Values are not validated."""

    x: float
    y: float


@dataclass(frozen=True)
class Line:
    """The line ``y = slope * x + intercept``."""

    slope: float
    intercept: float


def as_points(points: Iterable[Sequence[float]]) -> Tuple[Point, ...]:
    """Copy a series of pairs into an immutable tuple of :class:`Point`."""
    return tuple(Point(float(x), float(y)) for x, y in points)


def predict_y(line: Line, x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Return ``slope * x + intercept``.

    Accepts a scalar or an array of x values. Non-finite inputs follow IEEE
    arithmetic and may give ``inf`` or ``nan``.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        y = line.slope * np.asarray(x, dtype=float) + line.intercept
    return float(y) if np.ndim(y) == 0 else y


def predict_x(line: Line, y: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Return ``(y - intercept) / slope``.

    A zero slope gives ``inf`` (or ``nan`` when ``y`` equals the intercept)
    rather than raising.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        x = (np.asarray(y, dtype=float) - line.intercept) / np.float64(line.slope)
    return float(x) if np.ndim(x) == 0 else x


def line(trend: "Union[QuickTrend, RobustTrend]") -> Line:
    """Return the primary fitted line of a trend of either kind."""
    return trend.line
