"""Percentile lookup used to pick the robust fit lines."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np


def percentile(values: Sequence[float], k: float) -> Optional[float]:
    """Return the ``k`` quantile of an ascending series.

    With ``index = len(values) * k``:

    - if ``index`` is a whole number, the element at 1-based position
      ``index`` is returned;
    - otherwise the result is the plain average of the elements at 0-based
      positions ``floor(index) - 1`` and ``floor(index)``. This is not
      weighted by the fractional part of ``index``.

    A negative start position is clamped to the first element, so a small
    quantile on a short series averages its first two values. The averaging
    case always needs both elements: a one-element series with a fractional
    index (``percentile([5.0], 0.5)``) gives ``None``, not its lone value.

    Args:
        values: Values sorted in ascending order. The order is not checked.
        k: Quantile in ``[0, 1]``.

    Returns:
        float | None: The percentile, or ``None`` when the series does not
        hold the element(s) the rule asks for (for example when it is empty).
    """
    arr = np.asarray(values, dtype=float)
    index = arr.size * k
    start = max(math.floor(index) - 1, 0)

    if index == math.floor(index):
        if start >= arr.size:
            return None
        return float(arr[start])

    if start + 1 >= arr.size:
        return None
    return float((arr[start] + arr[start + 1]) / 2)
