"""Evenly spaced sample points for chart series."""

from __future__ import annotations

import numpy as np


def linspace(start: float, stop: float, num: int) -> list[float]:
    """``num`` points from ``start`` to ``stop`` inclusive.

    ``num <= 1`` yields ``[start]`` so a single-sample chart still has a point.
    """
    if num <= 1:
        return [float(start)]
    return [float(x) for x in np.linspace(start, stop, num)]
