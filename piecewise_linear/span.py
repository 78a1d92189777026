from __future__ import annotations

import numpy as np


def span(lo: float, hi: float, n_points: int) -> np.ndarray:
    """
    Generate n_points equidistant coordinates spanning [lo, hi].

    The bounds are order-independent. Element i is exactly lo + i * step,
    which is what UniformGrid synthesizes on the fly.
    """
    n_points = int(n_points)
    if n_points < 2:
        raise ValueError(f"span needs at least 2 points, got {n_points}")
    lo, hi = float(min(lo, hi)), float(max(lo, hi))
    step = (hi - lo) / (n_points - 1)
    return lo + np.arange(n_points) * step
