"""
Segment location, interpolation and trapezoidal integration.

Shared by PiecewiseLinear and UniformPiecewiseLinear. The routines take any
indexable sequence of X coordinates (a numpy array or a UniformGrid), so both
function types run the exact same floating-point operations and agree bit for
bit on every query.

Index convention for a located query x over N control points:
- i == 0: x is at or before the first point
- i == N: x is after the last point
- otherwise x lies in the segment (xs[i-1], xs[i]]
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .errors import EmptyFunctionError
from .policy import BoundaryPolicy


def lower_bound(xs: np.ndarray, x: float) -> int:
    """Smallest index i with xs[i] >= x (binary search, O(log N))."""
    return int(np.searchsorted(xs, x, side="left"))


def interpolate(x0: float, x1: float, y0: float, y1: float, x: float) -> float:
    w = (x - x0) / (x1 - x0)
    return float((1 - w) * y0 + w * y1)


def boundary_value(ys: Sequence[float], i: int, policy: BoundaryPolicy) -> float:
    if policy == BoundaryPolicy.ZERO:
        return 0.0
    n = len(ys)
    if n == 0:
        raise EmptyFunctionError("Cannot clamp to the boundary of an empty function")
    if i == 0:
        return float(ys[0])
    return float(ys[n - 1])


def evaluate(
    xs: Sequence[float],
    ys: Sequence[float],
    i: int,
    x: float,
    policy: BoundaryPolicy,
) -> float:
    """
    Value at x given its located index i.

    An exact hit on a control point returns its Y without rounding.
    """
    n = len(xs)
    if i < n and xs[i] == x:
        return float(ys[i])
    if i == 0 or i == n:
        return boundary_value(ys, i, policy)
    return interpolate(xs[i - 1], xs[i], ys[i - 1], ys[i], x)


def area(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Signed definite integral over [xs[0], xs[-1]]; 0 for fewer than 2 points."""
    total = 0.0
    for i in range(1, len(xs)):
        total += (xs[i] - xs[i - 1]) * (ys[i] + ys[i - 1]) / 2
    return float(total)


def area_up_to(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """
    Definite integral over the domain intersected with (-inf, x].

    Full trapezoids are accumulated left to right; the segment containing x
    contributes only the part from its left end to x.
    """
    total = 0.0
    for i in range(1, len(xs)):
        dx = xs[i] - xs[i - 1]
        if x < xs[i]:
            if x >= xs[i - 1]:
                dx_part = x - xs[i - 1]
                w = dx_part / dx
                y = (1 - w) * ys[i - 1] + w * ys[i]
                total += dx_part * (y + ys[i - 1]) / 2
            return float(total)
        total += dx * (ys[i] + ys[i - 1]) / 2
    return float(total)
