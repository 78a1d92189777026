"""
Piecewise-linear function over equally spaced control points.

Only the bounds and the Y values are stored. The X coordinate of point i is
synthesized as xmin + i * step, which is bit-identical to span(xmin, xmax, N)[i],
so a UniformPiecewiseLinear returns exactly what the equivalent
PiecewiseLinear over span(xmin, xmax, N) returns, for any query.

Lookup is O(1): the bucket is estimated arithmetically relative to xmin and then
corrected against the synthesized grid, instead of binary searched.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from . import segments
from .errors import InvalidInputError
from .function import PiecewiseLinear, readonly_array
from .policy import BoundaryPolicy, PolicyLike, parse_boundary_policy
from .span import span

logger = logging.getLogger(__name__)


class UniformGrid:
    """Read-only sequence of n_points coordinates xmin + i * step."""

    def __init__(self, xmin: float, step: float, n_points: int):
        self.xmin = float(xmin)
        self.step = float(step)
        self.n_points = int(n_points)

    def __len__(self) -> int:
        return self.n_points

    def __getitem__(self, i: int) -> float:
        if i < 0:
            i += self.n_points
        if not 0 <= i < self.n_points:
            raise IndexError(f"grid index {i} out of range for {self.n_points} points")
        return self.xmin + i * self.step

    def to_array(self) -> np.ndarray:
        return self.xmin + np.arange(self.n_points) * self.step

    def lower_bound(self, x: float) -> int:
        """Smallest index i with self[i] >= x, in constant time."""
        n = self.n_points
        if math.isnan(x):
            # Same position numpy.searchsorted gives NaN: past the end
            return n
        if n == 0 or x <= self.xmin:
            return 0
        if x > self[n - 1]:
            return n
        # x is in (xmin, last]: the answer is in [1, n-1] and the estimate is
        # at most one rounding step away from it.
        i = int(math.ceil((x - self.xmin) / self.step))
        i = min(max(i, 1), n - 1)
        while self[i] < x:
            i += 1
        while self[i - 1] >= x:
            i -= 1
        return i


@dataclass(frozen=True, eq=False)
class UniformPiecewiseLinear:
    """
    Piecewise-linear 1-D function with equidistant control points.

    Attributes:
        xmin: X coordinate of the first control point
        xmax: X coordinate of the last control point (xmin <= xmax)
        ys: Y coordinates at the N equidistant points, shape (N,)
        policy: Value outside the grid (zero or clamp to the boundary)

    N >= 2 is required for queries; with N == 1 the step is undefined.
    """
    xmin: float
    xmax: float
    ys: np.ndarray
    policy: BoundaryPolicy = BoundaryPolicy.ZERO

    def __post_init__(self):
        object.__setattr__(self, "xmin", float(self.xmin))
        object.__setattr__(self, "xmax", float(self.xmax))
        object.__setattr__(self, "ys", readonly_array(self.ys))
        object.__setattr__(self, "policy", parse_boundary_policy(self.policy))

    @staticmethod
    def from_bounds(
        xmin: float,
        xmax: float,
        ys: Sequence[float],
        policy: PolicyLike = BoundaryPolicy.ZERO,
    ) -> "UniformPiecewiseLinear":
        """Build a function and check its invariants, raising InvalidInputError."""
        f = UniformPiecewiseLinear(xmin=xmin, xmax=xmax, ys=ys, policy=policy)
        problem = None
        if not (math.isfinite(f.xmin) and math.isfinite(f.xmax)):
            problem = "bounds must be finite"
        elif f.xmin > f.xmax:
            problem = f"xmin must not exceed xmax ({f.xmin} > {f.xmax})"
        elif f.ys.ndim != 1:
            problem = f"ys must be 1-D (got shape {f.ys.shape})"
        elif f.ys.size < 2:
            problem = "need at least 2 points"
        elif not np.all(np.isfinite(f.ys)):
            problem = "control points must be finite"
        if problem is not None:
            logger.debug(f"Rejected uniform control points: {problem}")
            raise InvalidInputError(problem)
        logger.debug(f"Accepted {len(f)} uniform control points on [{f.xmin}, {f.xmax}]")
        return f

    def __len__(self) -> int:
        return int(self.ys.size)

    @property
    def step(self) -> float:
        n = self.ys.size
        if n == 0:
            return 0.0
        return (self.xmax - self.xmin) / (n - 1)

    @property
    def grid(self) -> UniformGrid:
        return UniformGrid(self.xmin, self.step, self.ys.size)

    @property
    def domain(self) -> Optional[Tuple[float, float]]:
        """
        First and last grid point.

        The last grid point is xmin + (N-1) * step, which can differ from xmax
        in the last bit; it is what span() produces as well.
        """
        grid = self.grid
        if len(grid) == 0:
            return None
        return grid[0], grid[-1]

    def with_policy(self, policy: PolicyLike) -> "UniformPiecewiseLinear":
        return UniformPiecewiseLinear(xmin=self.xmin, xmax=self.xmax, ys=self.ys, policy=policy)

    def to_piecewise(self) -> PiecewiseLinear:
        """Equivalent function with explicit X coordinates."""
        return PiecewiseLinear(xs=span(self.xmin, self.xmax, self.ys.size), ys=self.ys, policy=self.policy)

    def at(self, x: float) -> float:
        """
        Value of the function at x.

        Time complexity: O(1)
        """
        x = float(x)
        grid = self.grid
        return segments.evaluate(grid, self.ys, grid.lower_bound(x), x, self.policy)

    __call__ = at

    def at_many(self, xs: Sequence[float]) -> np.ndarray:
        q = np.asarray(xs, dtype=np.float64)
        out = np.fromiter((self.at(x) for x in q.reshape(-1)), dtype=np.float64, count=q.size)
        return out.reshape(q.shape)

    def is_interpolated_at(self, x: float) -> bool:
        grid = self.grid
        if len(grid) == 0:
            return False
        return bool(grid[0] <= x <= grid[-1])

    def area(self) -> float:
        return segments.area(self.grid, self.ys)

    def area_up_to(self, x: float) -> float:
        return segments.area_up_to(self.grid, self.ys, float(x))
