"""
Piecewise-linear function over an arbitrary sorted set of control points.

Lookup is a binary search over the X coordinates; the integrals are exact
trapezoidal sums over the segments.

The plain constructor trusts its inputs: X is expected to be sorted in
ascending order and to have the same length as Y, and neither property is
verified. Use PiecewiseLinear.from_points (or validate) to check them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from . import segments
from .errors import InvalidInputError
from .policy import BoundaryPolicy, PolicyLike, parse_boundary_policy

logger = logging.getLogger(__name__)


def readonly_array(values: Sequence[float]) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class PiecewiseLinear:
    """
    Piecewise-linear 1-D function.

    Attributes:
        xs: X coordinates of the control points, ascending, shape (N,)
        ys: Y coordinates of the control points, shape (N,)
        policy: Value outside [xs[0], xs[-1]] (zero or clamp to the boundary)
    """
    xs: np.ndarray
    ys: np.ndarray
    policy: BoundaryPolicy = BoundaryPolicy.ZERO

    def __post_init__(self):
        # Frozen: copy the coordinates into read-only arrays owned by this instance.
        object.__setattr__(self, "xs", readonly_array(self.xs))
        object.__setattr__(self, "ys", readonly_array(self.ys))
        object.__setattr__(self, "policy", parse_boundary_policy(self.policy))

    @staticmethod
    def from_points(
        xs: Sequence[float],
        ys: Sequence[float],
        policy: PolicyLike = BoundaryPolicy.ZERO,
    ) -> "PiecewiseLinear":
        """Build a function and check its invariants, raising InvalidInputError."""
        f = PiecewiseLinear(xs=xs, ys=ys, policy=policy)
        f.validate()
        logger.debug(f"Accepted {len(f)} control points (policy={f.policy.value})")
        return f

    def validate(self) -> None:
        """
        Check the invariants the lookup relies on.

        Raises:
            InvalidInputError: if xs/ys are not 1-D, differ in length,
                hold non-finite values, or xs is not ascending
        """
        problem = None
        if self.xs.ndim != 1 or self.ys.ndim != 1:
            problem = f"xs and ys must be 1-D (got shapes {self.xs.shape} and {self.ys.shape})"
        elif self.xs.shape != self.ys.shape:
            problem = f"xs and ys must have same length ({self.xs.size} != {self.ys.size})"
        elif not (np.all(np.isfinite(self.xs)) and np.all(np.isfinite(self.ys))):
            problem = "control points must be finite"
        elif np.any(np.diff(self.xs) < 0):
            problem = "xs must be sorted in ascending order"
        if problem is not None:
            logger.debug(f"Rejected control points: {problem}")
            raise InvalidInputError(problem)

    def __len__(self) -> int:
        return int(self.xs.size)

    @property
    def domain(self) -> Optional[Tuple[float, float]]:
        """Closed interval covered by the control points, None when empty."""
        if self.xs.size == 0:
            return None
        return float(self.xs[0]), float(self.xs[-1])

    def with_policy(self, policy: PolicyLike) -> "PiecewiseLinear":
        return PiecewiseLinear(xs=self.xs, ys=self.ys, policy=policy)

    def at(self, x: float) -> float:
        """
        Value of the function at x.

        Time complexity: O(log N)
        """
        x = float(x)
        i = segments.lower_bound(self.xs, x)
        return segments.evaluate(self.xs, self.ys, i, x, self.policy)

    __call__ = at

    def at_many(self, xs: Sequence[float]) -> np.ndarray:
        """Evaluate at every query point; the result has the shape of the query."""
        q = np.asarray(xs, dtype=np.float64)
        out = np.fromiter((self.at(x) for x in q.reshape(-1)), dtype=np.float64, count=q.size)
        return out.reshape(q.shape)

    def is_interpolated_at(self, x: float) -> bool:
        """True if x lies within [xs[0], xs[-1]]."""
        if self.xs.size == 0:
            return False
        return bool(self.xs[0] <= x <= self.xs[-1])

    def area(self) -> float:
        """
        Definite integral of the function over its domain.

        Time complexity: O(N)
        """
        return segments.area(self.xs, self.ys)

    def area_up_to(self, x: float) -> float:
        """
        Definite integral over the domain intersected with (-inf, x].

        Time complexity: O(N)
        """
        return segments.area_up_to(self.xs, self.ys, float(x))
