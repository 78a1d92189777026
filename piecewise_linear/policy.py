from __future__ import annotations

from enum import Enum
from typing import Union


class BoundaryPolicy(str, Enum):
    """
    Value of a piecewise-linear function outside its domain.

    - ZERO: the function is identically zero outside [x_first, x_last].
    - CLAMP: the function holds the nearest boundary value (flat extrapolation).
    """

    ZERO = "zero"
    CLAMP = "clamp"


PolicyLike = Union[BoundaryPolicy, str]


def parse_boundary_policy(value: PolicyLike) -> BoundaryPolicy:
    if isinstance(value, BoundaryPolicy):
        return value
    v = str(value).strip().lower()
    if v in ("zero", "zero_outside", "zero-outside", ""):
        return BoundaryPolicy.ZERO
    if v in ("clamp", "clamp_outside", "clamp-outside", "hold", "nearest"):
        return BoundaryPolicy.CLAMP
    raise ValueError(f"Unknown boundary policy '{value}' (expected: zero|clamp)")
