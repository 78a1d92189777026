# Piecewise Linear
# Evaluation and exact integration of piecewise-linear 1-D functions

from .policy import BoundaryPolicy, parse_boundary_policy
from .errors import PiecewiseLinearError, InvalidInputError, EmptyFunctionError
from .function import PiecewiseLinear
from .uniform import UniformGrid, UniformPiecewiseLinear
from .span import span

__version__ = "0.1.0"
__all__ = [
    "BoundaryPolicy",
    "parse_boundary_policy",
    "PiecewiseLinearError",
    "InvalidInputError",
    "EmptyFunctionError",
    "PiecewiseLinear",
    "UniformGrid",
    "UniformPiecewiseLinear",
    "span",
]
