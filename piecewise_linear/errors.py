"""Exceptions raised by the piecewise-linear function types."""


class PiecewiseLinearError(Exception):
    """Base class for piecewise-linear function errors."""


class InvalidInputError(PiecewiseLinearError, ValueError):
    """Control points violate the sortedness or length invariants."""


class EmptyFunctionError(PiecewiseLinearError, LookupError):
    """A boundary value was requested from a function without control points."""
