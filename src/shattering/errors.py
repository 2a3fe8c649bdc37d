"""Exceptions raised by the reduction pipeline.

Errors always propagate to the caller; nothing is retried and no partial
result is returned.
"""


class ShatteringError(Exception):
    """Base class for every error raised by this package."""


class InvalidInput(ShatteringError, ValueError):
    """Malformed sample or settings: shapes, labels, quantile, epsilon."""


class DegenerateGeometry(InvalidInput):
    """A class has no opposite-class point, so its radius is undefined."""


class NumericAnomaly(ShatteringError, ArithmeticError):
    """Epsilon reached the nearest opposite distance and a radius went negative."""
