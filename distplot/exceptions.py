"""
Error taxonomy for the distribution core.

Parameter errors subclass ValueError so callers that already catch
ValueError keep working.
"""


class DistPlotError(Exception):
    """Base class for all errors raised by distplot."""


class InvalidParameterError(DistPlotError, ValueError):
    """
    A parameter is outside its valid domain.

    Raised for non-positive variance, inverted or non-finite ranges,
    non-positive steps, and density functions returning unusable values.
    """


class EmptyRangeError(DistPlotError, LookupError):
    """An inverse lookup scanned no grid point and has no result."""
