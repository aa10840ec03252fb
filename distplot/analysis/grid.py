"""
Discretization grid.

Every sampling, accumulation and lookup in the package happens on the same
fixed-width grid x_i = range_min + i·step, i = 0 … length-1.

The grid length is fixed up front as floor((range_max - range_min) / step) + 1
instead of accumulating x += step until x passes range_max. Accumulating the
step drifts, and whether the last point survives then depends on rounding.
An absolute tolerance of GRID_TOLERANCE steps, added to the quotient,
absorbs quotients that land just below an integer, so
range_max is a grid point whenever it lies on the grid in exact arithmetic.
"""

import math
from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

from distplot.exceptions import InvalidParameterError


GRID_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Grid:
    """
    Fixed-step grid over [range_min, range_max].

    Attributes:
        range_min: First grid point
        range_max: Inclusive upper bound
        step: Distance between neighbouring points (> 0)
    """
    range_min: float
    range_max: float
    step: float

    def __post_init__(self):
        for name in ("range_min", "range_max", "step"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidParameterError(f"Grid {name} must be finite, got {value}")
        if self.step <= 0:
            raise InvalidParameterError(f"Grid step must be positive, got {self.step}")
        if self.range_min > self.range_max:
            raise InvalidParameterError(
                f"Grid range_min ({self.range_min}) is greater than range_max ({self.range_max})"
            )

    @classmethod
    def from_settings(cls, grid_settings) -> "Grid":
        """Build a grid from a GridSettings instance."""
        return cls(grid_settings.range_min, grid_settings.range_max, grid_settings.step)

    @property
    def span(self) -> float:
        return self.range_max - self.range_min

    def __len__(self) -> int:
        return math.floor(self.span / self.step + GRID_TOLERANCE) + 1

    def point(self, index: int) -> float:
        """x-value of the grid point at ``index``."""
        return self.range_min + index * self.step

    def points(self) -> NDArray[np.float64]:
        """All grid points in increasing order."""
        return self.range_min + np.arange(len(self), dtype=np.float64) * self.step

    def __iter__(self):
        for i in range(len(self)):
            yield self.point(i)

    def nearest_index(self, x: float) -> int:
        """
        Index of the grid point closest to x, clamped to the grid.

        Halves round up (2.5 -> 3, -2.5 -> -2), not to even.
        """
        fractional = (x - self.range_min) / self.step
        index = math.floor(fractional + 0.5)
        return min(max(index, 0), len(self) - 1)
