"""
Cumulative Distribution Estimation.

Discretizes a density function into a normalized cumulative distribution
and answers forward and inverse queries against it:

    - build_cumulative_table(): p(x_i) → running normalized sum F_i
    - lookup(): nearest-neighbour step function x → F
    - find_quartile(): x at which F reaches a target fraction

The cumulative table is a step function: lookups pick the closest grid
point and never interpolate between neighbours.
"""

import logging
import math
import warnings
from dataclasses import dataclass, field
from typing import Callable, Optional
import numpy as np
from numpy.typing import NDArray

from distplot.analysis.grid import Grid
from distplot.exceptions import EmptyRangeError, InvalidParameterError


logger = logging.getLogger(__name__)

NORMALIZATION_TOLERANCE = 1e-6


@dataclass(frozen=True, eq=False)
class CumulativeTable:
    """
    Normalized cumulative distribution sampled on a grid.

    Attributes:
        grid: Grid the density was sampled on
        values: Read-only running sums, one per grid point, ending at 1.0

    The table is callable: ``table(x)`` is ``lookup(table, x)``.
    """
    grid: Grid
    values: NDArray[np.float64] = field(repr=False)

    def __post_init__(self):
        values = np.array(self.values, dtype=np.float64)
        if values.ndim != 1:
            raise InvalidParameterError(f"Table values must be 1-D, got shape {values.shape}")
        if len(values) != len(self.grid):
            raise InvalidParameterError(
                f"Table has {len(values)} values for a grid of {len(self.grid)} points"
            )
        if not np.all(np.isfinite(values)):
            raise InvalidParameterError("Table values must be finite")
        if np.any(np.diff(values) < 0):
            raise InvalidParameterError("Table values must be non-decreasing")
        values.setflags(write=False)
        object.__setattr__(self, "values", values)

    @property
    def range_min(self) -> float:
        return self.grid.range_min

    @property
    def range_max(self) -> float:
        return self.grid.range_max

    @property
    def step(self) -> float:
        return self.grid.step

    def __len__(self) -> int:
        return len(self.values)

    def __call__(self, x: float) -> float:
        return lookup(self, x)


def build_cumulative_table(
    density_fn: Callable[[float], float],
    range_min: float,
    range_max: float,
    step: float
) -> CumulativeTable:
    """
    Discretize a density function into a normalized cumulative table.

    1. Evaluate density_fn at every grid point, in increasing x.
    2. Sum the values to get the normalization constant.
    3. Accumulate value / constant in grid order.

    Args:
        density_fn: Any x -> y function with y >= 0
        range_min: First grid point
        range_max: Inclusive upper bound of the grid
        step: Grid step (> 0)

    Returns:
        CumulativeTable, non-decreasing and ending at 1.0

    Raises:
        InvalidParameterError: On an invalid range or step, or if the density
            returns a negative or non-finite value, or sums to zero
    """
    grid = Grid(range_min, range_max, step)
    densities = np.fromiter(
        (density_fn(x) for x in grid), dtype=np.float64, count=len(grid)
    )

    if not np.all(np.isfinite(densities)):
        bad = grid.point(int(np.argmin(np.isfinite(densities))))
        raise InvalidParameterError(f"Density is not finite at x={bad}")
    if np.any(densities < 0):
        bad = grid.point(int(np.argmax(densities < 0)))
        raise InvalidParameterError(f"Density is negative at x={bad}")

    total = float(np.sum(densities))
    if total <= 0:
        raise InvalidParameterError(
            f"Density sums to zero over [{range_min}, {range_max}]; nothing to normalize"
        )

    values = np.cumsum(densities / total)

    if abs(values[-1] - 1.0) > NORMALIZATION_TOLERANCE:
        warnings.warn(f"Cumulative table ends at {values[-1]!r} instead of 1.0")

    logger.debug(
        "Built cumulative table: %d points over [%s, %s] step %s",
        len(grid), range_min, range_max, step
    )
    return CumulativeTable(grid=grid, values=values)


def lookup(table: CumulativeTable, x: float) -> float:
    """
    Cumulative value at x, from the closest grid point.

    Maps x to the fractional index (x - range_min) / step, rounds half up,
    clamps to [0, length - 1]. Points outside the range read the first or
    last entry.

    Raises:
        InvalidParameterError: If x is not finite
    """
    if not math.isfinite(x):
        raise InvalidParameterError(f"Lookup position must be finite, got {x}")
    return float(table.values[table.grid.nearest_index(x)])


def find_quartile(
    table: CumulativeTable,
    target_fraction: float,
    range_min: Optional[float] = None,
    range_max: Optional[float] = None,
    step: Optional[float] = None
) -> float:
    """
    Find the x at which the cumulative value is closest to target_fraction.

    Scans grid points in increasing x, tracking the point with the smallest
    |lookup(x) - target_fraction|. The scan stops the first time the delta
    grows past the best one; equal deltas neither stop the scan nor replace
    the best point, so the first of several equally close points wins.

    Stopping early relies on the delta being unimodal in x, which holds for
    a non-decreasing cumulative table. CumulativeTable rejects decreasing
    values; a scan over a non-monotonic function would return a local
    rather than global optimum.

    An invalid scan range raises InvalidParameterError before the scan
    starts, so every valid scan visits at least one point. EmptyRangeError
    guards the case where the scan still yields no point.

    Args:
        table: Cumulative table to search
        target_fraction: Target cumulative value, e.g. 0.25 for Q1
        range_min: Start of the scan (defaults to the table's grid)
        range_max: Inclusive end of the scan (defaults to the table's grid)
        step: Scan step (defaults to the table's grid)

    Returns:
        x-value of the best grid point

    Raises:
        InvalidParameterError: On a non-finite target or invalid scan range
        EmptyRangeError: If the scan produced no candidate
    """
    if not math.isfinite(target_fraction):
        raise InvalidParameterError(f"Target fraction must be finite, got {target_fraction}")

    scan = Grid(
        table.range_min if range_min is None else range_min,
        table.range_max if range_max is None else range_max,
        table.step if step is None else step,
    )

    best_x: Optional[float] = None
    best_delta = math.inf
    for x in scan:
        y = lookup(table, x)
        delta = abs(y - target_fraction)
        if best_x is None or delta < best_delta:
            best_x, best_delta = x, delta
        elif delta > best_delta:
            break

    if best_x is None:
        raise EmptyRangeError(
            f"No grid point in [{scan.range_min}, {scan.range_max}] to match {target_fraction}"
        )

    logger.debug("Cumulative fraction %s reached at x=%s (delta %s)", target_fraction, best_x, best_delta)
    return best_x
