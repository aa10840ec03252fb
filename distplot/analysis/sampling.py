"""
Lazy sample sequences for progressive plotting.

A plotting collaborator draws the density, the cumulative distribution and
the mirrored density band ("violin") by consuming these sequences at its own
pace. Each sequence is finite and restartable: every iteration recomputes
the samples from scratch, nothing is cached between passes.

Pacing is the caller's business. stream_batch_size() and iter_batches()
only decide how many samples go out per delivery interval.
"""

import math
from itertools import islice
from typing import Callable, Iterable, Iterator, List, NamedTuple, TypeVar

from distplot.analysis.cumulative import CumulativeTable
from distplot.analysis.grid import Grid
from distplot.exceptions import InvalidParameterError


T = TypeVar("T")


class Sample(NamedTuple):
    """Point of a curve."""
    x: float
    y: float


class RangeSample(NamedTuple):
    """Point of a band: low and high value at a position."""
    position: float
    low: float
    high: float


class SampleSequence:
    """
    Restartable sequence of (x, f(x)) samples over a grid.

    Example:
        >>> seq = SampleSequence(pdf, Grid(-4, 4, 0.02))
        >>> first_pass = list(seq)
        >>> second_pass = list(seq)  # recomputed, equal to first_pass
    """

    def __init__(self, function: Callable[[float], float], grid: Grid):
        self.function = function
        self.grid = grid

    def __iter__(self) -> Iterator[Sample]:
        for x in self.grid:
            yield Sample(x, float(self.function(x)))

    def __len__(self) -> int:
        return len(self.grid)

    def __repr__(self) -> str:
        return f"SampleSequence(grid={self.grid!r})"


class ViolinSequence:
    """
    Restartable mirrored density band.

    For every grid point whose density y is at least ``threshold`` yields
    RangeSample(x, center - y/2, center + y/2). Points below the threshold
    are skipped, so the band covers only the visible body of the density.
    """

    def __init__(
        self,
        density_fn: Callable[[float], float],
        grid: Grid,
        center: float = 1.0,
        threshold: float = 0.001
    ):
        if threshold < 0:
            raise InvalidParameterError(f"Violin threshold must be non-negative, got {threshold}")
        self.samples = SampleSequence(density_fn, grid)
        self.center = center
        self.threshold = threshold

    def __iter__(self) -> Iterator[RangeSample]:
        for x, y in self.samples:
            if y >= self.threshold:
                yield RangeSample(
                    position=x,
                    low=self.center - y / 2,
                    high=self.center + y / 2,
                )

    def __repr__(self) -> str:
        return f"ViolinSequence(center={self.center}, threshold={self.threshold})"


def density_samples(density_fn: Callable[[float], float], grid: Grid) -> SampleSequence:
    """Samples of a density function on a grid."""
    return SampleSequence(density_fn, grid)


def cumulative_samples(table: CumulativeTable) -> SampleSequence:
    """Samples of a cumulative table on its own grid."""
    return SampleSequence(table, table.grid)


def violin_samples(
    density_fn: Callable[[float], float],
    grid: Grid,
    center: float = 1.0,
    threshold: float = 0.001
) -> ViolinSequence:
    """Mirrored density band around ``center``."""
    return ViolinSequence(density_fn, grid, center=center, threshold=threshold)


def stream_batch_size(grid: Grid, duration_ms: float, interval_ms: float) -> int:
    """
    Samples per delivery so a whole grid streams in ``duration_ms``.

    One batch goes out every ``interval_ms``:
        ceil(1000 · span / (step · interval_ms · duration_ms)), at least 1

    Raises:
        InvalidParameterError: If duration or interval is not positive
    """
    if not duration_ms > 0 or not interval_ms > 0:
        raise InvalidParameterError(
            f"Stream duration and interval must be positive, got {duration_ms} and {interval_ms}"
        )
    size = 1000 * grid.span / (grid.step * interval_ms * duration_ms)
    return max(1, math.ceil(size))


def iter_batches(samples: Iterable[T], batch_size: int) -> Iterator[List[T]]:
    """
    Chunk samples into lists of at most ``batch_size``.

    Lazy: pulls from ``samples`` only as batches are requested.
    """
    if batch_size < 1:
        raise InvalidParameterError(f"Batch size must be at least 1, got {batch_size}")
    iterator = iter(samples)
    while True:
        batch = list(islice(iterator, batch_size))
        if not batch:
            return
        yield batch
