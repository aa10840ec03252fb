"""
Distribution Pipeline.

One-shot computation behind a distribution chart:

    (mean, variance) → density → cumulative table → sample sequences
                                                  → quartiles + fences

Each run builds its own table and touches no shared state, so runs for
different parameters may execute concurrently.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from config.settings import Settings, get_settings
from distplot.analysis.cumulative import CumulativeTable, build_cumulative_table
from distplot.analysis.grid import Grid
from distplot.analysis.quartiles import QuartileSet, derive_quartile_set
from distplot.analysis.sampling import (
    SampleSequence,
    ViolinSequence,
    cumulative_samples,
    density_samples,
    stream_batch_size,
    violin_samples,
)
from distplot.models.base import DensityFunction
from distplot.models.gaussian import density


logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class DistributionResult:
    """
    Everything a chart of one distribution needs.

    Attributes:
        mean: Gaussian mean
        variance: Gaussian spread parameter
        density: The density function
        table: Cumulative table built once for this run
        density_curve: Lazy samples of the density
        cumulative_curve: Lazy samples of the cumulative table
        violin: Lazy mirrored density band
        quartiles: Box-and-whisker summary
        batch_size: Samples per delivery for progressive streaming
    """
    mean: float
    variance: float
    density: DensityFunction
    table: CumulativeTable
    density_curve: SampleSequence
    cumulative_curve: SampleSequence
    violin: ViolinSequence
    quartiles: QuartileSet
    batch_size: int


class DistributionPipeline:
    """
    Runs the distribution computation on a fixed grid.

    Example:
        >>> pipeline = DistributionPipeline()
        >>> result = pipeline.run(mean=0.0, variance=1.0)
        >>> result.quartiles.median
    """

    def __init__(self, grid: Optional[Grid] = None, settings: Optional[Settings] = None):
        """
        Initialize pipeline.

        Args:
            grid: Sampling grid (defaults to the configured grid)
            settings: Configuration (defaults to the cached settings)
        """
        self.settings = settings or get_settings()
        self.grid = grid or Grid.from_settings(self.settings.grid)

    def run(self, mean: Optional[float] = None, variance: Optional[float] = None) -> DistributionResult:
        """
        Compute density, cumulative table, sample sequences and quartiles.

        Args:
            mean: Gaussian mean (defaults to configuration)
            variance: Gaussian spread, > 0 (defaults to configuration)

        Raises:
            InvalidParameterError: If variance <= 0 or a parameter is not finite
        """
        if mean is None:
            mean = self.settings.distribution.mean
        if variance is None:
            variance = self.settings.distribution.variance

        pdf = density(mean, variance)
        grid = self.grid
        table = build_cumulative_table(pdf, grid.range_min, grid.range_max, grid.step)
        quartiles = derive_quartile_set(table, whisker_factor=self.settings.box.whisker_factor)

        logger.debug("Distribution mean=%s variance=%s on %r: %s", mean, variance, grid, quartiles)

        return DistributionResult(
            mean=mean,
            variance=variance,
            density=pdf,
            table=table,
            density_curve=density_samples(pdf, grid),
            cumulative_curve=cumulative_samples(table),
            violin=violin_samples(
                pdf, grid,
                center=self.settings.violin.center,
                threshold=self.settings.violin.threshold,
            ),
            quartiles=quartiles,
            batch_size=stream_batch_size(
                grid, self.settings.stream.duration_ms, self.settings.stream.interval_ms
            ),
        )


def graph_distribution(
    mean: float,
    variance: float,
    range_min: Optional[float] = None,
    range_max: Optional[float] = None,
    step: Optional[float] = None
) -> DistributionResult:
    """
    Run the pipeline once, overriding grid settings where given.

    Example:
        >>> result = graph_distribution(0, 1)
        >>> result.quartiles.as_dict()
    """
    grid_settings = get_settings().grid
    grid = Grid(
        grid_settings.range_min if range_min is None else range_min,
        grid_settings.range_max if range_max is None else range_max,
        grid_settings.step if step is None else step,
    )
    return DistributionPipeline(grid=grid).run(mean, variance)
