"""
distplot - numeric core for statistical distribution charts.

Computes everything a chart of a probability distribution needs, leaving
rendering to an external plotting library:

    - models: probability density functions (Gaussian)
    - analysis: discretized cumulative distribution, inverse lookup,
      quartiles with Tukey fences, lazy sample sequences, one-shot pipeline

Mathematical Framework:
    F(x_i) = Σ_{j<=i} p(x_j) / Σ_j p(x_j)

    Where:
    - p(·): Density evaluated on the grid x_j = x_min + j·step
    - F(·): Normalized cumulative distribution (step function)

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__license__ = "MIT"

from distplot.exceptions import DistPlotError, InvalidParameterError, EmptyRangeError
from distplot.models import density, GaussianDensityModel, DensityModelRegistry
from distplot.analysis import (
    Grid,
    CumulativeTable,
    build_cumulative_table,
    lookup,
    find_quartile,
    QuartileSet,
    derive_quartile_set,
    DistributionPipeline,
    DistributionResult,
    graph_distribution,
)

__all__ = [
    "DistPlotError",
    "InvalidParameterError",
    "EmptyRangeError",
    "density",
    "GaussianDensityModel",
    "DensityModelRegistry",
    "Grid",
    "CumulativeTable",
    "build_cumulative_table",
    "lookup",
    "find_quartile",
    "QuartileSet",
    "derive_quartile_set",
    "DistributionPipeline",
    "DistributionResult",
    "graph_distribution",
]
