"""
Analysis Module.

Numeric pipeline behind the distribution charts:

1. Grid (grid.py)
   - Fixed-step discretization of the x-range
   - Grid length fixed up front, no step accumulation drift

2. Cumulative Estimation (cumulative.py)
   - Density → normalized running sum
   - Nearest-neighbour lookup
   - Early-exit inverse lookup

3. Quartiles (quartiles.py)
   - Q1, median, Q3 from inverse lookups
   - Tukey fences (1.5·IQR)

4. Sampling (sampling.py)
   - Lazy, restartable curve and violin sequences
   - Stream batch sizing

5. Pipeline (pipeline.py)
   - One-shot run per (mean, variance)
"""

from distplot.analysis.grid import Grid
from distplot.analysis.cumulative import (
    CumulativeTable,
    build_cumulative_table,
    lookup,
    find_quartile,
)
from distplot.analysis.quartiles import QuartileSet, derive_quartile_set
from distplot.analysis.sampling import (
    Sample,
    RangeSample,
    SampleSequence,
    ViolinSequence,
    density_samples,
    cumulative_samples,
    violin_samples,
    stream_batch_size,
    iter_batches,
)
from distplot.analysis.pipeline import (
    DistributionPipeline,
    DistributionResult,
    graph_distribution,
)

__all__ = [
    "Grid",
    "CumulativeTable",
    "build_cumulative_table",
    "lookup",
    "find_quartile",
    "QuartileSet",
    "derive_quartile_set",
    "Sample",
    "RangeSample",
    "SampleSequence",
    "ViolinSequence",
    "density_samples",
    "cumulative_samples",
    "violin_samples",
    "stream_batch_size",
    "iter_batches",
    "DistributionPipeline",
    "DistributionResult",
    "graph_distribution",
]
