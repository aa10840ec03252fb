"""
Quartiles and Tukey fences.

Derives the five numbers of a box-and-whisker figure from a cumulative
table: three inverse lookups (0.25, 0.50, 0.75) plus the IQR rule

    lower_extreme = Q1 - k·IQR,  upper_extreme = Q3 + k·IQR,  k = 1.5

The fences are not clamped to the sampled range.
"""

import logging
import warnings
from dataclasses import dataclass
from typing import Optional

from distplot.analysis.cumulative import CumulativeTable, find_quartile
from distplot.exceptions import InvalidParameterError


logger = logging.getLogger(__name__)

QUARTILE_FRACTIONS = (0.25, 0.50, 0.75)
TUKEY_FACTOR = 1.5


@dataclass(frozen=True)
class QuartileSet:
    """
    Box-and-whisker summary of a distribution.

    Attributes:
        lower_extreme: Lower fence, Q1 - k·IQR
        lower_quartile: Q1
        median: Q2
        upper_quartile: Q3
        upper_extreme: Upper fence, Q3 + k·IQR
    """
    lower_extreme: float
    lower_quartile: float
    median: float
    upper_quartile: float
    upper_extreme: float

    @property
    def iqr(self) -> float:
        """Interquartile range Q3 - Q1."""
        return self.upper_quartile - self.lower_quartile

    def as_dict(self) -> dict[str, float]:
        """Five numbers keyed the way box series expect them."""
        return {
            "lowerExtreme": self.lower_extreme,
            "lowerQuartile": self.lower_quartile,
            "median": self.median,
            "upperQuartile": self.upper_quartile,
            "upperExtreme": self.upper_extreme,
        }


def derive_quartile_set(
    table: CumulativeTable,
    range_min: Optional[float] = None,
    range_max: Optional[float] = None,
    step: Optional[float] = None,
    whisker_factor: float = TUKEY_FACTOR
) -> QuartileSet:
    """
    Compute quartiles and fences from a cumulative table.

    Args:
        table: Cumulative table of the distribution
        range_min: Start of the quartile scan (defaults to the table's grid)
        range_max: End of the quartile scan (defaults to the table's grid)
        step: Scan step (defaults to the table's grid)
        whisker_factor: IQR multiplier for the fences

    Returns:
        QuartileSet

    Raises:
        InvalidParameterError: On a non-positive whisker factor or invalid scan range
    """
    if not whisker_factor > 0:
        raise InvalidParameterError(f"Whisker factor must be positive, got {whisker_factor}")

    q1, q2, q3 = (
        find_quartile(table, fraction, range_min, range_max, step)
        for fraction in QUARTILE_FRACTIONS
    )
    iqr = q3 - q1

    edges = (table.range_min, table.range_max)
    if q1 in edges or q3 in edges:
        warnings.warn(
            "Quartile found on the edge of the sampled range; "
            "the range is probably too narrow for this distribution"
        )

    quartiles = QuartileSet(
        lower_extreme=q1 - whisker_factor * iqr,
        lower_quartile=q1,
        median=q2,
        upper_quartile=q3,
        upper_extreme=q3 + whisker_factor * iqr,
    )
    logger.debug("Quartiles: %s", quartiles)
    return quartiles
