"""
Gaussian Density Model.

The probability density used by the distribution charts:
    p(x) = 1 / (σ·√(2π)) · exp(-(x - μ)² / (2σ²))

Where:
    - μ: mean (location)
    - σ: spread, passed in as the ``variance`` parameter

Note:
    The charts have always fed the ``variance`` argument into the formula
    in the position of the standard deviation. The parameterization is kept
    so that existing charts keep their shape; for variance = 1 both readings
    coincide.
"""

import math
from typing import ClassVar
import numpy as np

from distplot.models.base import ArrayOrFloat, DensityFunction, DensityModel, DensityModelRegistry


SQRT_2PI = math.sqrt(2 * math.pi)


@DensityModelRegistry.register
class GaussianDensityModel(DensityModel):
    """
    Gaussian (normal) density model.

    Model:
        p(x) = exp(-(x - mean)² / (2·variance²)) / (variance·√(2π))

    Parameters:
        mean: Location of the peak
        variance: Spread, must be > 0

    Example:
        >>> model = GaussianDensityModel()
        >>> x = np.linspace(-4, 4, 401)
        >>> y = model.evaluate(x, mean=0.0, variance=1.0)
    """

    name: ClassVar[str] = "gaussian"
    description: ClassVar[str] = "Gaussian density: exp(-(x-μ)²/(2σ²)) / (σ√(2π))"

    @property
    def parameter_names(self) -> list[str]:
        return ["mean", "variance"]

    @property
    def parameter_bounds(self) -> dict[str, tuple[float, float]]:
        return {
            "mean": (-np.inf, np.inf),
            "variance": (0.0, np.inf),
        }

    def evaluate(
        self,
        x: ArrayOrFloat,
        mean: float = 0.0,
        variance: float = 1.0
    ) -> ArrayOrFloat:
        """
        Evaluate the Gaussian density.

        Args:
            x: Point or array of points
            mean: Location of the peak
            variance: Spread parameter (> 0, not re-validated here)

        Returns:
            Density values; underflow to 0.0 far in the tails
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.exp(-np.square(x - mean) / (2 * variance * variance)) / (variance * SQRT_2PI)
        if y.ndim == 0:
            return float(y)
        return y


def density(mean: float, variance: float) -> DensityFunction:
    """
    Build the Gaussian density function for the given parameters.

    Precondition: variance > 0. Violations are rejected here, before any
    evaluation, so no NaN or infinity reaches downstream code.

    Args:
        mean: Location of the peak
        variance: Spread parameter

    Returns:
        Callable mapping x (scalar or array) to the density

    Raises:
        InvalidParameterError: If variance <= 0 or a parameter is not finite
    """
    return GaussianDensityModel().density_function(mean=mean, variance=variance)
