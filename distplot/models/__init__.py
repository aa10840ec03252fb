"""
Density Models Module

Probability density functions sampled by the cumulative estimator:

1. Gaussian: p(x) = exp(-(x-μ)²/(2σ²)) / (σ√(2π))

Each model implements:
    - Forward evaluation (scalar or numpy array)
    - Parameter bounds and fail-fast validation
    - A bound x -> y density function
"""

from distplot.models.base import DensityModel, DensityModelRegistry, DensityFunction
from distplot.models.gaussian import GaussianDensityModel, density

__all__ = [
    "DensityModel",
    "DensityModelRegistry",
    "DensityFunction",
    "GaussianDensityModel",
    "density",
]
