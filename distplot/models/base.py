"""
Base class for density models.

This module provides the abstract base class and registry for all
probability density models, ensuring a consistent interface for the
cumulative estimator and the sample sequences.
"""

from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Type, Union
import numpy as np
from numpy.typing import NDArray

from distplot.exceptions import InvalidParameterError


ArrayOrFloat = Union[float, NDArray[np.float64]]
DensityFunction = Callable[[float], float]


class DensityModel(ABC):
    """
    Abstract base class for density models.

    All density models must inherit from this class and implement:
        - evaluate(): Compute the density at given points
        - parameter_names: Names of model parameters
        - parameter_bounds: Valid open ranges for parameters

    The base class provides:
        - validate_parameters(): Fail-fast domain check
        - density_function(): A validated x -> y callable

    Example:
        >>> model = GaussianDensityModel()
        >>> pdf = model.density_function(mean=0.0, variance=1.0)
        >>> pdf(0.0)
    """

    # Class attributes to be overridden by subclasses
    name: ClassVar[str] = "BaseDensityModel"
    description: ClassVar[str] = "Abstract base class for density models"

    @property
    @abstractmethod
    def parameter_names(self) -> list[str]:
        """Names of model parameters."""
        pass

    @property
    @abstractmethod
    def parameter_bounds(self) -> dict[str, tuple[float, float]]:
        """Open bounds (exclusive) for each parameter as (min, max) tuples."""
        pass

    @property
    def n_parameters(self) -> int:
        """Number of free parameters in the model."""
        return len(self.parameter_names)

    @abstractmethod
    def evaluate(self, x: ArrayOrFloat, **params: float) -> ArrayOrFloat:
        """
        Evaluate the density at given points.

        Args:
            x: Point or array of points
            **params: Model parameters

        Returns:
            Density values, same shape as x
        """
        pass

    def validate_parameters(self, **params: float) -> None:
        """
        Check every parameter against its bounds.

        Raises:
            InvalidParameterError: On a missing, non-finite or out-of-bounds value
        """
        for name in self.parameter_names:
            if name not in params:
                raise InvalidParameterError(f"{self.name}: missing parameter '{name}'")
            value = params[name]
            low, high = self.parameter_bounds[name]
            if not np.isfinite(value):
                raise InvalidParameterError(f"{self.name}: {name} must be finite, got {value}")
            if not low < value < high:
                raise InvalidParameterError(
                    f"{self.name}: {name}={value} outside ({low}, {high})"
                )

    def density_function(self, **params: float) -> DensityFunction:
        """Validate parameters once and bind them into an x -> y callable."""
        self.validate_parameters(**params)

        def pdf(x: ArrayOrFloat) -> ArrayOrFloat:
            return self.evaluate(x, **params)

        return pdf


class DensityModelRegistry:
    """
    Registry for density models.

    Example:
        >>> model = DensityModelRegistry.get("gaussian")
        >>> DensityModelRegistry.list_models()
    """

    _models: ClassVar[dict[str, Type[DensityModel]]] = {}

    @classmethod
    def register(cls, model_class: Type[DensityModel]) -> Type[DensityModel]:
        """
        Register a density model class.

        Can be used as a decorator:
            @DensityModelRegistry.register
            class MyModel(DensityModel):
                ...
        """
        cls._models[model_class.name] = model_class
        return model_class

    @classmethod
    def get(cls, name: str) -> DensityModel:
        """Get an instance of a registered model by name."""
        if name not in cls._models:
            available = list(cls._models.keys())
            raise ValueError(f"Unknown model: {name}. Available: {available}")
        return cls._models[name]()

    @classmethod
    def list_models(cls) -> list[str]:
        """List all registered model names."""
        return list(cls._models.keys())
