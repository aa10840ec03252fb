"""Tests for density models."""

import math

import numpy as np
import pytest
from scipy.stats import norm

from distplot.exceptions import InvalidParameterError
from distplot.models.base import DensityModelRegistry
from distplot.models.gaussian import GaussianDensityModel, density


class TestGaussianDensity:
    """Tests for the Gaussian density."""

    def test_peak_value(self):
        """Test density at the mean of N(0, 1)."""
        pdf = density(0.0, 1.0)
        assert pdf(0.0) == pytest.approx(1 / math.sqrt(2 * math.pi))

    def test_symmetric_around_mean(self):
        """Test p(mean - d) == p(mean + d)."""
        pdf = density(1.5, 0.7)
        for d in (0.1, 0.5, 2.0):
            assert pdf(1.5 - d) == pytest.approx(pdf(1.5 + d))

    def test_matches_scipy(self):
        """Test the variance argument is used as the scale of the normal."""
        x = np.linspace(-3, 5, 41)
        model = GaussianDensityModel()
        y = model.evaluate(x, mean=1.0, variance=2.0)
        np.testing.assert_allclose(y, norm.pdf(x, loc=1.0, scale=2.0), rtol=1e-12)

    def test_array_evaluation(self):
        """Test vectorized evaluation keeps the shape."""
        pdf = density(0.0, 1.0)
        x = np.linspace(-4, 4, 401)
        y = pdf(x)
        assert y.shape == x.shape
        assert all(y >= 0)

    def test_tails_vanish(self):
        """Test density is tiny and non-negative far from the mean."""
        pdf = density(0.0, 1.0)
        assert 0.0 <= pdf(40.0) < 1e-300
        assert 0.0 <= pdf(-1e6) < 1e-300

    def test_scalar_returns_float(self):
        """Test scalar input gives a plain float."""
        assert isinstance(density(0.0, 1.0)(0.3), float)

    @pytest.mark.parametrize("variance", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_variance_rejected(self, variance):
        """Test non-positive or non-finite variance fails before evaluation."""
        with pytest.raises(InvalidParameterError):
            density(0.0, variance)

    def test_invalid_mean_rejected(self):
        """Test non-finite mean is rejected."""
        with pytest.raises(InvalidParameterError):
            density(float("nan"), 1.0)

    def test_invalid_parameter_is_value_error(self):
        """Test parameter errors stay catchable as ValueError."""
        with pytest.raises(ValueError):
            density(0.0, -2.0)

    def test_missing_parameter(self):
        """Test validation reports missing parameters."""
        with pytest.raises(InvalidParameterError, match="variance"):
            GaussianDensityModel().validate_parameters(mean=0.0)


class TestModelRegistry:
    """Tests for model registry."""

    def test_registry_contains_models(self):
        """Test that registry contains the Gaussian."""
        assert "gaussian" in DensityModelRegistry.list_models()

    def test_get_model(self):
        """Test retrieving model from registry."""
        model = DensityModelRegistry.get("gaussian")
        assert isinstance(model, GaussianDensityModel)
        assert model.n_parameters == 2

    def test_get_invalid_model(self):
        """Test error on invalid model name."""
        with pytest.raises(ValueError):
            DensityModelRegistry.get("nonexistent_model")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
