"""
Configuration settings for the distribution plot core.
Uses pydantic-settings for type-safe configuration management.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class GridSettings(BaseSettings):
    """Discretization grid used for sampling and lookups."""
    model_config = SettingsConfigDict(env_prefix="GRID_")

    range_min: float = Field(default=-4.0, description="Lower bound of the sampled x-range")
    range_max: float = Field(default=4.0, description="Upper bound of the sampled x-range")
    step: float = Field(default=0.02, gt=0, description="Grid step size")


class DistributionSettings(BaseSettings):
    """Default density parameters."""
    model_config = SettingsConfigDict(env_prefix="DIST_")

    mean: float = Field(default=0.0, description="Gaussian mean")
    variance: float = Field(default=1.0, gt=0, description="Gaussian variance parameter")


class StreamSettings(BaseSettings):
    """Progressive delivery of samples to a plotting collaborator."""
    model_config = SettingsConfigDict(env_prefix="STREAM_")

    duration_ms: int = Field(default=1500, gt=0, description="Total time to stream one curve")
    interval_ms: int = Field(default=30, gt=0, description="Time between two delivered batches")


class ViolinSettings(BaseSettings):
    """Mirrored density band ('violin')."""
    model_config = SettingsConfigDict(env_prefix="VIOLIN_")

    center: float = Field(default=1.0, description="Value the band is mirrored around")
    threshold: float = Field(default=0.001, ge=0, description="Minimum density kept in the band")


class BoxSettings(BaseSettings):
    """Box-and-whisker derivation."""
    model_config = SettingsConfigDict(env_prefix="BOX_")

    whisker_factor: float = Field(default=1.5, gt=0, description="IQR multiplier for the Tukey fences")


class Settings(BaseSettings):
    """Main settings class combining all configurations."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Sub-settings
    grid: GridSettings = Field(default_factory=GridSettings)
    distribution: DistributionSettings = Field(default_factory=DistributionSettings)
    stream: StreamSettings = Field(default_factory=StreamSettings)
    violin: ViolinSettings = Field(default_factory=ViolinSettings)
    box: BoxSettings = Field(default_factory=BoxSettings)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Export settings instance
settings = get_settings()
