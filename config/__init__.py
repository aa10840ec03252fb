"""
Configuration module for the distribution plot core.

This module provides centralized configuration management using pydantic-settings,
ensuring type-safe access to environment variables and configuration parameters.

Example:
    >>> from config import settings
    >>> print(settings.grid.step)
    >>> print(settings.stream.duration_ms)
"""

from config.settings import (
    Settings,
    GridSettings,
    DistributionSettings,
    StreamSettings,
    ViolinSettings,
    BoxSettings,
    get_settings,
    settings,
)

__all__ = [
    "Settings",
    "GridSettings",
    "DistributionSettings",
    "StreamSettings",
    "ViolinSettings",
    "BoxSettings",
    "get_settings",
    "settings",
]
