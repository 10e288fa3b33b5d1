"""Configuration management for pathdata.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- EncoderConfig: Number formatting settings
- LoggingConfig: Logging settings
- PathDataSettings: Main application settings
"""

from pathdata.config.settings import (
    EncoderConfig,
    LoggingConfig,
    NonFinitePolicy,
    PathDataSettings,
    get_default_settings,
)

__all__ = [
    "EncoderConfig",
    "LoggingConfig",
    "NonFinitePolicy",
    "PathDataSettings",
    "get_default_settings",
]
