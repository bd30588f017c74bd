"""Configuration management for bwmesh.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, keyword options, or
defaults.

Key classes:
- MeshOptions: Simplification tolerance and triangulation directive
- LoggingConfig: Logging settings
- BWMeshSettings: Main application settings
"""

from bwmesh.config.settings import (
    BWMeshSettings,
    LoggingConfig,
    MeshOptions,
    get_default_settings,
    option_names,
    parse_options,
    parse_parameter_pairs,
)

__all__ = [
    "BWMeshSettings",
    "LoggingConfig",
    "MeshOptions",
    "get_default_settings",
    "option_names",
    "parse_options",
    "parse_parameter_pairs",
]
