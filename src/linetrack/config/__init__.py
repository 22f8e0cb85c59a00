"""Configuration management for linetrack.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- BoardConfig: Grid dimensions and physical spacing
- GeometryConfig: Curve synthesis tolerances and handle ratios
- RenderConfig: Canvas fitting for render-space output
- LoggingConfig: Logging settings
- LinetrackSettings: Main application settings
"""

from linetrack.config.settings import (
    BoardConfig,
    GeometryConfig,
    LinetrackSettings,
    LoggingConfig,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "BoardConfig",
    "GeometryConfig",
    "LinetrackSettings",
    "LoggingConfig",
    "RenderConfig",
    "get_default_settings",
]
