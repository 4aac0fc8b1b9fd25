"""Configuration management for glyphwarp.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Tolerances for decomposition, arc length and handles
- DisplayConfig: Colours for warped artwork and the outline frame
- TextConfig: Text layout settings
- LoggingConfig: Logging settings
- WarpSettings: Main application settings
"""

from glyphwarp.config.settings import (
    DisplayConfig,
    GeometryConfig,
    LoggingConfig,
    TextConfig,
    WarpSettings,
    get_default_settings,
)

__all__ = [
    "DisplayConfig",
    "GeometryConfig",
    "LoggingConfig",
    "TextConfig",
    "WarpSettings",
    "get_default_settings",
]
