"""Configuration management for glyphtrace.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TracingConfig: Tolerance, step and completion timing for the engine
- GeometryConfig: Coordinate space and curve flattening settings
- LoggingConfig: Logging settings
- GlyphTraceSettings: Main application settings
"""

from glyphtrace.config.settings import (
    GeometryConfig,
    GlyphTraceSettings,
    LoggingConfig,
    TracingConfig,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "GlyphTraceSettings",
    "LoggingConfig",
    "TracingConfig",
    "get_default_settings",
]
