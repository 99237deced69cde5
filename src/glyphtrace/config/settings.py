"""Configuration settings for Glyphtrace."""

from pathlib import Path

from pydantic import BaseModel, Field


class TracingConfig(BaseModel):
    """Configuration for the stroke tracing engine.

    All distances are in the glyph's normalized coordinate space (0-100 on
    each axis), so the values are independent of screen resolution.
    """

    tolerance: float = Field(
        default=12.0,
        gt=0.0,
        description="Distance from the target point at which the pointer is off path",
    )
    inner_band_ratio: float = Field(
        default=0.8,
        gt=0.0,
        le=1.0,
        description="Fraction of tolerance inside which a sample advances progress",
    )
    step: float = Field(
        default=2.5,
        gt=0.0,
        description="Arc length added to the active stroke per accepted sample",
    )
    completion_delay: float = Field(
        default=0.3,
        ge=0.0,
        description="Seconds between tracing the last stroke and marking the glyph complete",
    )

    @property
    def inner_tolerance(self) -> float:
        """Distance below which a sample advances progress."""
        return self.tolerance * self.inner_band_ratio


class GeometryConfig(BaseModel):
    """Configuration for curve geometry."""

    extent: float = Field(
        default=100.0,
        gt=0.0,
        description="Size of the normalized square glyphs are authored in",
    )
    flatten_tolerance: float = Field(
        default=0.01,
        ge=0.0001,
        le=1.0,
        description="Maximum deviation of the flattened polyline from the true curve",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphTraceSettings(BaseModel):
    """Main application settings."""

    tracing: TracingConfig = Field(default_factory=TracingConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphTraceSettings:
    """Get default application settings."""
    return GlyphTraceSettings()
