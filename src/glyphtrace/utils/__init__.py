"""Utility functions for glyphtrace.

This module provides utility functions including:

- Logging setup and configuration
- Tracing statistics collection
"""

from glyphtrace.utils.logging import (
    SessionLogger,
    TracingStats,
    configure_logging,
)

__all__ = [
    "SessionLogger",
    "TracingStats",
    "configure_logging",
]
