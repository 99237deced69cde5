"""Domain models for glyphtrace.

This module contains the core domain models representing glyphs, their stroke
curves and the state of a tracing attempt. Models are:

- Immutable where the data is shared (glyphs, curves, snapshots)
- Independent of fonttools and of any presentation toolkit

Key classes:
- Point: A 2D point in the normalized tracing space
- PathCommand: One drawing command of a stroke
- CurveSpec: A stroke curve with arc-length queries
- GlyphDefinition: A glyph with its ordered strokes
- TracingSession: Mutable state of one tracing attempt
- SessionSnapshot: Read-only copy of a session
- SessionDelta: What one pointer event changed
"""

from glyphtrace.domain.curve import CommandKind, CurveSpec, PathCommand
from glyphtrace.domain.glyph import GlyphDefinition
from glyphtrace.domain.point import Point
from glyphtrace.domain.session import (
    SessionDelta,
    SessionSnapshot,
    StrokeStatus,
    TracingSession,
)

__all__: list[str] = [
    # Enums
    "CommandKind",
    "StrokeStatus",
    # Core types
    "Point",
    "PathCommand",
    "CurveSpec",
    "GlyphDefinition",
    "TracingSession",
    "SessionSnapshot",
    "SessionDelta",
]
